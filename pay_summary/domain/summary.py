"""Payment summary assembly for the platform payment UI"""

from typing import Any, Dict, Iterable, List, Optional
from pay_summary.domain.models import PaymentItem, PaymentItemType


def build_payment_summary(items: Iterable[PaymentItem]) -> List[Dict[str, Any]]:
    """
    Serialize payment items into the list consumed by the payment selector.

    Order is preserved: payment sheets render entries top to bottom as given.

    Example:
        [PaymentItem(label="Your new shoes", amount="99.99", type=ITEM),
         PaymentItem(label="Total", amount="102.99")]
        → [{"label": "Your new shoes", ...}, {"label": "Total", ...}]
    """
    return [item.to_map() for item in items]


def find_total_item(items: Iterable[PaymentItem]) -> Optional[PaymentItem]:
    """Return the last TOTAL entry, or None when the summary has no total line"""
    total = None
    for item in items:
        if item.type == PaymentItemType.TOTAL:
            total = item
    return total
