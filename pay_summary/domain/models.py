"""Domain models - immutable value objects for payment summary entries"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class PaymentItemStatus(str, Enum):
    """
    Price status of a payment summary entry.

    - FINAL_PRICE: price has been calculated and won't change
    - PENDING: price may change in response to user selection or other
      circumstances not known when the payment is first requested
    - UNKNOWN: any other scenario
    """

    UNKNOWN = "unknown"
    PENDING = "pending"
    FINAL_PRICE = "final_price"

    def to_simple_string(self) -> str:
        return self.value


class PaymentItemType(str, Enum):
    """Regular summary line (ITEM) or the total amount to be paid (TOTAL)"""

    ITEM = "item"
    TOTAL = "total"

    def to_simple_string(self) -> str:
        return self.value


class IntervalUnit(str, Enum):
    """Calendar unit used to express a recurring payment interval"""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    def to_simple_string(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentItem:
    """
    Single entry in the payment summary shown before completing a payment.

    Examples:
        PaymentItem(label="Your new shoes", amount="99.99",
                    status=PaymentItemStatus.FINAL_PRICE, type=PaymentItemType.ITEM)
        PaymentItem(label="Total", amount="102.99",
                    status=PaymentItemStatus.FINAL_PRICE, type=PaymentItemType.TOTAL)

    amount is opaque text (e.g. a formatted decimal) and interval_count is
    not range-checked; callers own the validity of both.
    """

    amount: str
    label: Optional[str] = None
    type: PaymentItemType = PaymentItemType.TOTAL
    status: PaymentItemStatus = PaymentItemStatus.UNKNOWN
    recurring: bool = False
    # interval_unit=MONTH with interval_count=3 means a payment every three months
    interval_unit: IntervalUnit = IntervalUnit.MONTH
    interval_count: int = 1

    def to_map(self) -> Dict[str, Any]:
        """Map representation handed to the platform payment UI"""
        return {
            "label": self.label,
            "amount": self.amount,
            "type": self.type.to_simple_string(),
            "status": self.status.to_simple_string(),
            "recurring": self.recurring,
            "intervalUnit": self.interval_unit.to_simple_string(),
            "intervalCount": self.interval_count,
        }
