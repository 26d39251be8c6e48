"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from pay_summary.domain.models import IntervalUnit, PaymentItem, PaymentItemStatus, PaymentItemType


class PaymentItemSchema(BaseModel):
    """Single payment item in a summary request, keyed like the payment UI map"""

    model_config = ConfigDict(populate_by_name=True)

    label: Optional[str] = None
    amount: str = Field(..., description="Price as text, passed through unparsed")
    type: PaymentItemType = PaymentItemType.TOTAL
    status: PaymentItemStatus = PaymentItemStatus.UNKNOWN
    recurring: bool = False
    interval_unit: IntervalUnit = Field(IntervalUnit.MONTH, alias="intervalUnit")
    interval_count: int = Field(1, alias="intervalCount")

    def to_domain(self) -> PaymentItem:
        return PaymentItem(
            label=self.label,
            amount=self.amount,
            type=self.type,
            status=self.status,
            recurring=self.recurring,
            interval_unit=self.interval_unit,
            interval_count=self.interval_count,
        )


class PaymentSummaryRequest(BaseModel):
    """Request body for POST /v1/payment-summary"""

    items: List[PaymentItemSchema]


class PaymentSummaryResponse(BaseModel):
    """Response for POST /v1/payment-summary"""

    items: List[Dict[str, Any]]
    total: Optional[Dict[str, Any]] = None
