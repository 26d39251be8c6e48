"""POST /v1/payment-summary - Serialize payment items for the platform payment UI"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from pay_summary.api.v1.schemas import PaymentSummaryRequest, PaymentSummaryResponse
from pay_summary.api.dependencies import get_request_id, get_settings
from pay_summary.config import Settings
from pay_summary.domain.summary import build_payment_summary, find_total_item
from pay_summary.infrastructure.observability.metrics import record_summary, summary_requests_counter
from pay_summary.infrastructure.observability.logging import log_summary

router = APIRouter()


@router.post("/payment-summary", response_model=PaymentSummaryResponse)
async def create_payment_summary(
    request_body: PaymentSummaryRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Build the payment summary handed to the payment selector.

    Flow:
    1. Convert request items to domain PaymentItems
    2. Serialize each item in request order
    3. Attach the total line, if any
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    if len(request_body.items) > app_settings.max_summary_items:
        summary_requests_counter.labels(outcome="rejected").inc()
        logging.warning(
            f"Summary too large: {len(request_body.items)} items",
            extra={"request_id": request_id},
        )
        raise HTTPException(
            status_code=413,
            detail=f"At most {app_settings.max_summary_items} items per summary",
        )

    items = [item.to_domain() for item in request_body.items]
    total = find_total_item(items)
    response = PaymentSummaryResponse(
        items=build_payment_summary(items),
        total=total.to_map() if total is not None else None,
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_summary(items)
    log_summary(request_id, len(items), total is not None, duration_ms)

    return response
