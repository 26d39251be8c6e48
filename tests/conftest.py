"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from pay_summary.api.main import create_app
from pay_summary.domain.models import PaymentItem, PaymentItemStatus, PaymentItemType


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def shoes_item() -> PaymentItem:
    """Regular summary line with a final price"""
    return PaymentItem(
        label="Your new shoes",
        amount="99.99",
        status=PaymentItemStatus.FINAL_PRICE,
        type=PaymentItemType.ITEM,
    )


@pytest.fixture
def total_item() -> PaymentItem:
    """Summary total line"""
    return PaymentItem(
        label="Total",
        amount="102.99",
        status=PaymentItemStatus.FINAL_PRICE,
        type=PaymentItemType.TOTAL,
    )
