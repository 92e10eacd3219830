"""
dashboard 앱 테스트용 공통 fixture
"""
import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from apps.transactions.models import Transaction


@pytest.fixture
def make_transaction(db):
    """거래 생성 헬퍼"""
    def _make(price='100.00', month=3, day=1, sold=False, title='상품'):
        return Transaction.objects.create(
            title=title,
            price=Decimal(str(price)),
            date_of_sale=datetime(2024, month, day, 12, 0, tzinfo=dt_timezone.utc),
            sold=sold,
        )
    return _make


@pytest.fixture
def march_dataset(make_transaction):
    """3월 판매 1건(150) + 미판매 1건(850)"""
    return [
        make_transaction(title='A', price=150, month=3, day=5, sold=True),
        make_transaction(title='B', price=850, month=3, day=10, sold=False),
    ]
