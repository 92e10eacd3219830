"""
transactions 앱 테스트용 공통 fixture
"""
import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest.mock import MagicMock

from apps.transactions.models import Transaction


@pytest.fixture
def raw_dataset():
    """외부 데이터셋 형태의 원본 레코드 (category/sold/image 일부 누락)"""
    return [
        {
            'title': 'A', 'description': 'Red cotton shirt', 'price': 150,
            'dateOfSale': '2024-03-05', 'category': "men's clothing", 'sold': True,
            'image': 'https://example.com/a.jpg',
        },
        {
            'title': 'B', 'description': 'Gold ring', 'price': 850,
            'dateOfSale': '2024-03-10', 'sold': False,
        },
        {
            'title': 'C', 'description': 'Laptop backpack', 'price': '329.85',
            'dateOfSale': '2021-11-27T20:29:54+00:00',
        },
    ]


@pytest.fixture
def mock_response():
    """requests.get 응답 모킹 헬퍼"""
    def _make(payload):
        response = MagicMock()
        response.json.return_value = payload
        response.raise_for_status.return_value = None
        return response
    return _make


@pytest.fixture
def make_transaction(db):
    """거래 생성 헬퍼"""
    def _make(title='상품', price='100.00', month=3, day=1, sold=False, **kwargs):
        return Transaction.objects.create(
            title=title,
            description=kwargs.pop('description', ''),
            price=Decimal(str(price)),
            date_of_sale=datetime(2024, month, day, 12, 0, tzinfo=dt_timezone.utc),
            sold=sold,
            **kwargs,
        )
    return _make
