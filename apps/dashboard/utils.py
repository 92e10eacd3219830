"""
대시보드 집계 (통계 / 가격대별 막대 차트)

Dashboard 앱은 자체 모델을 가지지 않습니다.
Transaction 데이터를 Django ORM 집계 함수로 계산합니다.
"""
from decimal import Decimal

from django.db.models import Case, CharField, Count, Q, Sum, Value, When

from apps.transactions.models import Transaction
from apps.transactions.utils import parse_month

# (라벨, 하한) - 다음 구간 하한 미만까지가 한 구간, 마지막 구간은 상한 없음
PRICE_RANGES = [
    ('0-100', 0),
    ('101-200', 101),
    ('201-300', 201),
    ('301-400', 301),
    ('401-500', 401),
    ('501-600', 501),
    ('601-700', 601),
    ('701-800', 701),
    ('801-900', 801),
    ('901-above', 901),
]


def _price_range_case():
    """SQL CASE: 높은 구간부터 검사해서 첫 매칭 구간에 배정"""
    whens = [
        When(price__gte=Decimal(minimum), then=Value(label))
        for label, minimum in reversed(PRICE_RANGES[1:])
    ]
    return Case(*whens, default=Value(PRICE_RANGES[0][0]), output_field=CharField())


def compute_statistics(month):
    """
    월별 판매 통계
    - totalSaleAmount: 가격 합계
    - totalSoldItems / totalNotSoldItems: sold 필드 기준 개수
    해당 월 거래가 없으면 빈 dict
    """
    month = parse_month(month)

    stats = Transaction.objects.by_month(month).aggregate(
        total_sale_amount=Sum('price'),
        total_sold_items=Count('id', filter=Q(sold=True)),
        total_not_sold_items=Count('id', filter=Q(sold=False)),
        count=Count('id'),
    )

    if not stats['count']:
        return {}

    return {
        'totalSaleAmount': float(stats['total_sale_amount'] or 0),
        'totalSoldItems': stats['total_sold_items'],
        'totalNotSoldItems': stats['total_not_sold_items'],
    }


def compute_bar_chart(month):
    """가격대별 거래 수 (빈 구간 포함 항상 10개)"""
    month = parse_month(month)

    bucket_counts = (
        Transaction.objects.by_month(month)
        .annotate(price_range=_price_range_case())
        .values('price_range')
        .annotate(count=Count('id'))
        .order_by()
    )
    counts_by_range = {item['price_range']: item['count'] for item in bucket_counts}

    return [
        {'range': label, 'count': counts_by_range.get(label, 0)}
        for label, _ in PRICE_RANGES
    ]


def combined_data(month):
    """통계 + 막대 차트를 한 번에 (두 조회는 같은 스냅샷을 보장하지 않음)"""
    return {
        'statistics': compute_statistics(month),
        'barChart': compute_bar_chart(month),
    }
