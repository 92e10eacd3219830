from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.core.models import TimeStampedModel


def format_price_text(price):
    """
    검색용 가격 문자열 (항상 소수점 2자리, 예: 150 → '150.00')
    DB 종류와 상관없이 같은 문자열로 부분 검색
    """
    return f"{Decimal(str(price or 0)):.2f}"


class TransactionQuerySet(models.QuerySet):
    """Transaction 전용 QuerySet (헬퍼 메서드)"""
    def by_month(self, month): return self.filter(date_of_sale__month=month)

    def search(self, text):
        """제목/설명/가격 중 하나라도 포함하면 매칭 (대소문자 무시)"""
        if not text:
            return self
        return self.filter(
            Q(title__icontains=text) |
            Q(description__icontains=text) |
            Q(price_text__icontains=text)
        )

    def matching(self, title=None, price=None):
        """제목 + 가격 조건 (둘 다 주어지면 AND)"""
        qs = self
        if title:
            qs = qs.filter(title__icontains=title)
        if price:
            qs = qs.filter(price_text__icontains=price)
        return qs


class Transaction(TimeStampedModel):
    """상품 판매 거래 (외부 데이터셋 미러)"""

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # price 검색용 비정규화 컬럼 (bulk_create는 save()를 거치지 않으므로 생성 시 함께 채움)
    price_text = models.CharField(max_length=20, blank=True, default='', editable=False)
    date_of_sale = models.DateTimeField(db_index=True)
    category = models.CharField(max_length=100, blank=True, default='')
    sold = models.BooleanField(default=False, db_index=True)
    image = models.URLField(max_length=500, blank=True, default='')

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = 'product_transactions'
        # 페이지네이션이 흔들리지 않도록 id(입력 순서) 기준 고정 정렬
        ordering = ['id']
        indexes = [
            models.Index(fields=['sold', 'date_of_sale'], name='product_tx_sold_date_idx'),
        ]

    def __str__(self):
        return f"{self.title} {self.price:,.2f} ({self.date_of_sale.date()})"

    def save(self, *args, **kwargs):
        self.price_text = format_price_text(self.price)
        super().save(*args, **kwargs)

    def to_dict(self):
        """대시보드 API 응답용 직렬화 (camelCase)"""
        return {
            'id': self.pk,
            'title': self.title,
            'description': self.description,
            'price': float(self.price),
            'dateOfSale': self.date_of_sale.isoformat(),
            'category': self.category,
            'sold': self.sold,
            'image': self.image,
        }
