import logging
import re
from io import BytesIO
from datetime import datetime, time, timezone as dt_timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

import openpyxl
import requests
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.paginator import EmptyPage, Paginator
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .models import Transaction, format_price_text

logger = logging.getLogger(__name__)

MONTH_TOKEN_RE = re.compile(r'^\d{2}$')
INVALID_MONTH_MESSAGE = "Invalid month format. Use 'MM'."
INVALID_DATE_OF_SALE_MESSAGE = "Invalid dateOfSale format. Use 'MM'."
TRUE_STRINGS = {'true', '1', 'yes'}


class DatasetFetchError(Exception):
    """외부 데이터셋을 가져오지 못했을 때"""


# ============================================================
# 변환 헬퍼
# ============================================================

def to_decimal(value):
    """
    값을 Decimal로 변환하고 소수점 2자리로 통일
    가격은 항상 0 이상의 숫자 → 비어있거나 잘못된 값, 음수는 0.00
    (bulk_create는 MinValueValidator를 거치지 않으므로 여기서 보정)
    """
    if value is None or isinstance(value, bool) or str(value).strip() == '':
        return Decimal('0.00')

    try:
        # 문자열로 변환 후 Decimal (부동소수점 오차 방지)
        price = Decimal(str(value).strip()).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal('0.00')
    return max(price, Decimal('0.00'))


def to_bool(value):
    """
    sold 값 변환
    bool은 그대로, 문자열은 'true'/'1'/'yes'만 True, 나머지는 False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    return str(value or '').strip().lower() in TRUE_STRINGS


def to_datetime(value):
    """
    dateOfSale 문자열 → timezone-aware datetime
    날짜만 있으면 자정, 타임존 정보가 없으면 UTC로 간주
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value or '').strip()
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime.combine(day, time.min) if day else None
        except ValueError:
            parsed = None

    if parsed is None:
        raise ValueError(f"날짜 형식 오류: {value!r}")
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def parse_month(value):
    """월 파라미터 검증 (1~12 정수)"""
    try:
        month = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(INVALID_MONTH_MESSAGE)
    if not 1 <= month <= 12:
        raise ValidationError(INVALID_MONTH_MESSAGE)
    return month


def parse_positive_int(value, default, name):
    if value is None or str(value).strip() == '':
        return default
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}. Use a positive integer.")
    if number < 1:
        raise ValidationError(f"Invalid {name}. Use a positive integer.")
    return number


# ============================================================
# 데이터셋 동기화 (Ingestion)
# ============================================================

def normalize_record(raw):
    """
    원본 레코드 정규화
    category/sold/image가 없으면 기본값('' / False / '')
    """
    price = to_decimal(raw.get('price'))
    return {
        'title': raw.get('title') or '',
        'description': raw.get('description') or '',
        'price': price,
        'price_text': format_price_text(price),
        'date_of_sale': to_datetime(raw.get('dateOfSale')),
        'category': raw.get('category') or '',
        'sold': to_bool(raw.get('sold')),
        'image': raw.get('image') or '',
    }


def fetch_dataset(url=None):
    """외부 JSON 데이터셋 다운로드 (재시도 없음)"""
    url = url or settings.TRANSACTIONS_DATASET_URL
    try:
        response = requests.get(url, timeout=settings.TRANSACTIONS_FETCH_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise DatasetFetchError(f"데이터셋 다운로드 실패 ({url}): {e}") from e

    if not isinstance(data, list):
        raise DatasetFetchError(f"데이터셋 형식 오류: 배열이 아닙니다 ({type(data).__name__})")

    logger.info(f"데이터셋 다운로드 완료: {len(data)}건")
    return data


def sync_dataset(url=None):
    """
    외부 데이터셋으로 저장소 전체 교체

    1. 다운로드 + 정규화 (실패 시 기존 데이터 그대로)
    2. 삭제 + Bulk Create를 하나의 트랜잭션으로 (중간에 빈 저장소가 보이지 않음)
    """
    raw_records = fetch_dataset(url)
    records = [Transaction(**normalize_record(raw)) for raw in raw_records]

    with transaction.atomic():
        deleted, _ = Transaction.objects.all().delete()
        Transaction.objects.bulk_create(records)
        stored = list(Transaction.objects.order_by('id'))

    logger.info(f"데이터셋 동기화 완료: 삭제 {deleted}건, 저장 {len(stored)}건")
    return stored


def filtered_read(month_token, title=None, price=None):
    """
    동기화 없이 기존 데이터 조회
    month_token은 정확히 두 자리('01'~'12')
    """
    token = str(month_token or '').strip()
    if not MONTH_TOKEN_RE.match(token) or not 1 <= int(token) <= 12:
        raise ValidationError(INVALID_DATE_OF_SALE_MESSAGE)

    return list(Transaction.objects.by_month(int(token)).matching(title=title, price=price))


# ============================================================
# 목록 조회 (검색 + 페이지네이션)
# ============================================================

def list_transactions(month, search=None, page=None, per_page=None):
    """
    월별 거래 목록

    - 검색: 제목/설명/가격 부분 일치
    - 페이지: 마지막 페이지를 넘으면 빈 리스트
    - perPage: TRANSACTIONS_MAX_PER_PAGE로 상한
    """
    month = parse_month(month)
    page = parse_positive_int(page, 1, 'page')
    per_page = parse_positive_int(per_page, settings.TRANSACTIONS_PER_PAGE, 'perPage')
    per_page = min(per_page, settings.TRANSACTIONS_MAX_PER_PAGE)

    transactions = Transaction.objects.by_month(month).search(search).order_by('id')

    paginator = Paginator(transactions, per_page)
    try:
        return list(paginator.page(page).object_list)
    except EmptyPage:
        return []


# ============================================================
# 엑셀 내보내기
# ============================================================

def export_transactions_to_excel(queryset):
    """
    조회된 거래 내역을 엑셀로 내보내기
    대시보드 표와 같은 열 순서
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "transactions"

    headers = ['ID', 'Title', 'Description', 'Price', 'Category', 'Sold', 'Date of Sale', 'Image']
    ws.append(headers)

    for tx in queryset:
        ws.append([
            tx.pk,
            tx.title,
            tx.description,
            float(tx.price),  # Decimal → float (엑셀 호환)
            tx.category,
            'Yes' if tx.sold else 'No',
            tx.date_of_sale.strftime('%Y-%m-%d %H:%M'),
            tx.image,
        ])

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
