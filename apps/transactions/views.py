import logging

from django.core.exceptions import ValidationError
from django.http import (
    FileResponse,
    HttpResponseBadRequest,
    HttpResponseServerError,
    JsonResponse,
)
from django.views.decorators.http import require_GET

from .models import Transaction
from .utils import (
    export_transactions_to_excel,
    filtered_read,
    list_transactions,
    parse_month,
    sync_dataset,
)

logger = logging.getLogger(__name__)


def _records_response(transactions):
    return JsonResponse([tx.to_dict() for tx in transactions], safe=False)


# ============================================================
# 데이터셋 동기화 / 조회
# ============================================================

@require_GET
def init_dataset(request):
    """
    외부 데이터셋으로 전체 교체 후 저장된 목록 반환
    dateOfSale 값이 있으면 기존 호환을 위해 filtered read로 넘김 (빈 값이면 동기화)
    """
    if request.GET.get('dateOfSale'):
        return filter_dataset(request)

    try:
        transactions = sync_dataset()
    except Exception:
        logger.exception("데이터셋 동기화 실패")
        return HttpResponseServerError("Error processing request")

    return _records_response(transactions)


@require_GET
def filter_dataset(request):
    """동기화 없이 월(+제목/가격) 조건으로 조회"""
    try:
        transactions = filtered_read(
            request.GET.get('dateOfSale', ''),
            title=request.GET.get('title') or None,
            price=request.GET.get('price') or None,
        )
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("거래 조회 실패")
        return HttpResponseServerError("Error processing request")

    return _records_response(transactions)


# ============================================================
# 거래 목록 / 내보내기
# ============================================================

@require_GET
def transaction_list(request):
    """월별 거래 목록 (검색 + 페이지네이션)"""
    try:
        transactions = list_transactions(
            request.GET.get('month'),
            search=request.GET.get('search', ''),
            page=request.GET.get('page'),
            per_page=request.GET.get('perPage'),
        )
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("거래 목록 조회 실패")
        return HttpResponseServerError("Error fetching transactions")

    return _records_response(transactions)


@require_GET
def transaction_export(request):
    """월별 거래 엑셀 다운로드"""
    try:
        month = parse_month(request.GET.get('month'))
        queryset = Transaction.objects.by_month(month).search(request.GET.get('search', ''))
        output = export_transactions_to_excel(queryset.order_by('id'))
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("엑셀 내보내기 실패")
        return HttpResponseServerError("Error exporting transactions")

    return FileResponse(
        output,
        as_attachment=True,
        filename=f'transactions_{month:02d}.xlsx',
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    )
