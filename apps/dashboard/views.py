import logging

from django.core.exceptions import ValidationError
from django.http import HttpResponseBadRequest, HttpResponseServerError, JsonResponse
from django.views.decorators.http import require_GET

from .utils import combined_data, compute_bar_chart, compute_statistics

logger = logging.getLogger(__name__)


@require_GET
def statistics(request):
    """월별 판매 통계"""
    try:
        data = compute_statistics(request.GET.get('month'))
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("통계 집계 실패")
        return HttpResponseServerError("Error processing request")
    return JsonResponse(data)


@require_GET
def bar_chart(request):
    """가격대별 막대 차트 데이터"""
    try:
        data = compute_bar_chart(request.GET.get('month'))
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("막대 차트 집계 실패")
        return HttpResponseServerError("Error fetching bar chart data")
    return JsonResponse(data, safe=False)


@require_GET
def combined(request):
    try:
        data = combined_data(request.GET.get('month'))
    except ValidationError as e:
        return HttpResponseBadRequest(e.messages[0])
    except Exception:
        logger.exception("통합 데이터 조회 실패")
        return HttpResponseServerError("Error fetching combined data")
    return JsonResponse(data)
