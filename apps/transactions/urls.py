from django.urls import path
from . import views

app_name = 'transactions'

urlpatterns = [
    # 데이터셋 동기화 / 조회
    path('init', views.init_dataset, name='init'),
    path('init/filter', views.filter_dataset, name='init_filter'),

    # 거래 목록
    path('transactions', views.transaction_list, name='transaction_list'),
    path('transactions/export', views.transaction_export, name='transaction_export'),
]
