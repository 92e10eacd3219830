from django.contrib import admin
from django.utils.html import format_html
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    판매 거래 조회 (동기화로만 생성되므로 읽기 위주)
    """
    list_display = [
        'id',
        'title',
        'get_price_display',
        'category',
        'get_sold_display_colored',
        'date_of_sale',
    ]

    date_hierarchy = 'date_of_sale'

    list_filter = ['sold', 'category']

    search_fields = ['title', 'description']

    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description='판매 여부', ordering='sold')
    def get_sold_display_colored(self, obj):
        if obj.sold:
            return format_html('<span style="color:blue; font-weight:bold;">{}</span>', '판매')
        return format_html('<span style="color:red; font-weight:bold;">{}</span>', '미판매')

    @admin.display(description='가격', ordering='price')
    def get_price_display(self, obj):
        return f"{obj.price:,.2f}"

    def has_add_permission(self, request):
        return False
