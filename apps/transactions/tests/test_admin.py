import pytest
from django.urls import reverse

from apps.transactions.admin import TransactionAdmin
from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestTransactionAdmin:
    def test_changelist_renders(self, admin_client, make_transaction):
        make_transaction(title='Bag', sold=True)
        response = admin_client.get(reverse('admin:transactions_transaction_changelist'))
        assert response.status_code == 200
        assert b'Bag' in response.content

    def test_search(self, admin_client, make_transaction):
        make_transaction(title='Gold Ring')
        make_transaction(title='Backpack')
        response = admin_client.get(reverse('admin:transactions_transaction_changelist'), {'q': 'ring'})
        assert response.status_code == 200
        assert response.context['cl'].result_count == 1

    def test_add_is_disabled(self, admin_client):
        """거래는 동기화로만 생성"""
        response = admin_client.get(reverse('admin:transactions_transaction_add'))
        assert response.status_code == 403

    def test_display_helpers(self, make_transaction):
        from django.contrib.admin.sites import AdminSite
        model_admin = TransactionAdmin(Transaction, AdminSite())
        tx = make_transaction(price='1234.5', sold=False)

        assert model_admin.get_price_display(tx) == '1,234.50'
        assert '미판매' in model_admin.get_sold_display_colored(tx)
