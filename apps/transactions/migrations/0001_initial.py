from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('price_text', models.CharField(blank=True, default='', editable=False, max_length=20)),
                ('date_of_sale', models.DateTimeField(db_index=True)),
                ('category', models.CharField(blank=True, default='', max_length=100)),
                ('sold', models.BooleanField(db_index=True, default=False)),
                ('image', models.URLField(blank=True, default='', max_length=500)),
            ],
            options={
                'db_table': 'product_transactions',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['sold', 'date_of_sale'], name='product_tx_sold_date_idx')],
            },
        ),
    ]
