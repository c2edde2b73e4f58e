# Generated manually for the vouchers app

import uuid
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('piggybanks', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='VoucherTemplate',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('amount_cents', models.IntegerField(help_text='Value in minor currency units', validators=[MinValueValidator(1)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('piggybank', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='voucher_templates', to='piggybanks.piggybank')),
            ],
            options={
                'db_table': 'voucher_templates',
                'ordering': ['created_at'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount_cents__gt', 0)), name='voucher_templates_amount_positive'),
                ],
            },
        ),
    ]
