# Generated manually for the actions app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('vouchers', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ActionEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('occurred_at', models.DateTimeField()),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('giver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='action_entries', to=settings.AUTH_USER_MODEL)),
                ('voucher_template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='action_entries', to='vouchers.vouchertemplate')),
            ],
            options={
                'db_table': 'action_entries',
                'ordering': ['-occurred_at'],
                'verbose_name_plural': 'action entries',
                'indexes': [models.Index(fields=['voucher_template', 'occurred_at'], name='action_entries_template_idx')],
            },
        ),
    ]
