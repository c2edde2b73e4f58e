# Generated manually for the couples app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import apps.couples.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Couple',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('partner1', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='couples_as_partner1', to=settings.AUTH_USER_MODEL)),
                ('partner2', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='couples_as_partner2', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'couples',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('partner1',), name='couples_unique_partner1'),
                    models.UniqueConstraint(fields=('partner2',), name='couples_unique_partner2'),
                    models.CheckConstraint(condition=models.Q(('partner1', models.F('partner2')), _negated=True), name='couples_distinct_partners'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CoupleRequest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('target_email', models.EmailField(blank=True, max_length=255, null=True)),
                ('invitation_token', models.CharField(default=apps.couples.models.generate_invitation_token, editable=False, max_length=64, unique=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('responded_at', models.DateTimeField(blank=True, null=True)),
                ('requester', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_couple_requests', to=settings.AUTH_USER_MODEL)),
                ('target_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='received_couple_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'couple_requests',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['status', 'created_at'], name='couple_requests_status_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(models.Q(('target_email__isnull', True), ('target_user__isnull', False)), models.Q(('target_email__isnull', False), ('target_user__isnull', True)), _connector='OR'), name='couple_requests_single_target'),
                    models.UniqueConstraint(condition=models.Q(('status', 'pending')), fields=('requester',), name='couple_requests_one_pending_per_requester'),
                    models.UniqueConstraint(condition=models.Q(('status', 'pending')), fields=('target_user',), name='couple_requests_one_pending_per_target'),
                ],
            },
        ),
    ]
