from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html
from .models import Couple, CoupleRequest, CoupleRequestStatus


@admin.register(Couple)
class CoupleAdmin(admin.ModelAdmin):
    list_display = ['id', 'partner1', 'partner2', 'created_at']
    search_fields = ['partner1__email', 'partner2__email']
    raw_id_fields = ['partner1', 'partner2']
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']


@admin.register(CoupleRequest)
class CoupleRequestAdmin(admin.ModelAdmin):
    """Admin interface for couple invitations."""

    list_display = [
        'requester',
        'target_display',
        'status_badge',
        'created_at',
        'responded_at',
    ]

    list_filter = ['status', 'created_at']

    search_fields = [
        'requester__email',
        'target_user__email',
        'target_email',
    ]

    raw_id_fields = ['requester', 'target_user']
    readonly_fields = ['id', 'invitation_token', 'created_at', 'responded_at']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    def target_display(self, obj):
        """Invitee account, or the raw address when unregistered."""
        if obj.target_user_id:
            return obj.target_user.email
        return f'{obj.target_email} (invited)'
    target_display.short_description = 'Target'

    def status_badge(self, obj):
        colors = {
            CoupleRequestStatus.PENDING: '#f59e0b',
            CoupleRequestStatus.ACCEPTED: '#10b981',
            CoupleRequestStatus.REJECTED: '#B85C5C',
        }
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colors.get(obj.status, '#6b7280'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    actions = ['reject_requests']

    @admin.action(description='Reject selected pending requests')
    def reject_requests(self, request, queryset):
        count = queryset.filter(status=CoupleRequestStatus.PENDING).update(
            status=CoupleRequestStatus.REJECTED,
            responded_at=timezone.now(),
        )
        self.message_user(request, f'Rejected {count} request(s).')
