from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for the user directory.

    Email is the login field, so the username-based layout of the stock
    UserAdmin is replaced.
    """

    list_display = [
        'email',
        'name',
        'is_active_badge',
        'is_staff',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        color, label = ('#10b981', 'Active') if obj.is_active else ('#B85C5C', 'Inactive')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            label,
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = ['deactivate_users']

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes superusers)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} user(s).')
