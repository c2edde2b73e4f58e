from django.contrib import admin
from .models import ActionEntry


@admin.register(ActionEntry)
class ActionEntryAdmin(admin.ModelAdmin):
    """Read-only view of the ledger; entries are never edited."""

    list_display = ['voucher_template', 'giver', 'occurred_at', 'created_at']
    list_filter = ['occurred_at', 'created_at']
    search_fields = ['voucher_template__title', 'giver__email', 'notes']
    raw_id_fields = ['voucher_template', 'giver']
    readonly_fields = ['id', 'voucher_template', 'giver', 'occurred_at', 'notes', 'created_at', 'updated_at']
    ordering = ['-occurred_at']
    date_hierarchy = 'occurred_at'

    def has_change_permission(self, request, obj=None):
        return False
