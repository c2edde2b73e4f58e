from django.contrib import admin
from django.utils import timezone
from .models import PiggyBank


@admin.register(PiggyBank)
class PiggyBankAdmin(admin.ModelAdmin):
    list_display = ['title', 'couple', 'start_date', 'end_date', 'is_open', 'created_at']
    list_filter = ['start_date', 'end_date', 'created_at']
    search_fields = ['title', 'couple__partner1__email', 'couple__partner2__email']
    raw_id_fields = ['couple']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    @admin.display(boolean=True, description='Open')
    def is_open(self, obj):
        return not obj.has_ended()

    actions = ['close_piggybanks']

    @admin.action(description='Close selected piggybanks')
    def close_piggybanks(self, request, queryset):
        count = queryset.filter(PiggyBank.open_filter()).update(end_date=timezone.now())
        self.message_user(request, f'Closed {count} piggybank(s).')
