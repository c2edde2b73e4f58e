from django.contrib import admin
from .models import VoucherTemplate


@admin.register(VoucherTemplate)
class VoucherTemplateAdmin(admin.ModelAdmin):
    list_display = ['title', 'piggybank', 'amount_display', 'created_at']
    list_filter = ['created_at']
    search_fields = ['title', 'piggybank__title']
    raw_id_fields = ['piggybank']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']

    @admin.display(description='Amount', ordering='amount_cents')
    def amount_display(self, obj):
        return f'{obj.amount_cents / 100:.2f}'
