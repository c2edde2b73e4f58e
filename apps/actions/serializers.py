from rest_framework import serializers
from apps.vouchers.models import VoucherTemplate
from .models import ActionEntry


class ActionEntrySerializer(serializers.ModelSerializer):
    """Entry as returned by POST /action-entries."""

    voucherTemplateId = serializers.UUIDField(source='voucher_template_id', read_only=True)
    giverUserId = serializers.UUIDField(source='giver_id', read_only=True)
    occurredAt = serializers.DateTimeField(source='occurred_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ActionEntry
        fields = [
            'id',
            'voucherTemplateId',
            'giverUserId',
            'occurredAt',
            'notes',
            'createdAt',
        ]
        read_only_fields = fields


class ActionEntryCreateSerializer(serializers.Serializer):
    """Input for POST /action-entries."""

    voucherTemplateId = serializers.UUIDField(source='voucher_template_id')
    occurredAt = serializers.DateTimeField(source='occurred_at')
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)


class ActionEntrySummarySerializer(serializers.ModelSerializer):

    occurredAt = serializers.DateTimeField(source='occurred_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ActionEntry
        fields = ['id', 'occurredAt', 'notes', 'createdAt']
        read_only_fields = fields


class VoucherTemplateSummarySerializer(serializers.ModelSerializer):

    amountCents = serializers.IntegerField(source='amount_cents', read_only=True)

    class Meta:
        model = VoucherTemplate
        fields = ['id', 'title', 'description', 'amountCents']
        read_only_fields = fields


class ActionEntryGroupSerializer(serializers.Serializer):
    """Entries of one template (expects an ActionEntryGroup)."""

    voucherTemplateId = serializers.UUIDField(source='voucher_template.id', read_only=True)
    voucherTemplate = VoucherTemplateSummarySerializer(source='voucher_template', read_only=True)
    entries = ActionEntrySummarySerializer(many=True, read_only=True)


class PiggyBankStatsSerializer(serializers.Serializer):
    totalActions = serializers.IntegerField(source='total_actions', read_only=True)
    totalValue = serializers.IntegerField(source='total_value', read_only=True)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
