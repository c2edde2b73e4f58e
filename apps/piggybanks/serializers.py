from rest_framework import serializers
from .models import PiggyBank


class PiggyBankSerializer(serializers.ModelSerializer):
    """Goal as returned by create, retrieve and close."""

    coupleId = serializers.UUIDField(source='couple_id', read_only=True)
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = PiggyBank
        fields = [
            'id',
            'coupleId',
            'title',
            'description',
            'startDate',
            'endDate',
            'createdAt',
        ]
        read_only_fields = fields


class PiggyBankListSerializer(PiggyBankSerializer):
    """Goal with progress totals (expects list_piggybanks annotations)."""

    voucherTemplatesCount = serializers.IntegerField(source='voucher_templates_count', read_only=True)
    totalActions = serializers.IntegerField(source='total_actions', read_only=True)
    totalValue = serializers.IntegerField(source='total_value', read_only=True)

    class Meta(PiggyBankSerializer.Meta):
        fields = PiggyBankSerializer.Meta.fields + [
            'voucherTemplatesCount',
            'totalActions',
            'totalValue',
        ]
        read_only_fields = fields


class PiggyBankCreateSerializer(serializers.Serializer):
    """Input for POST /piggybanks. Dates are ISO 8601 / RFC 3339."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    startDate = serializers.DateTimeField(source='start_date')
    endDate = serializers.DateTimeField(source='end_date', required=False, allow_null=True, default=None)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
