from rest_framework import serializers
from .models import VoucherTemplate


class VoucherTemplateSerializer(serializers.ModelSerializer):

    piggyBankId = serializers.UUIDField(source='piggybank_id', read_only=True)
    amountCents = serializers.IntegerField(source='amount_cents', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = VoucherTemplate
        fields = [
            'id',
            'piggyBankId',
            'title',
            'description',
            'amountCents',
            'createdAt',
        ]
        read_only_fields = fields


class VoucherTemplateCreateSerializer(serializers.Serializer):
    """Input for POST /voucher-templates."""

    piggyBankId = serializers.UUIDField(source='piggybank_id')
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    amountCents = serializers.IntegerField(source='amount_cents')

    def validate_amountCents(self, value):
        if value <= 0:
            raise serializers.ValidationError("amountCents must be positive")
        return value


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
