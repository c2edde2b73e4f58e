from rest_framework import serializers


class UserSummarySerializer(serializers.Serializer):
    """Partner identity; also used for unsaved stand-ins of invitees."""

    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    name = serializers.CharField(read_only=True)


class RequestCoupleSerializer(serializers.Serializer):
    """Input for POST /couples/request. Blank and malformed addresses are rejected by the service."""

    partnerEmail = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        source='partner_email',
    )


class CoupleRequestActionSerializer(serializers.Serializer):
    """Input for accept and resend."""

    requestId = serializers.UUIDField(required=True, source='request_id')


class CoupleRequestSerializer(serializers.Serializer):
    """A request seen from one party (expects a RequestView)."""

    id = serializers.UUIDField(source='request.id', read_only=True)
    direction = serializers.CharField(read_only=True)
    status = serializers.CharField(source='request.status', read_only=True)
    partner = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='request.created_at', read_only=True)


class CoupleSerializer(serializers.Serializer):
    """A couple with the caller's partner (expects {'couple', 'partner'})."""

    id = serializers.UUIDField(source='couple.id', read_only=True)
    partner = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='couple.created_at', read_only=True)


class CoupleStatusSerializer(serializers.Serializer):
    couple = CoupleSerializer(allow_null=True, read_only=True)
    incoming = CoupleRequestSerializer(many=True, read_only=True)
    outgoing = CoupleRequestSerializer(many=True, read_only=True)


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
