from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    VoucherTemplateSerializer,
    VoucherTemplateCreateSerializer,
    ErrorResponseSerializer,
)
from .services import (
    create_voucher_template,
    list_voucher_templates,
    # Exceptions
    VoucherNotAuthorizedError,
)


@extend_schema(
    request=VoucherTemplateCreateSerializer,
    responses={
        201: VoucherTemplateSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Define a voucher template on a piggybank.",
    tags=['vouchers'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_template(request):
    """Create a voucher template."""
    serializer = VoucherTemplateCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        template = create_voucher_template(user=request.user, **serializer.validated_data)
    except VoucherNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(VoucherTemplateSerializer(template).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={
        200: VoucherTemplateSerializer(many=True),
        403: ErrorResponseSerializer,
    },
    description="List the voucher templates of a piggybank, oldest first.",
    tags=['vouchers'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def piggybank_templates(request, piggybank_id):
    """List voucher templates of a piggybank."""
    try:
        templates = list_voucher_templates(piggybank_id=piggybank_id, user=request.user)
    except VoucherNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(VoucherTemplateSerializer(templates, many=True).data)
