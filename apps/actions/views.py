from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ActionEntrySerializer,
    ActionEntryCreateSerializer,
    ActionEntryGroupSerializer,
    PiggyBankStatsSerializer,
    ErrorResponseSerializer,
)
from .services import (
    create_action_entry,
    list_action_entries,
    get_piggybank_stats,
    # Exceptions
    VoucherTemplateNotFoundError,
    ActionNotAuthorizedError,
    PiggyBankEndedError,
)


@extend_schema(
    request=ActionEntryCreateSerializer,
    responses={
        201: ActionEntrySerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Log a voucher redemption against a piggybank.",
    tags=['actions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_entry(request):
    """Create an action entry."""
    serializer = ActionEntryCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        entry = create_action_entry(user=request.user, **serializer.validated_data)
    except VoucherTemplateNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ActionNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except PiggyBankEndedError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ActionEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={
        200: ActionEntryGroupSerializer(many=True),
        403: ErrorResponseSerializer,
    },
    description="List a piggybank's action entries grouped per voucher template.",
    tags=['actions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def piggybank_entries(request, piggybank_id):
    """Action entries of a piggybank."""
    try:
        groups = list_action_entries(piggybank_id=piggybank_id, user=request.user)
    except ActionNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ActionEntryGroupSerializer(groups, many=True).data)


@extend_schema(
    responses={
        200: PiggyBankStatsSerializer,
        403: ErrorResponseSerializer,
    },
    description="Total number of actions and their summed value for a piggybank.",
    tags=['actions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def piggybank_stats(request, piggybank_id):
    """Progress totals of a piggybank."""
    try:
        stats = get_piggybank_stats(piggybank_id=piggybank_id, user=request.user)
    except ActionNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(PiggyBankStatsSerializer(stats).data)
