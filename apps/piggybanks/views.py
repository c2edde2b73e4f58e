from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    PiggyBankSerializer,
    PiggyBankListSerializer,
    PiggyBankCreateSerializer,
    ErrorResponseSerializer,
)
from .services import (
    create_piggybank,
    list_piggybanks,
    get_piggybank,
    close_piggybank,
    # Exceptions
    PiggyBankNotFoundError,
    PiggyBankNotAuthorizedError,
)


@extend_schema(tags=['piggybanks'])
class PiggyBankViewSet(viewsets.GenericViewSet):
    """
    Savings goals of the caller's couple.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Open goals with progress totals
    create: Create a goal for the caller's couple
    retrieve: Get a specific goal
    close: Set the goal's end date to now
    """

    serializer_class = PiggyBankSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    @extend_schema(responses={200: PiggyBankListSerializer(many=True)})
    def list(self, request):
        """List open goals, newest first."""
        piggybanks = list_piggybanks(user=request.user)
        return Response(PiggyBankListSerializer(piggybanks, many=True).data)

    @extend_schema(
        request=PiggyBankCreateSerializer,
        responses={201: PiggyBankSerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer},
    )
    def create(self, request):
        """Create a new goal."""
        serializer = PiggyBankCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            piggybank = create_piggybank(user=request.user, **serializer.validated_data)
        except PiggyBankNotAuthorizedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(PiggyBankSerializer(piggybank).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: PiggyBankSerializer, 404: ErrorResponseSerializer})
    def retrieve(self, request, pk=None):
        """Get a goal owned by the caller's couple."""
        try:
            piggybank = get_piggybank(piggybank_id=pk, user=request.user)
        except PiggyBankNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(PiggyBankSerializer(piggybank).data)

    @extend_schema(request=None, responses={204: None, 403: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def close(self, request, pk=None):
        """Close a goal."""
        try:
            close_piggybank(piggybank_id=pk, user=request.user)
        except PiggyBankNotAuthorizedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)
