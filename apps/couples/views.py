from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import RequestDirection
from .serializers import (
    RequestCoupleSerializer,
    CoupleRequestActionSerializer,
    CoupleRequestSerializer,
    CoupleSerializer,
    CoupleStatusSerializer,
    MessageResponseSerializer,
    ErrorResponseSerializer,
)
from .services import (
    RequestView,
    request_couple,
    accept_couple,
    resend_couple,
    get_couple_status,
    # Exceptions
    PartnerRequiredError,
    InvalidPartnerEmailError,
    CannotInviteSelfError,
    AlreadyCoupledError,
    PendingRequestExistsError,
    RequestNotFoundError,
    RequestNotAuthorizedError,
    RequestNotPendingError,
)


@extend_schema(
    request=RequestCoupleSerializer,
    responses={
        201: CoupleRequestSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Invite a partner by email to form a couple.",
    tags=['couples'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def request_couple_view(request):
    """Send a couple invitation."""
    serializer = RequestCoupleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        couple_request, partner = request_couple(
            requester=request.user,
            partner_email=serializer.validated_data['partner_email'],
        )
    except (PartnerRequiredError, InvalidPartnerEmailError, CannotInviteSelfError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except (AlreadyCoupledError, PendingRequestExistsError) as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    view = RequestView(couple_request, RequestDirection.OUTGOING, partner)
    return Response(CoupleRequestSerializer(view).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=CoupleRequestActionSerializer,
    responses={
        200: CoupleSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Accept a pending couple request addressed to the current user.",
    tags=['couples'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def accept_couple_view(request):
    """Accept a couple invitation."""
    serializer = CoupleRequestActionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        couple, partner = accept_couple(
            request_id=serializer.validated_data['request_id'],
            user=request.user,
        )
    except RequestNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RequestNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except (AlreadyCoupledError, RequestNotPendingError) as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(CoupleSerializer({'couple': couple, 'partner': partner}).data)


@extend_schema(
    request=CoupleRequestActionSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Re-send the invitation email of a pending outgoing request.",
    tags=['couples'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def resend_couple_view(request):
    """Re-send a couple invitation."""
    serializer = CoupleRequestActionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        resend_couple(
            request_id=serializer.validated_data['request_id'],
            user=request.user,
        )
    except RequestNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RequestNotAuthorizedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except RequestNotPendingError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({'message': 'invitation resent'})


@extend_schema(
    responses={200: CoupleStatusSerializer},
    description="Get the current user's couple and pending requests.",
    tags=['couples'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def couple_status_view(request):
    """Current pairing state of the user."""
    couple_status = get_couple_status(user=request.user)

    couple = None
    if couple_status.couple is not None:
        couple = {'couple': couple_status.couple, 'partner': couple_status.partner}

    return Response(CoupleStatusSerializer({
        'couple': couple,
        'incoming': couple_status.incoming,
        'outgoing': couple_status.outgoing,
    }).data)
