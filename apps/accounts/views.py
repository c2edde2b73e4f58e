from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserSerializer,
    UserRegistrationSerializer,
    InvitationRegistrationSerializer,
    UserLoginSerializer,
    AuthResponseSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    issue_access_token,
    register_with_invitation,
    # Exceptions
    RegistrationValidationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidInvitationTokenError,
    InvitationEmailMismatchError,
    InvitationAlreadyClaimedError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _auth_response(user, status_code):
    return Response({
        'token': issue_access_token(user),
        'user': UserSerializer(user).data,
    }, status=status_code)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive an access token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except RegistrationValidationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return _auth_response(user, status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive an access token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except (InvalidCredentialsError, InactiveAccountError) as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    return _auth_response(user, status.HTTP_200_OK)


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=InvitationRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Register through a couple invitation and bind the new account to it.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register_with_invitation_view(request):
    """Register a user from an invitation link."""
    serializer = InvitationRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_with_invitation(**serializer.validated_data)
    except (
        InvalidInvitationTokenError,
        InvitationEmailMismatchError,
        RegistrationValidationError,
    ) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except InvitationAlreadyClaimedError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return _auth_response(user, status.HTTP_201_CREATED)
