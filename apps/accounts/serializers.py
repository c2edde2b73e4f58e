from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = ['id', 'email', 'name']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """
    Serializer for user registration.

    Email format, password length and name presence are checked by the
    registration service so each failure gets its own message.
    """

    email = serializers.CharField(required=True, allow_blank=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        allow_blank=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(required=True, allow_blank=True)


class InvitationRegistrationSerializer(UserRegistrationSerializer):
    """Registration payload carrying the invitation token."""

    invitationToken = serializers.CharField(required=True, source='invitation_token')


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.CharField(required=True, allow_blank=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class AuthResponseSerializer(serializers.Serializer):
    """Token plus the authenticated user."""

    token = serializers.CharField()
    user = UserSerializer()
