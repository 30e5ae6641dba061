from rest_framework import serializers
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password
from django.contrib.auth.validators import UnicodeUsernameValidator
from django.db import IntegrityError, transaction
from django.utils.translation import gettext_lazy as _
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.exceptions import InvalidCredentials, UserAlreadyExists

User = get_user_model()


class SignupSerializer(serializers.Serializer):
    """
    Validates a signup payload and creates the account with a hashed password.
    Username uniqueness is checked in `create` so a duplicate surfaces as
    UserAlreadyExists (403) instead of a field error.
    """
    username = serializers.CharField(
        min_length=4, max_length=10,
        validators=[UnicodeUsernameValidator()],
        error_messages={
            'min_length': _("Username must be at least 4 characters long"),
            'max_length': _("Username cannot exceed 10 characters"),
        },
    )
    password = serializers.CharField(
        write_only=True, max_length=20, trim_whitespace=False,
        validators=[validate_password], style={'input_type': 'password'},
        error_messages={'max_length': _("Password must not exceed 20 characters")},
    )

    def create(self, validated_data):
        username = validated_data['username']
        if User.objects.filter(username=username).exists():
            raise UserAlreadyExists()
        try:
            with transaction.atomic():
                return User.objects.create_user(username=username, password=validated_data['password'])
        except IntegrityError:
            # Lost a race against a concurrent signup for the same name.
            raise UserAlreadyExists()


class SigninSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=3, max_length=10)
    password = serializers.CharField(
        write_only=True, min_length=8, max_length=20, trim_whitespace=False,
        style={'input_type': 'password'},
    )

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password'],
        )
        if user is None:
            raise InvalidCredentials()
        attrs['user'] = user
        return attrs

    @staticmethod
    def issue_tokens(user):
        """Return a (refresh, access) pair; the access token is the bearer token."""
        refresh = RefreshToken.for_user(user)
        refresh['username'] = user.username
        return str(refresh), str(refresh.access_token)
