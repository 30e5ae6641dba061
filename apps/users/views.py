import logging

from django.contrib.auth.models import update_last_login
from django.utils.translation import gettext_lazy as _
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.settings import api_settings as jwt_settings

from apps.core.exceptions import RequestValidationError
from .serializers import SignupSerializer, SigninSerializer

logger = logging.getLogger(__name__)


class SignupView(APIView):
    """
    POST /api/v1/signup
    Body: { "username": "...", "password": "..." }
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    serializer_class = SignupSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            raise RequestValidationError(serializer.errors)

        user = serializer.save()
        logger.info(f"New account created: {user.username} (id={user.pk})")
        return Response({'success': True, 'message': _('Sign up successful')}, status=status.HTTP_200_OK)


class SigninView(APIView):
    """
    POST /api/v1/signin
    Returns the bearer `token` (access) and a `refresh` token.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    serializer_class = SigninSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data, context={'request': request})
        if not serializer.is_valid():  # Bad credentials raise InvalidCredentials from validate()
            raise RequestValidationError(serializer.errors)

        user = serializer.validated_data['user']
        refresh, access = serializer.issue_tokens(user)
        if jwt_settings.UPDATE_LAST_LOGIN:
            update_last_login(None, user)

        logger.info(f"User {user.username} signed in")
        return Response({
            'success': True,
            'message': _('Sign in successful'),
            'token': access,
            'refresh': refresh,
        }, status=status.HTTP_200_OK)
