# apps/core/exceptions.py
"""
API error taxonomy and the project-wide DRF exception handler.

Every error leaves the API as::

    {"success": false, "message": "<human readable>", "errors": {...}}

where ``errors`` is only present for validation failures.
"""
import logging

from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class RequestValidationError(exceptions.ValidationError):
    """Malformed signup/signin payload. Reported as 411 to keep the public contract."""
    status_code = status.HTTP_411_LENGTH_REQUIRED
    default_detail = _('Validation Error')
    default_code = 'invalid'


class InvalidCredentials(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _('Invalid username or password')
    default_code = 'invalid_credentials'


class InvalidAccessToken(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _('Invalid or expired token')
    default_code = 'token_not_valid'


class UserAlreadyExists(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _('User already exists with this username')
    default_code = 'user_exists'


class ShareLinkNotFound(exceptions.APIException):
    status_code = status.HTTP_411_LENGTH_REQUIRED
    default_detail = _('Sorry, input is invalid')
    default_code = 'share_link_not_found'


class ShareLinkUnavailable(exceptions.APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = _('Could not allocate a share link, please retry')
    default_code = 'share_link_unavailable'


def first_error_message(detail):
    """
    Pull the first human-readable message out of a DRF error detail,
    which may be a string, a list or a (nested) dict.
    """
    if isinstance(detail, dict):
        for value in detail.values():
            message = first_error_message(value)
            if message:
                return message
        return ''
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return ''
    return str(detail)


def api_exception_handler(exc, context):
    # rest_framework.views resolves the default authentication classes on import,
    # and those import this module.
    from rest_framework import views

    response = views.exception_handler(exc, context)

    if response is None:
        # Not an APIException / Http404 / PermissionDenied: a bug or a store failure.
        view = context.get('view')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return Response(
            {'success': False, 'message': _('Internal Server Error')},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.NotAuthenticated):
        message = _('Access token missing')
    else:
        message = first_error_message(response.data) or _('Request failed')

    payload = {'success': False, 'message': message}
    if isinstance(exc, exceptions.ValidationError):
        payload['errors'] = response.data
    response.data = payload
    return response
