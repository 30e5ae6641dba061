from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import AUTH_HEADER_TYPE_BYTES, JWTAuthentication

from apps.core.exceptions import InvalidAccessToken


class BearerTokenAuthentication(JWTAuthentication):
    """
    SimpleJWT bearer authentication with the API's status contract:
    no token at all (no header, or a bare "Bearer") stays a 401, raised later
    by the permission check, while a bad, expired or orphaned token is a 403.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            parts = header.split()
            if len(parts) == 1 and parts[0] in AUTH_HEADER_TYPE_BYTES:
                return None

        try:
            return super().authenticate(request)
        except AuthenticationFailed as exc:  # InvalidToken is a subclass
            raise InvalidAccessToken() from exc
