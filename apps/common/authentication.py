# apps/common/authentication.py
from django.conf import settings
from rest_framework.authentication import CSRFCheck
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


def verify_token(raw_token):
    """
    Decode an access token and return the user id it carries.
    Returns None for expired, tampered or otherwise unreadable tokens.
    """
    try:
        token = AccessToken(raw_token)
    except TokenError:
        return None
    return token.get(api_settings.USER_ID_CLAIM)


class CookieJWTAuthentication(JWTAuthentication):
    """
    Authenticate requests from the access token stored in a cookie.
    - No cookie: the request stays anonymous and permissions decide.
    - Cookie present but unusable: 401 "Invalid token".
    - Unsafe methods must pass Django's CSRF check, since browsers attach
      the cookie to cross-site form posts.
    """
    token_verifier = staticmethod(verify_token)

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None

        user_id = self.token_verifier(raw_token)
        if user_id is None:
            raise AuthenticationFailed("Invalid token")

        user = self.user_model.objects.filter(pk=user_id, is_active=True).first()
        if user is None:
            raise AuthenticationFailed("Invalid token")

        self.enforce_csrf(request)
        return user, None

    def enforce_csrf(self, request):
        def dummy_get_response(request):
            return None

        check = CSRFCheck(dummy_get_response)
        # populates request.META['CSRF_COOKIE'], which is used in process_view()
        check.process_request(request)
        reason = check.process_view(request, None, (), {})
        if reason:
            raise PermissionDenied(f"CSRF Failed: {reason}")
