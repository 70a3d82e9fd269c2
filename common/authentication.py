"""
common.authentication
~~~~~~~~~~~~~~~~~~~~~
DRF authentication that checks the CSRF token on every unsafe request.

Stock ``SessionAuthentication`` only enforces CSRF for logged-in users, which
leaves anonymous API writes without any anti-forgery check.
"""
from rest_framework.authentication import SessionAuthentication


class CsrfEnforcedSessionAuthentication(SessionAuthentication):
    """Session authentication that enforces CSRF for anonymous requests too."""

    def authenticate(self, request):
        # Safe methods pass through CSRFCheck untouched.
        self.enforce_csrf(request)
        return super().authenticate(request)
