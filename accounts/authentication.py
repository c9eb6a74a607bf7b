from rest_framework_simplejwt.authentication import JWTAuthentication

TOKEN_HEADER = "HTTP_X_AUTH_TOKEN"


class HeaderTokenAuthentication(JWTAuthentication):
    """JWT authentication that also accepts the raw token in an ``x-auth-token`` header.

    The admin frontend sends ``x-auth-token: <token>``; ``Authorization: Bearer
    <token>`` keeps working for other clients. Expired or tampered tokens are
    rejected with 401 by simplejwt's validation.
    """

    def authenticate(self, request):
        raw_token = request.META.get(TOKEN_HEADER)
        if not raw_token:
            return super().authenticate(request)

        validated_token = self.get_validated_token(raw_token.strip().encode())
        return self.get_user(validated_token), validated_token
