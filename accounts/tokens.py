from datetime import timedelta

from rest_framework_simplejwt.tokens import AccessToken

SESSION_LIFETIME = timedelta(hours=5)


class SessionTokenIssuer:
    """Mints signed access tokens carrying the account id, email and role."""

    def __init__(self, lifetime=SESSION_LIFETIME):
        self.lifetime = lifetime

    def issue(self, account):
        token = AccessToken.for_user(account)
        token.set_exp(lifetime=self.lifetime)
        token["email"] = account.email
        token["role"] = account.role
        return str(token)
