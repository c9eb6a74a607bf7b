from datetime import timedelta

from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Account
from accounts.tokens import SessionTokenIssuer


class SessionTokenTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = Account.objects.create_user(email="admin@example.com", password="secret1")

    def test_me_with_x_auth_token_header(self):
        token = SessionTokenIssuer().issue(self.admin)

        response = self.client.get("/api/auth/me", HTTP_X_AUTH_TOKEN=token)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["email"], "admin@example.com")
        self.assertEqual(response.data["role"], "admin")
        self.assertEqual(response.data["account"]["id"], self.admin.pk)

    def test_me_with_bearer_header(self):
        token = SessionTokenIssuer().issue(self.admin)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get("/api/auth/me")
        self.assertEqual(response.status_code, 200)

    def test_me_without_token(self):
        response = self.client.get("/api/auth/me")
        self.assertEqual(response.status_code, 401)

    def test_me_with_tampered_token(self):
        token = SessionTokenIssuer().issue(self.admin)
        response = self.client.get("/api/auth/me", HTTP_X_AUTH_TOKEN=token[:-2] + "xx")
        self.assertEqual(response.status_code, 401)

    def test_me_with_expired_token(self):
        token = SessionTokenIssuer(lifetime=timedelta(seconds=-1)).issue(self.admin)
        response = self.client.get("/api/auth/me", HTTP_X_AUTH_TOKEN=token)
        self.assertEqual(response.status_code, 401)

    def test_non_admin_role_is_forbidden(self):
        editor = Account.objects.create_user(email="editor@example.com", password="secret1", role="editor")
        token = SessionTokenIssuer().issue(editor)

        response = self.client.get("/api/auth/me", HTTP_X_AUTH_TOKEN=token)
        self.assertEqual(response.status_code, 403)

    def test_token_lifetime_is_five_hours(self):
        token = AccessToken(SessionTokenIssuer().issue(self.admin))
        self.assertEqual(token["exp"] - token["iat"], 5 * 60 * 60)

    def test_token_from_login_flow_grants_access(self):
        self.client.post("/api/auth/login", {"identifier": "admin@example.com", "password": "secret1"}, format="json")
        self.admin.refresh_from_db()
        response = self.client.post(
            "/api/auth/verify-otp",
            {"identifier": "admin@example.com", "code": self.admin.otp_code},
            format="json",
        )

        me = self.client.get("/api/auth/me", HTTP_X_AUTH_TOKEN=response.data["token"])
        self.assertEqual(me.status_code, 200)
