import logging

from django.conf import settings
from django.db import DatabaseError, IntegrityError
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import AccountExists
from .models import Account
from .permissions import IsAdminRole
from .serializers import (
    AccountSerializer,
    LoginSerializer,
    RegisterSerializer,
    ResendOTPSerializer,
    VerifyOTPSerializer,
)
from .services import get_login_protocol

logger = logging.getLogger(__name__)


class MeView(APIView):
    permission_classes = (IsAuthenticated, IsAdminRole)

    def get(self, request):
        return Response(
            {
                "account": AccountSerializer(request.user).data,
                "email": request.user.email,
                "role": request.auth.get("role"),
            },
            status=200,
        )


class RegisterView(APIView):
    """
    One-time admin registration.
    """
    permission_classes = (AllowAny,)
    authentication_classes = ()

    def post(self, request):
        if not getattr(settings, "ALLOW_ADMIN_REGISTRATION", False):
            raise PermissionDenied("Registration is disabled.")

        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["identifier"]
        password = serializer.validated_data["password"]

        try:
            if Account.objects.get_by_identifier(email):
                raise AccountExists()
            Account.objects.create_user(email=email, password=password, role=Account.ROLE_ADMIN)
        except IntegrityError:
            # lost a race with a concurrent registration of the same email
            raise AccountExists()
        except DatabaseError:
            logger.exception("Register error for %s", email)
            return Response({"detail": "Server error"}, status=500)

        return Response({"message": "Admin user created! You can now log in."}, status=201)


class LoginView(APIView):
    """
    Step 1: check the password and email a one-time code.
    """
    permission_classes = (AllowAny,)
    authentication_classes = ()

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            identifier = get_login_protocol().start_login(
                serializer.validated_data["identifier"],
                serializer.validated_data["password"],
            )
        except DatabaseError:
            logger.exception("Login/OTP error")
            return Response({"detail": "Server error during login process."}, status=500)

        return Response(
            {
                "message": "OTP sent to your email.",
                "otpSent": True,
                "sessionData": {"identifier": identifier},
            },
            status=200,
        )


class VerifyOTPView(APIView):
    """
    Step 2: exchange the emailed code for a session token.
    """
    permission_classes = (AllowAny,)
    authentication_classes = ()

    def post(self, request):
        serializer = VerifyOTPSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            token = get_login_protocol().verify_otp(
                serializer.validated_data["identifier"],
                serializer.validated_data["code"],
            )
        except DatabaseError:
            logger.exception("Verify OTP error")
            return Response({"detail": "Server error during verification."}, status=500)

        return Response({"token": token, "message": "Login successful!"}, status=200)


class ResendOTPView(APIView):
    permission_classes = (AllowAny,)
    authentication_classes = ()

    def post(self, request):
        serializer = ResendOTPSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            get_login_protocol().resend_otp(serializer.validated_data["identifier"])
        except DatabaseError:
            logger.exception("Resend OTP error")
            return Response({"detail": "Server error while resending OTP."}, status=500)

        return Response({"message": "New OTP sent."}, status=200)
