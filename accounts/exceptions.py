from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidCredentials(APIException):
    # same wording for unknown account and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class AccountNotFound(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "User not found"
    default_code = "not_found"


class AccountExists(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "User already exists"
    default_code = "account_exists"


class NoActiveCode(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No active OTP. Please log in again."
    default_code = "no_active_code"


class CodeExpired(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "OTP expired. Please log in again."
    default_code = "expired"


class CodeMismatch(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid OTP."
    default_code = "mismatch"


class LockedOut(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_detail = "Too many invalid attempts. Please log in again."
    default_code = "locked_out"
