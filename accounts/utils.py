# accounts/utils.py
import secrets
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

OTP_LENGTH = 6
DEFAULT_OTP_EXPIRY_MINUTES = 5
DEFAULT_MAX_OTP_ATTEMPTS = 5


def generate_numeric_otp(length=OTP_LENGTH):
    # returns string e.g. "483920", never with a leading zero
    min_val = 10**(length-1)
    max_val = 10**length - 1
    return str(secrets.randbelow(max_val - min_val + 1) + min_val)


def otp_expiry_minutes():
    return getattr(settings, "OTP_EXPIRY_MINUTES", DEFAULT_OTP_EXPIRY_MINUTES)


def max_otp_attempts():
    return getattr(settings, "MAX_OTP_ATTEMPTS", DEFAULT_MAX_OTP_ATTEMPTS)


def otp_expiry_from(now=None, minutes=None):
    now = now or timezone.now()
    if minutes is None:
        minutes = otp_expiry_minutes()
    return now + timedelta(minutes=minutes)
