import pytest

from accounts.services import get_login_protocol


@pytest.fixture(autouse=True)
def otp_test_settings(settings):
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.OTP_ASYNC_DELIVERY = False
    settings.ALLOW_ADMIN_REGISTRATION = True
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    get_login_protocol.cache_clear()
    yield
    get_login_protocol.cache_clear()
