"""
Two-factor admin login.

A password check issues a time-boxed six digit code that is emailed to the
account; presenting that code before it expires, and before too many wrong
guesses, exchanges it for a signed session token.

    Idle --start_login--> AwaitingOtp --verify_otp(match)--> Authenticated
    AwaitingOtp --expiry / lockout--> Idle
    AwaitingOtp --verify_otp(mismatch)--> AwaitingOtp

Verification runs as a locked read-modify-write on the account row, so two
concurrent verifications for the same account cannot both count against (or
both consume) the same code.
"""
import logging
import secrets
from functools import lru_cache

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .exceptions import (
    AccountNotFound,
    CodeExpired,
    CodeMismatch,
    InvalidCredentials,
    LockedOut,
    NoActiveCode,
)
from .models import Account
from .notifications import EmailOtpNotifier
from .tokens import SessionTokenIssuer
from .utils import generate_numeric_otp, max_otp_attempts, otp_expiry_from, otp_expiry_minutes

logger = logging.getLogger(__name__)


class LoginProtocol:
    def __init__(self, notifier, token_issuer, clock=timezone.now, expiry_minutes=None, max_attempts=None):
        self.notifier = notifier
        self.token_issuer = token_issuer
        self.clock = clock
        self.expiry_minutes = expiry_minutes if expiry_minutes is not None else otp_expiry_minutes()
        self.max_attempts = max_attempts if max_attempts is not None else max_otp_attempts()

    def start_login(self, identifier, password):
        """Check the password and email a fresh code. Returns the normalized identifier."""
        account = Account.objects.get_by_identifier(identifier)
        # unknown identifiers return before any hash is computed
        if account is None or not account.check_password(password):
            logger.info("Login rejected for %s: invalid credentials", identifier)
            raise InvalidCredentials()

        self._issue_and_notify(account, resend=False)
        return account.email

    def resend_otp(self, identifier):
        """Replace the active code with a new one. Clears any lockout."""
        account = Account.objects.get_by_identifier(identifier)
        if account is None:
            raise AccountNotFound()
        self._issue_and_notify(account, resend=True)
        return account.email

    def verify_otp(self, identifier, code):
        """Exchange a valid code for a session token.

        Every failure except an unknown account leaves the account in a
        persisted state before the error is raised: mismatches count toward
        lockout, and expired or locked-out codes are cleared.
        """
        failure = None
        token = None
        with transaction.atomic():
            account = (
                Account.objects.select_for_update()
                .filter(email=Account.objects.normalize_identifier(identifier))
                .first()
            )
            if account is None:
                raise AccountNotFound()

            now = self.clock()
            if account.otp_attempts >= self.max_attempts:
                account.clear_otp()
                failure = LockedOut()
            elif not account.has_active_otp:
                failure = NoActiveCode()
            elif account.otp_expired(now):
                account.clear_otp()
                failure = CodeExpired()
            elif not secrets.compare_digest(account.otp_code, code):
                account.otp_attempts += 1
                if account.otp_attempts >= self.max_attempts:
                    account.clear_otp()
                failure = CodeMismatch()
            else:
                token = self.token_issuer.issue(account)
                account.clear_otp(reset_attempts=True)

            account.save(update_fields=["otp_code", "otp_expires_at", "otp_attempts"])

        if failure is not None:
            logger.info(
                "OTP verification failed for %s: %s (attempts=%s)",
                account.email,
                failure.default_code,
                account.otp_attempts,
            )
            raise failure

        logger.info("Login completed for %s", account.email)
        return token

    def _issue_and_notify(self, account, resend):
        code = generate_numeric_otp()
        expires_at = otp_expiry_from(self.clock(), self.expiry_minutes)
        account.issue_otp(code, expires_at)
        Account.objects.filter(pk=account.pk).update(
            otp_code=account.otp_code,
            otp_expires_at=account.otp_expires_at,
            otp_attempts=account.otp_attempts,
        )
        logger.info("OTP issued for %s, expires at %s", account.email, expires_at.isoformat())
        self.notifier.send_code(account.email, code, self.expiry_minutes, resend=resend)


@lru_cache(maxsize=1)
def get_login_protocol():
    """Return the process-wide protocol with its collaborators built once."""
    notifier = EmailOtpNotifier(async_delivery=getattr(settings, "OTP_ASYNC_DELIVERY", True))
    return LoginProtocol(notifier=notifier, token_issuer=SessionTokenIssuer())
