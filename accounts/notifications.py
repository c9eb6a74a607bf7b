"""
One-time code delivery.

Delivery is fire-and-forget: the code is already persisted when the notifier
is called, so a failed send is logged and never reported to the caller.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)

LOGIN_SUBJECT = "NEXORA Admin Login Verification Code"
RESEND_SUBJECT = "Your new NEXORA Admin OTP"


class EmailOtpNotifier:
    """Sends OTP codes by email, on a background thread unless ``async_delivery`` is off."""

    def __init__(self, from_email=None, async_delivery=True, max_workers=2):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.async_delivery = async_delivery
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="otp-mail") if async_delivery else None

    def send_code(self, destination, code, expiry_minutes, resend=False):
        subject = RESEND_SUBJECT if resend else LOGIN_SUBJECT
        if self._executor is not None:
            self._executor.submit(self._deliver, destination, code, expiry_minutes, subject)
        else:
            self._deliver(destination, code, expiry_minutes, subject)

    def _deliver(self, destination, code, expiry_minutes, subject):
        message = (
            f"Your One-Time Password (OTP) for NEXORA Admin Login is: {code}\n"
            f"It is valid for {expiry_minutes} minutes. Do not share this code."
        )
        html_message = (
            "<p>Your One-Time Password (OTP) for <b>NEXORA Admin Login</b> is:</p>"
            f'<p style="font-size:20px;margin:8px 0"><b>{code}</b></p>'
            f"<p>This code is valid for <b>{expiry_minutes} minutes</b>. Do not share this code.</p>"
        )
        try:
            send_mail(
                subject=subject,
                message=message,
                from_email=self.from_email,
                recipient_list=[destination],
                html_message=html_message,
                fail_silently=False,
            )
        except Exception:
            logger.exception("OTP email delivery to %s failed", destination)
            return False
        logger.info("OTP email sent to %s", destination)
        return True

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
