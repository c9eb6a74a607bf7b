from unittest import mock

from django.core import mail
from django.test import TestCase

from accounts.notifications import LOGIN_SUBJECT, RESEND_SUBJECT, EmailOtpNotifier


class EmailOtpNotifierTests(TestCase):
    def test_sends_code_synchronously(self):
        notifier = EmailOtpNotifier(from_email="noreply@nexora.test", async_delivery=False)

        notifier.send_code("admin@example.com", "482913", 5)

        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.subject, LOGIN_SUBJECT)
        self.assertEqual(message.from_email, "noreply@nexora.test")
        self.assertIn("482913", message.body)
        self.assertIn("5 minutes", message.body)

    def test_resend_subject(self):
        notifier = EmailOtpNotifier(async_delivery=False)
        notifier.send_code("admin@example.com", "482913", 5, resend=True)
        self.assertEqual(mail.outbox[0].subject, RESEND_SUBJECT)

    def test_delivery_failure_is_logged_not_raised(self):
        notifier = EmailOtpNotifier(async_delivery=False)

        with mock.patch("accounts.notifications.send_mail", side_effect=OSError("smtp down")):
            with self.assertLogs("accounts.notifications", level="ERROR") as logs:
                notifier.send_code("admin@example.com", "482913", 5)

        self.assertIn("admin@example.com", logs.output[0])

    def test_async_delivery_runs_on_executor(self):
        notifier = EmailOtpNotifier(async_delivery=True)

        notifier.send_code("admin@example.com", "482913", 5)
        notifier.shutdown()

        self.assertEqual(len(mail.outbox), 1)
