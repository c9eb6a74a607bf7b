# accounts/models.py
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone


class AccountManager(BaseUserManager):
    use_in_migrations = True

    @staticmethod
    def normalize_identifier(identifier):
        return (identifier or "").strip().lower()

    def get_by_identifier(self, identifier):
        return self.filter(email=self.normalize_identifier(identifier)).first()

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        account = self.model(email=self.normalize_identifier(email), **extra_fields)
        account.set_password(password)
        account.save(using=self._db)
        return account

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Account.ROLE_ADMIN)
        return self.create_user(email, password, **extra_fields)


class Account(AbstractBaseUser, PermissionsMixin):
    ROLE_ADMIN = "admin"

    email = models.EmailField(unique=True)
    role = models.CharField(max_length=30, default=ROLE_ADMIN)

    otp_code = models.CharField(max_length=6, null=True, blank=True)
    otp_expires_at = models.DateTimeField(null=True, blank=True)
    otp_attempts = models.PositiveSmallIntegerField(default=0)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    objects = AccountManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(otp_code__isnull=True, otp_expires_at__isnull=True)
                    | models.Q(otp_code__isnull=False, otp_expires_at__isnull=False)
                ),
                name="account_otp_code_and_expiry_together",
            ),
        ]

    def __str__(self):
        return self.email

    def save(self, *args, **kwargs):
        self.email = Account.objects.normalize_identifier(self.email)
        super().save(*args, **kwargs)

    @property
    def has_active_otp(self):
        return bool(self.otp_code and self.otp_expires_at)

    def otp_expired(self, now=None):
        now = now or timezone.now()
        return self.otp_expires_at is not None and self.otp_expires_at < now

    def issue_otp(self, code, expires_at):
        self.otp_code = code
        self.otp_expires_at = expires_at
        self.otp_attempts = 0

    def clear_otp(self, reset_attempts=False):
        self.otp_code = None
        self.otp_expires_at = None
        if reset_attempts:
            self.otp_attempts = 0
