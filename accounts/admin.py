from django.contrib import admin

from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("email", "role", "is_active", "otp_expires_at", "otp_attempts")
    list_filter = ("role", "is_active")
    search_fields = ("email",)
    exclude = ("password", "otp_code")
    readonly_fields = ("otp_expires_at", "otp_attempts", "last_login", "created_at")
