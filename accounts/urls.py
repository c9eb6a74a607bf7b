from django.urls import path

from .views import LoginView, MeView, RegisterView, ResendOTPView, VerifyOTPView

urlpatterns = [
    path('register', RegisterView.as_view(), name='register'),
    path('login', LoginView.as_view(), name='login'),
    path('verify-otp', VerifyOTPView.as_view(), name='verify-otp'),
    path('resend-otp', ResendOTPView.as_view(), name='resend-otp'),
    path('me', MeView.as_view(), name='me'),
]
