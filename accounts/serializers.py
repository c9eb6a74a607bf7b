from rest_framework import serializers

from .models import Account


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['id', 'email', 'role']


class LoginSerializer(serializers.Serializer):
    identifier = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    identifier = serializers.EmailField()
    password = serializers.CharField(min_length=6, trim_whitespace=False)


class ResendOTPSerializer(serializers.Serializer):
    identifier = serializers.EmailField()


class VerifyOTPSerializer(serializers.Serializer):
    identifier = serializers.EmailField()
    code = serializers.RegexField(regex=r"^[0-9]{6}\Z", trim_whitespace=False)
