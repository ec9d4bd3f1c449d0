from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    access_code = serializers.CharField(trim_whitespace=False)
