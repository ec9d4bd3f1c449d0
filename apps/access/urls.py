"""
URL routing for access code endpoints.
"""
from django.urls import path
from apps.access.api import LoginAPIView, LogoutAPIView, AuthCheckAPIView

app_name = 'access'

urlpatterns = [
    path('login', LoginAPIView.as_view(), name='login'),
    path('logout', LogoutAPIView.as_view(), name='logout'),
    path('check', AuthCheckAPIView.as_view(), name='check'),
]
