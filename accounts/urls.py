"""
URL routing for accounts app.
"""
from django.urls import path

from . import auth

urlpatterns = [
    path('login', auth.login, name='login'),
    path('logout', auth.logout, name='logout'),
    path('me', auth.me, name='me'),
]
