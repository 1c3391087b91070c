"""
URL routing for contact app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('contact', views.submit_contact, name='contact'),
    path('contact-settings', views.ContactSettingsView.as_view(), name='contact-settings'),
]
