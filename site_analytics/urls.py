"""
URL routing for site_analytics app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('analytics/track', views.track_event, name='analytics-track'),
    path('analytics/stats', views.analytics_stats, name='analytics-stats'),
    path('analytics-settings', views.AnalyticsSettingsView.as_view(), name='analytics-settings'),
]
