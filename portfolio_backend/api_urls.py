"""
API URL routing for portfolio_backend.
All API endpoints are prefixed with /api/ and carry no trailing slash.
"""
from django.urls import path, include

from .views import health_check

urlpatterns = [
    # Health check (no auth) - GET /api/health
    path('health', health_check),
    # Admin authentication (cookie session)
    path('auth/', include('accounts.urls')),
    # Contact form and its settings
    path('', include('contact.urls')),
    # Event ingestion, stats and analytics settings
    path('', include('site_analytics.urls')),
    # Content collections, singletons and uploads
    path('', include('portfolio.urls')),
]
