"""
URL routing for portfolio app.
"""
from django.urls import path, include
from rest_framework.routers import SimpleRouter

from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r'projects', views.ProjectViewSet, basename='project')
router.register(r'experiences', views.ExperienceViewSet, basename='experience')
router.register(r'skills', views.SkillViewSet, basename='skill')
router.register(r'tools', views.ToolViewSet, basename='tool')
router.register(r'soft-skills', views.SoftSkillViewSet, basename='soft-skill')

urlpatterns = [
    path('', include(router.urls)),
    # Page sections (single row each)
    path('hero', views.HeroContentView.as_view(), name='hero'),
    path('about', views.AboutContentView.as_view(), name='about'),
    path('footer', views.FooterContentView.as_view(), name='footer'),
    path('navigation-settings', views.NavigationSettingsView.as_view(), name='navigation-settings'),
    path('seo-settings', views.SeoSettingsView.as_view(), name='seo-settings'),
    # Image uploads (admin only)
    path('upload', views.upload, name='upload'),
]
