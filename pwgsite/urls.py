"""
URL configuration for the pwgsite project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import include, path

from pwgsite import views as core_views

urlpatterns = [
    path('', core_views.HomeView.as_view(), name='home'),
    path('gallery/', include(('gallery.urls', 'gallery'), namespace='gallery')),
]
