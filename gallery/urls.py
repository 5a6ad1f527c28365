"""Gallery app URL configuration."""
from django.urls import path

from . import views

app_name = 'gallery'

urlpatterns = [
    path('fragment/', views.fragment, name='fragment'),
]
