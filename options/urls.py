"""
URL routing for options.
Note: These URLs are included at /api/v1/ level, so paths here are relative to that.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('options/<str:name>/', views.option_detail, name='option-detail'),
    path('titles/', views.titles, name='titles'),
]
