"""
URL routing for importers.
Note: These URLs are included at /api/v1/importing/.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('', views.importing_overview, name='importing-overview'),
    path('<slug:plugin>/<slug:importer_type>/', views.run_importer, name='importing-run'),
    path('<slug:plugin>/<slug:importer_type>/reset/', views.reset_importer, name='importing-reset'),
]
