"""
apps.cats.api_urls
~~~~~~~~~~~~~~~~~~
JSON API routes for cats.  Mounted at /api/v1/ by the root URLconf.
"""
from django.urls import path

from .api_views import CatApiDetailView, CatApiListCreateView

urlpatterns = [
    path("cats/", CatApiListCreateView.as_view(), name="cat-api-list-create"),
    path("cats/<int:pk>/", CatApiDetailView.as_view(), name="cat-api-detail"),
]
