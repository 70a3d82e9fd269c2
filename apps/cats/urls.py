"""
apps.cats.urls
~~~~~~~~~~~~~~
HTML routes for cats.  Mounted at /cats/ by the root URLconf.
"""
from django.urls import path

from .views import CatDetailView, CatEditView, CatListCreateView, CatNewView

app_name = "cats"

urlpatterns = [
    # GET, POST /cats/
    path("", CatListCreateView.as_view(), name="index"),
    # GET /cats/new/
    path("new/", CatNewView.as_view(), name="new"),
    # GET, PATCH, PUT, DELETE /cats/<pk>/
    path("<int:pk>/", CatDetailView.as_view(), name="detail"),
    # GET /cats/<pk>/edit/
    path("<int:pk>/edit/", CatEditView.as_view(), name="edit"),
]
