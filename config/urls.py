"""
Root URL configuration for cat_registry.
"""
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="cats:index"), name="root"),

    # Admin
    path("admin/", admin.site.urls),

    # HTML pages
    path("cats/", include("apps.cats.urls")),

    # OpenAPI schema & Swagger UI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),

    # JSON API
    path("api/v1/", include("apps.cats.api_urls")),
]
