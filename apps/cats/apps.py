"""
apps.cats.apps
"""
from django.apps import AppConfig


class CatsConfig(AppConfig):
    name = "apps.cats"
    label = "cats"
    verbose_name = "Cats"
