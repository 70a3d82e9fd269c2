"""
apps.cats.admin
"""
from django.contrib import admin

from .models import Cat


@admin.register(Cat)
class CatAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "breed", "created_at"]
    search_fields = ["name", "breed"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["id"]
