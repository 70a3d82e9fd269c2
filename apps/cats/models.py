"""
apps.cats.models
~~~~~~~~~~~~~~~~
Cat – the single resource managed by this project.
"""
from django.db import models


class Cat(models.Model):
    """
    A cat with a name and a breed.

    Fields
    ------
    id
        Auto-incrementing integer primary key, assigned on first save and
        never changed afterwards.
    name
        Required display name (e.g. ``"Tom"``).
    breed
        Required breed (e.g. ``"Tabby"``).
    created_at / updated_at
        Automatic timestamps.

    Presence of ``name`` and ``breed`` is enforced by
    :func:`apps.cats.services.validate_cat_fields` before any write.
    """

    #: Fields that must be non-blank, in the order they are checked.
    REQUIRED_FIELDS = ("name", "breed")

    name = models.CharField(max_length=255)
    breed = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        verbose_name = "Cat"
        verbose_name_plural = "Cats"

    def __str__(self) -> str:
        return f"#{self.id} {self.name}" if self.id else self.name
