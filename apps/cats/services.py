"""
apps.cats.services
~~~~~~~~~~~~~~~~~~
All business logic for cats.

Views (HTML and API) must call only these functions.  Writes accept a
:class:`~apps.cats.params.CatParams`, never a raw request mapping.

Errors
------
:class:`~common.exceptions.NotFoundError`
    Unknown cat id.
:class:`~common.exceptions.ValidationError`
    A field was blank or too long; ``exc.errors`` lists the messages and no
    row was written.
"""
from __future__ import annotations

from typing import Any, Mapping

import structlog

from common.exceptions import NotFoundError, ValidationError
from .models import Cat
from .params import CatParams

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_cat_fields(fields: Mapping[str, Any]) -> list[str]:
    """
    Return violations for *fields*, in :attr:`Cat.REQUIRED_FIELDS` order.

    A missing key, ``None``, an empty string and a whitespace-only string all
    count as blank.  Values longer than the column allows are too long.

    Example::

        >>> validate_cat_fields({"name": "Tom", "breed": ""})
        ["breed can't be blank"]
    """
    errors = []
    for field in Cat.REQUIRED_FIELDS:
        value = fields.get(field)
        if value is None or not str(value).strip():
            errors.append(f"{field} can't be blank")
            continue
        max_length = Cat._meta.get_field(field).max_length
        if max_length is not None and len(str(value)) > max_length:
            errors.append(f"{field} is too long (maximum is {max_length} characters)")
    return errors


def _fields_of(cat: Cat) -> dict[str, Any]:
    return {field: getattr(cat, field) for field in Cat.REQUIRED_FIELDS}


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def list_cats() -> list[Cat]:
    """Return every cat, ordered by id."""
    return list(Cat.objects.all())


def get_cat(cat_id: int | str) -> Cat:
    """Fetch a single cat, raising :class:`NotFoundError` if it does not exist."""
    try:
        return Cat.objects.get(pk=cat_id)
    except (Cat.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"Cat '{cat_id}' not found.")


def build_cat(params: CatParams | None = None) -> Cat:
    """Return an unsaved cat, pre-populated from *params* when given."""
    cat = Cat(name="", breed="")
    if params is not None:
        params.apply_to(cat)
    return cat


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def create_cat(*, params: CatParams) -> Cat:
    """
    Validate and persist a new cat.

    Raises:
        ValidationError: If ``name`` or ``breed`` is blank or too long.
            Nothing is saved.
    """
    cat = build_cat(params)
    errors = validate_cat_fields(_fields_of(cat))
    if errors:
        logger.warning("cat_validation_failed", action="create", error_count=len(errors))
        raise ValidationError(errors=errors)

    cat.save()
    logger.info("cat_created", cat_id=cat.id, name=cat.name, breed=cat.breed)
    return cat


def update_cat(cat_id: int | str, *, params: CatParams) -> Cat:
    """
    Apply the submitted fields of *params* to an existing cat.

    Fields absent from *params* keep their stored value; the merged record is
    what gets validated.

    Raises:
        NotFoundError: If the cat does not exist.
        ValidationError: If the merged record has a blank or too-long field.
            The stored row is left untouched.
    """
    cat = get_cat(cat_id)
    changes = params.as_dict()
    merged = _fields_of(cat)
    merged.update(changes)

    errors = validate_cat_fields(merged)
    if errors:
        logger.warning(
            "cat_validation_failed",
            action="update",
            cat_id=cat.id,
            error_count=len(errors),
        )
        raise ValidationError(errors=errors)

    params.apply_to(cat)
    cat.save(update_fields=[*changes, "updated_at"])
    logger.info("cat_updated", cat_id=cat.id, fields=sorted(changes))
    return cat


def delete_cat(cat_id: int | str) -> None:
    """Delete a cat, raising :class:`NotFoundError` if it does not exist."""
    cat = get_cat(cat_id)
    pk = cat.id
    cat.delete()
    logger.info("cat_deleted", cat_id=pk)
