"""
apps.cats.params
~~~~~~~~~~~~~~~~
Allow-listed input for cat writes.

Caller input never reaches the store as a raw mapping: it is first reduced to
a :class:`CatParams`, which only knows ``name`` and ``breed``.  Form posts
nest their fields Rails-style (``cat[name]``, ``cat[breed]``); JSON bodies
nest them under a ``"cat"`` object.  Anything else is dropped.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping

import structlog
from django.http import QueryDict

logger = structlog.get_logger(__name__)

#: Key under which cat fields are nested in submitted data.
PARAM_KEY = "cat"

_NESTED_KEY_RE = re.compile(rf"^{PARAM_KEY}\[(?P<field>[^\]]+)\]$")


@dataclass(frozen=True)
class CatParams:
    """
    The fields a caller may set on a cat.

    ``None`` means "not submitted", which is different from an empty string:
    an update leaves unsubmitted fields as they are, while an empty string is
    submitted and fails the presence check.
    """

    name: str | None = None
    breed: str | None = None

    @classmethod
    def allowed_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_form(cls, data: QueryDict) -> CatParams:
        """Build params from ``cat[<field>]`` keys of a form submission."""
        allowed = cls.allowed_fields()
        values: dict[str, str] = {}
        dropped: list[str] = []
        for key in data.keys():
            match = _NESTED_KEY_RE.match(key)
            if match and match.group("field") in allowed:
                values[match.group("field")] = data.get(key)
            elif match:
                dropped.append(key)
        if dropped:
            logger.debug("cat_params_dropped", keys=dropped)
        return cls(**values)

    @classmethod
    def from_mapping(cls, data: Any) -> CatParams:
        """
        Build params from a ``{"cat": {...}}`` payload.

        An explicit JSON ``null`` counts as a submitted blank value.
        """
        nested = data.get(PARAM_KEY) if isinstance(data, Mapping) else None
        if not isinstance(nested, Mapping):
            return cls()
        allowed = cls.allowed_fields()
        dropped = [key for key in nested if key not in allowed]
        if dropped:
            logger.debug("cat_params_dropped", keys=dropped)
        return cls(
            **{
                key: "" if value is None else str(value)
                for key, value in nested.items()
                if key in allowed
            }
        )

    @classmethod
    def from_request(cls, request) -> CatParams:
        """
        Build params from an HTML request.

        A POST (including one rewritten by ``_method``) already has its body
        parsed into ``request.POST``; a genuine PATCH/PUT with a urlencoded
        body is parsed here.
        """
        data = request.POST
        if not data and request.content_type == "application/x-www-form-urlencoded":
            data = QueryDict(request.body, encoding=request.encoding)
        return cls.from_form(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def as_dict(self) -> dict[str, str]:
        """Only the fields that were actually submitted."""
        return {
            name: getattr(self, name)
            for name in self.allowed_fields()
            if getattr(self, name) is not None
        }

    def apply_to(self, cat) -> None:
        """Assign submitted fields onto *cat* without saving it."""
        for name, value in self.as_dict().items():
            setattr(cat, name, value)
