"""
common.flash
~~~~~~~~~~~~
Transient, session-backed messages that survive exactly one redirect.

A :class:`Flash` is loaded from the session at the start of every request and
attached as ``request.flash`` by :class:`FlashMiddleware`.  Values written
with :meth:`Flash.set` are readable for the rest of the current request and
during the next one; after that next request they are gone whether or not
anything read them.  Values written through :attr:`Flash.now` never leave the
current request.

Usage in a view::

    request.flash["message"] = "You deleted a cat!"
    return redirect("cats:index")

and in a template (via the :func:`flash` context processor)::

    {% if flash.message %}<p class="notice">{{ flash.message }}</p>{% endif %}
"""
from __future__ import annotations

from typing import Any

import structlog

logger = structlog.get_logger(__name__)

#: Session key under which the outgoing slots are stored between requests.
SESSION_KEY = "_flash"


class FlashNow:
    """Write-only view of a :class:`Flash` for current-request values."""

    def __init__(self, flash: Flash) -> None:
        self._flash = flash

    def __setitem__(self, slot: str, value: Any) -> None:
        self._flash._now[slot] = value

    def __getitem__(self, slot: str) -> Any:
        return self._flash.peek(slot)


class Flash:
    """
    A set of named slots, each holding zero or one value.

    Lookup order for :meth:`peek` is current-request values, then values set
    during this request for the next one, then values carried in from the
    previous request.
    """

    def __init__(self, incoming: dict[str, Any] | None = None) -> None:
        self._incoming: dict[str, Any] = dict(incoming or {})
        self._outgoing: dict[str, Any] = {}
        self._now: dict[str, Any] = {}

    @classmethod
    def from_session(cls, session) -> Flash:
        stored = session.get(SESSION_KEY) or {}
        if not isinstance(stored, dict):
            logger.warning("flash_session_payload_ignored", payload_type=type(stored).__name__)
            stored = {}
        return cls(stored)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def peek(self, slot: str, default: Any = None) -> Any:
        for source in (self._now, self._outgoing, self._incoming):
            if slot in source:
                return source[slot]
        return default

    def __getitem__(self, slot: str) -> Any:
        return self.peek(slot)

    def __contains__(self, slot: str) -> bool:
        return slot in self._now or slot in self._outgoing or slot in self._incoming

    def __bool__(self) -> bool:
        return bool(self._now or self._outgoing or self._incoming)

    def __len__(self) -> int:
        return len(self.as_dict())

    def as_dict(self) -> dict[str, Any]:
        merged = dict(self._incoming)
        merged.update(self._outgoing)
        merged.update(self._now)
        return merged

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def set(self, slot: str, value: Any) -> None:
        self._now.pop(slot, None)
        self._outgoing[slot] = value

    def __setitem__(self, slot: str, value: Any) -> None:
        self.set(slot, value)

    @property
    def now(self) -> FlashNow:
        return FlashNow(self)

    def keep(self, slot: str | None = None) -> None:
        """Carry incoming value(s) over to the next request as well."""
        if slot is None:
            for key, value in self._incoming.items():
                self._outgoing.setdefault(key, value)
        elif slot in self._incoming:
            self._outgoing.setdefault(slot, self._incoming[slot])

    def discard(self, slot: str | None = None) -> None:
        """Stop value(s) set during this request from reaching the next one."""
        if slot is None:
            self._outgoing.clear()
        else:
            self._outgoing.pop(slot, None)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def persist(self, session) -> None:
        """Write the next-request slots back to *session*, dropping the rest."""
        if self._outgoing:
            session[SESSION_KEY] = dict(self._outgoing)
        elif SESSION_KEY in session:
            del session[SESSION_KEY]


class FlashMiddleware:
    """
    Attach a :class:`Flash` to every request and sweep it after the response.

    Must be listed after ``SessionMiddleware``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.flash = Flash.from_session(request.session)
        response = self.get_response(request)
        request.flash.persist(request.session)
        return response


def flash(request) -> dict:
    """Template context processor exposing ``request.flash`` as ``flash``."""
    return {"flash": getattr(request, "flash", Flash())}
