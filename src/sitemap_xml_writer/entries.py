"""Entry builders — ``Url`` and ``Sitemap``.

An entry is built with a fluent chain that starts at ``loc``::

    Url.loc("http://www.example.com/").lastmod("2005-01-01").priority("0.8")

Every step validates its value and returns a new entry; the receiver is
never changed, so a half-built entry can be shared and extended safely.
A step that fails raises immediately and the chain goes no further.

Serialization order is fixed by the entry type (loc, lastmod, changefreq,
priority), not by the order the setters were called in.

Thread Safety:
    Entries are immutable and safe to build and share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Self

from sitemap_xml_writer._types import RawDate, RawLoc, RawPriority
from sitemap_xml_writer.fields import (
    Changefreq,
    Lastmod,
    Loc,
    Priority,
    validate_changefreq,
    validate_date,
    validate_loc,
    validate_priority,
)


class _Entry:
    """Shared shape of both entry kinds: a required loc and an optional lastmod."""

    __slots__ = ("_lastmod", "_loc")

    _lastmod: Lastmod | None
    _loc: Loc

    def __init__(
        self,
        loc: RawLoc | Loc,
        lastmod: RawDate | Lastmod | None = None,
        *,
        check_syntax: bool = True,
    ) -> None:
        object.__setattr__(self, "_loc", validate_loc(loc, check_syntax=check_syntax))
        object.__setattr__(
            self, "_lastmod", None if lastmod is None else validate_date(lastmod),
        )

    @classmethod
    def loc(cls, raw: RawLoc | Loc, *, check_syntax: bool = True) -> Self:
        """Start an entry whose location is *raw*."""
        return cls(raw, check_syntax=check_syntax)

    def lastmod(self, raw: RawDate | Lastmod) -> Self:
        """Return a copy with ``lastmod`` set to *raw*."""
        return self._replace(lastmod=validate_date(raw))

    @property
    def location(self) -> str:
        return self._loc.value

    @property
    def last_modified(self) -> str | None:
        return None if self._lastmod is None else self._lastmod.value

    def fields(self) -> Iterator[tuple[str, str]]:
        """Yield ``(tag, text)`` for each present child element, in document order."""
        yield "loc", self._loc.value
        if self._lastmod is not None:
            yield "lastmod", self._lastmod.value

    def _replace(self, **changes: object) -> Self:
        new = object.__new__(type(self))
        for name in self._slot_names():
            object.__setattr__(new, name, changes.get(name[1:], getattr(self, name)))
        return new

    def _slot_names(self) -> tuple[str, ...]:
        names: list[str] = []
        for klass in type(self).__mro__:
            names.extend(getattr(klass, "__slots__", ()))
        return tuple(names)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable; use the builder methods"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return tuple(self.fields()) == tuple(other.fields())  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.fields())))

    def __repr__(self) -> str:
        parts = ", ".join(f"{tag}={text!r}" for tag, text in self.fields())
        return f"{type(self).__name__}({parts})"


class Sitemap(_Entry):
    """One ``<sitemap>`` entry of a sitemap index.

    Start with :meth:`loc`; add :meth:`lastmod` if known.
    """

    __slots__ = ()


class Url(_Entry):
    """One ``<url>`` entry of a sitemap.

    Start with :meth:`loc`; ``lastmod``, ``changefreq`` and ``priority``
    are optional and may be set in any order.
    """

    __slots__ = ("_changefreq", "_priority")

    _changefreq: Changefreq | None
    _priority: Priority | None

    def __init__(
        self,
        loc: RawLoc | Loc,
        lastmod: RawDate | Lastmod | None = None,
        changefreq: str | Changefreq | None = None,
        priority: RawPriority | Priority | None = None,
        *,
        check_syntax: bool = True,
    ) -> None:
        super().__init__(loc, lastmod, check_syntax=check_syntax)
        object.__setattr__(
            self,
            "_changefreq",
            None if changefreq is None else validate_changefreq(changefreq),
        )
        object.__setattr__(
            self, "_priority", None if priority is None else validate_priority(priority),
        )

    def changefreq(self, raw: str | Changefreq) -> Self:
        """Return a copy with ``changefreq`` set to *raw*."""
        return self._replace(changefreq=validate_changefreq(raw))

    def priority(self, raw: RawPriority | Priority) -> Self:
        """Return a copy with ``priority`` set to *raw*."""
        return self._replace(priority=validate_priority(raw))

    @property
    def change_frequency(self) -> Changefreq | None:
        return self._changefreq

    @property
    def priority_value(self) -> str | None:
        return None if self._priority is None else self._priority.value

    def fields(self) -> Iterator[tuple[str, str]]:
        yield from super().fields()
        if self._changefreq is not None:
            yield "changefreq", self._changefreq.value
        if self._priority is not None:
            yield "priority", self._priority.value
