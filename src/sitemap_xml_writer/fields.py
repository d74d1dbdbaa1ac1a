"""Field validation — the syntax rules for each sitemap child element.

Every validator takes a raw value and returns either a validated field
(text that is safe to emit as-is) or raises a
:class:`~sitemap_xml_writer._errors.ValidationError` subclass naming
what was wrong.  Validators are pure and total: malformed input of any
type ends in a typed validation error, never in some other exception.

Validation is idempotent.  Passing an already-validated field back in
yields an equal field.

Priority canonical form:
    Trailing fractional zeros are trimmed, at least one fractional digit
    is kept, and the sign is dropped.  ``"1"`` becomes ``1.0``,
    ``"0.80"`` becomes ``0.8``, ``".5"`` becomes ``0.5``.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum
from urllib.parse import ParseResult, SplitResult, urlsplit

from sitemap_xml_writer._errors import (
    EmptyLocation,
    InvalidDateSyntax,
    InvalidDecimalSyntax,
    InvalidUrlSyntax,
    PriorityOutOfRange,
    UnknownChangefreq,
)
from sitemap_xml_writer.adapters import date_text, priority_text, url_text

# XML Schema 1.1 lexical forms for xs:date and xs:dateTime
_YEAR_MONTH_DAY = r"-?(?:[1-9][0-9]{3,}|0[0-9]{3})-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12][0-9]|3[01])"
_TIMEZONE = r"(?:Z|[+-](?:(?:0[0-9]|1[0-3]):[0-5][0-9]|14:00))?"
_TIME = r"(?:(?:[01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](?:\.[0-9]+)?|24:00:00(?:\.0+)?)"

_DATE_RE = re.compile(_YEAR_MONTH_DAY + _TIMEZONE)
_DATE_TIME_RE = re.compile(_YEAR_MONTH_DAY + "T" + _TIME + _TIMEZONE)

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Anything outside the XML 1.0 Char production, lone surrogates included
_XML_ILLEGAL_RE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

# Most fractional digits a priority may carry after canonicalization
_MAX_PRIORITY_DIGITS = 4

_MIN_PRIORITY = Decimal(0)
_MAX_PRIORITY = Decimal(1)


@dataclass(frozen=True, slots=True)
class ValidatedField:
    """Text that passed validation for one element kind.

    Build instances through the ``validate_*`` functions; constructing
    one directly skips every check.

    Attributes:
        value: The canonical text written between the element's tags.

    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Loc(ValidatedField):
    """Validated content of a ``<loc>`` element."""


@dataclass(frozen=True, slots=True)
class Lastmod(ValidatedField):
    """Validated content of a ``<lastmod>`` element."""


@dataclass(frozen=True, slots=True)
class Priority(ValidatedField):
    """Validated content of a ``<priority>`` element."""


class Changefreq(StrEnum):
    """Allowed values of the ``<changefreq>`` element."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


# ---------------------------------------------------------------------------
# loc
# ---------------------------------------------------------------------------


def validate_loc(
    raw: str | Loc | SplitResult | ParseResult,
    *,
    check_syntax: bool = True,
) -> Loc:
    """Validate a page or sitemap location.

    Args:
        raw: URL text, a previously validated :class:`Loc`, or a parsed
            URL from :mod:`urllib.parse`.
        check_syntax: Require an absolute URL (scheme and host).  When
            off, only emptiness and characters XML
            cannot carry are checked.

    Raises:
        EmptyLocation: *raw* is empty.
        InvalidUrlSyntax: *raw* is not an absolute URL, holds a character
            XML cannot carry, or is not text at all.

    """
    if isinstance(raw, Loc):
        raw = raw.value
    elif isinstance(raw, (SplitResult, ParseResult)):
        raw = url_text(raw)

    if not isinstance(raw, str):
        msg = f"loc must be a string, got {type(raw).__name__}"
        raise InvalidUrlSyntax(msg, raw)
    if not raw:
        msg = "loc must not be empty"
        raise EmptyLocation(msg, raw)
    bad = _XML_ILLEGAL_RE.search(raw)
    if bad:
        msg = f"loc contains a character XML cannot carry: {bad.group()!r}"
        raise InvalidUrlSyntax(msg, raw)
    if check_syntax and not _is_absolute_url(raw):
        msg = f"loc is not an absolute URL: {raw!r}"
        raise InvalidUrlSyntax(msg, raw)
    return Loc(raw)


def _is_absolute_url(text: str) -> bool:
    """True when *text* has a scheme and a host and nothing unprintable."""
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        return False
    try:
        parts = urlsplit(text)
        # Accessing .port validates it (raises ValueError on garbage)
        parts.port  # noqa: B018
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


# ---------------------------------------------------------------------------
# lastmod
# ---------------------------------------------------------------------------


def validate_date(raw: str | Lastmod | date) -> Lastmod:
    """Validate a W3C date or datetime.

    Only the lexical form is checked.  ``2023-02-31`` passes; use a
    ``date`` object when calendar validity matters.

    Raises:
        InvalidDateSyntax: *raw* matches neither form.

    """
    if isinstance(raw, Lastmod):
        raw = raw.value
    elif isinstance(raw, date):
        raw = date_text(raw)

    if not isinstance(raw, str) or not (
        _DATE_RE.fullmatch(raw) or _DATE_TIME_RE.fullmatch(raw)
    ):
        msg = f"lastmod is not a W3C date or datetime: {raw!r}"
        raise InvalidDateSyntax(msg, raw)
    return Lastmod(raw)


# ---------------------------------------------------------------------------
# changefreq
# ---------------------------------------------------------------------------


def validate_changefreq(raw: str | Changefreq) -> Changefreq:
    """Match *raw* against the allowed change frequencies (case-sensitive).

    Raises:
        UnknownChangefreq: *raw* is not one of the allowed words.

    """
    if isinstance(raw, Changefreq):
        return raw
    allowed = ", ".join(member.value for member in Changefreq)
    msg = f"changefreq must be one of {allowed}; got {raw!r}"
    if not isinstance(raw, str):
        raise UnknownChangefreq(msg, raw)
    try:
        return Changefreq(raw)
    except ValueError as exc:
        raise UnknownChangefreq(msg, raw) from exc


# ---------------------------------------------------------------------------
# priority
# ---------------------------------------------------------------------------


def validate_priority(raw: str | Priority | int | float | Decimal) -> Priority:
    """Parse a priority and return it in canonical form.

    Raises:
        InvalidDecimalSyntax: *raw* is not a plain decimal, or carries
            more than four significant fractional digits.
        PriorityOutOfRange: the value is below 0.0 or above 1.0.

    """
    if isinstance(raw, Priority):
        raw = raw.value
    elif isinstance(raw, bool):
        msg = f"priority must be a number, got {raw!r}"
        raise InvalidDecimalSyntax(msg, raw)
    elif isinstance(raw, (int, float, Decimal)):
        raw = _number_text(raw)

    if not isinstance(raw, str) or not _DECIMAL_RE.fullmatch(raw):
        msg = f"priority is not a decimal number: {raw!r}"
        raise InvalidDecimalSyntax(msg, raw)

    number = Decimal(raw)
    if number < _MIN_PRIORITY or number > _MAX_PRIORITY:
        msg = f"priority must be between 0.0 and 1.0; got {raw!r}"
        raise PriorityOutOfRange(msg, raw)
    # In range, so the whole part is 0 or 1 and only the fraction varies
    whole, _, fraction = raw.lstrip("+-").partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) > _MAX_PRIORITY_DIGITS:
        msg = (
            f"priority allows at most {_MAX_PRIORITY_DIGITS} fractional digits; "
            f"got {raw!r}"
        )
        raise InvalidDecimalSyntax(msg, raw)

    return Priority(f"{whole.lstrip('0') or '0'}.{fraction or '0'}")


def _number_text(value: int | float | Decimal) -> str:
    """Range-check a number, then render it for the text rules.

    The checks run on the number itself so that huge integers and
    extreme exponents never get expanded into text.
    """
    if isinstance(value, int):
        if not 0 <= value <= 1:
            shown = str(value) if abs(value) < 10**20 else f"a {value.bit_length()}-bit integer"
            msg = f"priority must be between 0.0 and 1.0; got {shown}"
            raise PriorityOutOfRange(msg, value)
        return priority_text(value)

    number = Decimal(repr(value)) if isinstance(value, float) else value
    if not number.is_finite():
        msg = f"priority is not a decimal number: {value!r}"
        raise InvalidDecimalSyntax(msg, value)
    if number < _MIN_PRIORITY or number > _MAX_PRIORITY:
        msg = f"priority must be between 0.0 and 1.0; got {value!r}"
        raise PriorityOutOfRange(msg, value)
    if _fraction_digits(number) > _MAX_PRIORITY_DIGITS:
        msg = (
            f"priority allows at most {_MAX_PRIORITY_DIGITS} fractional digits; "
            f"got {value!r}"
        )
        raise InvalidDecimalSyntax(msg, value)
    if not number:
        return "0"
    return priority_text(number)


def _fraction_digits(number: Decimal) -> int:
    """Count fractional digits up to the last non-zero one."""
    _, digits, exponent = number.as_tuple()
    significant = len(digits)
    while significant and digits[significant - 1] == 0:
        significant -= 1
    if not significant:
        return 0
    return max(0, -(exponent + len(digits) - significant))
