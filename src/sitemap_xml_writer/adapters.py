"""Typed-value adapters — turn library values into raw field text.

Each adapter converts a typed value into the textual form the matching
validator in :mod:`sitemap_xml_writer.fields` expects.  Adapters do not
validate: whatever they return still goes through the validator, so a
value the type allows but the sitemap format does not (an offset with
seconds, a priority of 2.5) is rejected there.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from urllib.parse import ParseResult, SplitResult


def date_text(value: date) -> str:
    """Render a ``date`` or ``datetime`` in W3C form.

    Naive datetimes stay naive; aware ones keep their offset as
    ``+hh:mm``.  Plain dates render as ``YYYY-MM-DD``.
    """
    return value.isoformat()


def url_text(value: SplitResult | ParseResult) -> str:
    """Reassemble a parsed URL into its string form."""
    return value.geturl()


def priority_text(value: int | float | Decimal) -> str:
    """Render a number as plain decimal text, without rounding.

    Floats go through their shortest ``repr``, so ``0.8`` renders as
    ``0.8`` and ``1.00004`` stays ``1.00004`` for the range check to see.
    """
    if isinstance(value, float):
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
