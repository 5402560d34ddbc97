"""Name case conversions used for headings, anchors and output paths."""

from __future__ import annotations

import re

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+")


def split_words(name: str) -> list[str]:
    """Split *name* into words on underscores, punctuation and case changes."""
    return _WORD.findall(name)


def upper_camel_case(name: str) -> str:
    """Return *name* as ``UpperCamelCase`` (``payment_card`` -> ``PaymentCard``)."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def lower_snake_case(name: str) -> str:
    """Return *name* as ``lower_snake_case``.

    Dotted names are converted segment by segment and keep their dots, so
    ``Shop.OrderService`` becomes ``shop.order_service``.
    """
    return ".".join(
        "_".join(word.lower() for word in split_words(segment)) for segment in name.split(".")
    )


def package_heading(qualified_name: str) -> str:
    """Return the last two dot-separated segments of *qualified_name*."""
    parts = qualified_name.split(".")
    return ".".join(parts[-2:])
