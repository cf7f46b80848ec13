"""Construction boundary for dynamic button props.

Turns a discriminant plus a field bag into a validated ``LinkProps`` or
``ButtonProps``.  Shape problems (missing required field, field of the other
variant, wrong field type, unknown discriminant) are raised as
``ShapeMismatch``; nothing is coerced into a default variant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from models.errors import ShapeMismatch
from models.props import DEFAULT_VARIANT, ButtonProps, DynamicButtonProps, LinkProps

logger = logging.getLogger("dynamic_button.contract")
# Silent until configure_logging installs a real handler.
logging.getLogger("dynamic_button").addHandler(logging.NullHandler())

_ADAPTER: TypeAdapter = TypeAdapter(DynamicButtonProps)

# Required fields per variant, keyed by caller-facing names.
_REQUIRED: dict[str, frozenset[str]] = {
    "link": frozenset({"name"}),
    "button": frozenset({"onClick"}),
}

# Python attribute names accepted in place of the caller-facing aliases.
_ALIASES: dict[str, str] = {
    "as_": "as",
    "on_click": "onClick",
}


# ---------------------------------------------------------------------------
# Field bag normalization
# ---------------------------------------------------------------------------

def _normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map Python attribute names onto their aliases.

    Raises ``ShapeMismatch`` when both spellings of one field are supplied.
    """
    bag: dict[str, Any] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            raise ShapeMismatch(
                f"field names must be strings, got {key!r}",
                unexpected=(repr(key),),
            )
        alias = _ALIASES.get(key, key)
        if alias in bag:
            raise ShapeMismatch(
                f"field {alias!r} supplied more than once",
                unexpected=(key,),
            )
        bag[alias] = value
    return bag


def resolve_variant(raw: Mapping[str, Any]) -> str:
    """Return the variant a field bag asks for.

    An absent or ``None`` discriminant resolves to ``"button"``.

    Raises:
        ShapeMismatch: If the discriminant is not ``"link"`` or ``"button"``.
    """
    tag = raw.get("as", raw.get("as_"))
    if tag is None:
        return DEFAULT_VARIANT
    if not isinstance(tag, str) or tag not in _REQUIRED:
        raise ShapeMismatch(
            f"unknown discriminant {tag!r}; expected 'link' or 'button'",
            unexpected=("as",),
        )
    return tag


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def parse_props(raw: Mapping[str, Any]) -> LinkProps | ButtonProps:
    """Validate a field bag into exactly one prop variant.

    Keys may use the caller-facing names (``as``, ``name``, ``onClick``) or
    the Python attribute names (``as_``, ``on_click``).

    Returns:
        A frozen ``LinkProps`` or ``ButtonProps``.

    Raises:
        ShapeMismatch: If the bag does not fit the resolved variant.
    """
    if not isinstance(raw, Mapping):
        raise ShapeMismatch(
            f"props must be a mapping, got {type(raw).__name__}"
        )

    bag = _normalize_keys(raw)
    variant = resolve_variant(bag)
    bag.pop("as", None)

    required = _REQUIRED[variant]
    missing = tuple(sorted(required - bag.keys()))
    unexpected = tuple(sorted(bag.keys() - required))
    if missing or unexpected:
        logger.warning(
            "props shape mismatch",
            extra={"variant": variant, "missing": missing, "unexpected": unexpected},
        )
        parts = []
        if missing:
            parts.append(f"missing {', '.join(missing)}")
        if unexpected:
            parts.append(f"unexpected {', '.join(unexpected)}")
        raise ShapeMismatch(
            f"{variant} props: {'; '.join(parts)}",
            variant=variant,
            missing=missing,
            unexpected=unexpected,
        )

    try:
        props = _ADAPTER.validate_python({"as": variant, **bag})
    except ValidationError as exc:
        logger.warning(
            "props field validation failed",
            extra={"variant": variant},
        )
        raise ShapeMismatch(
            f"{variant} props: {exc.error_count()} invalid field(s): "
            + "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ),
            variant=variant,
        ) from exc

    logger.debug("props constructed", extra={"variant": variant})
    return props


def construct(
    discriminant: str | None = None, **fields: Any
) -> LinkProps | ButtonProps:
    """Build props from an optional discriminant and keyword fields.

    ``construct("link", name="docs")`` gives a link;
    ``construct(onClick=fn)`` gives a button.  The discriminant may also be
    passed as an ``as_`` field, but not with a conflicting value.
    """
    raw: dict[str, Any] = dict(fields)
    if discriminant is not None:
        given = raw.get("as", raw.get("as_"))
        if given is not None and given != discriminant:
            raise ShapeMismatch(
                f"conflicting discriminants {discriminant!r} and {given!r}",
                unexpected=("as",),
            )
        raw.pop("as_", None)
        raw["as"] = discriminant
    return parse_props(raw)


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------

def link(name: str) -> LinkProps:
    """Create link props."""
    return parse_props({"as": "link", "name": name})


def button(on_click: Callable[[], None]) -> ButtonProps:
    """Create button props."""
    return parse_props({"onClick": on_click})
