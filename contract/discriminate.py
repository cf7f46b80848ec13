"""Variant discrimination and exhaustive dispatch for constructed props."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeVar

from models.props import DEFAULT_VARIANT, ButtonProps, LinkProps

T = TypeVar("T")

Variant = Literal["link", "button"]


def discriminate(props: LinkProps | ButtonProps) -> Variant:
    """Return ``"link"`` or ``"button"`` for constructed props.

    Reads the discriminant and falls back to ``"button"`` when it is absent.
    """
    tag = getattr(props, "as_", None)
    if tag == "link":
        return "link"
    return DEFAULT_VARIANT


def is_link(props: LinkProps | ButtonProps) -> bool:
    return discriminate(props) == "link"


def is_button(props: LinkProps | ButtonProps) -> bool:
    return discriminate(props) == "button"


def match_props(
    props: LinkProps | ButtonProps,
    *,
    on_link: Callable[[LinkProps], T],
    on_button: Callable[[ButtonProps], T],
) -> T:
    """Dispatch to exactly one handler based on the props variant.

    Both handlers are required so a consumer always covers both variants.

    Raises:
        TypeError: If ``props`` is neither ``LinkProps`` nor ``ButtonProps``.
    """
    if isinstance(props, LinkProps):
        return on_link(props)
    if isinstance(props, ButtonProps):
        return on_button(props)
    raise TypeError(
        f"expected LinkProps or ButtonProps, got {type(props).__name__}"
    )
