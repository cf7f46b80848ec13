"""Public re-exports of all model types."""

from models.errors import ShapeMismatch
from models.props import (
    DEFAULT_VARIANT,
    ButtonProps,
    DynamicButtonProps,
    LinkProps,
    variant_tag,
)

__all__ = [
    # Variants
    "LinkProps",
    "ButtonProps",
    "DynamicButtonProps",
    "DEFAULT_VARIANT",
    "variant_tag",
    # Errors
    "ShapeMismatch",
]
