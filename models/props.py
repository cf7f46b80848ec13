"""Link and button prop variants as Pydantic v2 models with discriminated union."""

import inspect
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

DEFAULT_VARIANT = "button"


class LinkProps(BaseModel):
    """Action rendered as a navigable hyperlink."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    as_: Literal["link"] = Field(alias="as")
    name: str = Field(strict=True)


class ButtonProps(BaseModel):
    """Action rendered as a clickable button.

    The discriminant may be omitted; a missing ``as`` means button.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    as_: Literal["button"] = Field(default="button", alias="as")
    on_click: Callable[[], None] = Field(alias="onClick")

    @field_validator("on_click")
    @classmethod
    def require_zero_arguments(cls, v):
        try:
            signature = inspect.signature(v)
        except (TypeError, ValueError):
            # Some builtins expose no signature; callable() already passed.
            return v
        try:
            signature.bind()
        except TypeError as exc:
            raise ValueError(f"onClick must accept zero arguments: {exc}") from exc
        return v


def variant_tag(value: Any) -> Optional[str]:
    """Return the variant tag for raw input or a model instance.

    An absent (or ``None``) discriminant resolves to ``"button"``.  A dict
    carrying both ``as`` and ``as_`` has no tag and fails validation.
    """
    if isinstance(value, dict):
        if "as" in value and "as_" in value:
            return None
        tag = value["as"] if "as" in value else value.get("as_")
    else:
        tag = getattr(value, "as_", None)
    if tag is None:
        return DEFAULT_VARIANT
    return tag


DynamicButtonProps = Annotated[
    Union[
        Annotated[LinkProps, Tag("link")],
        Annotated[ButtonProps, Tag("button")],
    ],
    Discriminator(variant_tag),
]
