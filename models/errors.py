"""Error raised when props do not fit exactly one variant."""

from typing import Iterable, Optional


class ShapeMismatch(ValueError):
    """Props are missing a required field or carry a field of the other variant.

    ``variant`` is the variant the discriminant resolved to, or ``None`` when
    the discriminant itself was not recognised.
    """

    def __init__(
        self,
        message: str,
        *,
        variant: Optional[str] = None,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.variant = variant
        self.missing = tuple(missing)
        self.unexpected = tuple(unexpected)
