"""Construction and discrimination of dynamic button props."""

from contract.construct import button, construct, link, parse_props, resolve_variant
from contract.discriminate import discriminate, is_button, is_link, match_props

__all__ = [
    "construct",
    "parse_props",
    "resolve_variant",
    "link",
    "button",
    "discriminate",
    "is_link",
    "is_button",
    "match_props",
]
