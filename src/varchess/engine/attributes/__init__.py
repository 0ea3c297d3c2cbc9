"""Movement attributes a piece type is composed of.

The set is closed: ``PieceAttribute`` is a tagged union discriminated on
``kind`` so that piece definitions can be validated from plain data.
"""

from __future__ import annotations

from typing import Annotated, List, Union

from pydantic import Field, TypeAdapter

from .base import AttributeInfo, InfoOption, OptionType, PieceAttributeBase
from .castle import Castle
from .enpassant import EnPassant
from .jumping import Jumping
from .sliding import Sliding

PieceAttribute = Annotated[
    Union[Jumping, Sliding, EnPassant, Castle], Field(discriminator="kind")
]

_ATTRIBUTE_ADAPTER: TypeAdapter[PieceAttribute] = TypeAdapter(PieceAttribute)


def attribute_from_dict(data: dict) -> PieceAttribute:
    """Validate one attribute definition, e.g. ``{"kind": "sliding", ...}``."""
    return _ATTRIBUTE_ADAPTER.validate_python(data)


def default_attributes() -> List[PieceAttribute]:
    """One unconfigured instance of every variant, for editors listing choices."""
    return [Jumping(), Sliding(), EnPassant(), Castle()]


__all__ = [
    "AttributeInfo",
    "Castle",
    "EnPassant",
    "InfoOption",
    "Jumping",
    "OptionType",
    "PieceAttribute",
    "PieceAttributeBase",
    "Sliding",
    "attribute_from_dict",
    "default_attributes",
]
