"""Attribute and element specifications consumed by the dispatcher and rules."""

from .models import AttributeSpec, AttributeType, ElementSpec, EnumSpec, EnumType, NamedType, SpecType
from .table import SpecTable, is_palpable_element, is_void_element

__all__ = [
    "AttributeSpec",
    "AttributeType",
    "ElementSpec",
    "EnumSpec",
    "EnumType",
    "NamedType",
    "SpecType",
    "SpecTable",
    "is_palpable_element",
    "is_void_element",
]
