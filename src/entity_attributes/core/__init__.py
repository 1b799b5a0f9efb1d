"""Attribute model: kinds, modifiers, instances and value resolution."""

from .catalog import (
    DEFAULT_ATTRIBUTES,
    AttributeCatalog,
    AttributeDefinition,
    AttributeDefinitionError,
    AttributeKind,
    DuplicateAttributeError,
    UnknownAttributeError,
    build_default_catalog,
    define_all,
    load_attribute_definitions,
)
from .container import AttributeContainer, MissingAttributeInstanceError
from .instance import AttributeInstance
from .modifiers import Modifier, Operation
from .resolver import resolve, resolve_or_default, resolve_value

__all__ = [
    "DEFAULT_ATTRIBUTES",
    "AttributeCatalog",
    "AttributeContainer",
    "AttributeDefinition",
    "AttributeDefinitionError",
    "AttributeInstance",
    "AttributeKind",
    "DuplicateAttributeError",
    "MissingAttributeInstanceError",
    "Modifier",
    "Operation",
    "UnknownAttributeError",
    "build_default_catalog",
    "define_all",
    "load_attribute_definitions",
    "resolve",
    "resolve_or_default",
    "resolve_value",
]
