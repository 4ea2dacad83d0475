# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Type resolution: declared field type to a closed set of categories."""

from __future__ import annotations

from enum import Enum
from typing import Any

from syringe.compiler.model import AnnotatedProperty, TypeRef
from syringe.kernel.exceptions import UnreachableCategoryError
from syringe.runtime.capabilities import Parcelable, Serializable, ServiceProvider
from syringe.runtime.primitives import Byte, Char, Double, Long, Short


class TypeCategory(Enum):
    """Kind of value a field holds, as far as injection is concerned."""

    BOOL = "bool"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    CHAR = "char"
    FLOAT = "float"
    DOUBLE = "double"
    STR = "str"
    SERIALIZABLE = "serializable"
    PARCELABLE = "parcelable"
    PROVIDER = "provider"
    OBJECT = "object"

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_CATEGORIES


PRIMITIVE_CATEGORIES = frozenset(
    {
        TypeCategory.BOOL,
        TypeCategory.BYTE,
        TypeCategory.SHORT,
        TypeCategory.INT,
        TypeCategory.LONG,
        TypeCategory.CHAR,
        TypeCategory.FLOAT,
        TypeCategory.DOUBLE,
    }
)

# Keyed by identity: bool and the NewType aliases must not collapse into int/float/str.
_PRIMITIVES: tuple[tuple[Any, TypeCategory], ...] = (
    (bool, TypeCategory.BOOL),
    (Byte, TypeCategory.BYTE),
    (Short, TypeCategory.SHORT),
    (int, TypeCategory.INT),
    (Long, TypeCategory.LONG),
    (Char, TypeCategory.CHAR),
    (float, TypeCategory.FLOAT),
    (Double, TypeCategory.DOUBLE),
)


def resolve(prop: AnnotatedProperty) -> TypeCategory:
    """Map a property's declared type to its category.

    First match wins: provider, primitive, string, serializable,
    parcelable, object. Nullability does not affect the category; generic
    aliases are matched on their origin class.

    Raises:
        UnreachableCategoryError: The declared type carries no runtime target.
    """
    return resolve_type(prop.declared_type)


def resolve_type(type_ref: TypeRef) -> TypeCategory:
    target = type_ref.target
    if target is None:
        raise UnreachableCategoryError(
            f"Declared type '{type_ref}' has no runtime target to resolve",
            context={"type": str(type_ref)},
        )

    if _is_subclass(target, ServiceProvider):
        return TypeCategory.PROVIDER

    if not type_ref.is_generic:
        for primitive, category in _PRIMITIVES:
            if target is primitive:
                return category
        if target is str:
            return TypeCategory.STR

    if _is_subclass(target, Serializable):
        return TypeCategory.SERIALIZABLE
    if _is_subclass(target, Parcelable):
        return TypeCategory.PARCELABLE
    return TypeCategory.OBJECT


def _is_subclass(target: Any, capability: type) -> bool:
    return isinstance(target, type) and issubclass(target, capability)
