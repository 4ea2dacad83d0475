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
"""Tests for type resolution."""

from __future__ import annotations

import pytest

from syringe.compiler.discovery import type_ref_of
from syringe.compiler.model import TypeRef
from syringe.compiler.types import PRIMITIVE_CATEGORIES, TypeCategory, resolve_type
from syringe.kernel.exceptions import UnreachableCategoryError
from syringe.runtime import Byte, Char, Double, Long, Parcelable, Serializable, SerializationService, ServiceProvider, Short


class Greeter(ServiceProvider):
    pass


class SerializableGreeter(Greeter, Serializable):
    pass


class Payload(Serializable):
    pass


class Parcel(Parcelable):
    pass


class Profile:
    pass


class TestResolveType:
    @pytest.mark.parametrize(
        ("annotation", "category"),
        [
            (bool, TypeCategory.BOOL),
            (Byte, TypeCategory.BYTE),
            (Short, TypeCategory.SHORT),
            (int, TypeCategory.INT),
            (Long, TypeCategory.LONG),
            (Char, TypeCategory.CHAR),
            (float, TypeCategory.FLOAT),
            (Double, TypeCategory.DOUBLE),
            (str, TypeCategory.STR),
        ],
    )
    def test_primitives_and_string(self, annotation, category):
        assert resolve_type(type_ref_of(annotation)) is category

    def test_nullable_does_not_change_category(self):
        assert resolve_type(type_ref_of(int | None)) is TypeCategory.INT
        assert resolve_type(type_ref_of(str | None)) is TypeCategory.STR

    def test_provider(self):
        assert resolve_type(type_ref_of(Greeter)) is TypeCategory.PROVIDER
        assert resolve_type(type_ref_of(SerializationService)) is TypeCategory.PROVIDER

    def test_provider_wins_over_serializable(self):
        assert resolve_type(type_ref_of(SerializableGreeter)) is TypeCategory.PROVIDER

    def test_serializable_and_parcelable(self):
        assert resolve_type(type_ref_of(Payload)) is TypeCategory.SERIALIZABLE
        assert resolve_type(type_ref_of(Parcel)) is TypeCategory.PARCELABLE

    def test_everything_else_is_object(self):
        assert resolve_type(type_ref_of(Profile)) is TypeCategory.OBJECT
        assert resolve_type(type_ref_of(list[int])) is TypeCategory.OBJECT
        assert resolve_type(type_ref_of(dict[str, Profile])) is TypeCategory.OBJECT

    def test_generic_alias_of_primitive_origin_is_not_primitive(self):
        assert resolve_type(type_ref_of(tuple[int, ...])) is TypeCategory.OBJECT

    def test_missing_target_is_unreachable(self):
        with pytest.raises(UnreachableCategoryError):
            resolve_type(TypeRef("somewhere", "Ghost"))


class TestTypeCategory:
    def test_primitive_set(self):
        assert len(PRIMITIVE_CATEGORIES) == 8
        assert TypeCategory.INT.is_primitive
        assert not TypeCategory.STR.is_primitive
        assert not TypeCategory.OBJECT.is_primitive
