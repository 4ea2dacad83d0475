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
"""Tests for Autowired discovery and annotation reduction."""

from __future__ import annotations

import importlib
import typing
from typing import Annotated, Any, Optional, Union

import pytest

from syringe.compiler.discovery import discover_module, discover_package, type_ref_of
from syringe.compiler.model import TypeRef, Visibility
from syringe.kernel.exceptions import UsageError
from syringe.runtime import Long, Role

from sample_app.models import Address, Point


class TestDiscoverModule:
    def test_fields_in_declaration_order(self):
        props = discover_module(importlib.import_module("sample_app.screens"))

        profile = [p for p in props if p.owner.qualname == "ProfileScreen"]
        assert [p.name for p in profile] == [
            "user_id",
            "nickname",
            "age",
            "vip",
            "page",
            "ratio",
            "initial",
            "token",
            "ticket",
            "address",
            "points",
            "hello",
        ]

    def test_owner_reference(self):
        props = discover_module(importlib.import_module("sample_app.screens"))

        owner = props[0].owner
        assert owner.module == "sample_app.screens"
        assert owner.package == "sample_app"
        assert owner.role is Role.SCREEN
        assert owner.origin is not None and owner.origin.name == "screens.py"

    def test_subclass_reports_only_its_own_fields(self):
        props = discover_module(importlib.import_module("sample_app.screens"))

        vip = [p for p in props if p.owner.qualname == "VipProfileScreen"]
        assert [p.name for p in vip] == ["level"]
        assert vip[0].owner.role is Role.SCREEN

    def test_marker_arguments(self):
        props = discover_module(importlib.import_module("sample_app.fragments"))

        hello = props[0]
        assert hello.name == "hello_service"
        assert hello.args.name == "/service/hello"
        assert hello.args.required is True
        assert hello.nullable is True
        assert hello.owner.role is Role.SCREEN_FRAGMENT

    def test_protected_field(self):
        props = discover_module(importlib.import_module("sample_app.fragments"))

        visits = props[-1]
        assert visits.name == "_visits"
        assert visits.visibility is Visibility.PROTECTED
        assert visits.declared_type.target is Long

    def test_nested_class(self):
        (step,) = discover_module(importlib.import_module("sample_app.nested"))
        assert step.owner.qualname == "Wizard.StepScreen"

    def test_private_field_is_reported_private(self):
        (prop,) = discover_module(importlib.import_module("sample_broken.private_field"))

        assert prop.name == "__token"
        assert prop.visibility is Visibility.PRIVATE

    def test_module_level_marker_has_no_owner(self):
        (prop,) = discover_module(importlib.import_module("sample_broken.module_level"))

        assert prop.name == "orphan"
        assert prop.owner is None

    def test_missing_annotation_aborts(self):
        with pytest.raises(UsageError, match="has no type annotation"):
            discover_module(importlib.import_module("sample_broken.unannotated"))


class TestDiscoverPackage:
    def test_walks_submodules_in_name_order(self):
        props = discover_package("sample_app")

        modules = [p.owner.module for p in props]
        assert modules == sorted(modules)
        assert {p.owner.qualname for p in props} >= {"ProfileScreen", "HelloFragment", "OrderService", "ReportJob"}

    def test_single_module(self):
        props = discover_package("sample_app.consumers")
        assert {p.owner.qualname for p in props} == {"OrderService", "ReportJob"}


class TestTypeRefOf:
    def test_builtin(self):
        ref = type_ref_of(int)
        assert ref == TypeRef("builtins", "int")
        assert ref.import_ref() is None

    @pytest.mark.parametrize("annotation", [Address | None, Optional[Address], Union[Address, None]])
    def test_nullable(self, annotation):
        ref = type_ref_of(annotation)
        assert ref.nullable
        assert ref.qualname == "Address"
        assert str(ref) == "Address | None"

    def test_generic(self):
        ref = type_ref_of(dict[str, list[Point]])

        assert str(ref) == "dict[str, list[Point]]"
        assert ref.origin() == TypeRef("builtins", "dict")

    def test_typing_alias_uses_builtin_origin(self):
        assert str(type_ref_of(typing.List[int])) == "list[int]"

    def test_variadic_tuple(self):
        assert str(type_ref_of(tuple[int, ...])) == "tuple[int, Ellipsis]"

    def test_annotated_metadata_is_dropped(self):
        assert type_ref_of(Annotated[int, "meta"]) == TypeRef("builtins", "int")

    def test_union_of_several_types(self):
        ref = type_ref_of(int | str | None)

        assert ref.qualname == "Union"
        assert ref.nullable
        assert str(ref) == "Union[int, str] | None"

    def test_new_type(self):
        ref = type_ref_of(Long)
        assert ref.module == "syringe.runtime.primitives"
        assert ref.qualname == "Long"

    def test_any(self):
        assert type_ref_of(Any) == TypeRef("typing", "Any")

    def test_unsupported(self):
        with pytest.raises(UsageError):
            type_ref_of(typing.TypeVar("T"))

    def test_local_class_rejected(self):
        class Local:
            pass

        with pytest.raises(ValueError, match="local to a function"):
            type_ref_of(Local)
