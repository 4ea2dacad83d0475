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
"""Tests for the Syringe exception hierarchy."""

import pytest

from syringe.kernel.exceptions import (
    GenerationError,
    GenerationException,
    InjectionException,
    RequiredProviderMissingError,
    ServiceTypeMismatchError,
    SyringeException,
    TargetTypeMismatchError,
    UnreachableCategoryError,
    UsageError,
)


class TestSyringeException:
    def test_basic_creation(self):
        exc = SyringeException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = SyringeException("bad field", code="USAGE", context={"field": "user_id"})
        assert exc.code == "USAGE"
        assert exc.context["field"] == "user_id"

    def test_context_not_shared(self):
        first = SyringeException("a")
        first.context["key"] = "value"
        assert SyringeException("b").context == {}


class TestGenerationErrors:
    @pytest.mark.parametrize("cls", [UsageError, UnreachableCategoryError, GenerationError])
    def test_are_generation_exceptions(self, cls):
        assert issubclass(cls, GenerationException)
        assert issubclass(cls, SyringeException)

    def test_usage_error_code(self):
        exc = UsageError("private field", context={"field": "__x"})
        assert exc.code == "USAGE"
        assert exc.context == {"field": "__x"}

    def test_unreachable_code(self):
        assert UnreachableCategoryError("no strategy").code == "UNREACHABLE_CATEGORY"

    def test_generation_error_message(self):
        exc = GenerationError("MainScreen__Syringe", "invalid syntax")
        assert str(exc) == "Generated unit 'MainScreen__Syringe' is not valid Python: invalid syntax"
        assert exc.unit_name == "MainScreen__Syringe"


class TestInjectionErrors:
    @pytest.mark.parametrize("cls", [RequiredProviderMissingError, TargetTypeMismatchError, ServiceTypeMismatchError])
    def test_are_injection_exceptions(self, cls):
        assert issubclass(cls, InjectionException)
        assert not issubclass(cls, GenerationException)

    def test_type_mismatches_are_type_errors(self):
        assert issubclass(TargetTypeMismatchError, TypeError)
        assert issubclass(ServiceTypeMismatchError, TypeError)

    def test_service_type_mismatch_message(self):
        class Greeter:
            pass

        exc = ServiceTypeMismatchError(Greeter, 42)

        assert "'int'" in str(exc)
        assert "Greeter" in str(exc)
        assert exc.actual == 42
