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
"""Unified exception hierarchy for Syringe.

All exceptions inherit from SyringeException, enabling unified error
handling across the generator and the generated injectors.

Categories:
- GenerationException: fatal errors that abort a generation pass
- InjectionException: errors raised by generated injectors at runtime
"""

from __future__ import annotations


class SyringeException(Exception):
    """Base exception for all Syringe errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "USAGE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# ---------------------------------------------------------------------------
# Generation-time
# ---------------------------------------------------------------------------


class GenerationException(SyringeException):
    """Fatal error during a generation pass — no output is valid."""


class UsageError(GenerationException):
    """The annotated code is used in a way the generator cannot support.

    Raised for private fields, fields declared outside a class body and
    argument-bundle injection requested on an owner that is neither a screen
    nor a screen fragment.
    """

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="USAGE", context=context)


class UnreachableCategoryError(GenerationException):
    """Type resolution and strategy dispatch disagree on the category set."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="UNREACHABLE_CATEGORY", context=context)


class GenerationError(GenerationException):
    """An assembled unit did not render to valid Python source."""

    def __init__(self, unit_name: str, reason: str) -> None:
        self.unit_name = unit_name
        self.reason = reason
        super().__init__(
            f"Generated unit '{unit_name}' is not valid Python: {reason}",
            code="GENERATION",
            context={"unit": unit_name},
        )


# ---------------------------------------------------------------------------
# Runtime (raised by generated injectors)
# ---------------------------------------------------------------------------


class InjectionException(SyringeException):
    """Error raised while a generated injector populates its target."""


class RequiredProviderMissingError(InjectionException):
    """A required service-provider field resolved to nothing."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="REQUIRED_PROVIDER_MISSING")


class TargetTypeMismatchError(InjectionException, TypeError):
    """An injector was invoked with an object of the wrong class."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="TARGET_TYPE_MISMATCH")


class ServiceTypeMismatchError(InjectionException, TypeError):
    """A service looked up by name is not an instance of the declared type."""

    def __init__(self, expected: type, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Service of type '{type(actual).__qualname__}' cannot be cast to "
            f"'{getattr(expected, '__qualname__', repr(expected))}'",
            code="SERVICE_TYPE_MISMATCH",
        )
