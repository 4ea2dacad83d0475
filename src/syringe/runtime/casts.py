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
"""Checked cast used by generated injectors for by-name service lookups."""

from __future__ import annotations

from typing import Any, TypeVar

from syringe.kernel.exceptions import ServiceTypeMismatchError

T = TypeVar("T")


def checked_cast(value: Any, expected: type[T]) -> T | None:
    """Return *value* typed as *expected*.

    ``None`` passes through; any other value that is not an instance of
    *expected* raises ServiceTypeMismatchError.
    """
    if value is None:
        return None
    if not isinstance(value, expected):
        raise ServiceTypeMismatchError(expected, value)
    return value
