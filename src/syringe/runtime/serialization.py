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
"""Pydantic-backed deserialization capability for object-typed fields."""

from __future__ import annotations

import functools
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from syringe.runtime.capabilities import SerializationService

logger = structlog.get_logger("syringe.runtime.serialization")


@functools.lru_cache(maxsize=256)
def _adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


class PydanticSerializationService(SerializationService):
    """SerializationService that validates JSON against the declared type.

    Any type pydantic can validate works as a target: dataclasses, pydantic
    models, ``TypedDict`` and generic containers such as ``list[User]``.
    """

    def parse_object(self, raw: str, target_type: Any) -> Any:
        try:
            return _adapter(target_type).validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "parse_object_failed",
                target_type=getattr(target_type, "__qualname__", repr(target_type)),
                errors=exc.error_count(),
            )
            return None

    def object_to_json(self, value: Any) -> str:
        return _adapter(type(value)).dump_json(value).decode()
