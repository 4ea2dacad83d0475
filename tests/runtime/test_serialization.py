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
"""Tests for the pydantic-backed SerializationService."""

from dataclasses import dataclass

from pydantic import BaseModel
from structlog.testing import capture_logs

from syringe.runtime import PydanticSerializationService, SerializationService


class User(BaseModel):
    name: str
    age: int


@dataclass
class Point:
    x: int
    y: int


class TestPydanticSerializationService:
    def test_is_serialization_service(self):
        assert isinstance(PydanticSerializationService(), SerializationService)

    def test_parse_model(self):
        service = PydanticSerializationService()
        assert service.parse_object('{"name": "ann", "age": 3}', User) == User(name="ann", age=3)

    def test_parse_generic_container(self):
        service = PydanticSerializationService()
        assert service.parse_object('[{"x": 1, "y": 2}]', list[Point]) == [Point(1, 2)]

    def test_invalid_json_returns_none_and_logs(self):
        service = PydanticSerializationService()

        with capture_logs() as logs:
            assert service.parse_object('{"name": "ann"}', User) is None

        assert logs[0]["event"] == "parse_object_failed"
        assert logs[0]["log_level"] == "warning"

    def test_round_trip(self):
        service = PydanticSerializationService()
        user = User(name="bo", age=40)
        assert service.parse_object(service.object_to_json(user), User) == user
