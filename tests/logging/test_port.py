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
"""Tests for the logging port and the CLI's use of it."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from syringe.cli.generate import load_settings
from syringe.core.config import Config
from syringe.logging.port import LoggingPort


class RecordingLogging:
    def __init__(self) -> None:
        self.calls: list[tuple[dict[str, Any], str | None]] = []
        self._root_level = "INFO"

    @property
    def root_level(self) -> str:
        return self._root_level

    def configure(self, config: Config, level: str | None = None) -> None:
        self.calls.append((config.get_section("syringe.logging"), level))
        self._root_level = level or self._root_level

    def get_logger(self, name: str) -> Any:
        return None

    def set_level(self, name: str, level: str) -> None:
        pass


class TestLoggingPortProtocol:
    def test_conforming_class_is_instance(self):
        assert isinstance(RecordingLogging(), LoggingPort)

    def test_missing_configure_is_not_instance(self):
        class GetterOnly:
            def get_logger(self, name: str) -> Any:
                pass

        assert not isinstance(GetterOnly(), LoggingPort)


class TestLoadSettings:
    def test_configures_the_given_port(self, tmp_path: Path):
        config_file = tmp_path / "syringe.yaml"
        config_file.write_text("syringe:\n  logging:\n    format: json\n  generator:\n    packages: [app]\n")
        port = RecordingLogging()

        settings = load_settings(str(config_file), logging_port=port)

        assert settings.packages == ["app"]
        assert port.calls == [({"format": "json", "level": {"root": "INFO"}}, None)]

    def test_verbose_overrides_root_level(self, tmp_path: Path):
        config_file = tmp_path / "syringe.yaml"
        config_file.write_text("syringe: {}\n")
        port = RecordingLogging()

        load_settings(str(config_file), verbose=True, logging_port=port)

        assert port.calls[0][1] == "DEBUG"
