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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from syringe.core.config import Config


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Generator diagnostics and the events of generated injectors
    (``syringe.injector``) go to stderr, so ``syringe`` output on stdout
    stays clean.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    @property
    def root_level(self) -> str:
        return self._root_level

    def configure(self, config: Config, level: str | None = None) -> None:
        """Configure structlog from ``syringe.logging``; *level* overrides the root level."""
        level_section = dict(config.get_section("syringe.logging.level"))
        self._root_level = str(level or level_section.pop("root", "INFO")).upper()
        level_section.pop("root", None)
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("syringe.logging.format", "console")).lower()

        self._setup_structlog()
        self._apply_levels()

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level of one stdlib logger (e.g. ``syringe.injector``)."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def _setup_structlog(self) -> None:
        log_level = getattr(logging, self._root_level, logging.INFO)

        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
        if self._format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level, force=True)

    def _apply_levels(self) -> None:
        for module, level in self._module_levels.items():
            self.set_level(module, level)
