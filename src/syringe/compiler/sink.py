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
"""Emission sink: where rendered injector modules are written."""

from __future__ import annotations

import hashlib
import json
import threading
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog

from syringe.compiler.assembler import GeneratedUnit
from syringe.kernel.exceptions import GenerationError

logger = structlog.get_logger(__name__)

DEFAULT_MANIFEST = "syringe-manifest.json"


@runtime_checkable
class CodeGenerator(Protocol):
    """Destination of rendered units."""

    def write(self, unit: GeneratedUnit, source: str, origin: Path | None = None) -> Path: ...

    def is_up_to_date(self, unit: GeneratedUnit, origin: Path) -> bool: ...


class FileSystemSink:
    """Writes each unit to ``<name>.py`` in its package directory.

    With an ``output_dir`` the package path is recreated below it; without
    one the module is written beside the file that declares the owner.
    A JSON manifest maps every origin file to its digest and the modules
    generated from it, so units of unchanged origins can be skipped on the
    next run. Writes of distinct units may run concurrently.
    """

    def __init__(self, output_dir: Path | str | None = None, manifest_path: Path | str | None = None) -> None:
        self._output_dir = Path(output_dir) if output_dir is not None else None
        if manifest_path is None:
            manifest_path = (self._output_dir or Path.cwd()) / DEFAULT_MANIFEST
        self._manifest_path = Path(manifest_path)
        self._lock = threading.Lock()
        self._manifest: dict[str, dict[str, Any]] = self._load()
        self._touched: set[str] = set()
        self._kept: dict[str, set[str]] = {}

    @property
    def manifest_path(self) -> Path:
        return self._manifest_path

    def path_for(self, unit: GeneratedUnit, origin: Path | None = None) -> Path:
        """File the unit is written to."""
        filename = f"{unit.generated_class_name}.py"
        if self._output_dir is not None:
            parts = unit.package.split(".") if unit.package else []
            return self._output_dir.joinpath(*parts, filename)
        if origin is None:
            raise GenerationError(
                unit.generated_class_name, "no output directory configured and no origin file to write beside"
            )
        return origin.parent / filename

    def write(self, unit: GeneratedUnit, source: str, origin: Path | None = None) -> Path:
        path = self.path_for(unit, origin)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        if origin is not None:
            self._record(origin, path)
        logger.info("injector_written", unit=unit.module_name, path=str(path))
        return path

    def is_up_to_date(self, unit: GeneratedUnit, origin: Path) -> bool:
        """True when *unit* was generated from *origin* and *origin* is unchanged since.

        A unit found up to date keeps its manifest record when other units
        of the same origin are rewritten in this pass.
        """
        key = str(origin)
        output = str(self.path_for(unit, origin))
        with self._lock:
            entry = self._manifest.get(key)
        if entry is None or not origin.exists():
            return False
        if entry.get("sha256") != _digest(origin):
            return False
        if output not in entry.get("outputs", []) or not Path(output).exists():
            return False
        with self._lock:
            self._kept.setdefault(key, set()).add(output)
        return True

    def _record(self, origin: Path, output: Path) -> None:
        key = str(origin)
        with self._lock:
            entry = self._manifest.get(key)
            # outputs of a previous run are replaced, except those kept as up to date
            if entry is None or key not in self._touched:
                entry = {"sha256": _digest(origin), "outputs": sorted(self._kept.get(key, ()))}
                self._manifest[key] = entry
                self._touched.add(key)
            if str(output) not in entry["outputs"]:
                entry["outputs"].append(str(output))
                entry["outputs"].sort()
            self._save()

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self._manifest_path.exists():
            return {}
        try:
            data = json.loads(self._manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("manifest_unreadable", path=str(self._manifest_path))
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self) -> None:
        self._manifest_path.parent.mkdir(parents=True, exist_ok=True)
        self._manifest_path.write_text(json.dumps(self._manifest, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _digest(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()
