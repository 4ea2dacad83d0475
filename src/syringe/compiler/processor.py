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
"""Orchestration: discovered properties in, injector modules out."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from syringe.compiler.assembler import GeneratedUnit, assemble, render
from syringe.compiler.classifier import classify
from syringe.compiler.dispatcher import dispatch
from syringe.compiler.model import AnnotatedProperty
from syringe.compiler.sink import CodeGenerator
from syringe.compiler.types import resolve
from syringe.kernel.exceptions import UsageError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProcessReport:
    """Outcome of one processing pass."""

    units: tuple[GeneratedUnit, ...]
    written: tuple[Path, ...] = ()
    skipped: tuple[GeneratedUnit, ...] = ()


class AutowiredProcessor:
    """Turns Autowired properties into one injector per owning class.

    Processing is all-or-nothing: every group is classified, dispatched,
    assembled and rendered before the first unit reaches the sink, so a
    usage error leaves no partial output behind.

    Args:
        sink: Where rendered units are written. ``None`` renders only.
        incremental: Skip units the sink already wrote from an origin
            file that is unchanged since.
    """

    def __init__(self, sink: CodeGenerator | None = None, incremental: bool = False) -> None:
        self._sink = sink
        self._incremental = incremental

    def generate(self, properties: Iterable[AnnotatedProperty]) -> tuple[GeneratedUnit, ...]:
        """Build one unit per owning class, in discovery order. Writes nothing."""
        properties = list(properties)
        if not properties:
            return ()
        logger.info("autowired_fields_found", fields=len(properties))

        groups = classify(properties)
        logger.info("autowired_categories_finished", classes=len(groups))

        units: list[GeneratedUnit] = []
        modules: dict[str, GeneratedUnit] = {}
        for owner, props in groups.items():
            logger.info("processing_class", target=owner.qualified_name, fields=len(props))
            injections = [dispatch(prop, resolve(prop), owner.role) for prop in props]
            unit = assemble(owner, injections)
            clash = modules.get(unit.module_name)
            if clash is not None:
                raise UsageError(
                    f"Classes [{clash.target.qualified_name}] and [{owner.qualified_name}] would both be "
                    f"injected by [{unit.module_name}]; rename one of them or move it to another package",
                    context={
                        "module": unit.module_name,
                        "owners": [clash.target.qualified_name, owner.qualified_name],
                    },
                )
            modules[unit.module_name] = unit
            logger.debug("injector_assembled", target=owner.qualified_name, injector=unit.generated_class_name)
            units.append(unit)
        return tuple(units)

    def process(self, properties: Iterable[AnnotatedProperty]) -> ProcessReport:
        """Generate, render and emit every unit."""
        units = self.generate(properties)
        rendered = [(unit, render(unit)) for unit in units]
        if self._sink is None:
            return ProcessReport(units=units)

        sink = self._sink
        # decided for every unit before the first write
        fresh = {
            unit.module_name
            for unit in units
            if self._incremental and unit.origin is not None and sink.is_up_to_date(unit, unit.origin)
        }

        written: list[Path] = []
        skipped: list[GeneratedUnit] = []
        for unit, source in rendered:
            if unit.module_name in fresh:
                logger.debug("injector_up_to_date", target=unit.target.qualified_name)
                skipped.append(unit)
                continue
            written.append(sink.write(unit, source, unit.origin))
            logger.info("injector_generated", target=unit.target.qualified_name, injector=unit.generated_class_name)

        logger.info("autowired_processor_finished", written=len(written), skipped=len(skipped))
        return ProcessReport(units=units, written=tuple(written), skipped=tuple(skipped))
