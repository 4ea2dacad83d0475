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
"""Generator configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from syringe.core.config import config_properties


@config_properties(prefix="syringe.generator")
@dataclass
class GeneratorProperties:
    """Configuration for the code generator (syringe.generator.*).

    Attributes:
        packages: Dotted package names scanned when none are given on the command line.
        output_dir: Root directory for generated modules. ``None`` writes each
            injector beside the source file of its owning class.
        incremental: Skip owners whose source file is unchanged since the last pass.
        manifest: File name of the provenance manifest, relative to the output root.
    """

    packages: list[str] = field(default_factory=list)
    output_dir: str | None = None
    incremental: bool = False
    manifest: str = "syringe-manifest.json"
