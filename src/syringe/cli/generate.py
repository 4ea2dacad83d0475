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
"""'syringe generate' — Generate injector modules for Autowired fields."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

import click
from rich.markup import escape

from syringe.cli.console import console, print_report
from syringe.compiler.discovery import discover_package
from syringe.compiler.model import AnnotatedProperty
from syringe.compiler.processor import AutowiredProcessor
from syringe.compiler.sink import FileSystemSink
from syringe.config.properties import GeneratorProperties
from syringe.core.config import Config
from syringe.kernel.exceptions import SyringeException
from syringe.logging import LoggingPort, StructlogAdapter

config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (default: syringe.yaml or syringe.toml in the current directory).",
)
source_root_option = click.option(
    "--source-root",
    "source_roots",
    multiple=True,
    default=(".",),
    show_default=True,
    help="Directory put on sys.path before importing packages. Repeatable.",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Log debug events to stderr.")


def load_settings(
    config_file: str | None, verbose: bool = False, logging_port: LoggingPort | None = None
) -> GeneratorProperties:
    """Load configuration, configure logging and bind the generator properties."""
    config = Config.from_file(config_file) if config_file else Config.from_sources(Path.cwd())
    port: LoggingPort = logging_port if logging_port is not None else StructlogAdapter()
    port.configure(config, level="DEBUG" if verbose else None)
    return config.bind(GeneratorProperties)


def discover(packages: tuple[str, ...], source_roots: tuple[str, ...]) -> list[AnnotatedProperty]:
    """Import *packages* from *source_roots* and collect their Autowired fields."""
    for root in reversed(source_roots):
        resolved = str(Path(root).resolve())
        if resolved not in sys.path:
            sys.path.insert(0, resolved)
    importlib.invalidate_caches()

    properties: list[AnnotatedProperty] = []
    for package in packages:
        properties.extend(discover_package(package))
    return properties


def resolve_packages(packages: tuple[str, ...], settings: GeneratorProperties) -> tuple[str, ...]:
    resolved = packages or tuple(settings.packages)
    if not resolved:
        console.print(
            "[error]No packages to scan.[/error] Pass them as arguments or set syringe.generator.packages."
        )
        raise SystemExit(1)
    return resolved


@click.command()
@click.argument("packages", nargs=-1)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Root directory for generated modules (default: beside each source file).",
)
@click.option(
    "--incremental/--no-incremental",
    default=None,
    help="Skip classes whose source file is unchanged since the last run.",
)
@config_option
@source_root_option
@verbose_option
def generate_command(
    packages: tuple[str, ...],
    output_dir: str | None,
    incremental: bool | None,
    config_file: str | None,
    source_roots: tuple[str, ...],
    verbose: bool,
) -> None:
    """Generate an injector module for every class declaring Autowired fields."""
    settings = load_settings(config_file, verbose)
    packages = resolve_packages(packages, settings)

    output_dir = output_dir or settings.output_dir
    sink = FileSystemSink(output_dir, Path(output_dir or ".") / settings.manifest)
    processor = AutowiredProcessor(sink, incremental=settings.incremental if incremental is None else incremental)

    try:
        report = processor.process(discover(packages, source_roots))
    except ImportError as exc:
        console.print(f"[error]Cannot import package:[/error] {escape(str(exc))}")
        raise SystemExit(1) from None
    except SyringeException as exc:
        console.print(f"[error]Generation failed:[/error] {escape(str(exc))}")
        raise SystemExit(1) from None

    if not report.units:
        console.print("[warning]No Autowired fields found.[/warning]")
        return
    print_report(report)
