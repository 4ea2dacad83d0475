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
"""'syringe inspect' — Show how each Autowired field would be injected."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.syntax import Syntax

from syringe.cli.console import console, print_unit
from syringe.cli.generate import (
    config_option,
    discover,
    load_settings,
    resolve_packages,
    source_root_option,
    verbose_option,
)
from syringe.compiler.assembler import render
from syringe.compiler.processor import AutowiredProcessor
from syringe.kernel.exceptions import SyringeException


@click.command()
@click.argument("packages", nargs=-1)
@click.option("--source", "show_source", is_flag=True, help="Also print the rendered injector modules.")
@config_option
@source_root_option
@verbose_option
def inspect_command(
    packages: tuple[str, ...],
    show_source: bool,
    config_file: str | None,
    source_roots: tuple[str, ...],
    verbose: bool,
) -> None:
    """Dry run: print the injection plan of every class. Writes nothing."""
    settings = load_settings(config_file, verbose)
    packages = resolve_packages(packages, settings)

    try:
        units = AutowiredProcessor().generate(discover(packages, source_roots))
        sources = [render(unit) for unit in units] if show_source else []
    except ImportError as exc:
        console.print(f"[error]Cannot import package:[/error] {escape(str(exc))}")
        raise SystemExit(1) from None
    except SyringeException as exc:
        console.print(f"[error]Inspection failed:[/error] {escape(str(exc))}")
        raise SystemExit(1) from None

    if not units:
        console.print("[warning]No Autowired fields found.[/warning]")
        return
    for index, unit in enumerate(units):
        print_unit(unit)
        if show_source:
            console.print(Syntax(sources[index], "python", line_numbers=False))
            console.print()
