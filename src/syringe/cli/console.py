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
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from syringe.compiler.assembler import GeneratedUnit
from syringe.compiler.dispatcher import Strategy
from syringe.compiler.processor import ProcessReport

SYRINGE_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "syringe": "bold magenta",
    "dim": "dim",
})

console = Console(theme=SYRINGE_THEME)


def print_banner() -> None:
    """Print the Syringe name line with version."""
    from syringe import __version__

    console.print("[syringe]syringe[/syringe] [dim]:: generated field injection ::[/dim]")
    console.print(f"  [dim](v{__version__}) | Apache 2.0 License[/dim]\n")


def print_report(report: ProcessReport) -> None:
    """Print one row per generated unit with what happened to it."""
    table = Table(title="[syringe]Injectors[/syringe]", border_style="dim")
    table.add_column("Target", style="bold")
    table.add_column("Injector", style="info")
    table.add_column("Fields", justify="right")
    table.add_column("Status")

    skipped = {unit.target for unit in report.skipped}
    written = iter(report.written)
    for unit in report.units:
        if unit.target in skipped:
            status = "[dim]up to date[/dim]"
        else:
            status = f"[success]written[/success] [dim]{next(written, '')}[/dim]"
        table.add_row(unit.target.qualified_name, unit.module_name, str(len(unit.injections)), status)

    console.print(table)
    console.print(
        f"\n  [success]{len(report.written)}[/success] written, [dim]{len(report.skipped)} up to date[/dim]\n"
    )


def print_unit(unit: GeneratedUnit) -> None:
    """Print the injection plan of one unit: a row per field."""
    target = unit.target
    table = Table(
        title=f"[syringe]{target.qualified_name}[/syringe] [dim]({target.role.value})[/dim] -> {unit.module_name}",
        border_style="dim",
        title_justify="left",
    )
    table.add_column("Field", style="bold")
    table.add_column("Type")
    table.add_column("Key / service")
    table.add_column("Category", style="info")
    table.add_column("Strategy")
    table.add_column("Required", justify="center")

    for injection in unit.injections:
        prop = injection.prop
        key = prop.args.name if injection.strategy is Strategy.PROVIDER else prop.bundle_key
        table.add_row(
            prop.name,
            str(prop.declared_type),
            key or "[dim]by type[/dim]",
            injection.category.value,
            injection.strategy.value,
            "[warning]yes[/warning]" if prop.args.required else "",
        )
    console.print(table)
    console.print()
