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
"""Unit assembly: one generated injector per owning class.

``assemble`` composes the statement tree of an injector; ``render`` is the
only place that turns statements into Python source.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import groupby
from pathlib import Path

from jinja2 import Environment, PackageLoader

from syringe.compiler.dispatcher import SERIALIZATION_SERVICE_ATTR, Injection
from syringe.compiler.model import ClassRef, ImportRef, TypeRef
from syringe.compiler.statements import (
    And,
    Assign,
    CastTarget,
    CheckedCast,
    Conditional,
    Field,
    GuardedAssign,
    IsInstance,
    IsNone,
    Literal,
    Local,
    LogDiagnostic,
    MethodCall,
    NotEmpty,
    NotNone,
    RegistryLookup,
    RequiredCheck,
    SelfAttr,
    SourceBundle,
    Statement,
    TypeExpr,
    walk,
)
from syringe.kernel.exceptions import GenerationError
from syringe.runtime.capabilities import SerializationService
from syringe.runtime.naming import injector_class_name
from syringe.runtime.stereotypes import Role

LOGGER_NAME = "syringe.injector"

SERIALIZATION_SERVICE_TYPE = TypeRef(
    "syringe.runtime.capabilities", "SerializationService", target=SerializationService
)
_REGISTRY = ImportRef("syringe.runtime.registry", "ServiceRegistry")
_CHECKED_CAST = ImportRef("syringe.runtime.casts", "checked_cast")
_TARGET_MISMATCH = ImportRef("syringe.kernel.exceptions", "TargetTypeMismatchError")
_PROVIDER_MISSING = ImportRef("syringe.kernel.exceptions", "RequiredProviderMissingError")

_SOURCE_ATTRS: dict[Role, str] = {
    Role.SCREEN: "extras",
    Role.SCREEN_FRAGMENT: "arguments",
}

# Names bound inside every generated module; imports never shadow them.
_RESERVED_NAMES = frozenset(
    {"structlog", "_logger", "self", "target", "substitute", "value", "raw", "parsed", "object", "isinstance"}
)


@dataclass(frozen=True, slots=True)
class GeneratedUnit:
    """A complete injector for one owning class, not yet rendered.

    Attributes:
        target: The owning class.
        generated_class_name: Name of the injector class (and of its module).
        prelude: Statements run before any field is injected.
        injections: One injection per property, in discovery order.
        imports: Every external name the rendered module refers to.
    """

    target: ClassRef
    generated_class_name: str
    prelude: tuple[Statement, ...]
    injections: tuple[Injection, ...]
    imports: frozenset[ImportRef]

    @property
    def package(self) -> str:
        return self.target.package

    @property
    def module_name(self) -> str:
        if self.package:
            return f"{self.package}.{self.generated_class_name}"
        return self.generated_class_name

    @property
    def origin(self) -> Path | None:
        return self.target.origin

    @property
    def statements(self) -> tuple[Statement, ...]:
        """The whole injection routine, in execution order."""
        body: list[Statement] = list(self.prelude)
        for injection in self.injections:
            body.extend(injection.statements)
            body.extend(injection.checks)
        return tuple(body)

    @property
    def required_field_checks(self) -> tuple[RequiredCheck, ...]:
        return tuple(check for injection in self.injections for check in injection.checks)


def assemble(owner: ClassRef, injections: Iterable[Injection]) -> GeneratedUnit:
    """Compose the injector of *owner* from its per-property injections."""
    injections = tuple(injections)
    if not injections:
        raise ValueError(f"cannot assemble an injector for {owner} without properties")

    prelude: tuple[Statement, ...] = (
        Assign(SelfAttr(SERIALIZATION_SERVICE_ATTR), RegistryLookup(by_type=TypeExpr(SERIALIZATION_SERVICE_TYPE))),
        CastTarget(
            owner,
            f"The target that needs to be injected must be {owner.simple_name}, please check your code!",
        ),
    )

    imports: set[ImportRef] = set(SERIALIZATION_SERVICE_TYPE.iter_imports())
    for injection in injections:
        for statement in (*injection.statements, *injection.checks):
            imports.update(_imports_of(statement))
    for statement in prelude:
        imports.update(_imports_of(statement))

    return GeneratedUnit(
        target=owner,
        generated_class_name=injector_class_name(owner.simple_name),
        prelude=prelude,
        injections=injections,
        imports=frozenset(imports),
    )


def _imports_of(statement: Statement) -> Iterator[ImportRef]:
    for node in walk(statement):
        if isinstance(node, TypeExpr):
            yield from node.spelled.iter_imports()
        elif isinstance(node, RegistryLookup):
            yield _REGISTRY
        elif isinstance(node, CheckedCast):
            yield _CHECKED_CAST
        elif isinstance(node, CastTarget):
            yield _TARGET_MISMATCH
            yield from node.owner.as_type().iter_imports()
        elif isinstance(node, RequiredCheck) and node.fatal:
            yield _PROVIDER_MISSING


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _get_env() -> Environment:
    """Create the Jinja2 template environment."""
    return Environment(
        loader=PackageLoader("syringe.compiler", "templates"),
        keep_trailing_newline=True,
        lstrip_blocks=True,
        trim_blocks=True,
        autoescape=False,
    )


def render(unit: GeneratedUnit) -> str:
    """Render *unit* as the source of a Python module.

    Output depends only on the unit: imports are sorted and colliding names
    get numbered aliases, so unchanged input renders byte-identical source.

    Raises:
        GenerationError: The rendered module does not parse.
    """
    names = _bind_names(unit.imports, _RESERVED_NAMES | {unit.generated_class_name})
    renderer = _StatementRenderer(names)

    body: list[str] = []
    for statement in unit.prelude:
        body.extend(renderer.statement(statement, 2))
    for injection in unit.injections:
        prop = injection.prop
        body.append(f"        # {prop.name}: {prop.declared_type} ({injection.strategy.value})")
        for statement in (*injection.statements, *injection.checks):
            body.extend(renderer.statement(statement, 2))

    source = (
        _get_env()
        .get_template("injector.py.j2")
        .render(
            owner_name=unit.target.qualified_name,
            class_name=unit.generated_class_name,
            import_lines=_import_lines(names),
            uses_logger=renderer.uses_logger,
            logger_name=LOGGER_NAME,
            serialization_service=SERIALIZATION_SERVICE_TYPE.render(names.__getitem__),
            body=body,
        )
    )

    try:
        ast.parse(source, filename=f"{unit.module_name}.py")
    except SyntaxError as exc:
        raise GenerationError(unit.generated_class_name, str(exc)) from exc
    return source


def _bind_names(imports: Iterable[ImportRef], reserved: frozenset[str]) -> dict[ImportRef, str]:
    """Choose the local name each import is bound to."""
    taken = set(reserved)
    names: dict[ImportRef, str] = {}
    for ref in sorted(imports, key=lambda r: (r.module, r.name)):
        local = ref.name
        counter = 1
        while local in taken:
            local = f"{ref.name}_{counter}"
            counter += 1
        taken.add(local)
        names[ref] = local
    return names


def _import_lines(names: Mapping[ImportRef, str]) -> list[str]:
    lines: list[str] = []
    ordered = sorted(names.items(), key=lambda item: (item[0].module, item[0].name))
    for module, group in groupby(ordered, key=lambda item: item[0].module):
        bound = [ref.name if local == ref.name else f"{ref.name} as {local}" for ref, local in group]
        lines.append(f"from {module} import {', '.join(bound)}")
    return lines


class _StatementRenderer:
    """Turns statement and expression nodes into Python source lines."""

    def __init__(self, names: Mapping[ImportRef, str]) -> None:
        self._names = names
        self.uses_logger = False

    def _name(self, ref: ImportRef) -> str:
        return self._names[ref]

    def expr(self, node: object) -> str:
        if isinstance(node, Field):
            return f"substitute.{node.name}"
        if isinstance(node, SelfAttr):
            return f"self.{node.name}"
        if isinstance(node, Local):
            return node.name
        if isinstance(node, Literal):
            return repr(node.value)
        if isinstance(node, TypeExpr):
            return node.spelled.render(self._name)
        if isinstance(node, SourceBundle):
            return f"substitute.{_SOURCE_ATTRS[node.role]}"
        if isinstance(node, MethodCall):
            args = ", ".join(self.expr(arg) for arg in node.args)
            return f"{self.expr(node.receiver)}.{node.method}({args})"
        if isinstance(node, RegistryLookup):
            registry = f"{self._name(_REGISTRY)}.get_instance()"
            if node.by_type is not None:
                return f"{registry}.get_by_type({self.expr(node.by_type)})"
            return f"{registry}.get_by_name({node.by_name!r})"
        if isinstance(node, CheckedCast):
            return f"{self._name(_CHECKED_CAST)}({self.expr(node.value)}, {self.expr(node.to)})"
        if isinstance(node, IsNone):
            return f"{self.expr(node.operand)} is None"
        if isinstance(node, NotNone):
            return f"{self.expr(node.operand)} is not None"
        if isinstance(node, IsInstance):
            return f"isinstance({self.expr(node.operand)}, {self.expr(node.of)})"
        if isinstance(node, NotEmpty):
            return self.expr(node.operand)
        if isinstance(node, And):
            return f"{self.expr(node.left)} and {self.expr(node.right)}"
        raise TypeError(f"not an expression node: {node!r}")

    def statement(self, node: Statement, depth: int) -> list[str]:
        pad = "    " * depth
        inner = "    " * (depth + 1)
        if isinstance(node, Assign):
            return [f"{pad}{self.expr(node.target)} = {self.expr(node.value)}"]
        if isinstance(node, GuardedAssign):
            return [
                f"{pad}if {self.expr(node.guard)}:",
                f"{inner}{self.expr(node.target)} = {self.expr(node.value)}",
            ]
        if isinstance(node, Conditional):
            lines = [f"{pad}if {self.expr(node.condition)}:"]
            for child in node.body:
                lines.extend(self.statement(child, depth + 1))
            if node.orelse:
                lines.append(f"{pad}else:")
                for child in node.orelse:
                    lines.extend(self.statement(child, depth + 1))
            return lines
        if isinstance(node, CastTarget):
            owner = node.owner.as_type().render(self._name)
            return [
                f"{pad}if not isinstance(target, {owner}):",
                f"{inner}raise {self._name(_TARGET_MISMATCH)}({node.message!r})",
                f"{pad}substitute = target",
            ]
        if isinstance(node, RequiredCheck):
            if node.fatal:
                action = f"raise {self._name(_PROVIDER_MISSING)}({node.message!r})"
            else:
                self.uses_logger = True
                action = f"_logger.error({node.message!r})"
            return [f"{pad}if {self.expr(node.field)} is None:", f"{inner}{action}"]
        if isinstance(node, LogDiagnostic):
            self.uses_logger = True
            return [f"{pad}_logger.error({node.message!r})"]
        raise TypeError(f"not a statement node: {node!r}")
