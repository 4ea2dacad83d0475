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
"""Property classification: validate annotated properties and group them by owner."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from syringe.compiler.model import AnnotatedProperty, ClassRef, Visibility
from syringe.kernel.exceptions import UsageError

logger = structlog.get_logger(__name__)


def classify(properties: Iterable[AnnotatedProperty]) -> dict[ClassRef, tuple[AnnotatedProperty, ...]]:
    """Group annotated properties by owning class, in discovery order.

    Raises:
        UsageError: A property was declared outside a class body, or is private.
    """
    groups: dict[ClassRef, list[AnnotatedProperty]] = {}
    for prop in properties:
        if prop.owner is None:
            raise UsageError(
                f"Property '{prop.name}' annotated with Autowired must be declared in a class body",
                context={"field": prop.name, "location": prop.location},
            )
        if prop.visibility is Visibility.PRIVATE:
            raise UsageError(
                f"The inject fields CAN NOT BE 'private'!!! please check field "
                f"[{prop.name}] in class [{prop.owner.qualified_name}]",
                context={"field": prop.name, "owner": prop.owner.qualified_name},
            )
        groups.setdefault(prop.owner, []).append(prop)

    logger.debug("autowired_classified", classes=len(groups), fields=sum(len(v) for v in groups.values()))
    return {owner: tuple(props) for owner, props in groups.items()}
