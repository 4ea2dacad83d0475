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
"""Syringe — generated field injection.

Classes mark fields with :class:`~syringe.runtime.Autowired`; ``syringe
generate`` writes one ``<Owner>__Syringe`` module per class, and
:func:`~syringe.runtime.inject` runs it on an instance.
"""

__version__ = "0.1.0"

from syringe.runtime import Autowired, ServiceRegistry, inject

__all__ = ["Autowired", "ServiceRegistry", "__version__", "inject"]
