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
"""Per-adapter options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from eden_session.ports.outbound import EdenClient

TtlOption = int | float | str | Callable[[Any, Mapping[str, Any], str], Any] | None


@dataclass(frozen=True)
class StoreSettings:
    """Settings passed to a ``ttl`` function as its first argument."""

    ttl: TtlOption = None


@dataclass(frozen=True)
class SessionStoreOptions:
    """Immutable configuration for one ``EdenSessionStore``.

    Attributes:
        eden: The backing-store client.
        prefix: Optional key namespace; ``None`` or ``""`` means no prefix.
        store: Object or mapping carrying the optional ``ttl`` setting.
    """

    eden: EdenClient
    prefix: str | None = None
    store: Any = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> SessionStoreOptions:
        """Build options from ``{"eden": ..., "prefix": ..., "store": {"ttl": ...}}``."""
        store = options.get("store")
        if isinstance(store, Mapping):
            store = StoreSettings(ttl=store.get("ttl"))
        return cls(eden=options["eden"], prefix=options.get("prefix"), store=store)
