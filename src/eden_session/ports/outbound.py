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
"""Backing-store (eden) client protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EdenClient(Protocol):
    """Key-value contract the session adapter delegates to.

    Keys may be glob patterns (``*``). A pattern ``get`` returns a mapping of
    matching keys to values; a pattern ``delete`` removes every match. ``ttl``
    is always in seconds.
    """

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: int | float | str | None = None) -> None: ...

    async def delete(self, key: str) -> None: ...
