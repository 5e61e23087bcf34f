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
"""Session store protocol consumed by session middleware."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Callback = Callable[..., Any]


@runtime_checkable
class SessionStore(Protocol):
    """Capability set a session middleware expects from its store.

    Every operation may be awaited for its result or given a trailing
    node-style ``fn(error, result)`` completion callback.
    """

    async def get(self, session_id: str, fn: Callback | None = None) -> dict[str, Any] | None: ...

    async def set(self, session_id: str, session: dict[str, Any], fn: Callback | None = None) -> bool: ...

    async def touch(self, session_id: str, session: dict[str, Any], fn: Callback | None = None) -> bool: ...

    async def destroy(self, session_id: str, fn: Callback | None = None) -> bool: ...

    async def all(self, fn: Callback | None = None) -> list[dict[str, Any]]: ...

    async def clear(self, fn: Callback | None = None) -> bool: ...

    async def length(self, fn: Callback | None = None) -> int: ...
