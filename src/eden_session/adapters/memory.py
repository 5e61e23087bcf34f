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
"""In-memory eden client with TTL expiry and glob wildcards."""

from __future__ import annotations

import asyncio
import fnmatch
import time
from typing import Any

from eden_session.keys import WILDCARD


class InMemoryEdenClient:
    """In-memory backing store with TTL support and asyncio.Lock for safety.

    Suitable for development, testing, and single-process applications.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Any, float | None]] = {}
        self._lock = asyncio.Lock()

    def _expired(self, key: str, now: float) -> bool:
        _, expires_at = self._store[key]
        if expires_at is not None and now >= expires_at:
            del self._store[key]
            return True
        return False

    def _matching(self, pattern: str) -> list[str]:
        now = time.monotonic()
        keys = [key for key in self._store if fnmatch.fnmatchcase(key, pattern)]
        return [key for key in keys if not self._expired(key, now)]

    async def get(self, key: str) -> Any | None:
        """Return the value at *key*, or a ``{key: value}`` dict when *key* is a pattern."""
        async with self._lock:
            if WILDCARD in key:
                return {k: self._store[k][0] for k in self._matching(key)}

            if key not in self._store or self._expired(key, time.monotonic()):
                return None
            return self._store[key][0]

    async def set(self, key: str, value: Any, ttl: int | float | str | None = None) -> None:
        """Store a value; ``ttl`` is in seconds and ``<= 0`` expires it at once."""
        async with self._lock:
            if ttl is None:
                self._store[key] = (value, None)
                return

            seconds = float(ttl)
            if seconds <= 0:
                self._store.pop(key, None)
                return
            self._store[key] = (value, time.monotonic() + seconds)

    async def delete(self, key: str) -> None:
        """Remove *key*, or every key matching it when it is a pattern."""
        async with self._lock:
            if WILDCARD in key:
                for k in self._matching(key):
                    del self._store[k]
            else:
                self._store.pop(key, None)
