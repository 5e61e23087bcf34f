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
"""EdenSessionStore: session store adapter over an eden key-value client."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import structlog

from eden_session.completion import completes_callback
from eden_session.keys import session_key, wildcard_key
from eden_session.kernel.exceptions import BackingStoreException
from eden_session.kernel.lifecycle import Lifecycle
from eden_session.options import SessionStoreOptions
from eden_session.ports.inbound import Callback
from eden_session.ttl import resolve_ttl

logger = structlog.get_logger("eden_session.store")


@contextmanager
def _backing_store(log: Any, operation: str, key: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        log.warning("backing_store_failed", operation=operation, key=key, error=str(exc))
        raise BackingStoreException(f"Backing store {operation} failed for '{key}'", operation, key) from exc


class EdenSessionStore:
    """Session store that keeps every record in an eden key-value store.

    Records live under ``<prefix>.session.<id>``. Writes carry a TTL in
    seconds resolved from ``options.store.ttl`` or the session cookie's
    ``maxAge``. The adapter holds no state besides its options.

    Satisfies :class:`~eden_session.ports.inbound.SessionStore` structurally.
    """

    def __init__(self, options: SessionStoreOptions) -> None:
        self._options = options
        self._eden = options.eden
        self._log = logger.bind(prefix=options.prefix)

    @property
    def options(self) -> SessionStoreOptions:
        return self._options

    def _key(self, session_id: str) -> str:
        return session_key(self._options.prefix, session_id)

    def _wildcard(self) -> str:
        return wildcard_key(self._options.prefix)

    async def _collection(self) -> Mapping[str, Any]:
        key = self._wildcard()
        with _backing_store(self._log, "get", key):
            records = await self._eden.get(key)
        return records or {}

    @completes_callback
    async def get(self, session_id: str, fn: Callback | None = None) -> dict[str, Any] | None:
        """Fetch the session stored under *session_id*, or ``None``."""
        key = self._key(session_id)
        with _backing_store(self._log, "get", key):
            data = await self._eden.get(key)
        self._log.debug("session_get", key=key, found=bool(data))
        return data or None

    @completes_callback
    async def set(self, session_id: str, session: dict[str, Any], fn: Callback | None = None) -> bool:
        """Write *session* with its resolved TTL."""
        ttl = resolve_ttl(self._options.store, session, session_id)
        key = self._key(session_id)
        with _backing_store(self._log, "set", key):
            await self._eden.set(key, session, ttl)
        self._log.debug("session_set", key=key, ttl=ttl)
        return True

    @completes_callback
    async def touch(self, session_id: str, session: dict[str, Any], fn: Callback | None = None) -> bool:
        """Refresh the TTL of *session* by writing it again."""
        return await self.set(session_id, session)

    @completes_callback
    async def destroy(self, session_id: str, fn: Callback | None = None) -> bool:
        """Delete the session stored under *session_id*."""
        key = self._key(session_id)
        with _backing_store(self._log, "delete", key):
            await self._eden.delete(key)
        self._log.debug("session_destroy", key=key)
        return True

    @completes_callback
    async def all(self, fn: Callback | None = None) -> list[dict[str, Any]]:
        """Return every stored session record, without keys."""
        return list((await self._collection()).values())

    @completes_callback
    async def clear(self, fn: Callback | None = None) -> bool:
        """Delete every session under this store's prefix."""
        key = self._wildcard()
        with _backing_store(self._log, "delete", key):
            await self._eden.delete(key)
        self._log.debug("session_clear", key=key)
        return True

    @completes_callback
    async def length(self, fn: Callback | None = None) -> int:
        """Return the number of stored sessions."""
        return len(await self._collection())

    async def start(self) -> None:
        if isinstance(self._eden, Lifecycle):
            await self._eden.start()

    async def stop(self) -> None:
        if isinstance(self._eden, Lifecycle):
            await self._eden.stop()
