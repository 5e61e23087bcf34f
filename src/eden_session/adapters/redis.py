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
"""Redis-backed eden client."""

from __future__ import annotations

import json
import math
from typing import Any

import structlog

from eden_session.keys import WILDCARD

logger = structlog.get_logger("eden_session.adapters.redis")

_SCAN_COUNT = 100


class RedisEdenClient:
    """Eden client that delegates to a ``redis.asyncio.Redis``-like client.

    Values are JSON-serialized before storage. Pattern keys are expanded with
    ``SCAN`` so that large keyspaces are never walked with ``KEYS``.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @staticmethod
    def _decode_key(key: Any) -> str:
        return key.decode() if isinstance(key, bytes) else key

    def _loads(self, key: str, raw: Any) -> Any | None:
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("eden_value_undecodable", key=key)
            return None

    async def _scan(self, pattern: str) -> list[str]:
        keys: list[str] = []
        async for key in self._client.scan_iter(match=pattern, count=_SCAN_COUNT):
            keys.append(self._decode_key(key))
        return keys

    async def get(self, key: str) -> Any | None:
        """Return the decoded value at *key*, or a ``{key: value}`` dict for a pattern."""
        if WILDCARD in key:
            keys = await self._scan(key)
            if not keys:
                return {}
            raws = await self._client.mget(keys)
            records: dict[str, Any] = {}
            for k, raw in zip(keys, raws):
                if raw is None:
                    continue
                value = self._loads(k, raw)
                if value is not None:
                    records[k] = value
            return records

        raw = await self._client.get(key)
        if raw is None:
            return None
        return self._loads(key, raw)

    async def set(self, key: str, value: Any, ttl: int | float | str | None = None) -> None:
        """Serialize and store *value* with ``EX`` set to *ttl* rounded up to whole seconds.

        A ``ttl`` of zero or less removes the key.
        """
        raw = json.dumps(value).encode()
        if ttl is None:
            await self._client.set(key, raw)
            return

        seconds = math.ceil(float(ttl))
        if seconds <= 0:
            await self._client.delete(key)
            return
        await self._client.set(key, raw, ex=seconds)

    async def delete(self, key: str) -> None:
        """Remove *key*, or every key matching it when it is a pattern."""
        if WILDCARD in key:
            keys = await self._scan(key)
            if keys:
                await self._client.delete(*keys)
            return
        await self._client.delete(key)

    async def start(self) -> None:
        """Validate connectivity by pinging Redis."""
        await self._client.ping()

    async def stop(self) -> None:
        """Close the underlying Redis connection."""
        await self._client.aclose()
