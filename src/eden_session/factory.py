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
"""Build an EdenSessionStore from configuration."""

from __future__ import annotations

import importlib
from typing import Any

import structlog

from eden_session.adapters.memory import InMemoryEdenClient
from eden_session.core.config import Config
from eden_session.kernel.exceptions import ConfigurationException
from eden_session.logging.port import LoggingPort
from eden_session.logging.structlog_adapter import StructlogAdapter
from eden_session.options import SessionStoreOptions, StoreSettings
from eden_session.ports.outbound import EdenClient
from eden_session.store import EdenSessionStore

logger = structlog.get_logger("eden_session.factory")

_DEFAULT_REDIS_URL = "redis://localhost:6379/0"


def _redis_client(config: Config) -> EdenClient:
    try:
        aioredis = importlib.import_module("redis.asyncio")
    except ImportError as exc:
        raise ConfigurationException(
            "eden.session.backend is 'redis' but the redis package is not installed",
            code="SESSION_BACKEND_UNAVAILABLE",
        ) from exc

    from eden_session.adapters.redis import RedisEdenClient

    url = str(config.get("eden.session.redis.url", _DEFAULT_REDIS_URL))
    return RedisEdenClient(aioredis.from_url(url))


def create_eden_client(config: Config) -> EdenClient:
    """Create the backing-store client selected by ``eden.session.backend``."""
    backend = str(config.get("eden.session.backend", "memory")).lower()
    if backend == "memory":
        return InMemoryEdenClient()
    if backend == "redis":
        return _redis_client(config)
    raise ConfigurationException(
        f"Unknown eden.session.backend '{backend}'",
        code="SESSION_BACKEND_UNKNOWN",
        context={"backend": backend},
    )


def _enabled(value: Any) -> bool:
    return str(value).lower() in ("true", "1", "yes")


def create_session_store(
    config: Config,
    eden: EdenClient | None = None,
    ttl: Any = None,
    logging_port: LoggingPort | None = None,
) -> EdenSessionStore:
    """Create a session store from the ``eden.session`` section of *config*.

    *eden* overrides the configured backend. *ttl* (a number or a
    ``ttl(store, session, session_id)`` function) overrides
    ``eden.session.ttl``. Logging is configured from *config* first when
    *logging_port* is given or ``eden.logging.enabled`` is true, in which
    case a :class:`StructlogAdapter` is used.
    """
    if logging_port is None and _enabled(config.get("eden.logging.enabled", False)):
        logging_port = StructlogAdapter()
    if logging_port is not None:
        logging_port.configure(config)

    client = eden if eden is not None else create_eden_client(config)
    prefix = config.get("eden.session.prefix")
    store_ttl = ttl if ttl is not None else config.get("eden.session.ttl")

    options = SessionStoreOptions(
        eden=client,
        prefix=str(prefix) if prefix is not None else None,
        store=StoreSettings(ttl=store_ttl),
    )
    log = logging_port.get_logger("eden_session.factory") if logging_port is not None else logger
    log.info("session_store_created", client=type(client).__name__, prefix=options.prefix)
    return EdenSessionStore(options)
