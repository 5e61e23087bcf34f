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
"""StructlogAdapter: LoggingPort backed by structlog and the ``eden.logging`` section."""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from eden_session.core.config import Config

_RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": structlog.dev.ConsoleRenderer,
}


class StructlogAdapter:
    """Routes structlog through stdlib logging with session-aware events.

    Every event gets ``session_prefix`` and ``session_backend`` from the
    ``eden.session`` section so that several stores sharing one process can
    be told apart in the log stream.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}
        self._session_fields: dict[str, str] = {}

    @property
    def session_fields(self) -> dict[str, str]:
        return dict(self._session_fields)

    def configure(self, config: Config) -> None:
        """Read levels, format and session fields, then install structlog."""
        levels = config.get_section("eden.logging.level")
        self._root_level = str(levels.get("root", "INFO")).upper()
        self._module_levels = {name: str(level).upper() for name, level in levels.items() if name != "root"}

        self._format = str(config.get("eden.logging.format", "console")).lower()
        if self._format not in _RENDERERS:
            self._format = "console"

        prefix = config.get("eden.session.prefix")
        self._session_fields = {"session_backend": str(config.get("eden.session.backend", "memory")).lower()}
        if prefix:
            self._session_fields["session_prefix"] = str(prefix)

        self._install()
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str, **fields: Any) -> Any:
        """Return a structlog logger for *name* bound to *fields*."""
        return structlog.get_logger(name).bind(**fields)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def add_session_fields(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        """structlog processor filling in the configured session fields."""
        for key, value in self._session_fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    def _install(self) -> None:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                self.add_session_fields,
                structlog.processors.TimeStamper(fmt="iso"),
                _RENDERERS[self._format](),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
