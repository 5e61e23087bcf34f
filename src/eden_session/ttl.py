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
"""TTL resolution for session writes.

TTLs are always expressed in seconds. A configured ``store.ttl`` wins over the
session cookie; without one the cookie's ``maxAge`` (milliseconds) is floored
to whole seconds, falling back to one day.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from eden_session.kernel.exceptions import InvalidTtlException

DEFAULT_TTL = 86400

_NUMERIC_RE = re.compile(r"\d+(\.\d+)?")


def _option(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_RE.fullmatch(value.strip()) is not None


def resolve_ttl(store: Any, session: Mapping[str, Any], session_id: str) -> Any:
    """Return the TTL, in seconds, to write *session* with.

    ``store`` is the object (or mapping) carrying the ``ttl`` option. Numbers
    and numeric strings are returned verbatim; a callable is invoked as
    ``ttl(store, session, session_id)`` and its result returned verbatim.

    A numeric string is plain digits with an optional decimal part, ignoring
    surrounding whitespace (``"60"``, ``" 1.5 "``). ``""``, ``"1e3"``,
    ``"-5"`` and ``"inf"`` are not numeric. ``None`` and ``False`` mean
    unset.

    Raises:
        InvalidTtlException: ``ttl`` is set to anything else.
    """
    ttl = _option(store, "ttl")

    if _is_number(ttl) or _is_numeric_string(ttl):
        return ttl

    if callable(ttl):
        return ttl(store, session, session_id)

    if ttl is not None and ttl is not False:
        raise InvalidTtlException(context={"session_id": session_id, "ttl_type": type(ttl).__name__})

    max_age = _option(_option(session, "cookie"), "maxAge")
    if _is_number(max_age):
        return math.floor(max_age / 1000)
    return DEFAULT_TTL
