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
"""Backing-store key construction for session records."""

from __future__ import annotations

SESSION_NAMESPACE = "session"
WILDCARD = "*"


def _namespace(prefix: str | None) -> str:
    return f"{prefix}.{SESSION_NAMESPACE}." if prefix else f"{SESSION_NAMESPACE}."


def session_key(prefix: str | None, session_id: str) -> str:
    """Return ``<prefix>.session.<session_id>``, or ``session.<session_id>`` without a prefix.

    The session id is not escaped or validated.
    """
    return _namespace(prefix) + session_id


def wildcard_key(prefix: str | None) -> str:
    """Return the glob key addressing every session under *prefix*."""
    return _namespace(prefix) + WILDCARD
