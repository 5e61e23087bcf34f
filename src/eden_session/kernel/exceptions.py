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
"""Exception hierarchy for eden-session.

All package exceptions inherit from EdenSessionException so callers can catch
every adapter error with a single handler.

Categories:
- ConfigurationException: deployment and configuration bugs, always fatal
- InfrastructureException: backing-store and network failures
"""

from __future__ import annotations


class EdenSessionException(Exception):
    """Base exception for all eden-session errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_TTL_INVALID").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(EdenSessionException):
    """The adapter was configured with unsupported values."""


class InvalidTtlException(ConfigurationException, TypeError):
    """``store.ttl`` is set to something that is neither a number nor a function."""

    def __init__(self, message: str = "`store.ttl` must be a number or function.", context: dict | None = None) -> None:
        super().__init__(message, code="SESSION_TTL_INVALID", context=context)


class InfrastructureException(EdenSessionException):
    """Infrastructure failures: backing store, network."""


class BackingStoreException(InfrastructureException):
    """A call to the backing key-value store failed."""

    def __init__(self, message: str, operation: str, key: str) -> None:
        super().__init__(message, code="SESSION_BACKING_STORE", context={"operation": operation, "key": key})
        self.operation = operation
        self.key = key
