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
"""Node-style completion callbacks for awaitable store operations."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from eden_session.kernel.exceptions import BackingStoreException

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def completes_callback(method: F) -> F:
    """Let an ``async`` store method also report through an optional ``fn`` argument.

    When ``fn`` is given, a result is delivered as ``fn(None, result)`` (or
    ``fn()`` when the result is ``None``) and a ``BackingStoreException`` as
    ``fn(error)``. Without ``fn`` the result is returned and errors raise.
    Other exceptions, configuration errors included, always propagate.
    """
    signature = inspect.signature(method)

    @functools.wraps(method)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        fn = signature.bind(*args, **kwargs).arguments.get("fn")
        try:
            result = await method(*args, **kwargs)
        except BackingStoreException as exc:
            if fn is None:
                raise
            fn(exc)
            return None

        if fn is not None:
            if result is None:
                fn()
            else:
                fn(None, result)
        return result

    return wrapper  # type: ignore[return-value]
