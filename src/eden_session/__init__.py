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
"""eden-session: session store adapter over an eden key-value store.

Typical use::

    from eden_session import EdenSessionStore, SessionStoreOptions
    from eden_session.adapters.memory import InMemoryEdenClient

    store = EdenSessionStore(SessionStoreOptions(eden=InMemoryEdenClient(), prefix="app"))
    await store.set("abc", {"cookie": {"maxAge": 60000}})
"""

from eden_session.factory import create_eden_client, create_session_store
from eden_session.keys import session_key, wildcard_key
from eden_session.options import SessionStoreOptions, StoreSettings
from eden_session.ports.inbound import SessionStore
from eden_session.ports.outbound import EdenClient
from eden_session.store import EdenSessionStore
from eden_session.ttl import DEFAULT_TTL, resolve_ttl

__all__ = [
    "DEFAULT_TTL",
    "EdenClient",
    "EdenSessionStore",
    "SessionStore",
    "SessionStoreOptions",
    "StoreSettings",
    "create_eden_client",
    "create_session_store",
    "resolve_ttl",
    "session_key",
    "wildcard_key",
]
