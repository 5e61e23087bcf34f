"""Tests for EdenSessionStore."""

from __future__ import annotations

from typing import Any

import pytest

from eden_session.adapters.memory import InMemoryEdenClient
from eden_session.kernel.exceptions import BackingStoreException, InvalidTtlException
from eden_session.options import SessionStoreOptions, StoreSettings
from eden_session.ports.inbound import SessionStore
from eden_session.store import EdenSessionStore


class RecordingEden:
    """Eden client stub that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.data: dict[str, Any] = {}

    async def get(self, key: str) -> Any | None:
        self.calls.append(("get", key))
        return self.data.get(key)

    async def set(self, key: str, value: Any, ttl: Any = None) -> None:
        self.calls.append(("set", key, value, ttl))
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        self.data.pop(key, None)


class FailingEden:
    async def get(self, key: str) -> Any | None:
        raise ConnectionError("eden unreachable")

    async def set(self, key: str, value: Any, ttl: Any = None) -> None:
        raise ConnectionError("eden unreachable")

    async def delete(self, key: str) -> None:
        raise ConnectionError("eden unreachable")


class Recorder:
    """Node-style callback that records its arguments."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)


def _store(eden: Any = None, prefix: str | None = None, ttl: Any = None) -> EdenSessionStore:
    return EdenSessionStore(
        SessionStoreOptions(eden=eden or InMemoryEdenClient(), prefix=prefix, store=StoreSettings(ttl=ttl))
    )


def _session(user: str = "alice", max_age: int | None = 60000) -> dict[str, Any]:
    cookie = {} if max_age is None else {"maxAge": max_age}
    return {"cookie": cookie, "user": user}


class TestProtocol:
    def test_implements_session_store(self):
        assert isinstance(_store(), SessionStore)

    def test_not_a_subclass(self):
        assert SessionStore not in EdenSessionStore.__mro__


class TestAwaitable:
    @pytest.mark.asyncio
    async def test_set_then_get_round_trip(self):
        store = _store()
        session = _session()
        assert await store.set("abc", session) is True
        assert await store.get("abc") == session

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        assert await _store().get("nope") is None

    @pytest.mark.asyncio
    async def test_get_falsy_record_is_not_found(self):
        eden = RecordingEden()
        eden.data["session.abc"] = {}
        assert await _store(eden).get("abc") is None

    @pytest.mark.asyncio
    async def test_destroy(self):
        store = _store()
        await store.set("abc", _session())
        assert await store.destroy("abc") is True
        assert await store.get("abc") is None

    @pytest.mark.asyncio
    async def test_all_returns_records_only(self):
        store = _store(prefix="app")
        await store.set("a", _session("alice"))
        await store.set("b", _session("bob"))
        records = await store.all()
        assert len(records) == 2
        assert sorted(r["user"] for r in records) == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_all_empty(self):
        assert await _store().all() == []

    @pytest.mark.asyncio
    async def test_length(self):
        store = _store()
        await store.set("a", _session())
        await store.set("b", _session())
        assert await store.length() == 2

    @pytest.mark.asyncio
    async def test_clear_then_length_is_zero(self):
        store = _store()
        await store.set("a", _session())
        await store.set("b", _session())
        assert await store.clear() is True
        assert await store.length() == 0

    @pytest.mark.asyncio
    async def test_prefixes_are_isolated(self):
        eden = InMemoryEdenClient()
        app, other = _store(eden, prefix="app"), _store(eden, prefix="other")
        await app.set("a", _session())
        await other.set("a", _session("bob"))
        await app.clear()
        assert await app.length() == 0
        assert await other.get("a") == _session("bob")


class TestKeysAndTtl:
    @pytest.mark.asyncio
    async def test_get_set_destroy_share_key(self):
        eden = RecordingEden()
        store = _store(eden, prefix="app")
        await store.set("abc", _session())
        await store.get("abc")
        await store.destroy("abc")
        keys = {call[1] for call in eden.calls}
        assert keys == {"app.session.abc"}

    @pytest.mark.asyncio
    async def test_unprefixed_key(self):
        eden = RecordingEden()
        await _store(eden).set("abc", _session())
        assert eden.calls[0][1] == "session.abc"

    @pytest.mark.asyncio
    async def test_wildcard_operations(self):
        eden = RecordingEden()
        store = _store(eden, prefix="app")
        await store.all()
        await store.length()
        await store.clear()
        assert eden.calls == [
            ("get", "app.session.*"),
            ("get", "app.session.*"),
            ("delete", "app.session.*"),
        ]

    @pytest.mark.asyncio
    async def test_set_passes_ttl_from_cookie(self):
        eden = RecordingEden()
        await _store(eden).set("abc", _session(max_age=30000))
        assert eden.calls == [("set", "session.abc", _session(max_age=30000), 30)]

    @pytest.mark.asyncio
    async def test_set_passes_default_ttl(self):
        eden = RecordingEden()
        await _store(eden).set("abc", _session(max_age=None))
        assert eden.calls[0][3] == 86400

    @pytest.mark.asyncio
    async def test_set_passes_configured_ttl(self):
        eden = RecordingEden()
        await _store(eden, ttl=120).set("abc", _session())
        assert eden.calls[0][3] == 120

    @pytest.mark.asyncio
    async def test_ttl_function(self):
        eden = RecordingEden()
        await _store(eden, ttl=lambda store, session, sid: 5).set("abc", _session())
        assert eden.calls[0][3] == 5

    @pytest.mark.asyncio
    async def test_touch_matches_set(self):
        set_eden, touch_eden = RecordingEden(), RecordingEden()
        await _store(set_eden, prefix="p").set("abc", _session())
        await _store(touch_eden, prefix="p").touch("abc", _session())
        assert set_eden.calls == touch_eden.calls

    @pytest.mark.asyncio
    async def test_invalid_ttl_aborts_before_write(self):
        eden = RecordingEden()
        with pytest.raises(InvalidTtlException):
            await _store(eden, ttl={}).set("abc", _session())
        assert eden.calls == []

    @pytest.mark.asyncio
    async def test_read_operations_do_not_resolve_ttl(self):
        store = _store(RecordingEden(), ttl={})
        assert await store.get("abc") is None
        assert await store.destroy("abc") is True
        assert await store.all() == []
        assert await store.length() == 0
        assert await store.clear() is True


class TestCallbacks:
    @pytest.mark.asyncio
    async def test_get_found(self):
        store = _store()
        await store.set("abc", _session())
        fn = Recorder()
        await store.get("abc", fn)
        assert fn.calls == [(None, _session())]

    @pytest.mark.asyncio
    async def test_get_not_found_calls_with_no_arguments(self):
        fn = Recorder()
        await _store().get("nope", fn)
        assert fn.calls == [()]

    @pytest.mark.asyncio
    async def test_get_falsy_record_calls_with_no_arguments(self):
        eden = RecordingEden()
        eden.data["session.abc"] = {}
        fn = Recorder()
        await _store(eden).get("abc", fn)
        assert fn.calls == [()]

    @pytest.mark.asyncio
    async def test_write_operations_report_true(self):
        store = _store()
        fn = Recorder()
        await store.set("abc", _session(), fn)
        await store.touch("abc", _session(), fn)
        await store.destroy("abc", fn)
        await store.clear(fn)
        assert fn.calls == [(None, True)] * 4

    @pytest.mark.asyncio
    async def test_all_and_length(self):
        store = _store()
        await store.set("abc", _session())
        fn = Recorder()
        await store.all(fn)
        await store.length(fn)
        assert fn.calls == [(None, [_session()]), (None, 1)]

    @pytest.mark.asyncio
    async def test_keyword_callback(self):
        fn = Recorder()
        await _store().length(fn=fn)
        assert fn.calls == [(None, 0)]

    @pytest.mark.asyncio
    async def test_invalid_ttl_raises_instead_of_calling_back(self):
        fn = Recorder()
        with pytest.raises(InvalidTtlException):
            await _store(ttl=True).set("abc", _session(), fn)
        assert fn.calls == []


class TestBackingStoreFailures:
    @pytest.mark.asyncio
    async def test_awaitable_raises(self):
        with pytest.raises(BackingStoreException) as exc_info:
            await _store(FailingEden(), prefix="app").get("abc")
        exc = exc_info.value
        assert exc.operation == "get"
        assert exc.key == "app.session.abc"
        assert exc.context == {"operation": "get", "key": "app.session.abc"}
        assert isinstance(exc.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_callback_receives_error(self):
        store = _store(FailingEden())
        fn = Recorder()
        assert await store.set("abc", _session(), fn) is None
        assert len(fn.calls) == 1
        (error,) = fn.calls[0]
        assert isinstance(error, BackingStoreException)
        assert error.operation == "set"

    @pytest.mark.asyncio
    async def test_every_operation_reports_failure(self):
        store = _store(FailingEden())
        fn = Recorder()
        await store.get("a", fn)
        await store.set("a", _session(), fn)
        await store.touch("a", _session(), fn)
        await store.destroy("a", fn)
        await store.all(fn)
        await store.clear(fn)
        await store.length(fn)
        assert len(fn.calls) == 7
        assert all(isinstance(call[0], BackingStoreException) for call in fn.calls)


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_forwards_to_lifecycle_client(self):
        class LifecycleEden(RecordingEden):
            async def start(self) -> None:
                self.calls.append(("start",))

            async def stop(self) -> None:
                self.calls.append(("stop",))

        eden = LifecycleEden()
        store = _store(eden)
        await store.start()
        await store.stop()
        assert eden.calls == [("start",), ("stop",)]

    @pytest.mark.asyncio
    async def test_plain_client_is_ignored(self):
        store = _store(RecordingEden())
        await store.start()
        await store.stop()
