"""
Scatter-Brain Backend — Thought Service Unit Tests
===================================================

What:  Tests for ThoughtService business logic (create, list, get, update).
How:   Uses a real InMemoryThoughtStore; request bodies are AsyncMocks so we
       can see whether the service ever read them.

What we test:
    ✅ Create assigns id/time and maps Thought → Content
    ✅ Create and update reject undecodable bodies, deep nesting included
    ✅ Get on an unknown id raises NotFoundError
    ✅ Update checks existence before reading the body
    ✅ Update rejects non-canonical ID and CreatedTime values
    ✅ Update stores client-supplied ID / CreatedTime as sent
"""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from scatterbrain.exceptions import BadRequestError, NotFoundError
from scatterbrain.identifiers import NIL_ID, new_id


def json_body(**fields):
    """A request.body stand-in returning `fields` encoded as JSON."""
    return AsyncMock(return_value=json.dumps(fields).encode())


class TestThoughtServiceCreate:

    @pytest.mark.asyncio
    async def test_create_maps_thought_to_content(self, service, store):
        thought = await service.create_thought(json_body(Title="t1", Thought="c1"))

        assert thought.title == "t1"
        assert thought.content == "c1"
        assert thought.id != NIL_ID
        assert thought.created_time.tzinfo is not None
        assert store.get(thought.id) == thought

    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self, service):
        first = await service.create_thought(json_body(Title="a", Thought="a"))
        second = await service.create_thought(json_body(Title="a", Thought="a"))
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_created_time_is_now(self, service):
        before = datetime.now(timezone.utc)
        thought = await service.create_thought(json_body())
        after = datetime.now(timezone.utc)
        assert before <= thought.created_time <= after

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw",
        [b"{not json", b"", b'"t1"', b'{"Title": 5}', b"[" * 100000 + b"]" * 100000],
        ids=["syntax", "empty", "string", "wrong-type", "deeply-nested"],
    )
    async def test_create_rejects_bad_body(self, service, store, raw):
        with pytest.raises(BadRequestError) as info:
            await service.create_thought(AsyncMock(return_value=raw))

        assert info.value.message == "unable to parse the resource"
        assert info.value.context["errors"]
        assert len(store) == 0


class TestThoughtServiceRead:

    @pytest.mark.asyncio
    async def test_list_empty(self, service):
        assert await service.list_thoughts() == []

    @pytest.mark.asyncio
    async def test_list_after_creates(self, service):
        for i in range(3):
            await service.create_thought(json_body(Title=str(i), Thought="x"))
        thoughts = await service.list_thoughts()
        assert sorted(t.title for t in thoughts) == ["0", "1", "2"]

    @pytest.mark.asyncio
    async def test_get_found(self, service):
        created = await service.create_thought(json_body(Title="t1", Thought="c1"))
        assert await service.get_thought(created.id) == created

    @pytest.mark.asyncio
    async def test_get_not_found(self, service):
        missing = new_id()
        with pytest.raises(NotFoundError) as info:
            await service.get_thought(missing)
        assert str(missing) in info.value.message


class TestThoughtServiceUpdate:

    @pytest.mark.asyncio
    async def test_update_replaces_title_and_content(self, service, store):
        created = await service.create_thought(json_body(Title="t1", Thought="c1"))
        body = json.dumps({
            "ID": str(created.id),
            "CreatedTime": created.created_time.isoformat(),
            "Title": "t2",
            "Content": "c2",
        }).encode()

        await service.update_thought(created.id, AsyncMock(return_value=body))

        stored = store.get(created.id)
        assert stored.title == "t2"
        assert stored.content == "c2"
        assert stored.created_time == created.created_time

    @pytest.mark.asyncio
    async def test_update_unknown_id_never_reads_body(self, service, store):
        read_body = AsyncMock(return_value=b"{not json")

        with pytest.raises(NotFoundError):
            await service.update_thought(new_id(), read_body)

        read_body.assert_not_awaited()
        assert len(store) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            b"{not json",
            b"",
            b"[]",
            b"null",
            b'{"Title": 5}',
            b'{"ID": "nope"}',
            b'{"ID": "6ba7b8109dad11d180b400c04fd430c8"}',
            b'{"ID": "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}"}',
            b'{"ID": "urn:uuid:6ba7b810-9dad-11d1-80b4-00c04fd430c8"}',
            b'{"CreatedTime": 0}',
            b'{"CreatedTime": "2032-04-23T10:20:30"}',
            b'{"CreatedTime": "2032-04-23"}',
            b"[" * 100000 + b"]" * 100000,
        ],
        ids=[
            "syntax", "empty", "array", "null", "wrong-type", "bad-id",
            "bare-hex-id", "braced-id", "urn-id",
            "epoch-time", "naive-time", "bare-date", "deeply-nested",
        ],
    )
    async def test_update_rejects_bad_body(self, service, store, body):
        created = await service.create_thought(json_body(Title="t1", Thought="c1"))

        with pytest.raises(BadRequestError) as info:
            await service.update_thought(created.id, AsyncMock(return_value=body))

        assert info.value.message == "unable to parse the resource"
        assert store.get(created.id) == created

    @pytest.mark.asyncio
    async def test_update_stores_client_supplied_fields(self, service, store):
        """ID and CreatedTime in the body are stored as sent, under the path id."""
        created = await service.create_thought(json_body(Title="t1", Thought="c1"))
        other_id = new_id()
        body = json.dumps({
            "ID": str(other_id),
            "CreatedTime": "2001-02-03T04:05:06Z",
            "Title": "t2",
            "Content": "c2",
        }).encode()

        await service.update_thought(created.id, AsyncMock(return_value=body))

        stored = store.get(created.id)
        assert stored.id == other_id
        assert stored.created_time == datetime(2001, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
        assert store.get(other_id) is None

    @pytest.mark.asyncio
    async def test_update_partial_body_zeroes_missing_fields(self, service, store):
        """Update is whole-record: omitted fields take their zero values."""
        created = await service.create_thought(json_body(Title="t1", Thought="c1"))

        await service.update_thought(created.id, AsyncMock(return_value=b'{"Title": "t2"}'))

        stored = store.get(created.id)
        assert stored.title == "t2"
        assert stored.content == ""
        assert stored.id == NIL_ID
