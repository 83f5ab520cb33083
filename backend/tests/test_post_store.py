"""
Inkpost Backend — Post Store Gateway Tests
============================================

What:  Tests PostStore against a real (SQLite) database.
Why:   The gateway is the only code that talks to the store; mocks would
       not catch mapping or predicate mistakes.
"""

import uuid

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from app.database import async_session_factory
from app.models.post import Post
from app.services.post_service import build_search_predicate
from app.services.post_store import PostStore, parse_post_id


async def _seed(store: PostStore):
    first = await store.create(
        title="My First Blog Post", content="Hello world", category="Technology", tags=["Tech"]
    )
    second = await store.create(
        title="Sourdough", content="Flour, water, salt", category="Cooking", tags=[]
    )
    return first, second


class TestParsePostId:

    def test_accepts_uuid_string(self):
        value = uuid.uuid4()
        assert parse_post_id(str(value)) == value
        assert parse_post_id(value) is value

    def test_rejects_malformed(self):
        with pytest.raises(ValueError, match='Cast to UUID failed for value "not-an-id"'):
            parse_post_id("not-an-id")


class TestPostStore:

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, db_session):
        store = PostStore(db_session)

        post = await store.create(
            title="My First Blog Post", content="Hello world", category="Technology", tags=["Tech", "Intro"]
        )

        assert isinstance(post.id, uuid.UUID)
        assert post.created_at is not None
        assert post.updated_at is not None
        assert post.tags == ["Tech", "Intro"]

    @pytest.mark.asyncio
    async def test_find_by_id(self, db_session):
        store = PostStore(db_session)
        first, _ = await _seed(store)

        found = await store.find_by_id(str(first.id))

        assert found is not None
        assert found.title == "My First Blog Post"
        assert await store.find_by_id(str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_find_by_malformed_id_raises(self, db_session):
        with pytest.raises(ValueError):
            await PostStore(db_session).find_by_id("123")

    @pytest.mark.asyncio
    async def test_find_many_without_predicate(self, db_session):
        store = PostStore(db_session)
        await _seed(store)

        assert len(await store.find_many()) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["hello", "FIRST", "techno", "o w"])
    async def test_find_many_matches_any_field(self, db_session, term):
        """Case-insensitive substring of title, content or category matches."""
        store = PostStore(db_session)
        first, _ = await _seed(store)

        matches = await store.find_many(build_search_predicate(term))

        assert [p.id for p in matches] == [first.id]

    @pytest.mark.asyncio
    async def test_find_many_term_across_posts(self, db_session):
        store = PostStore(db_session)
        await _seed(store)

        # "o" occurs in both posts
        assert len(await store.find_many(build_search_predicate("o"))) == 2
        assert await store.find_many(build_search_predicate("nomatch")) == []

    @pytest.mark.asyncio
    async def test_find_many_wildcards_are_literal(self, db_session):
        store = PostStore(db_session)
        await _seed(store)
        discount = await store.create(title="50% off", content="sale", category="Deals", tags=[])

        assert [p.id for p in await store.find_many(build_search_predicate("%"))] == [discount.id]
        assert await store.find_many(build_search_predicate("_")) == []

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, db_session):
        store = PostStore(db_session)
        first, _ = await _seed(store)
        created_at = first.created_at

        updated = await store.update_by_id(
            str(first.id), title="Updated", content="Hello world", category="Technology", tags=[]
        )

        assert updated.id == first.id
        assert updated.title == "Updated"
        assert updated.tags == []
        assert updated.created_at == created_at
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_none(self, db_session):
        store = PostStore(db_session)
        await _seed(store)

        result = await store.update_by_id(
            str(uuid.uuid4()), title="x", content="y", category="z", tags=[]
        )

        assert result is None
        assert {p.title for p in await store.find_many()} == {"My First Blog Post", "Sourdough"}

    @pytest.mark.asyncio
    async def test_delete_once(self, db_session):
        store = PostStore(db_session)
        first, second = await _seed(store)

        deleted = await store.delete_by_id(str(first.id))

        assert deleted == first.id
        assert await store.delete_by_id(str(first.id)) is None
        assert [p.id for p in await store.find_many()] == [second.id]

    @pytest.mark.asyncio
    async def test_concurrent_deletes_remove_once(self, db_session):
        """Two sessions deleting the same id: exactly one sees the row."""
        first, _ = await _seed(PostStore(db_session))

        async with async_session_factory() as other_session:
            results = [
                await PostStore(db_session).delete_by_id(str(first.id)),
                await PostStore(other_session).delete_by_id(str(first.id)),
            ]

        assert results.count(first.id) == 1
        assert results.count(None) == 1

    @pytest.mark.asyncio
    async def test_update_is_visible_to_other_sessions(self, db_session):
        first, _ = await _seed(PostStore(db_session))
        await PostStore(db_session).update_by_id(
            str(first.id), title="Updated", content="New body", category="Misc", tags=["a", "b"]
        )

        async with async_session_factory() as other_session:
            stored = await PostStore(other_session).find_by_id(str(first.id))

        assert (stored.title, stored.content, stored.category, stored.tags) == (
            "Updated", "New body", "Misc", ["a", "b"]
        )

    @pytest.mark.asyncio
    async def test_long_title_and_category(self, db_session):
        store = PostStore(db_session)
        title, category = "t" * 300, "c" * 300

        post = await store.create(title=title, content="body", category=category, tags=[])
        updated = await store.update_by_id(
            str(post.id), title=title + "!", content="body", category=category, tags=[]
        )

        assert updated.title == title + "!"
        assert updated.category == category


class TestPostTable:

    def test_text_columns_are_unbounded_on_postgresql(self):
        ddl = str(CreateTable(Post.__table__).compile(dialect=postgresql.dialect()))

        assert "VARCHAR" not in ddl
        for column in ("title", "content", "category"):
            assert f"{column} TEXT NOT NULL" in ddl
