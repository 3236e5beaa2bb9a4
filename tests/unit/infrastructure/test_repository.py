"""Repository tests: explicit status filter on reads, committed transitions, deletes."""

import pytest

from moderation.core.context import acting_as
from moderation.domain.status import Status, StatusFilter
from moderation.infrastructure.database.repository import ModeratedRepository
from tests.unit.moderated_models import FIXED_NOW, LenientPost, Post, reload, stored


@pytest.fixture
def repo():
    return ModeratedRepository(Post)


async def test_create_defaults_to_pending(session, repo):
    post = await repo.create(session, Post(title="draft"))

    assert post.id is not None
    assert post.is_pending()


async def test_get_by_id_applies_default_filter(session, repo):
    post = await repo.create(session, Post(title="p"))

    assert await repo.get_by_id(session, post.id) is None
    found = await repo.get_by_id(session, post.id, status_filter=StatusFilter.PENDING)
    assert found.id == post.id


async def test_list_all_with_criteria_and_filter(session, repo):
    await repo.create(session, Post(title="a", status=stored(Post, Status.APPROVED)))
    await repo.create(session, Post(title="b", status=stored(Post, Status.APPROVED)))
    await repo.create(session, Post(title="a", status=stored(Post, Status.REJECTED)))

    approved_a = await repo.list_all(session, Post.title == "a")
    any_a = await repo.list_all(session, Post.title == "a", status_filter=StatusFilter.ANY)

    assert len(approved_a) == 1
    assert len(any_a) == 2


async def test_approve_commits(session, session_factory, repo):
    post = await repo.create(session, Post(title="p"))

    with acting_as(17):
        rows = await repo.approve(session, post.id)

    assert rows == 1
    fresh = await reload(session_factory, Post, post.id)
    assert fresh.is_approved()
    assert fresh.moderated_at == FIXED_NOW
    assert fresh.moderated_by == "17"


async def test_reject_commits(session, session_factory, repo):
    post = await repo.create(session, Post(title="p", status=stored(Post, Status.APPROVED)))

    rows = await repo.reject(session, post.id)

    assert rows == 1
    assert (await reload(session_factory, Post, post.id)).is_rejected()


async def test_delete_rejected_record(session, session_factory, repo):
    post = await repo.create(session, Post(title="p", status=stored(Post, Status.REJECTED)))

    await repo.delete(session, post)

    assert await reload(session_factory, Post, post.id) is None


async def test_non_strict_repository_lists_pending(session):
    repo = ModeratedRepository(LenientPost)
    await repo.create(session, LenientPost(title="p"))
    await repo.create(session, LenientPost(title="r", status=stored(LenientPost, Status.REJECTED)))

    posts = await repo.list_all(session)

    assert [p.title for p in posts] == ["p"]
