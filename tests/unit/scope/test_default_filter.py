"""Scope tests: default status filter on plain ORM selects."""

from sqlalchemy import select

from moderation import INCLUDE_ALL_STATUSES, STRICT_MODERATION
from moderation.domain.status import Status
from tests.unit.moderated_models import Article, LenientPost, Post, create_records, stored


async def _fetch(session, stmt):
    result = await session.execute(stmt)
    return result.scalars().all()


async def test_strict_default_listing_returns_only_approved(session):
    await create_records(session, Post, 5, status=stored(Post, Status.APPROVED))
    await create_records(session, Post, 5, status=stored(Post, Status.PENDING))

    posts = await _fetch(session, select(Post))

    assert len(posts) == 5
    assert all(p.is_approved() for p in posts)


async def test_non_strict_default_listing_returns_approved_and_pending(session):
    await create_records(session, LenientPost, 5, status=stored(LenientPost, Status.APPROVED))
    await create_records(session, LenientPost, 5, status=stored(LenientPost, Status.PENDING))

    posts = await _fetch(session, select(LenientPost))

    assert len(posts) == 10


async def test_non_strict_default_listing_excludes_rejected(session):
    await create_records(session, LenientPost, 4, status=stored(LenientPost, Status.PENDING))
    await create_records(session, LenientPost, 2, status=stored(LenientPost, Status.APPROVED))
    await create_records(session, LenientPost, 3, status=stored(LenientPost, Status.REJECTED))

    posts = await _fetch(session, select(LenientPost))

    assert len(posts) == 6
    assert not any(p.is_rejected() for p in posts)


async def test_non_strict_queries_pending_by_default(session):
    posts = await create_records(
        session, LenientPost, 5, status=stored(LenientPost, Status.PENDING)
    )
    ids = [p.id for p in posts]

    returned = await _fetch(
        session, select(LenientPost).where(LenientPost.id.in_(ids))
    )

    assert len(returned) == 5
    assert all(p.is_pending() for p in returned)


async def test_include_all_statuses_option_bypasses_filter(session):
    await create_records(session, Post, 2, status=stored(Post, Status.APPROVED))
    await create_records(session, Post, 3, status=stored(Post, Status.REJECTED))

    stmt = select(Post).execution_options(**{INCLUDE_ALL_STATUSES: True})
    posts = await _fetch(session, stmt)

    assert len(posts) == 5


async def test_strict_option_overrides_model_mode_per_statement(session):
    await create_records(session, Post, 2, status=stored(Post, Status.APPROVED))
    await create_records(session, Post, 3, status=stored(Post, Status.PENDING))
    await create_records(session, LenientPost, 1, status=stored(LenientPost, Status.PENDING))

    relaxed = await _fetch(
        session, select(Post).execution_options(**{STRICT_MODERATION: False})
    )
    tightened = await _fetch(
        session, select(LenientPost).execution_options(**{STRICT_MODERATION: True})
    )

    assert len(relaxed) == 5
    assert tightened == []


async def test_refresh_is_not_filtered(session):
    (post,) = await create_records(session, Post, 1, status=stored(Post, Status.REJECTED))

    await session.refresh(post)

    assert post.is_rejected()


async def test_symbolic_statuses_on_custom_column(session):
    await create_records(session, Article, 2, state="published")
    await create_records(session, Article, 3, state="draft")
    await create_records(session, Article, 1, state="spam")

    articles = await _fetch(session, select(Article))

    assert len(articles) == 2
    assert all(a.state == "published" for a in articles)
