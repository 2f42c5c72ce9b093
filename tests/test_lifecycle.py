import asyncio

import pytest

from app.db.lifecycle import make_slug
from app.db.models.post import Post, estimate_read_time
from app.db.models.team import TeamMember


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello World!", "hello-world"),
        ("  Multiple   spaces  ", "multiple-spaces"),
        ("Ünïcödé Títle", "unicode-title"),
        ("C++ & Rust: a comparison", "c-rust-a-comparison"),
    ],
)
def test_make_slug(text, expected):
    assert make_slug(text) == expected
    assert make_slug(text) == make_slug(text)


def test_make_slug_falls_back_for_symbols_only():
    assert make_slug("!!!") == "untitled"
    assert make_slug("") == "untitled"


def test_estimate_read_time():
    assert estimate_read_time("") == 0
    assert estimate_read_time("word " * 200) == 1
    assert estimate_read_time("word " * 201) == 2


def run(session_factory, steps):
    async def scenario():
        async with session_factory() as session:
            return await steps(session)

    return asyncio.run(scenario())


def test_slug_tracks_source_field_only(session_factory):
    async def steps(session):
        post = Post(title="First Title", content="Body text", category="news")
        session.add(post)
        await session.commit()
        created = post.slug

        post.featured = True
        await session.commit()
        after_other_change = post.slug

        post.title = "Second Title"
        await session.commit()
        return created, after_other_change, post.slug

    created, after_other_change, renamed = run(session_factory, steps)
    assert created == "first-title"
    assert after_other_change == "first-title"
    assert renamed == "second-title"


def test_team_member_slug_uses_name(session_factory):
    async def steps(session):
        member = TeamMember(name="Ada Lovelace", position="Engineer", department="development", bio="Math")
        session.add(member)
        await session.commit()
        return member.slug

    assert run(session_factory, steps) == "ada-lovelace"


def test_colliding_slugs_get_numeric_suffix(session_factory):
    async def steps(session):
        titles = ["About Us", "About us!", "ABOUT US?"]
        posts = []
        for title in titles:
            post = Post(title=title, content="Body text", category="news")
            session.add(post)
            await session.commit()
            posts.append(post)
        slugs = [post.slug for post in posts]

        # Переименование в тот же slug оставляет запись на месте
        posts[0].title = "About  us"
        await session.commit()
        slugs.append(posts[0].slug)

        posts[1].title = "Careers"
        await session.commit()
        third = Post(title="About us.", content="Body text", category="news")
        session.add(third)
        await session.commit()
        slugs.append(third.slug)
        return slugs

    assert run(session_factory, steps) == ["about-us", "about-us-2", "about-us-3", "about-us", "about-us-2"]


def test_published_at_is_stamped_once(session_factory):
    async def steps(session):
        post = Post(title="Draft", content="Body", category="news")
        session.add(post)
        await session.commit()
        draft_stamp = post.published_at

        post.status = "published"
        await session.commit()
        first_stamp = post.published_at

        post.status = "draft"
        await session.commit()
        post.status = "published"
        await session.commit()
        return draft_stamp, first_stamp, post.published_at

    draft_stamp, first_stamp, second_stamp = run(session_factory, steps)
    assert draft_stamp is None
    assert first_stamp is not None
    assert second_stamp == first_stamp


def test_read_time_recomputed_when_content_changes(session_factory):
    async def steps(session):
        post = Post(title="Long read", content="word " * 10, category="news")
        session.add(post)
        await session.commit()
        initial = post.read_time

        post.content = "word " * 450
        await session.commit()
        return initial, post.read_time

    assert run(session_factory, steps) == (1, 3)
