from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ...database.connection import get_async_session
from ...dbmodels import BlogPosts
from ...logging import get_logger
from ..relations import get_loaders, load_related

if TYPE_CHECKING:
    from ..types.album import Album
    from ..types.blog_post import BlogPost
    from ..types.country import Country

logger = get_logger(__name__)


def parse_publication_cutoff(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time into a UTC datetime. Naive values are
    taken as UTC; values with an offset are converted.

    Raises:
        ValueError: If the value is not ISO-8601
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _with_relations():
    return (selectinload(BlogPosts.countries), selectinload(BlogPosts.albums))


def _to_blog_post(info: strawberry.Info, post: BlogPosts) -> BlogPost:
    """Convert a BlogPosts row and prime its eagerly loaded albums and countries."""
    from ..types.album import Album as AlbumType
    from ..types.blog_post import BlogPost as BlogPostType
    from ..types.country import Country as CountryType

    loaders = get_loaders(info)
    loaders.blog_post_albums.prime(post.id, [AlbumType.from_model(a) for a in post.albums])
    loaders.blog_post_countries.prime(
        post.id, [CountryType.from_model(c) for c in post.countries]
    )
    return BlogPostType.from_model(post)


# Query resolvers
async def resolve_all_blog_posts(info: strawberry.Info) -> list[BlogPost]:
    """Resolve every blog post, with countries and albums eagerly loaded."""
    async with get_async_session() as session:
        stmt = select(BlogPosts).options(*_with_relations())
        result = await session.execute(stmt)
        return [_to_blog_post(info, post) for post in result.scalars().all()]


async def resolve_blog_post_by_id(info: strawberry.Info, id: str) -> BlogPost | None:
    """Resolve a single blog post by its ID, or None when it does not exist."""
    async with get_async_session() as session:
        stmt = select(BlogPosts).where(BlogPosts.id == id).options(*_with_relations())
        result = await session.execute(stmt)
        post = result.scalar_one_or_none()

        if not post:
            logger.info("Blog post not found", blog_post_id=id)
            return None

        return _to_blog_post(info, post)


async def resolve_blog_posts_published_after(info: strawberry.Info, date: str) -> list[BlogPost]:
    """
    Resolve blog posts published strictly after the given date.

    A malformed date raises ValueError, which fails the request.
    """
    cutoff = parse_publication_cutoff(date)

    async with get_async_session() as session:
        stmt = (
            select(BlogPosts)
            .where(BlogPosts.publication_date > cutoff)
            .options(*_with_relations())
        )
        result = await session.execute(stmt)
        return [_to_blog_post(info, post) for post in result.scalars().all()]


# BlogPost field resolvers
async def resolve_blog_post_albums(post: BlogPost, info: strawberry.Info) -> list[Album]:
    """Resolve the albums attached to a blog post."""
    loaders = get_loaders(info)
    return await load_related(info, loaders.blog_post_albums, post.id, relation="BlogPost.albums")


async def resolve_blog_post_countries(post: BlogPost, info: strawberry.Info) -> list[Country]:
    """Resolve the countries a blog post covers."""
    loaders = get_loaders(info)
    return await load_related(
        info, loaders.blog_post_countries, post.id, relation="BlogPost.countries"
    )
