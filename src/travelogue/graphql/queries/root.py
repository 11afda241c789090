"""
Root GraphQL query definitions
"""

import strawberry

from ..types.album import Album
from ..types.blog_post import BlogPost


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def all_albums(self, info: strawberry.Info) -> list[Album]:
        """Get every album."""
        from ..resolvers.album import resolve_all_albums

        return await resolve_all_albums(info)

    @strawberry.field
    async def album_by_id(self, info: strawberry.Info, id: str) -> Album | None:
        """Get an album by ID."""
        from ..resolvers.album import resolve_album_by_id

        return await resolve_album_by_id(info, id)

    @strawberry.field
    async def all_blog_posts(self, info: strawberry.Info) -> list[BlogPost]:
        """Get every blog post."""
        from ..resolvers.blog_post import resolve_all_blog_posts

        return await resolve_all_blog_posts(info)

    @strawberry.field
    async def blog_post_by_id(self, info: strawberry.Info, id: str) -> BlogPost | None:
        """Get a blog post by ID."""
        from ..resolvers.blog_post import resolve_blog_post_by_id

        return await resolve_blog_post_by_id(info, id)

    @strawberry.field
    async def blog_posts_published_after(
        self, info: strawberry.Info, date: str
    ) -> list[BlogPost]:
        """Get blog posts published strictly after an ISO-8601 date."""
        from ..resolvers.blog_post import resolve_blog_posts_published_after

        return await resolve_blog_posts_published_after(info, date)
