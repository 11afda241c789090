"""
BlogPost GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import BlogPosts
    from .album import Album
    from .country import Country


@strawberry.type
class BlogPost:
    """BlogPost type for GraphQL API."""

    id: str
    title: str
    content: str
    publication_date: datetime = strawberry.field(name="publication_date")
    start_date: datetime = strawberry.field(name="start_date")
    end_date: datetime = strawberry.field(name="end_date")

    @classmethod
    def from_model(cls, post: "BlogPosts") -> "BlogPost":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            publication_date=post.publication_date,
            start_date=post.start_date,
            end_date=post.end_date,
        )

    @strawberry.field
    async def albums(
        self, info: strawberry.Info
    ) -> list[Annotated["Album", strawberry.lazy(".album")]]:
        """Get the albums attached to this blog post."""
        from ..resolvers.blog_post import resolve_blog_post_albums

        return await resolve_blog_post_albums(self, info)

    @strawberry.field
    async def countries(
        self, info: strawberry.Info
    ) -> list[Annotated["Country", strawberry.lazy(".country")]]:
        """Get the countries this blog post covers."""
        from ..resolvers.blog_post import resolve_blog_post_countries

        return await resolve_blog_post_countries(self, info)
