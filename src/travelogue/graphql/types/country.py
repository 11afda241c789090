"""
Country GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Countries
    from .blog_post import BlogPost


@strawberry.type
class Country:
    """Country type for GraphQL API, identified by its ISO numeric code."""

    id: str

    @classmethod
    def from_model(cls, country: "Countries") -> "Country":
        return cls(id=country.id)

    @strawberry.field
    async def blog_posts(
        self, info: strawberry.Info
    ) -> list[Annotated["BlogPost", strawberry.lazy(".blog_post")]]:
        """Get blog posts about this country."""
        from ..resolvers.country import resolve_country_blog_posts

        return await resolve_country_blog_posts(self, info)
