from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ..relations import get_loaders, load_related

if TYPE_CHECKING:
    from ..types.blog_post import BlogPost
    from ..types.country import Country


async def resolve_country_blog_posts(country: Country, info: strawberry.Info) -> list[BlogPost]:
    """Resolve the blog posts about a country."""
    loaders = get_loaders(info)
    return await load_related(
        info, loaders.country_blog_posts, country.id, relation="Country.blogPosts"
    )
