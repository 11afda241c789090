"""
Album and Picture GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Albums, Pictures


@strawberry.type
class Picture:
    """Picture type for GraphQL API."""

    id: str
    url: str
    album_id: str

    @classmethod
    def from_model(cls, picture: "Pictures") -> "Picture":
        return cls(id=picture.id, url=picture.url, album_id=picture.album_id)


@strawberry.type
class Album:
    """Album type for GraphQL API."""

    id: str
    title: str
    start_date: datetime = strawberry.field(name="start_date")
    end_date: datetime = strawberry.field(name="end_date")

    @classmethod
    def from_model(cls, album: "Albums") -> "Album":
        return cls(
            id=album.id,
            title=album.title,
            start_date=album.start_date,
            end_date=album.end_date,
        )

    @strawberry.field
    async def pictures(self, info: strawberry.Info) -> list[Picture]:
        """Get the pictures in this album."""
        from ..resolvers.album import resolve_album_pictures

        return await resolve_album_pictures(self, info)
