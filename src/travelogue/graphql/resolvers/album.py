from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ...database.connection import get_async_session
from ...dbmodels import Albums
from ...logging import get_logger
from ..relations import get_loaders, load_related

if TYPE_CHECKING:
    from ..types.album import Album, Picture

logger = get_logger(__name__)


def _to_album(info: strawberry.Info, album: Albums) -> Album:
    """Convert an Albums row and prime its eagerly loaded pictures."""
    from ..types.album import Album as AlbumType
    from ..types.album import Picture as PictureType

    get_loaders(info).album_pictures.prime(
        album.id, [PictureType.from_model(p) for p in album.pictures]
    )
    return AlbumType.from_model(album)


# Query resolvers
async def resolve_all_albums(info: strawberry.Info) -> list[Album]:
    """Resolve every album, with pictures eagerly loaded."""
    async with get_async_session() as session:
        stmt = select(Albums).options(selectinload(Albums.pictures))
        result = await session.execute(stmt)
        return [_to_album(info, album) for album in result.scalars().all()]


async def resolve_album_by_id(info: strawberry.Info, id: str) -> Album | None:
    """Resolve a single album by its ID, or None when it does not exist."""
    async with get_async_session() as session:
        stmt = select(Albums).where(Albums.id == id).options(selectinload(Albums.pictures))
        result = await session.execute(stmt)
        album = result.scalar_one_or_none()

        if not album:
            logger.info("Album not found", album_id=id)
            return None

        return _to_album(info, album)


# Album field resolvers
async def resolve_album_pictures(album: Album, info: strawberry.Info) -> list[Picture]:
    """Resolve the pictures of an album."""
    loaders = get_loaders(info)
    return await load_related(info, loaders.album_pictures, album.id, relation="Album.pictures")
