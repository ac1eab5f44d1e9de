"""Conversions from stored entities to transfer objects.

Only relationships the caller asked to include are read, so each function takes
flags for the nested collections it should fill.
"""
from typing import Optional

from ..database.models import Artist, Artwork, Exhibition
from ..schemas import ArtistDto, ArtworkDto, ExhibitionDto

UNKNOWN_ARTIST = "Unknown Artist"

def artist_name(artist: Optional[Artist]) -> str:
    if artist is None:
        return UNKNOWN_ARTIST
    return artist.full_name

def artwork_to_dto(artwork: Artwork, with_artist: bool = True, with_exhibitions: bool = False) -> ArtworkDto:
    return ArtworkDto(
        id=artwork.id,
        title=artwork.title,
        description=artwork.description,
        creation_year=artwork.creation_year,
        price=artwork.price,
        artist_id=artwork.artist_id,
        artist_name=artist_name(artwork.artist) if with_artist else None,
        exhibitions=[exhibition_to_dto(e) for e in artwork.exhibitions] if with_exhibitions else []
    )

def exhibition_to_dto(exhibition: Exhibition, with_artworks: bool = False) -> ExhibitionDto:
    return ExhibitionDto(
        id=exhibition.id,
        name=exhibition.name,
        location=exhibition.location,
        date=exhibition.date,
        artworks=[artwork_to_dto(a) for a in exhibition.artworks] if with_artworks else []
    )

def artist_to_dto(artist: Artist, with_artworks: bool = False) -> ArtistDto:
    dto = ArtistDto(
        id=artist.id,
        first_name=artist.first_name,
        last_name=artist.last_name,
        bio=artist.bio,
        email=artist.email
    )
    if with_artworks:
        dto.artworks = [artwork_to_dto(a, with_exhibitions=True) for a in artist.artworks]
        dto.artwork_ids = [a.id for a in artist.artworks]
    return dto
