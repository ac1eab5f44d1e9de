"""Create, read, update and delete artists."""
import logging
from typing import List, Optional

from ..database.models import Artist, Artwork
from ..database.repository import Repository
from ..exceptions import ConcurrencyConflictError
from ..schemas import ArtistDto, ServiceResponse
from ..utils import has_text
from .mapping import artist_to_dto

logger = logging.getLogger(__name__)

def list_artists(repo: Repository) -> List[ArtistDto]:
    """All artists, without their artworks"""
    return [artist_to_dto(artist) for artist in repo.find_all(Artist)]

def get_artist(repo: Repository, artist_id: int) -> Optional[ArtistDto]:
    """One artist with its artworks and the exhibitions each artwork is in"""
    artist = repo.find_by_id(Artist, artist_id, include=("artworks.exhibitions",))
    if artist is None:
        return None
    return artist_to_dto(artist, with_artworks=True)

def create_artist(repo: Repository, artist_dto: ArtistDto) -> ServiceResponse:
    artist = Artist(
        first_name=artist_dto.first_name,
        last_name=artist_dto.last_name,
        bio=artist_dto.bio,
        email=artist_dto.email
    )
    repo.save(artist)
    logger.change(f"Created artist {artist.id}: {artist.full_name}")
    return ServiceResponse.created(artist.id, f"Artist {artist.full_name} created successfully.")

def update_artist(repo: Repository, artist_id: int, artist_dto: ArtistDto) -> ServiceResponse:
    """Merge the non-blank fields of ``artist_dto`` into the stored artist.

    A non-empty ``artwork_ids`` list replaces the artist's artwork set. Every id
    must resolve, and an artwork the artist currently owns cannot be dropped
    from the set since an artwork always needs an artist.
    """
    artist = repo.find_by_id(Artist, artist_id, include=("artworks",))
    if artist is None:
        return ServiceResponse.not_found("Artist not found.")

    artworks = None
    if artist_dto.artwork_ids:
        requested_ids = list(dict.fromkeys(artist_dto.artwork_ids))
        artworks = repo.find_many(Artwork, requested_ids)
        if len(artworks) != len(requested_ids):
            missing = sorted(set(requested_ids) - {a.id for a in artworks})
            return ServiceResponse.error(
                "Some artworks provided do not exist. Please check ArtworkIds.",
                f"Unknown artwork ids: {', '.join(map(str, missing))}"
            )

        orphaned = [a.id for a in artist.artworks if a.id not in requested_ids]
        if orphaned:
            return ServiceResponse.error(
                f"Artworks {', '.join(map(str, orphaned))} would be left without an artist. "
                "Assign them to another artist first."
            )

    if has_text(artist_dto.first_name):
        artist.first_name = artist_dto.first_name
    if has_text(artist_dto.last_name):
        artist.last_name = artist_dto.last_name
    if has_text(artist_dto.bio):
        artist.bio = artist_dto.bio
    if has_text(artist_dto.email):
        artist.email = artist_dto.email
    if artworks is not None:
        artist.artworks = artworks

    try:
        repo.save(artist)
    except ConcurrencyConflictError as e:
        return ServiceResponse.error("An error occurred updating the record.", e.message)

    logger.change(f"Updated artist {artist_id}")
    return ServiceResponse.updated("Artist updated successfully.")

def delete_artist(repo: Repository, artist_id: int) -> ServiceResponse:
    """Delete an artist together with every artwork it owns"""
    artist = repo.find_by_id(Artist, artist_id)
    if artist is None:
        return ServiceResponse.not_found("Artist cannot be deleted because it does not exist.")

    repo.remove(artist)
    logger.change(f"Deleted artist {artist_id} and its artworks")
    return ServiceResponse.deleted("Artist deleted successfully.")
