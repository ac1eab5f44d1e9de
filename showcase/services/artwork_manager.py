"""Create, read, update and delete artworks.

Every artwork belongs to exactly one artist, checked explicitly before each
write that sets it.
"""
import logging
from typing import List, Optional

from ..database.models import Artist, Artwork
from ..database.repository import Repository
from ..exceptions import ConcurrencyConflictError
from ..schemas import ArtworkDto, ServiceResponse
from ..utils import has_number, has_text
from .mapping import artwork_to_dto

logger = logging.getLogger(__name__)

def list_artworks(repo: Repository) -> List[ArtworkDto]:
    """All artworks with their artist's name; exhibitions are not loaded"""
    return [artwork_to_dto(artwork) for artwork in repo.find_all(Artwork, include=("artist",))]

def list_artworks_for_artist(repo: Repository, artist_id: int) -> Optional[List[ArtworkDto]]:
    """The artworks one artist owns, or None when the artist does not exist"""
    artist = repo.find_by_id(Artist, artist_id, include=("artworks",))
    if artist is None:
        return None
    return [artwork_to_dto(artwork) for artwork in artist.artworks]

def get_artwork(repo: Repository, artwork_id: int) -> Optional[ArtworkDto]:
    artwork = repo.find_by_id(Artwork, artwork_id, include=("artist", "exhibitions"))
    if artwork is None:
        return None
    return artwork_to_dto(artwork, with_exhibitions=True)

def create_artwork(repo: Repository, artwork_dto: ArtworkDto) -> ServiceResponse:
    artist = repo.find_by_id(Artist, artwork_dto.artist_id)
    if artist is None:
        return ServiceResponse.error("Artist not found. Please provide a valid ArtistId.")

    artwork = Artwork(
        title=artwork_dto.title,
        description=artwork_dto.description,
        creation_year=artwork_dto.creation_year or 0,
        price=artwork_dto.price or 0,
        artist=artist
    )
    repo.save(artwork)
    logger.change(f"Created artwork {artwork.id} for artist {artist.id}")
    return ServiceResponse.created(
        artwork.id,
        f"Artwork created successfully for artist: {artist.full_name}"
    )

def update_artwork(repo: Repository, artwork_id: int, artwork_dto: ArtworkDto) -> ServiceResponse:
    """Merge ``artwork_dto`` into the stored artwork.

    Strings overwrite only when non-blank, creation year and price only when
    non-zero; a price or year can therefore not be set back to 0 here. The
    artist is re-checked only when a different, non-zero artist id is given.
    """
    artwork = repo.find_by_id(Artwork, artwork_id, include=("artist",))
    if artwork is None:
        return ServiceResponse.not_found("Artwork not found.")

    if artwork_dto.artist_id and artwork_dto.artist_id != artwork.artist_id:
        artist = repo.find_by_id(Artist, artwork_dto.artist_id)
        if artist is None:
            return ServiceResponse.not_found("Artist not found.")
        artwork.artist = artist

    if has_text(artwork_dto.title):
        artwork.title = artwork_dto.title
    if has_text(artwork_dto.description):
        artwork.description = artwork_dto.description
    if has_number(artwork_dto.creation_year):
        artwork.creation_year = artwork_dto.creation_year
    if has_number(artwork_dto.price):
        artwork.price = artwork_dto.price

    try:
        repo.save(artwork)
    except ConcurrencyConflictError as e:
        return ServiceResponse.error("An error occurred updating the record.", e.message)

    logger.change(f"Updated artwork {artwork_id}")
    return ServiceResponse.updated(
        f"Artwork updated successfully. Artist: {artwork.artist.full_name}"
    )

def delete_artwork(repo: Repository, artwork_id: int) -> ServiceResponse:
    """Delete an artwork; its exhibitions stay, only the association goes"""
    artwork = repo.find_by_id(Artwork, artwork_id)
    if artwork is None:
        return ServiceResponse.not_found("Artwork cannot be deleted because it does not exist.")

    repo.remove(artwork)
    logger.change(f"Deleted artwork {artwork_id}")
    return ServiceResponse.deleted("Artwork deleted successfully.")
