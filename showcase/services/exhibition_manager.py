"""Create, read, update and delete exhibitions and their artwork sets.

Artwork ids are resolved fail-closed: if any requested id is unknown the whole
write is rejected and nothing changes.
"""
import logging
from typing import List, Optional

from ..database.models import Artwork, Exhibition
from ..database.repository import Repository
from ..exceptions import ConcurrencyConflictError
from ..schemas import DATE_NOT_SET, ExhibitionDto, ServiceResponse
from ..utils import has_text
from .mapping import exhibition_to_dto

logger = logging.getLogger(__name__)

MISSING_ARTWORKS = "Some artworks provided do not exist. Please check ArtworkIds."

def _requested_artwork_ids(exhibition_dto: ExhibitionDto) -> List[int]:
    # Duplicates collapse; order follows the request
    return list(dict.fromkeys(a.id for a in exhibition_dto.artworks))

def _resolve_artworks(repo: Repository, artwork_ids: List[int]) -> Optional[List[Artwork]]:
    """The artworks for ``artwork_ids``, or None if any id is unknown"""
    artworks = repo.find_many(Artwork, artwork_ids)
    if len(artworks) != len(artwork_ids):
        missing = sorted(set(artwork_ids) - {a.id for a in artworks})
        logger.info(f"Rejected artwork ids {missing}")
        return None
    return artworks

def list_exhibitions(repo: Repository) -> List[ExhibitionDto]:
    exhibitions = repo.find_all(Exhibition, include=("artworks.artist",))
    return [exhibition_to_dto(exhibition, with_artworks=True) for exhibition in exhibitions]

def list_exhibitions_for_artwork(repo: Repository, artwork_id: int) -> Optional[List[ExhibitionDto]]:
    """The exhibitions showing one artwork, or None when the artwork does not exist"""
    artwork = repo.find_by_id(Artwork, artwork_id, include=("exhibitions",))
    if artwork is None:
        return None
    return [exhibition_to_dto(exhibition) for exhibition in artwork.exhibitions]

def get_exhibition(repo: Repository, exhibition_id: int) -> Optional[ExhibitionDto]:
    exhibition = repo.find_by_id(Exhibition, exhibition_id, include=("artworks.artist",))
    if exhibition is None:
        return None
    return exhibition_to_dto(exhibition, with_artworks=True)

def create_exhibition(repo: Repository, exhibition_dto: ExhibitionDto) -> ServiceResponse:
    artworks = _resolve_artworks(repo, _requested_artwork_ids(exhibition_dto))
    if artworks is None:
        return ServiceResponse.error(MISSING_ARTWORKS)

    exhibition = Exhibition(
        name=exhibition_dto.name,
        location=exhibition_dto.location,
        date=exhibition_dto.date,
        artworks=artworks
    )
    repo.save(exhibition)
    logger.change(f"Created exhibition {exhibition.id} with {len(artworks)} artworks")
    return ServiceResponse.created(exhibition.id, "Exhibition created successfully.")

def update_exhibition(repo: Repository, exhibition_id: int, exhibition_dto: ExhibitionDto) -> ServiceResponse:
    """Merge ``exhibition_dto`` into the stored exhibition.

    Name and location overwrite when non-blank, the date unless it is None or
    ``DATE_NOT_SET``. A non-empty artwork list replaces the whole set.
    """
    exhibition = repo.find_by_id(Exhibition, exhibition_id, include=("artworks",))
    if exhibition is None:
        return ServiceResponse.not_found("Exhibition not found.")

    artworks = None
    if exhibition_dto.artworks:
        artworks = _resolve_artworks(repo, _requested_artwork_ids(exhibition_dto))
        if artworks is None:
            return ServiceResponse.error(MISSING_ARTWORKS)

    if has_text(exhibition_dto.name):
        exhibition.name = exhibition_dto.name
    if has_text(exhibition_dto.location):
        exhibition.location = exhibition_dto.location
    if exhibition_dto.date is not None and exhibition_dto.date != DATE_NOT_SET:
        exhibition.date = exhibition_dto.date
    if artworks is not None:
        exhibition.artworks = artworks

    try:
        repo.save(exhibition)
    except ConcurrencyConflictError as e:
        return ServiceResponse.error("An error occurred updating the record.", e.message)

    logger.change(f"Updated exhibition {exhibition_id}")
    return ServiceResponse.updated("Exhibition updated successfully.")

def delete_exhibition(repo: Repository, exhibition_id: int) -> ServiceResponse:
    """Delete an exhibition; its artworks stay, only the association goes"""
    exhibition = repo.find_by_id(Exhibition, exhibition_id)
    if exhibition is None:
        return ServiceResponse.not_found("Exhibition not found.")

    repo.remove(exhibition)
    logger.change(f"Deleted exhibition {exhibition_id}")
    return ServiceResponse.deleted("Exhibition deleted successfully.")
