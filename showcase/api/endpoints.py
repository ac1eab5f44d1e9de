from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from ..database.repository import Repository
from ..schemas import ArtistDto, ArtworkDto, ExhibitionDto, ServiceResponse
from ..services import artist_manager, artwork_manager, exhibition_manager
from .dependencies import get_repository, respond

artists_router = APIRouter(prefix="/artists", tags=["Artists"])
artworks_router = APIRouter(prefix="/artworks", tags=["Artworks"])
exhibitions_router = APIRouter(prefix="/exhibitions", tags=["Exhibitions"])

def _found(dto, kind: str):
    if dto is None:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return dto

# Artists

@artists_router.get("", response_model=List[ArtistDto])
def list_artists(repo: Repository = Depends(get_repository)):
    return artist_manager.list_artists(repo)

@artists_router.get("/{artist_id}", response_model=ArtistDto)
def get_artist(artist_id: int, repo: Repository = Depends(get_repository)):
    return _found(artist_manager.get_artist(repo, artist_id), "Artist")

@artists_router.get("/{artist_id}/artworks", response_model=List[ArtworkDto])
def list_artworks_for_artist(artist_id: int, repo: Repository = Depends(get_repository)):
    return _found(artwork_manager.list_artworks_for_artist(repo, artist_id), "Artist")

@artists_router.post("", response_model=ServiceResponse)
def create_artist(payload: ArtistDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artist_manager.create_artist(repo, payload))

@artists_router.put("/{artist_id}", response_model=ServiceResponse)
def update_artist(artist_id: int, payload: ArtistDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artist_manager.update_artist(repo, artist_id, payload))

@artists_router.delete("/{artist_id}", response_model=ServiceResponse)
def delete_artist(artist_id: int, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artist_manager.delete_artist(repo, artist_id))

# Artworks

@artworks_router.get("", response_model=List[ArtworkDto])
def list_artworks(repo: Repository = Depends(get_repository)):
    return artwork_manager.list_artworks(repo)

@artworks_router.get("/{artwork_id}", response_model=ArtworkDto)
def get_artwork(artwork_id: int, repo: Repository = Depends(get_repository)):
    return _found(artwork_manager.get_artwork(repo, artwork_id), "Artwork")

@artworks_router.get("/{artwork_id}/exhibitions", response_model=List[ExhibitionDto])
def list_exhibitions_for_artwork(artwork_id: int, repo: Repository = Depends(get_repository)):
    return _found(exhibition_manager.list_exhibitions_for_artwork(repo, artwork_id), "Artwork")

@artworks_router.post("", response_model=ServiceResponse)
def create_artwork(payload: ArtworkDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artwork_manager.create_artwork(repo, payload))

@artworks_router.put("/{artwork_id}", response_model=ServiceResponse)
def update_artwork(artwork_id: int, payload: ArtworkDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artwork_manager.update_artwork(repo, artwork_id, payload))

@artworks_router.delete("/{artwork_id}", response_model=ServiceResponse)
def delete_artwork(artwork_id: int, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, artwork_manager.delete_artwork(repo, artwork_id))

# Exhibitions

@exhibitions_router.get("", response_model=List[ExhibitionDto])
def list_exhibitions(repo: Repository = Depends(get_repository)):
    return exhibition_manager.list_exhibitions(repo)

@exhibitions_router.get("/{exhibition_id}", response_model=ExhibitionDto)
def get_exhibition(exhibition_id: int, repo: Repository = Depends(get_repository)):
    return _found(exhibition_manager.get_exhibition(repo, exhibition_id), "Exhibition")

@exhibitions_router.post("", response_model=ServiceResponse)
def create_exhibition(payload: ExhibitionDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, exhibition_manager.create_exhibition(repo, payload))

@exhibitions_router.put("/{exhibition_id}", response_model=ServiceResponse)
def update_exhibition(exhibition_id: int, payload: ExhibitionDto, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, exhibition_manager.update_exhibition(repo, exhibition_id, payload))

@exhibitions_router.delete("/{exhibition_id}", response_model=ServiceResponse)
def delete_exhibition(exhibition_id: int, response: Response, repo: Repository = Depends(get_repository)):
    return respond(response, exhibition_manager.delete_exhibition(repo, exhibition_id))
