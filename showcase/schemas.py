from enum import Enum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

# Exhibition updates leave the stored date alone when given either None or this value
DATE_NOT_SET = datetime.min

class ShowcaseModel(BaseModel):
    """Transfer objects are camelCase on the wire and accept snake_case too"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )

class ExhibitionDto(ShowcaseModel):
    id: int = Field(default=0, validation_alias=AliasChoices('id', 'exhibitionId', 'exhibition_id'))
    name: Optional[str] = None
    location: Optional[str] = None
    date: Optional[datetime] = None
    artworks: List['ArtworkDto'] = Field(default_factory=list)

class ArtworkDto(ShowcaseModel):
    id: int = Field(default=0, validation_alias=AliasChoices('id', 'artworkId', 'artwork_id'))
    title: Optional[str] = None
    description: Optional[str] = None
    creation_year: Optional[int] = 0
    price: Optional[Decimal] = Decimal(0)
    artist_id: int = 0
    artist_name: Optional[str] = None  # Derived on read, never stored
    exhibitions: List[ExhibitionDto] = Field(default_factory=list)

class ArtistDto(ShowcaseModel):
    id: int = Field(default=0, validation_alias=AliasChoices('id', 'artistId', 'artist_id'))
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    artwork_ids: List[int] = Field(default_factory=list)
    artworks: List[ArtworkDto] = Field(default_factory=list)

ExhibitionDto.model_rebuild()

class ServiceStatus(str, Enum):
    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
    NOT_FOUND = "NotFound"
    ERROR = "Error"

class ServiceResponse(ShowcaseModel):
    """Uniform result of every write operation; callers branch on ``status`` only"""
    status: ServiceStatus
    created_id: Optional[int] = None
    messages: List[str] = Field(default_factory=list)

    @classmethod
    def created(cls, created_id: int, *messages: str) -> 'ServiceResponse':
        return cls(status=ServiceStatus.CREATED, created_id=created_id, messages=list(messages))

    @classmethod
    def updated(cls, *messages: str) -> 'ServiceResponse':
        return cls(status=ServiceStatus.UPDATED, messages=list(messages))

    @classmethod
    def deleted(cls, *messages: str) -> 'ServiceResponse':
        return cls(status=ServiceStatus.DELETED, messages=list(messages))

    @classmethod
    def not_found(cls, *messages: str) -> 'ServiceResponse':
        return cls(status=ServiceStatus.NOT_FOUND, messages=list(messages))

    @classmethod
    def error(cls, *messages: str) -> 'ServiceResponse':
        return cls(status=ServiceStatus.ERROR, messages=list(messages))
