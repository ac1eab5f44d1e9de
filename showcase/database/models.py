from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric, Table, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

# Many-to-many: an artwork can hang in many exhibitions
artwork_exhibitions = Table(
    'artwork_exhibitions',
    Base.metadata,
    Column('artwork_id', Integer, ForeignKey('artworks.id', ondelete='CASCADE'), primary_key=True),
    Column('exhibition_id', Integer, ForeignKey('exhibitions.id', ondelete='CASCADE'), primary_key=True),
)

class Artist(Base):
    __tablename__ = 'artists'

    id = Column(Integer, primary_key=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    bio = Column(Text)
    email = Column(String(255))

    # Deleting an artist deletes the artworks it owns
    artworks = relationship(
        "Artwork",
        back_populates="artist",
        cascade="all, delete-orphan",
        order_by="Artwork.id"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Artist(id={self.id}, name='{self.full_name}')>"

class Artwork(Base):
    __tablename__ = 'artworks'

    id = Column(Integer, primary_key=True)
    title = Column(String(500))
    description = Column(Text)
    creation_year = Column(Integer, default=0)
    price = Column(Numeric(18, 2), default=0)
    artist_id = Column(Integer, ForeignKey('artists.id', ondelete='CASCADE'), nullable=False, index=True)

    artist = relationship("Artist", back_populates="artworks")
    exhibitions = relationship(
        "Exhibition",
        secondary=artwork_exhibitions,
        back_populates="artworks",
        order_by="Exhibition.id"
    )

    def __repr__(self):
        return f"<Artwork(id={self.id}, title='{self.title}', artist_id={self.artist_id})>"

class Exhibition(Base):
    __tablename__ = 'exhibitions'

    id = Column(Integer, primary_key=True)
    name = Column(String(200))
    location = Column(String(200))
    date = Column(DateTime)

    artworks = relationship(
        "Artwork",
        secondary=artwork_exhibitions,
        back_populates="exhibitions",
        order_by="Artwork.id"
    )

    def __repr__(self):
        return f"<Exhibition(id={self.id}, name='{self.name}')>"
