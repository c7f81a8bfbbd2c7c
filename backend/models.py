from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship

from core.database import Base


# User model
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    # unique login key
    email = Column(String(255), unique=True, nullable=False, index=True)

    # bcrypt hash only, never the plain password
    password_hash = Column(String(100), nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)

    favorites = relationship("Favorite", back_populates="user")


# Region (state) model
class Region(Base):
    __tablename__ = "regions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    culture = Column(Text, nullable=True)
    cuisine = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    places = relationship("Place", back_populates="region", order_by="Place.id")


# Place model
class Place(Base):
    __tablename__ = "places"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    region_id = Column(Integer, ForeignKey("regions.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    history = Column(Text, nullable=True)
    best_time = Column(String(100), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    image_url = Column(String(500), nullable=True)

    region = relationship("Region", back_populates="places")
    attractions = relationship("Attraction", back_populates="place", order_by="Attraction.id")

    @property
    def region_name(self):
        return self.region.name if self.region else None


# Attraction model
class Attraction(Base):
    __tablename__ = "attractions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    place = relationship("Place", back_populates="attractions")


# Favorite model (user <-> place)
class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "place_id", name="uq_favorites_user_place"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False)

    user = relationship("User", back_populates="favorites")
    place = relationship("Place")
