"""Read-only catalog queries: regions, places, attractions and name search."""
from sqlalchemy.orm import Session, joinedload

from core.errors import NotFound
from models import Place, Region

# shorter queries return nothing (the client debounces below this too)
MIN_QUERY_LENGTH = 2


def list_regions(db: Session):
    return db.query(Region).order_by(Region.id).all()


def get_region(db: Session, region_id: int) -> Region:
    region = (
        db.query(Region)
        .options(joinedload(Region.places))
        .filter(Region.id == region_id)
        .first()
    )
    if not region:
        raise NotFound("State not found")
    return region


def list_places(db: Session):
    return (
        db.query(Place)
        .options(joinedload(Place.region))
        .order_by(Place.id)
        .all()
    )


def get_place(db: Session, place_id: int) -> Place:
    place = (
        db.query(Place)
        .options(joinedload(Place.region), joinedload(Place.attractions))
        .filter(Place.id == place_id)
        .first()
    )
    if not place:
        raise NotFound("Place not found")
    return place


def search(db: Session, query: str) -> list:
    """
    Case-insensitive substring match on region and place names.

    Regions come first, then places, each in id order. No ranking.
    """
    query = (query or "").strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    pattern = f"%{query}%"
    results = []

    for region in db.query(Region).filter(Region.name.ilike(pattern)).order_by(Region.id):
        results.append(_search_row("region", region))

    for place in db.query(Place).filter(Place.name.ilike(pattern)).order_by(Place.id):
        results.append(_search_row("place", place))

    return results


def _search_row(kind: str, row) -> dict:
    return {
        "type": kind,
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "image_url": row.image_url,
    }
