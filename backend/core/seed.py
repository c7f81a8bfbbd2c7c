"""Catalog seeding from the bundled travel dataset."""
import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from models import Attraction, Favorite, Place, Region

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).resolve().parent / "seed_data.json"

# a catalog with fewer regions than this is treated as an outdated seed
SEED_THRESHOLD = 10


def load_seed_data(path=None) -> list:
    with open(path or SEED_PATH, encoding="utf-8") as f:
        return json.load(f)["regions"]


def seed_if_empty(db: Session, path=None) -> bool:
    """
    Populate regions/places/attractions unless the catalog is already seeded.
    Returns True when the dataset was (re)inserted.
    """
    region_count = db.query(Region).count()
    if region_count >= SEED_THRESHOLD:
        logger.info(f"📦 Catalog already seeded ({region_count} regions), skipping")
        return False

    regions = load_seed_data(path)

    try:
        # 1. Clear the partial catalog (children first)
        db.query(Attraction).delete()
        db.query(Favorite).delete()
        db.query(Place).delete()
        db.query(Region).delete()

        # 2. Insert the dataset
        for region_data in regions:
            region = Region(
                name=region_data["name"],
                description=region_data.get("description"),
                culture=region_data.get("culture"),
                cuisine=region_data.get("cuisine"),
                image_url=region_data.get("image_url"),
            )
            for place_data in region_data.get("places", []):
                place = Place(
                    name=place_data["name"],
                    description=place_data.get("description"),
                    history=place_data.get("history"),
                    best_time=place_data.get("best_time"),
                    latitude=place_data.get("latitude"),
                    longitude=place_data.get("longitude"),
                    image_url=place_data.get("image_url"),
                )
                place.attractions = [
                    Attraction(name=a["name"], description=a.get("description"))
                    for a in place_data.get("attractions", [])
                ]
                region.places.append(place)
            db.add(region)

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"🌱 Seeded {len(regions)} regions")
    return True
