"""
DB initialisation script
- creates all tables
- seeds the travel catalog (skipped when already present)
- optionally creates a demo account

    python init_db.py [--demo-user]
"""
import argparse
import logging

from dotenv import load_dotenv

load_dotenv()

from config import settings
from core.database import SessionLocal, init_db
from core.errors import DuplicateEmail
from models import Attraction, Place, Region
from services import auth_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_USER = {"name": "Demo Traveller", "email": "demo@bharatexplore.in", "password": "demo1234!"}


def create_demo_user(db) -> None:
    try:
        auth_service.register(db, **DEMO_USER)
        logger.info(f"👤 Demo account created: {DEMO_USER['email']}")
    except DuplicateEmail:
        logger.info("⚠️ Demo account already exists, skipping")


def main():
    parser = argparse.ArgumentParser(description="Create tables and seed the catalog")
    parser.add_argument("--demo-user", action="store_true", help="also create a demo login")
    args = parser.parse_args()

    logger.info(f"🔧 Initialising {settings.database_url}")
    init_db()

    db = SessionLocal()
    try:
        if args.demo_user:
            create_demo_user(db)

        logger.info(
            f"🎉 Done: {db.query(Region).count()} regions, "
            f"{db.query(Place).count()} places, {db.query(Attraction).count()} attractions"
        )
    finally:
        db.close()


if __name__ == "__main__":
    main()
