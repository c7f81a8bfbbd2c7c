"""Per-user favorite places."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from core.errors import DuplicateFavorite, InternalError
from models import Favorite, Place

logger = logging.getLogger(__name__)


def list_favorites(db: Session, user_id: int):
    return (
        db.query(Place)
        .join(Favorite, Favorite.place_id == Place.id)
        .options(joinedload(Place.region))
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.id)
        .all()
    )


def add_favorite(db: Session, user_id: int, place_id: int) -> Favorite:
    favorite = Favorite(user_id=user_id, place_id=place_id)
    try:
        db.add(favorite)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_unique_violation(e):
            raise DuplicateFavorite()
        # unknown user/place id (foreign key)
        logger.warning(f"⚠️ Favorite insert rejected: {e.orig}")
        raise InternalError()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Favorite insert failed: {e}")
        raise InternalError()

    db.refresh(favorite)
    return favorite


def remove_favorite(db: Session, user_id: int, place_id: int) -> None:
    """Delete the pair if present. Deleting a missing pair is not an error."""
    try:
        (
            db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.place_id == place_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Favorite delete failed: {e}")
        raise InternalError()


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error.orig).lower()
    return "unique" in text or "duplicate" in text
