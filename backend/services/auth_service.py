"""Account registration and login."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import DuplicateEmail, InternalError, InvalidCredentials, UserNotFound
from core.security import create_access_token, get_password_hash, verify_password
from models import User

logger = logging.getLogger(__name__)


def _issue_token(user: User) -> dict:
    identity = {"id": user.id, "email": user.email, "name": user.name}
    return {"token": create_access_token(identity), "user": identity}


def register(db: Session, name: str, email: str, password: str) -> dict:
    new_user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
    )
    try:
        db.add(new_user)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"❌ Sign-up rejected, email already registered: {email}")
        raise DuplicateEmail()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Sign-up failed: {e}")
        raise InternalError()

    db.refresh(new_user)
    logger.info(f"✅ New user registered: {new_user.id}")
    return _issue_token(new_user)


def login(db: Session, email: str, password: str) -> dict:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise UserNotFound()

    if not verify_password(password, user.password_hash):
        logger.info(f"❌ Wrong password for user {user.id}")
        raise InvalidCredentials()

    return _issue_token(user)
