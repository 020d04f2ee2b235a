import logging

from sqlmodel import Session, select

from hospital_assets.models import User
from hospital_assets.schemas import UserCreate, UserUpdate
from hospital_assets.services.store import apply_changes, commit_unique, get_or_404

logger = logging.getLogger(__name__)


def create_user(session: Session, data: UserCreate) -> User:
    user = User(**data.model_dump())
    commit_unique(session, user, "User", "username or email")
    logger.info("created user %s (%s)", user.id, user.username)
    return user


def update_user(session: Session, user_id: int, patch: UserUpdate) -> User:
    user = get_or_404(session, User, user_id, "User")
    apply_changes(user, patch.changes())
    commit_unique(session, user, "User", "username or email")
    logger.info("updated user %s", user.id)
    return user


def delete_user(session: Session, user_id: int) -> bool:
    # assets and repair requests pointing at the user are left as they are
    user = session.get(User, user_id)
    if user is None:
        return False
    session.delete(user)
    session.commit()
    logger.info("deleted user %s", user_id)
    return True


def list_users(session: Session) -> list[User]:
    return list(session.exec(select(User).order_by(User.id)).all())
