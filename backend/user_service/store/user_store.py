"""Data-mapping layer over the ``users`` table.

Every write commits on its own; ``update`` and ``destroy`` report the number of
affected rows as a plain ``int`` so callers can branch on ``count > 0``.
"""

import logging
from contextlib import contextmanager
from typing import Optional, Sequence

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from user_service.models.user_model import User

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when a write collides with the unique index on ``users.email``."""


class UserStore:
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _write(self):
        try:
            yield
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            # email is the only unique column besides the primary key
            raise DuplicateEmailError(str(e.orig)) from e

    def create(self, values: dict) -> User:
        user = User(**values)
        with self._write():
            self.session.add(user)
        self.session.refresh(user)
        logger.info("Created user id=%s", user.id)
        return user

    def find_all(self) -> Sequence[User]:
        return self.session.exec(select(User)).all()

    def find_by_pk(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def update(self, user_id: int, values: dict) -> int:
        if not values:
            return 0
        with self._write():
            result = self.session.execute(
                update(User).where(User.id == user_id).values(**values)
            )
        logger.info("Updated user id=%s (%d row(s))", user_id, result.rowcount)
        return result.rowcount

    def destroy(self, user_id: int) -> int:
        with self._write():
            result = self.session.execute(delete(User).where(User.id == user_id))
        logger.info("Deleted user id=%s (%d row(s))", user_id, result.rowcount)
        return result.rowcount
