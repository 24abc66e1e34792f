from fastapi import Depends
from sqlmodel import Session
from typing import Annotated

from user_service.database import get_session
from user_service.store.user_store import UserStore

SessionDep = Annotated[Session, Depends(get_session)]


def get_user_store(session: SessionDep) -> UserStore:
    return UserStore(session)


StoreDep = Annotated[UserStore, Depends(get_user_store)]
