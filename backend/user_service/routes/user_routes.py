from fastapi import HTTPException, APIRouter
from typing import List, Optional

from user_service.dependencies import StoreDep
from user_service.models.user_model import User
from user_service.schemas.user_schemas import CreateUser, UpdateUser, UserId, in_id_range
from user_service.store.user_store import DuplicateEmailError

router = APIRouter()

USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "Email is already registered"


def ensure_id_in_range(id: int):
    # ids outside the column's range can't match a row; don't hand them to the driver
    if not in_id_range(id):
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)


# the collection answers on both /api/users and /api/users/
@router.post("", status_code=201, response_model=User)
@router.post("/", status_code=201, response_model=User, include_in_schema=False)
def create_user(store: StoreDep, user_data: CreateUser):
    try:
        return store.create(user_data.model_dump())
    except DuplicateEmailError:
        raise HTTPException(status_code=409, detail=EMAIL_TAKEN)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=List[User])
@router.get("/", response_model=List[User], include_in_schema=False)
def get_users(store: StoreDep):
    try:
        return store.find_all()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{id}", response_model=User)
def get_user(id: UserId, store: StoreDep):
    ensure_id_in_range(id)
    try:
        user = store.find_by_pk(id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not user:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return user


@router.put("/{id}", response_model=User)
def update_user(id: UserId, store: StoreDep, user_data: Optional[UpdateUser] = None):
    ensure_id_in_range(id)
    changes = user_data.changes() if user_data else {}

    try:
        if not changes:
            # nothing to write; an existing row is returned as-is
            user = store.find_by_pk(id)
        else:
            updated = store.update(id, changes)
            # branch on the row count, then re-fetch; a concurrent delete can
            # still leave the re-fetch empty, which is reported as not found
            user = store.find_by_pk(id) if updated > 0 else None
    except DuplicateEmailError:
        raise HTTPException(status_code=409, detail=EMAIL_TAKEN)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if user is None:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return user


@router.delete("/{id}")
def delete_user(id: UserId, store: StoreDep):
    ensure_id_in_range(id)
    try:
        deleted = store.destroy(id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if deleted > 0:
        return {"message": "User deleted successfully"}
    raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
