"""
End-user account endpoints used by the verification dashboard.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models.user_info import UserInfo
from ...schemas.user import UserListItem, UserOut, VerifyUserIn


router = APIRouter(tags=["users"])


@router.get("/user-list")
def list_users(
    email: Optional[str] = Query(None),
    filter: Optional[str] = Query(None),
    db: Session = Depends(get_db),
) -> List[dict]:
    query = db.query(UserInfo)
    # An email lookup ignores the verification filter.
    if email:
        query = query.filter(UserInfo.email == email.strip().lower())
    elif filter == "verified":
        query = query.filter(UserInfo.verified.is_(True))
    elif filter == "not-verified":
        query = query.filter(UserInfo.verified.is_(False))
    users = query.order_by(UserInfo.name.asc()).all()
    if not users:
        raise HTTPException(status_code=404, detail="No users found")
    return [UserListItem.model_validate(user).model_dump(mode="json") for user in users]


@router.put("/verify-user")
def verify_user(payload: VerifyUserIn, db: Session = Depends(get_db)) -> dict:
    user = db.query(UserInfo).filter(UserInfo.email == payload.email.strip().lower()).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    user.verified = True
    db.add(user)
    db.commit()
    db.refresh(user)
    return {"message": "User verified successfully", "user": UserOut.model_validate(user).model_dump(mode="json")}


@router.get("/user-count")
def count_users(db: Session = Depends(get_db)) -> dict:
    return {"count": int(db.query(func.count(UserInfo.id)).scalar() or 0)}
