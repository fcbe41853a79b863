"""
Admin account endpoints: registration, login, profile and superadmin
management of other admins.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ...core.auth import AdminContext, auth_disabled, get_optional_admin, require_admin
from ...core.db import get_db
from ...core.security import create_admin_token, hash_password, verify_password
from ...models.admin import Admin
from ...schemas.admin import EditProfileIn, LoginIn, RegisterIn


router = APIRouter(tags=["admins"])
logger = logging.getLogger("admins")


def _find_admin(db: Session, username: str | None) -> Optional[Admin]:
    if not username:
        return None
    return db.query(Admin).filter(func.lower(Admin.username) == username.strip().lower()).first()


def _caller_username(username: str | None, caller: AdminContext | None) -> str | None:
    # With auth enabled the token decides who is asking, not the query string.
    if caller is not None:
        return caller.username
    if not auth_disabled():
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return username


def _admin_summary(admin: Admin) -> dict:
    return {
        "first_name": admin.first_name,
        "last_name": admin.last_name,
        "email": admin.email,
        "is_superadmin": bool(admin.is_superadmin),
    }


def _admin_detail(admin: Admin) -> dict:
    return {
        "id": admin.id,
        "username": admin.username,
        "first_name": admin.first_name,
        "middle_initial": admin.middle_initial,
        "last_name": admin.last_name,
        "bio": admin.bio,
        "email": admin.email,
        "phone": admin.phone,
        "tin_id": admin.tin_id,
        "country": admin.country,
        "zip_code": admin.zip_code,
        "address": admin.address,
        "job": admin.job,
        "is_superadmin": bool(admin.is_superadmin),
    }


@router.post("/register", status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)) -> dict:
    username = payload.username.strip()
    email = payload.email.strip().lower()
    if " " in username:
        raise HTTPException(status_code=400, detail="username cannot contain spaces")
    existing = (
        db.query(Admin)
        .filter(or_(func.lower(Admin.email) == email, func.lower(Admin.username) == username.lower()))
        .first()
    )
    if existing:
        raise HTTPException(status_code=409, detail="Admin with this email or username already exists.")

    fields = payload.model_dump(exclude={"username", "email", "password"})
    admin = Admin(
        username=username,
        email=email,
        password_hash=hash_password(payload.password),
        is_superadmin=False,
        **fields,
    )
    db.add(admin)
    db.commit()
    logger.info("Admin registered username=%s", username)
    return {"message": "Admin registered successfully"}


@router.post("/login")
def login(payload: LoginIn, db: Session = Depends(get_db)) -> dict:
    admin = _find_admin(db, payload.username)
    if not admin or not verify_password(payload.password, admin.password_hash):
        raise HTTPException(status_code=401, detail="Invalid username or password")
    token = create_admin_token(username=admin.username, admin_id=admin.id, is_superadmin=bool(admin.is_superadmin))
    return {
        "message": "Login successful",
        "access_token": token,
        "token_type": "bearer",
        "user": _admin_summary(admin),
    }


@router.get("/admin")
def get_admin_profile(
    username: str | None = Query(None),
    db: Session = Depends(get_db),
    caller: AdminContext | None = Depends(get_optional_admin),
) -> dict:
    admin = _find_admin(db, _caller_username(username, caller))
    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")
    return {
        "first_name": admin.first_name,
        "last_name": admin.last_name,
        "email": admin.email,
        "phone": admin.phone,
        "address": {
            "full_address": admin.address,
            "postal_code": admin.zip_code,
            "tin_id": admin.tin_id,
        },
        "job": admin.job or "N/A",
        "location": admin.country or "N/A",
    }


@router.get("/admin-list")
def list_admins(
    username: str | None = Query(None),
    db: Session = Depends(get_db),
    caller: AdminContext | None = Depends(get_optional_admin),
) -> List[dict]:
    requester = _find_admin(db, _caller_username(username, caller))
    if not requester or not requester.is_superadmin:
        raise HTTPException(status_code=403, detail="Access denied. Only superadmins can access the admin list.")
    admins = (
        db.query(Admin.username, Admin.email)
        .filter(Admin.is_superadmin.is_(False))
        .order_by(Admin.username.asc())
        .all()
    )
    return [{"username": name, "email": email} for name, email in admins]


@router.delete("/delete-admin")
def delete_admin(
    username: str | None = Query(None),
    db: Session = Depends(get_db),
    caller: AdminContext | None = Depends(get_optional_admin),
) -> dict:
    if not username:
        raise HTTPException(status_code=400, detail="Username is required.")
    _caller_username(None, caller)
    if caller is not None and not caller.is_superadmin:
        raise HTTPException(status_code=403, detail="Only superadmins can delete admins.")
    admin = _find_admin(db, username)
    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found.")
    if admin.is_superadmin:
        raise HTTPException(status_code=403, detail="Cannot delete a superadmin.")
    db.delete(admin)
    db.commit()
    logger.info("Admin deleted username=%s", admin.username)
    return {"message": f"Admin {admin.username} deleted successfully."}


@router.get("/admin-count", dependencies=[Depends(require_admin)])
def count_admins(db: Session = Depends(get_db)) -> dict:
    count = db.query(func.count(Admin.id)).filter(Admin.is_superadmin.is_(False)).scalar() or 0
    return {"count": int(count)}


@router.put("/edit-profile")
def edit_profile(
    payload: EditProfileIn,
    db: Session = Depends(get_db),
    caller: AdminContext | None = Depends(get_optional_admin),
) -> dict:
    admin = _find_admin(db, _caller_username(payload.username, caller))
    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")
    changes = {
        key: value
        for key, value in payload.model_dump(exclude={"username"}, exclude_unset=True).items()
        if value is not None
    }
    if changes.get("email"):
        email = changes["email"].strip().lower()
        clash = db.query(Admin.id).filter(func.lower(Admin.email) == email, Admin.id != admin.id).first()
        if clash:
            raise HTTPException(status_code=409, detail="Email is already used by another admin.")
        changes["email"] = email
    for key, value in changes.items():
        setattr(admin, key, value)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return {"message": "Profile updated successfully", "updated_admin": _admin_detail(admin)}
