# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import TokenService, get_current_user, get_token_service, hash_password, verify_password
from .storage import create_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["Auth"])


def user_public(row: dict) -> UserPublic:
    return UserPublic(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        img=row.get("img"),
        created_at=row["created_at"],
    )


@router.post("/signup", response_model=AuthResponse, status_code=201, summary="Register a new user")
def register(request: RegisterRequest, tokens: TokenService = Depends(get_token_service)):
    if get_user_by_email(request.email):
        raise HTTPException(status_code=409, detail="Email is already in use.")

    user = create_user(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        img=request.img,
    )
    logger.info("Registered user %s", user["id"])

    token = tokens.create_access_token(user_id=user["id"], email=user["email"])
    return AuthResponse(user=user_public(user), token=token)


@router.post("/signin", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, tokens: TokenService = Depends(get_token_service)):
    user = get_user_by_email(request.email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=403, detail="Incorrect password")

    token = tokens.create_access_token(user_id=user["id"], email=user["email"])
    return AuthResponse(user=user_public(user), token=token)


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return user_public(user)
