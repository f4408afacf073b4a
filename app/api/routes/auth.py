"""注册、登录、登出。"""
import logging

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.redirects import flash_and_redirect, redirect_to
from app.core.db import get_db
from app.core.session import ROLE_STUDENT, SessionIdentity, clear_session, pop_flashed_messages, store_session_identity
from app.schemas.pages import PageView
from app.services.auth_service import SignupError, authenticate, signup

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/login", response_model=PageView)
async def login_page(request: Request):
    return PageView(view="login", messages=pop_flashed_messages(request))


@router.get("/signup", response_model=PageView)
async def signup_page(request: Request):
    return PageView(view="register", messages=pop_flashed_messages(request))


@router.get("/logout")
async def logout(request: Request):
    clear_session(request)
    return redirect_to("/")


@router.post("/signup")
async def signup_submit(
    request: Request,
    fullName: str = Form(""),
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    role: str = Form(ROLE_STUDENT),
    db: AsyncSession = Depends(get_db),
):
    try:
        await signup(
            db,
            full_name=fullName.strip(),
            username=username.strip(),
            email=email.strip(),
            password=password,
            role=role,
        )
    except SignupError:
        return flash_and_redirect(
            request, "error", "An error occurred. The username or email may be taken.", "/signup"
        )
    return flash_and_redirect(request, "success", "Registration successful! You can now log in.", "/login")


@router.post("/login")
async def login_submit(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    user = await authenticate(db, username.strip(), password)
    if not user:
        return flash_and_redirect(request, "error", "Invalid username or password.", "/login")
    store_session_identity(request, SessionIdentity.from_user(user))
    logger.info("[login] user id=%s role=%s", user.id, user.role)
    return redirect_to("/")
