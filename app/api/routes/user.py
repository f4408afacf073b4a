"""个人中心：GET/POST /profile。"""
import logging

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_user
from app.api.redirects import redirect_to
from app.core.db import get_db
from app.core.session import SessionIdentity, pop_flashed_messages, store_session_identity
from app.repositories.user_repository import get_user_by_id, update_user_profile
from app.schemas.pages import ProfileView
from app.schemas.user import SessionUser, UserProfile

logger = logging.getLogger(__name__)
router = APIRouter()


def _blank_to_none(value: str) -> str | None:
    value = (value or "").strip()
    return value or None


@router.get("/profile", response_model=ProfileView)
async def get_profile(
    request: Request,
    identity: SessionIdentity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """读取数据库中的最新资料（会话里只有身份快照）。"""
    try:
        user = await get_user_by_id(db, identity.user_id)
    except SQLAlchemyError:
        logger.exception("[profile] 读取用户资料失败 user_id=%s", identity.user_id)
        return redirect_to("/")
    if not user:
        return redirect_to("/")
    return ProfileView(
        view="profile",
        user=SessionUser.from_identity(identity),
        messages=pop_flashed_messages(request),
        profile=UserProfile.model_validate(user),
    )


@router.post("/profile")
async def update_profile(
    request: Request,
    fullName: str = Form(""),
    email: str = Form(""),
    phoneNumber: str = Form(""),
    schoolName: str = Form(""),
    grade: str = Form(""),
    city: str = Form(""),
    identity: SessionIdentity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """保存资料后用新的身份快照替换会话中的旧值，页头显示新姓名。"""
    try:
        user = await update_user_profile(
            db,
            identity.user_id,
            full_name=fullName.strip(),
            email=email.strip(),
            phone_number=_blank_to_none(phoneNumber),
            school_name=_blank_to_none(schoolName),
            grade=_blank_to_none(grade),
            city=_blank_to_none(city),
        )
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("[profile] 更新资料失败 user_id=%s", identity.user_id)
        return redirect_to("/profile")
    if user:
        store_session_identity(request, identity.with_full_name(user.full_name))
    return redirect_to("/profile")
