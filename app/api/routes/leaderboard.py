"""排行榜：按 XP 降序。"""
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_user
from app.api.redirects import redirect_to
from app.core.config import settings
from app.core.db import get_db
from app.core.session import SessionIdentity, pop_flashed_messages
from app.repositories.user_repository import list_top_users_by_xp
from app.schemas.pages import LeaderboardView
from app.schemas.user import LeaderboardEntry, SessionUser

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/leaderboard", response_model=LeaderboardView)
async def leaderboard(
    request: Request,
    identity: SessionIdentity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        users = await list_top_users_by_xp(db, limit=settings.leaderboard_limit)
    except SQLAlchemyError:
        logger.exception("[leaderboard] 查询排行榜失败")
        return redirect_to("/")
    return LeaderboardView(
        view="leaderboard",
        user=SessionUser.from_identity(identity),
        messages=pop_flashed_messages(request),
        topUsers=[LeaderboardEntry.model_validate(u) for u in users],
    )
