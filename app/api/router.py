from fastapi import APIRouter

from app.api.routes.auth import router as auth_router
from app.api.routes.courses import router as courses_router
from app.api.routes.home import router as home_router
from app.api.routes.leaderboard import router as leaderboard_router
from app.api.routes.teacher import router as teacher_router
from app.api.routes.user import router as user_router

site_router = APIRouter()
site_router.include_router(home_router, tags=["home"])
site_router.include_router(auth_router, tags=["auth"])
site_router.include_router(user_router, tags=["user"])
site_router.include_router(courses_router, tags=["courses"])
site_router.include_router(leaderboard_router, tags=["leaderboard"])
site_router.include_router(teacher_router, prefix="/teacher", tags=["teacher"])
