"""首页与仪表盘：按角色分流到教师或学生页面。"""
from fastapi import APIRouter, Depends, Request

from app.api.deps import current_identity, require_user
from app.core.session import SessionIdentity, pop_flashed_messages
from app.schemas.pages import DashboardView
from app.schemas.user import SessionUser

router = APIRouter()

# 学习进度暂未实现，固定示例数据
MOCK_COURSE_PROGRESS = {
    "maths": 75,
    "science": 50,
    "technology": 90,
    "engineering": 25,
}


@router.get("/", response_model=DashboardView, response_model_exclude_none=True)
async def home(request: Request, identity: SessionIdentity | None = Depends(current_identity)):
    if identity is None:
        return DashboardView(view="index", messages=pop_flashed_messages(request))
    view = "teacher_dashboard" if identity.is_teacher else "home"
    return DashboardView(view=view, user=SessionUser.from_identity(identity), messages=pop_flashed_messages(request))


@router.get("/dashboard", response_model=DashboardView, response_model_exclude_none=True)
async def dashboard(request: Request, identity: SessionIdentity = Depends(require_user)):
    user = SessionUser.from_identity(identity)
    messages = pop_flashed_messages(request)
    if identity.is_teacher:
        return DashboardView(view="teacher_dashboard", user=user, messages=messages)
    return DashboardView(view="dashboard", user=user, messages=messages, progress=dict(MOCK_COURSE_PROGRESS))
