"""API 依赖项：会话鉴权与当前用户。

不满足条件时抛 LoginRequiredError，由 app.main 注册的异常处理器重定向到 /login，
路由函数本身不会被执行，也不会访问数据库。
"""
from fastapi import Depends, Request

from app.core.exceptions import LoginRequiredError
from app.core.session import ROLE_TEACHER, SessionIdentity, get_session_identity


def current_identity(request: Request) -> SessionIdentity | None:
    """当前会话身份，未登录为 None（公开页面使用）。"""
    return get_session_identity(request)


def authorize_user(identity: SessionIdentity | None) -> SessionIdentity:
    if identity is None:
        raise LoginRequiredError()
    return identity


def authorize_teacher(identity: SessionIdentity | None) -> SessionIdentity:
    """必须已登录且角色为 teacher。"""
    if identity is None or identity.role != ROLE_TEACHER:
        raise LoginRequiredError(required_role=ROLE_TEACHER)
    return identity


def require_user(identity: SessionIdentity | None = Depends(current_identity)) -> SessionIdentity:
    return authorize_user(identity)


def require_teacher(identity: SessionIdentity | None = Depends(current_identity)) -> SessionIdentity:
    return authorize_teacher(identity)
