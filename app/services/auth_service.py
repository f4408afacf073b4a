"""注册与登录。"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import hash_password, password_too_long, verify_password
from app.core.session import ROLES
from app.models.user import User
from app.repositories.user_repository import create_user, get_user_by_username

logger = logging.getLogger(__name__)


class SignupError(Exception):
    """注册失败（用户名/邮箱已存在、角色非法或写库失败）。"""


async def signup(
    db: AsyncSession,
    *,
    full_name: str,
    username: str,
    email: str,
    password: str,
    role: str,
) -> User:
    if role not in ROLES:
        raise SignupError(f"invalid role: {role!r}")
    if not username or not password or password_too_long(password):
        raise SignupError("invalid username or password")
    try:
        user = await create_user(
            db,
            full_name=full_name or username,
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
        )
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("[signup] 创建用户失败 username=%s: %s", username, e)
        raise SignupError("username or email may be taken") from e
    logger.info("[signup] 新用户 id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


async def authenticate(db: AsyncSession, username: str, password: str) -> User | None:
    """用户名 + 密码校验，成功返回用户，否则 None。"""
    if not username or not password or password_too_long(password):
        return None
    user = await get_user_by_username(db, username)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
