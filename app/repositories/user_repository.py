from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    """按用户名查询用户，不存在返回 None。"""
    result = await db.execute(select(User).where(User.username == username))
    return result.scalars().first()


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """按用户 ID 查询用户，不存在返回 None。"""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalars().first()


async def create_user(
    db: AsyncSession,
    *,
    full_name: str,
    username: str,
    email: str,
    password_hash: str,
    role: str,
) -> User:
    """创建新用户。用户名或邮箱重复时由数据库唯一约束抛出 IntegrityError。"""
    user = User(
        full_name=full_name,
        username=username,
        email=email,
        password_hash=password_hash,
        role=role,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def update_user_profile(
    db: AsyncSession,
    user_id: int,
    *,
    full_name: str,
    email: str,
    phone_number: str | None,
    school_name: str | None,
    grade: str | None,
    city: str | None,
) -> User | None:
    """覆盖写个人资料字段并 commit，用户不存在返回 None。"""
    user = await get_user_by_id(db, user_id)
    if not user:
        return None
    user.full_name = full_name
    user.email = email
    user.phone_number = phone_number
    user.school_name = school_name
    user.grade = grade
    user.city = city
    await db.commit()
    await db.refresh(user)
    return user


async def list_top_users_by_xp(db: AsyncSession, limit: int = 20) -> list[User]:
    """排行榜：按 XP 降序取前 limit 名。"""
    result = await db.execute(select(User).order_by(User.xp.desc(), User.id.asc()).limit(limit))
    return list(result.scalars().all())
