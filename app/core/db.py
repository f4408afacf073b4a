from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings


def _to_async_url(url: str) -> str:
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


engine = create_async_engine(_to_async_url(settings.database_url), echo=settings.db_echo, future=True)
# expire_on_commit=False：commit 后仍可读取已加载属性，避免异步下懒加载（MissingGreenlet）
SessionLocal = async_sessionmaker(
    bind=engine, class_=AsyncSession, autoflush=False, autocommit=False, expire_on_commit=False
)
Base = declarative_base()


async def get_db():
    async with SessionLocal() as db:
        yield db
