from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.sql import func

from app.core.db import Base


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class IntegerIdMixin:
    # 自增主键：题目等按插入顺序可比较
    id = Column(Integer, primary_key=True, autoincrement=True)


__all__ = ["Base", "IntegerIdMixin", "TimestampMixin"]
