from sqlalchemy import Column, Integer, String

from app.models.base import IntegerIdMixin, TimestampMixin
from app.core.db import Base


class User(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "users"

    full_name = Column(String(150), nullable=False)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # student / teacher
    role = Column(String(20), nullable=False, default="student")
    # 个人资料
    phone_number = Column(String(30), nullable=True)
    school_name = Column(String(200), nullable=True)
    grade = Column(String(50), nullable=True)
    city = Column(String(100), nullable=True)
    xp = Column(Integer, nullable=False, default=0, server_default="0")
