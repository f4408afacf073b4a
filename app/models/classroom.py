from sqlalchemy import Column, ForeignKey, Integer, String

from app.models.base import IntegerIdMixin, TimestampMixin
from app.core.db import Base


class Classroom(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "classrooms"

    name = Column(String(200), nullable=False)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
