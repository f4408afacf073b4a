"""课程浏览：主题（Topic）-> 任务（Mission）-> 视频（Video）。"""
from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.models.base import IntegerIdMixin, TimestampMixin
from app.core.db import Base


class Topic(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "topics"

    category = Column(String(50), nullable=False, index=True)
    topic_name = Column(String(255), nullable=False)
    grade_level = Column(Integer, nullable=True)


class Mission(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "missions"

    topic_id = Column(Integer, ForeignKey("topics.id"), nullable=False, index=True)
    mission_title = Column(String(255), nullable=False)
    mission_order = Column(Integer, nullable=False, default=1)


class Video(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "videos"

    mission_id = Column(Integer, ForeignKey("missions.id"), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    video_url = Column(Text, nullable=False)
    video_order = Column(Integer, nullable=False, default=1)
    language = Column(String(30), nullable=False, default="english")
    quality = Column(String(10), nullable=False, default="720p")
