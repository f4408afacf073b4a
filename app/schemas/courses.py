"""课程主题、任务、视频。"""
from pydantic import BaseModel


class TopicItem(BaseModel):
    id: int
    category: str
    topic_name: str
    grade_level: int | None = None

    model_config = {"from_attributes": True}


class MissionItem(BaseModel):
    id: int
    mission_title: str
    mission_order: int

    model_config = {"from_attributes": True}


class MissionDetail(MissionItem):
    topic_id: int
    topic_name: str
    grade_level: int | None = None


class VideoItem(BaseModel):
    id: int
    title: str | None = None
    video_url: str
    video_order: int
    language: str
    quality: str

    model_config = {"from_attributes": True}
