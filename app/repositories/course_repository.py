"""课程主题、任务、视频的只读查询。"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.course import Mission, Topic, Video


async def list_topics_by_category(db: AsyncSession, category: str) -> list[Topic]:
    result = await db.execute(
        select(Topic).where(Topic.category == category).order_by(Topic.grade_level, Topic.topic_name)
    )
    return list(result.scalars().all())


async def get_mission_with_topic(db: AsyncSession, mission_id: int) -> tuple[Mission, Topic] | None:
    """任务及其所属主题（JOIN），不存在返回 None。"""
    result = await db.execute(
        select(Mission, Topic).join(Topic, Mission.topic_id == Topic.id).where(Mission.id == mission_id)
    )
    row = result.first()
    if row is None:
        return None
    return row[0], row[1]


async def list_videos_by_mission(db: AsyncSession, mission_id: int) -> list[Video]:
    result = await db.execute(
        select(Video)
        .where(Video.mission_id == mission_id)
        .order_by(Video.video_order, Video.language, Video.quality)
    )
    return list(result.scalars().all())


async def list_missions_by_topic(db: AsyncSession, topic_id: int) -> list[Mission]:
    result = await db.execute(
        select(Mission).where(Mission.topic_id == topic_id).order_by(Mission.mission_order)
    )
    return list(result.scalars().all())
