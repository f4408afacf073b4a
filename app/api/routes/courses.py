"""课程主题列表与任务页。"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_user
from app.api.redirects import redirect_to
from app.core.db import get_db
from app.core.session import SessionIdentity, pop_flashed_messages
from app.repositories.course_repository import (
    get_mission_with_topic,
    list_missions_by_topic,
    list_topics_by_category,
    list_videos_by_mission,
)
from app.schemas.courses import MissionDetail, MissionItem, TopicItem, VideoItem
from app.schemas.pages import CourseCategoryView, MissionView
from app.schemas.user import SessionUser
from app.services.course_service import select_current_video

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/courses/{category}", response_model=CourseCategoryView)
async def course_category(
    category: str,
    request: Request,
    identity: SessionIdentity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """某学科下的主题，按年级、主题名排序。"""
    try:
        topics = await list_topics_by_category(db, category)
    except SQLAlchemyError:
        logger.exception("[courses] 查询主题失败 category=%s", category)
        return redirect_to("/")
    return CourseCategoryView(
        view="course_category",
        user=SessionUser.from_identity(identity),
        messages=pop_flashed_messages(request),
        category=category,
        topics=[TopicItem.model_validate(t) for t in topics],
    )


@router.get("/mission/{mission_id}", response_model=MissionView)
async def mission_page(
    mission_id: int,
    request: Request,
    identity: SessionIdentity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """任务详情：视频列表、当前视频、同主题的其他任务。"""
    try:
        found = await get_mission_with_topic(db, mission_id)
        if found is None:
            raise HTTPException(status_code=404, detail="Mission not found!")
        mission, topic = found
        videos = await list_videos_by_mission(db, mission_id)
        topic_missions = await list_missions_by_topic(db, mission.topic_id)
    except SQLAlchemyError:
        logger.exception("[mission] 加载任务失败 mission_id=%s", mission_id)
        raise HTTPException(status_code=500, detail="Error loading mission.")

    current = select_current_video(videos)
    return MissionView(
        view="mission",
        user=SessionUser.from_identity(identity),
        messages=pop_flashed_messages(request),
        currentMission=MissionDetail(
            id=mission.id,
            mission_title=mission.mission_title,
            mission_order=mission.mission_order,
            topic_id=mission.topic_id,
            topic_name=topic.topic_name,
            grade_level=topic.grade_level,
        ),
        videos=[VideoItem.model_validate(v) for v in videos],
        currentVideo=VideoItem.model_validate(current) if current else None,
        allTopicMissions=[MissionItem.model_validate(m) for m in topic_missions],
    )
