"""页面视图模型：模板层渲染所需的上下文。view 为模板名。"""
from pydantic import BaseModel, Field

from app.schemas.assessments import AssessmentTypeOption, ClassroomOption
from app.schemas.courses import MissionDetail, MissionItem, TopicItem, VideoItem
from app.schemas.user import LeaderboardEntry, SessionUser, UserProfile


class PageView(BaseModel):
    view: str
    user: SessionUser | None = None
    messages: dict[str, list[str]] = Field(default_factory=dict)


class DashboardView(PageView):
    # 学习进度暂为固定示例数据
    progress: dict[str, int] | None = None


class CreateAssessmentView(PageView):
    classrooms: list[ClassroomOption] = Field(default_factory=list)
    assessmentTypes: list[AssessmentTypeOption] = Field(default_factory=list)


class ProfileView(PageView):
    profile: UserProfile


class CourseCategoryView(PageView):
    category: str
    topics: list[TopicItem] = Field(default_factory=list)


class MissionView(PageView):
    currentMission: MissionDetail
    videos: list[VideoItem] = Field(default_factory=list)
    currentVideo: VideoItem | None = None
    allTopicMissions: list[MissionItem] = Field(default_factory=list)


class LeaderboardView(PageView):
    topUsers: list[LeaderboardEntry] = Field(default_factory=list)
