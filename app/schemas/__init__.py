"""请求/页面视图 Pydantic 模型。按模块组织，路由从本包或子模块导入。"""
from app.schemas.assessments import (
    AssessmentSubmission,
    AssessmentTypeOption,
    ClassroomOption,
    QuestionSubmission,
)
from app.schemas.courses import MissionDetail, MissionItem, TopicItem, VideoItem
from app.schemas.pages import (
    CourseCategoryView,
    CreateAssessmentView,
    DashboardView,
    LeaderboardView,
    MissionView,
    PageView,
    ProfileView,
)
from app.schemas.user import LeaderboardEntry, SessionUser, UserProfile

__all__ = [
    "AssessmentSubmission",
    "AssessmentTypeOption",
    "ClassroomOption",
    "QuestionSubmission",
    "MissionDetail",
    "MissionItem",
    "TopicItem",
    "VideoItem",
    "CourseCategoryView",
    "CreateAssessmentView",
    "DashboardView",
    "LeaderboardView",
    "MissionView",
    "PageView",
    "ProfileView",
    "LeaderboardEntry",
    "SessionUser",
    "UserProfile",
]
