from app.core.db import Base
from app.models.base import IntegerIdMixin, TimestampMixin
from app.models.user import User
from app.models.classroom import Classroom
from app.models.assessment import AssessmentKind, AssessmentRef, QAssignment, Quiz, Test
from app.models.question import Question
from app.models.course import Mission, Topic, Video

__all__ = [
    "Base",
    "IntegerIdMixin",
    "TimestampMixin",
    "User",
    "Classroom",
    "AssessmentKind",
    "AssessmentRef",
    "Quiz",
    "Test",
    "QAssignment",
    "Question",
    "Topic",
    "Mission",
    "Video",
]
