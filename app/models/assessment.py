"""测评：概念上的父类型，物理上是三张互不相交的表（quizzes / tests / q_assignments）。

题目表 questions 由三种测评共用，通过 (assessment_type, assessment_id) 关联，见 AssessmentRef。
"""
import enum
from dataclasses import dataclass

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declared_attr

from app.models.base import IntegerIdMixin, TimestampMixin
from app.core.db import Base


class AssessmentKind(str, enum.Enum):
    QUIZ = "quiz"
    TEST = "test"
    Q_ASSIGNMENT = "q_assignment"


@dataclass(frozen=True)
class AssessmentRef:
    """指向某一张测评表中一行的外键：类型 + ID，二者缺一不可。"""
    kind: AssessmentKind
    assessment_id: int


class AssessmentMixin(IntegerIdMixin, TimestampMixin):
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    @declared_attr
    def classroom_id(cls):
        return Column(Integer, ForeignKey("classrooms.id"), nullable=False, index=True)


class Quiz(Base, AssessmentMixin):
    __tablename__ = "quizzes"


class Test(Base, AssessmentMixin):
    __tablename__ = "tests"
    __test__ = False  # 不是 pytest 测试类


class QAssignment(Base, AssessmentMixin):
    __tablename__ = "q_assignments"

    due_date = Column(Date, nullable=True)
