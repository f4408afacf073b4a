import json

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Text

from app.models.assessment import AssessmentKind, AssessmentRef
from app.models.base import IntegerIdMixin, TimestampMixin
from app.core.db import Base


class Question(Base, IntegerIdMixin, TimestampMixin):
    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint(
            "assessment_type IN ('quiz', 'test', 'q_assignment')",
            name="ck_questions_assessment_type",
        ),
        CheckConstraint("correct_answer <> ''", name="ck_questions_correct_answer_not_empty"),
        Index("ix_questions_assessment", "assessment_type", "assessment_id"),
    )

    assessment_id = Column(Integer, nullable=False)
    assessment_type = Column(String(20), nullable=False)
    question_text = Column(Text, nullable=False)
    # 提交时的 {"0": "选项文本", ...}，JSON 文本原样保存
    options = Column(Text, nullable=False)
    # 正确答案存文本而不是下标，选项顺序以后变化也不影响历史答案
    correct_answer = Column(Text, nullable=False)

    @property
    def assessment_ref(self) -> AssessmentRef:
        return AssessmentRef(kind=AssessmentKind(self.assessment_type), assessment_id=self.assessment_id)

    @property
    def options_mapping(self) -> dict[str, str]:
        return json.loads(self.options) if self.options else {}
