"""创建测评表单模型。assessment_type 在这里只做字符串接收，合法性由 resolve_storage_target 判定。"""
import datetime as dt
from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator

from app.core.forms import ordered_values, parse_nested_form
from app.models.assessment import AssessmentKind


class QuestionSubmission(BaseModel):
    """一道提交的选择题：options 为 {"0": "选项文本", ...}，correct 为被选中的下标键。"""
    text: str = Field("", description="题干")
    options: dict[str, str] = Field(default_factory=dict, description="下标 -> 选项文本")
    correct: str | None = Field(None, description="正确选项的下标键，如 \"1\"")

    @field_validator("text", mode="before")
    @classmethod
    def _none_text_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("options", mode="before")
    @classmethod
    def _coerce_options(cls, v: Any) -> Any:
        if v is None or v == "":
            return {}
        if isinstance(v, (list, tuple)):
            return {str(i): item for i, item in enumerate(v)}
        if isinstance(v, dict):
            return {str(k): ("" if item is None else item) for k, item in v.items()}
        return v

    @field_validator("correct", mode="before")
    @classmethod
    def _coerce_correct(cls, v: Any) -> Any:
        if v is None or v == "":
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class AssessmentSubmission(BaseModel):
    title: str
    description: str = ""
    classroom_id: int
    assessment_type: str = ""
    due_date: dt.date | None = None
    # 原始题目数据（dict 或 QuestionSubmission），逐题在落库时校验，单题格式错误不影响整次提交
    questions: list[Any] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", "assessment_type", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_due_date(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("questions", mode="before")
    @classmethod
    def _questions_in_index_order(cls, v: Any) -> Any:
        return ordered_values(v)

    @classmethod
    def from_form(cls, items: Iterable[tuple[str, Any]]) -> "AssessmentSubmission":
        """从扁平表单键值对（request.form().multi_items()）构造；校验失败抛 pydantic.ValidationError。"""
        return cls.model_validate(parse_nested_form(items))


class ClassroomOption(BaseModel):
    id: int
    name: str


class AssessmentTypeOption(BaseModel):
    value: str
    label: str


ASSESSMENT_TYPE_LABELS = {
    AssessmentKind.QUIZ: "Quiz",
    AssessmentKind.TEST: "Test",
    AssessmentKind.Q_ASSIGNMENT: "Assignment",
}


def assessment_type_options() -> list[AssessmentTypeOption]:
    return [AssessmentTypeOption(value=k.value, label=label) for k, label in ASSESSMENT_TYPE_LABELS.items()]
