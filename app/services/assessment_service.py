"""教师创建测评：类型解析 -> 写入测评主表 -> 逐题解析正确答案并落库。

- 类型解析（resolve_storage_target）：assessment_type 只接受 quiz / test / q_assignment，
  其他值在写库前抛 InvalidAssessmentTypeError，整次提交失败。
- 主表写入（create_parent）：失败抛 AssessmentPersistenceError，不再尝试任何题目。
- 题目落库（materialize_questions）：把教师选中的下标解析成选项文本后存入 correct_answer；
  格式错误或解析不到答案的题目跳过并记录，不影响其他题目。题目与主表不在同一事务中，逐题 commit。
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AssessmentPersistenceError, InvalidAssessmentTypeError
from app.models.assessment import AssessmentKind, AssessmentMixin, AssessmentRef, QAssignment, Quiz, Test
from app.models.question import Question
from app.repositories.assessment_repository import add_question, create_assessment_record
from app.schemas.assessments import AssessmentSubmission, QuestionSubmission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageTarget:
    kind: AssessmentKind
    model: type[AssessmentMixin]
    accepts_due_date: bool = False


STORAGE_TARGETS: dict[AssessmentKind, StorageTarget] = {
    AssessmentKind.QUIZ: StorageTarget(AssessmentKind.QUIZ, Quiz),
    AssessmentKind.TEST: StorageTarget(AssessmentKind.TEST, Test),
    AssessmentKind.Q_ASSIGNMENT: StorageTarget(AssessmentKind.Q_ASSIGNMENT, QAssignment, accepts_due_date=True),
}


@dataclass(frozen=True)
class SkippedQuestion:
    position: int  # 在提交列表中的下标（从 0 开始）
    question_text: str
    reason: str


@dataclass
class MaterializationResult:
    persisted: list[Question] = field(default_factory=list)
    skipped: list[SkippedQuestion] = field(default_factory=list)

    @property
    def persisted_count(self) -> int:
        return len(self.persisted)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


@dataclass(frozen=True)
class AssessmentCreationResult:
    ref: AssessmentRef
    materialization: MaterializationResult


def resolve_storage_target(type_tag: str | None) -> StorageTarget:
    """类型标签 -> 存储目标。只做精确匹配，没有默认值。"""
    for kind, target in STORAGE_TARGETS.items():
        if type_tag == kind.value:
            return target
    raise InvalidAssessmentTypeError(type_tag)


def _raw_question_text(raw: Any) -> str:
    text = raw.get("text") if isinstance(raw, dict) else None
    return text if isinstance(text, str) else ""


def resolve_correct_answer(options: dict[str, str] | None, correct: str | None) -> str | None:
    """返回 options[correct]；correct 缺失、下标不存在或文本为空时返回 None。"""
    if correct is None:
        return None
    text = (options or {}).get(str(correct))
    return text or None


async def create_parent(db: AsyncSession, target: StorageTarget, submission: AssessmentSubmission) -> int:
    """写入测评主表并返回新 ID。"""
    try:
        record = await create_assessment_record(
            db,
            target.model,
            title=submission.title,
            description=submission.description,
            classroom_id=submission.classroom_id,
            due_date=submission.due_date if target.accepts_due_date else None,
        )
    except SQLAlchemyError as e:
        await db.rollback()
        raise AssessmentPersistenceError(f"failed to create {target.kind.value}") from e
    return record.id


async def materialize_questions(
    db: AsyncSession,
    ref: AssessmentRef,
    questions: Sequence[QuestionSubmission | dict[str, Any]],
) -> MaterializationResult:
    """按提交顺序逐题落库。

    单题格式错误或答案解析失败只跳过该题；写库失败则中止剩余题目并抛 AssessmentPersistenceError，
    此前已 commit 的题目保留。
    """
    result = MaterializationResult()
    for position, raw in enumerate(questions):
        try:
            q = QuestionSubmission.model_validate(raw)
        except ValidationError as e:
            text = _raw_question_text(raw)
            logger.warning("[create-assessment] 跳过格式错误的题目 #%d %r: %s", position, text, e.errors())
            result.skipped.append(SkippedQuestion(position=position, question_text=text, reason="malformed question"))
            continue
        correct_answer = resolve_correct_answer(q.options, q.correct)
        if not correct_answer:
            logger.warning("[create-assessment] 跳过没有正确答案的题目: %r", q.text)
            result.skipped.append(
                SkippedQuestion(position=position, question_text=q.text, reason="no correct answer selected")
            )
            continue
        try:
            question = await add_question(
                db,
                ref=ref,
                question_text=q.text,
                options=json.dumps(q.options, ensure_ascii=False),
                correct_answer=correct_answer,
            )
        except SQLAlchemyError as e:
            await db.rollback()
            raise AssessmentPersistenceError(
                f"failed to save question #{position} of {ref.kind.value} {ref.assessment_id}"
            ) from e
        result.persisted.append(question)
    return result


async def create_assessment(db: AsyncSession, submission: AssessmentSubmission) -> AssessmentCreationResult:
    target = resolve_storage_target(submission.assessment_type)
    assessment_id = await create_parent(db, target, submission)
    ref = AssessmentRef(kind=target.kind, assessment_id=assessment_id)
    logger.info("[create-assessment] 已创建 %s id=%s", target.kind.value, assessment_id)
    materialization = await materialize_questions(db, ref, submission.questions)
    logger.info(
        "[create-assessment] %s id=%s 题目落库 %d 道，跳过 %d 道",
        target.kind.value,
        assessment_id,
        materialization.persisted_count,
        materialization.skipped_count,
    )
    return AssessmentCreationResult(ref=ref, materialization=materialization)
