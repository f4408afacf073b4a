"""测评（Quiz / Test / QAssignment）与题目（Question）数据访问层。"""
import datetime as dt

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.assessment import AssessmentMixin, AssessmentRef
from app.models.question import Question


async def create_assessment_record(
    db: AsyncSession,
    model: type[AssessmentMixin],
    *,
    title: str,
    description: str | None,
    classroom_id: int,
    due_date: dt.date | None = None,
) -> AssessmentMixin:
    """在指定测评表中插入一行并 commit。due_date 只由调用方对 q_assignments 传入。"""
    values = {"title": title, "description": description, "classroom_id": classroom_id}
    if due_date is not None:
        values["due_date"] = due_date
    record = model(**values)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def get_assessment_by_id(
    db: AsyncSession, model: type[AssessmentMixin], assessment_id: int
) -> AssessmentMixin | None:
    """按 ID 查询某张测评表，不存在返回 None。"""
    result = await db.execute(select(model).where(model.id == assessment_id))
    return result.scalars().first()


async def add_question(
    db: AsyncSession,
    *,
    ref: AssessmentRef,
    question_text: str,
    options: str,
    correct_answer: str,
) -> Question:
    """插入一道题目并 commit。options 为已序列化的 JSON 文本。"""
    q = Question(
        assessment_id=ref.assessment_id,
        assessment_type=ref.kind.value,
        question_text=question_text,
        options=options,
        correct_answer=correct_answer,
    )
    db.add(q)
    await db.commit()
    await db.refresh(q)
    return q


async def get_questions_by_assessment(db: AsyncSession, ref: AssessmentRef) -> list[Question]:
    """某测评下的题目，按插入顺序（自增 ID）升序。"""
    result = await db.execute(
        select(Question)
        .where(
            Question.assessment_type == ref.kind.value,
            Question.assessment_id == ref.assessment_id,
        )
        .order_by(Question.id.asc())
    )
    return list(result.scalars().all())
