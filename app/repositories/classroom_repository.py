"""班级（Classroom）数据访问层。"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.classroom import Classroom


async def list_classrooms_by_teacher(db: AsyncSession, teacher_id: int) -> list[Classroom]:
    result = await db.execute(
        select(Classroom).where(Classroom.teacher_id == teacher_id).order_by(Classroom.id.asc())
    )
    return list(result.scalars().all())


async def create_classroom(db: AsyncSession, *, name: str, teacher_id: int) -> Classroom:
    classroom = Classroom(name=name, teacher_id=teacher_id)
    db.add(classroom)
    await db.commit()
    await db.refresh(classroom)
    return classroom
