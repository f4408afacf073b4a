"""教师创建测评：GET 表单页、POST 保存测评及全部题目。"""
import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_teacher
from app.api.redirects import flash_and_redirect, redirect_to
from app.core.db import get_db
from app.core.exceptions import AssessmentSubmissionError
from app.core.session import SessionIdentity, pop_flashed_messages
from app.repositories.classroom_repository import list_classrooms_by_teacher
from app.schemas.assessments import AssessmentSubmission, ClassroomOption, assessment_type_options
from app.schemas.pages import CreateAssessmentView
from app.schemas.user import SessionUser
from app.services.assessment_service import create_assessment

logger = logging.getLogger(__name__)
router = APIRouter()

CREATE_ASSESSMENT_PATH = "/teacher/create-assessment"
CREATE_ASSESSMENT_ERROR = "There was an error creating the assessment."


@router.get("/create-assessment", response_model=CreateAssessmentView)
async def create_assessment_page(
    request: Request,
    identity: SessionIdentity = Depends(require_teacher),
    db: AsyncSession = Depends(get_db),
):
    """表单页：列出该教师的班级供选择。"""
    try:
        classrooms = await list_classrooms_by_teacher(db, identity.user_id)
    except SQLAlchemyError:
        logger.exception("[create-assessment] 加载班级失败 teacher_id=%s", identity.user_id)
        return redirect_to("/dashboard")
    return CreateAssessmentView(
        view="create_assessment",
        user=SessionUser.from_identity(identity),
        messages=pop_flashed_messages(request),
        classrooms=[ClassroomOption(id=c.id, name=c.name) for c in classrooms],
        assessmentTypes=assessment_type_options(),
    )


@router.post("/create-assessment")
async def create_assessment_submit(
    request: Request,
    identity: SessionIdentity = Depends(require_teacher),
    db: AsyncSession = Depends(get_db),
):
    """保存测评。类型非法、主表或题目写入失败时整体报错；格式错误或缺少答案的题目仅跳过。"""
    form = await request.form()
    try:
        submission = AssessmentSubmission.from_form(form.multi_items())
        result = await create_assessment(db, submission)
    except ValidationError as e:
        logger.warning("[create-assessment] 表单校验失败 teacher_id=%s: %s", identity.user_id, e.errors())
        return flash_and_redirect(request, "error", CREATE_ASSESSMENT_ERROR, CREATE_ASSESSMENT_PATH)
    except AssessmentSubmissionError:
        logger.exception("[create-assessment] 创建测评失败 teacher_id=%s", identity.user_id)
        return flash_and_redirect(request, "error", CREATE_ASSESSMENT_ERROR, CREATE_ASSESSMENT_PATH)

    message = f"{result.ref.kind.value} created successfully!"
    skipped = result.materialization.skipped_count
    if skipped:
        message += f" {skipped} question(s) that were malformed or had no correct answer were skipped."
    return flash_and_redirect(request, "success", message, "/dashboard")
