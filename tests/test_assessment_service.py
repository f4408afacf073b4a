# /tests/test_assessment_service.py

import datetime as dt
import json

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import AssessmentPersistenceError, InvalidAssessmentTypeError
from app.models import AssessmentKind, AssessmentRef, QAssignment, Question, Quiz, Test
from app.repositories import assessment_repository
from app.repositories.assessment_repository import get_questions_by_assessment
from app.schemas.assessments import AssessmentSubmission, QuestionSubmission
from app.services import assessment_service
from app.services.assessment_service import (
    create_assessment,
    materialize_questions,
    resolve_correct_answer,
    resolve_storage_target,
)


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


async def _count_all(db) -> dict:
    return {m.__tablename__: await _count(db, m) for m in (Quiz, Test, QAssignment, Question)}


def _submission(assessment_type, questions, classroom_id, **extra) -> AssessmentSubmission:
    return AssessmentSubmission(
        title="Geography",
        description="Capitals of Europe",
        classroom_id=classroom_id,
        assessment_type=assessment_type,
        questions=questions,
        **extra,
    )


# --- Resolver ---

@pytest.mark.parametrize(
    "tag, model, accepts_due_date",
    [("quiz", Quiz, False), ("test", Test, False), ("q_assignment", QAssignment, True)],
)
def test_resolve_storage_target_known_tags(tag, model, accepts_due_date):
    target = resolve_storage_target(tag)
    assert target.kind == AssessmentKind(tag)
    assert target.model is model
    assert target.accepts_due_date is accepts_due_date


@pytest.mark.parametrize("tag", ["survey", "", None, "Quiz", " quiz", "quizzes", "q-assignment"])
def test_resolve_storage_target_rejects_everything_else(tag):
    with pytest.raises(InvalidAssessmentTypeError):
        resolve_storage_target(tag)


# --- Answer resolution ---

@pytest.mark.parametrize(
    "options, correct, expected",
    [
        ({"0": "Berlin", "1": "Paris"}, "1", "Paris"),
        ({"0": "Berlin", "1": "Paris"}, "9", None),
        ({"0": "Berlin", "1": ""}, "1", None),
        ({"0": "Berlin"}, None, None),
        ({}, "0", None),
        (None, "0", None),
    ],
)
def test_resolve_correct_answer(options, correct, expected):
    assert resolve_correct_answer(options, correct) == expected


# --- Materializer ---

async def test_materialize_persists_well_formed_questions_in_order(db, classroom):
    quiz = Quiz(title="Q", description="", classroom_id=classroom.id)
    db.add(quiz)
    await db.commit()
    ref = AssessmentRef(kind=AssessmentKind.QUIZ, assessment_id=quiz.id)
    questions = [
        QuestionSubmission(text=f"Question {i}", options={"0": f"wrong {i}", "1": f"right {i}"}, correct="1")
        for i in range(5)
    ]

    result = await materialize_questions(db, ref, questions)

    assert result.persisted_count == 5
    assert result.skipped_count == 0
    rows = await get_questions_by_assessment(db, ref)
    assert [r.question_text for r in rows] == [f"Question {i}" for i in range(5)]
    assert [r.id for r in rows] == sorted(r.id for r in rows)
    for i, row in enumerate(rows):
        assert row.correct_answer == f"right {i}"
        assert row.assessment_id == quiz.id
        assert row.assessment_type == "quiz"
        assert row.assessment_ref == ref


async def test_materialize_skips_unresolvable_questions_without_aborting(db, classroom):
    test = Test(title="T", description="", classroom_id=classroom.id)
    db.add(test)
    await db.commit()
    ref = AssessmentRef(kind=AssessmentKind.TEST, assessment_id=test.id)
    questions = [
        QuestionSubmission(text="no answer picked", options={"0": "a"}),
        QuestionSubmission(text="good one", options={"0": "a", "1": "b"}, correct="0"),
        QuestionSubmission(text="empty option text", options={"0": ""}, correct="0"),
        QuestionSubmission(text="missing key", options={"0": "a"}, correct="3"),
    ]

    result = await materialize_questions(db, ref, questions)

    assert [q.question_text for q in result.persisted] == ["good one"]
    assert [(s.position, s.question_text) for s in result.skipped] == [
        (0, "no answer picked"),
        (2, "empty option text"),
        (3, "missing key"),
    ]
    assert await _count(db, Question) == 1



async def test_materialize_skips_malformed_questions_and_keeps_going(db, classroom):
    quiz = Quiz(title="Q", description="", classroom_id=classroom.id)
    db.add(quiz)
    await db.commit()
    ref = AssessmentRef(kind=AssessmentKind.QUIZ, assessment_id=quiz.id)
    questions = [
        {"text": "nested options", "options": {"0": {"x": "oops"}}, "correct": "0"},
        {"text": "good one", "options": {"0": "a"}, "correct": "0"},
        "not a question",
    ]

    result = await materialize_questions(db, ref, questions)

    assert [q.question_text for q in result.persisted] == ["good one"]
    assert [(s.position, s.question_text, s.reason) for s in result.skipped] == [
        (0, "nested options", "malformed question"),
        (2, "", "malformed question"),
    ]
    assert await _count(db, Question) == 1

async def test_options_round_trip_exactly(db, classroom):
    quiz = Quiz(title="Q", description="", classroom_id=classroom.id)
    db.add(quiz)
    await db.commit()
    ref = AssessmentRef(kind=AssessmentKind.QUIZ, assessment_id=quiz.id)
    options = {"0": "naïve", "1": "10 > 9", "2": '"quoted"', "10": "tenth"}

    await materialize_questions(db, ref, [QuestionSubmission(text="Unicode", options=options, correct="10")])

    (row,) = await get_questions_by_assessment(db, ref)
    assert json.loads(row.options) == options
    assert row.options_mapping == options
    assert row.correct_answer == "tenth"


# --- Full authoring flow ---

async def test_create_q_assignment_scenario(db, classroom):
    submission = _submission(
        "q_assignment",
        [
            QuestionSubmission(text="Capital of France?", options={"0": "Berlin", "1": "Paris"}, correct="1"),
            QuestionSubmission(text="Capital of Spain?", options={"0": "Madrid"}, correct="9"),
        ],
        classroom.id,
        due_date=dt.date(2025, 3, 1),
    )

    result = await create_assessment(db, submission)

    assert result.ref.kind is AssessmentKind.Q_ASSIGNMENT
    assert result.materialization.persisted_count == 1
    assert result.materialization.skipped_count == 1
    parent = await assessment_repository.get_assessment_by_id(db, QAssignment, result.ref.assessment_id)
    assert parent.due_date == dt.date(2025, 3, 1)
    assert parent.classroom_id == classroom.id
    (row,) = await get_questions_by_assessment(db, result.ref)
    assert row.correct_answer == "Paris"
    assert await _count_all(db) == {"quizzes": 0, "tests": 0, "q_assignments": 1, "questions": 1}


async def test_create_q_assignment_without_due_date(db, classroom):
    result = await create_assessment(db, _submission("q_assignment", [], classroom.id))

    parent = await assessment_repository.get_assessment_by_id(db, QAssignment, result.ref.assessment_id)
    assert parent.due_date is None


async def test_create_quiz_ignores_due_date(db, classroom, mocker):
    spy = mocker.spy(assessment_service, "create_assessment_record")

    result = await create_assessment(db, _submission("quiz", [], classroom.id, due_date=dt.date(2025, 1, 1)))

    assert result.ref.kind is AssessmentKind.QUIZ
    assert spy.call_args.kwargs["due_date"] is None
    assert await _count(db, Quiz) == 1


async def test_create_with_zero_questions_succeeds(db, classroom):
    result = await create_assessment(db, _submission("test", [], classroom.id))

    assert result.materialization.persisted_count == 0
    assert await _count(db, Test) == 1


async def test_invalid_type_writes_nothing(db, classroom):
    submission = _submission(
        "survey", [QuestionSubmission(text="Q", options={"0": "a"}, correct="0")], classroom.id
    )

    with pytest.raises(InvalidAssessmentTypeError):
        await create_assessment(db, submission)

    assert await _count_all(db) == {"quizzes": 0, "tests": 0, "q_assignments": 0, "questions": 0}


async def test_parent_insert_failure_attempts_no_questions(db, classroom, mocker):
    mocker.patch.object(assessment_service, "create_assessment_record", side_effect=SQLAlchemyError("db down"))
    add_question = mocker.patch.object(assessment_service, "add_question")
    submission = _submission("quiz", [QuestionSubmission(text="Q", options={"0": "a"}, correct="0")], classroom.id)

    with pytest.raises(AssessmentPersistenceError):
        await create_assessment(db, submission)

    add_question.assert_not_called()
    assert await _count(db, Question) == 0


async def test_question_insert_failure_stops_loop_and_keeps_earlier_rows(db, classroom, mocker):
    real_add_question = assessment_repository.add_question
    calls = []

    async def flaky_add_question(session, **kwargs):
        calls.append(kwargs["question_text"])
        if len(calls) == 2:
            raise SQLAlchemyError("connection lost")
        return await real_add_question(session, **kwargs)

    mocker.patch.object(assessment_service, "add_question", new=flaky_add_question)
    questions = [
        QuestionSubmission(text=f"Q{i}", options={"0": "a"}, correct="0") for i in range(3)
    ]

    with pytest.raises(AssessmentPersistenceError):
        await create_assessment(db, _submission("quiz", questions, classroom.id))

    assert calls == ["Q0", "Q1"]
    rows = (await db.execute(select(Question.question_text))).scalars().all()
    assert rows == ["Q0"]
    assert await _count(db, Quiz) == 1
