"""Tests for follow-ups, DECE follow-up forms and psychosocial interviews."""

from datetime import date

import pytest

from dece.core.errors import IntegrityViolationError, RecordNotFoundError
from dece.db.enums import InterventionType, InterviewType, ParticipantType
from dece.db.models import CaseFile, DeceFollowUpForm, FollowUp, PsychosocialInterview
from dece.schemas.cases import DeceFollowUpFormCreate, FollowUpCreate, InterviewSave
from dece.services import follow_up_service, interview_service, record_service


def test_follow_ups_are_listed_by_date(db, case_file):
    for day in (15, 3, 9):
        follow_up_service.add_follow_up(
            db,
            FollowUpCreate(
                case_id=case_file.id,
                date=date(2024, 10, day),
                description=f"Seguimiento del día {day}",
                responsible="Analista DECE",
                intervention_type=InterventionType.FAMILY,
                participant_types=[ParticipantType.STUDENT, ParticipantType.REPRESENTATIVE],
            ),
        )

    rows = follow_up_service.list_follow_ups(db, case_file.id)

    assert [row.date.day for row in rows] == [3, 9, 15]
    assert rows[0].intervention_type == "Familiar"
    assert rows[0].participant_types == ["Estudiante", "Representante"]


def test_follow_up_for_missing_case_is_rejected(db):
    with pytest.raises(IntegrityViolationError):
        follow_up_service.add_follow_up(
            db,
            FollowUpCreate(
                case_id=321,
                date=date(2024, 10, 1),
                description="Huérfano",
                responsible="Analista DECE",
            ),
        )


def test_dece_form_creates_its_follow_up(db, case_file):
    form = follow_up_service.add_dece_follow_up_form(
        db,
        case_file.id,
        DeceFollowUpFormCreate(q1_has_plan=True, q16_monitor_name="Analista DECE"),
        responsible="Coordinador DECE",
        on_date=date(2024, 10, 20),
    )

    follow_up = record_service.get(db, FollowUp, form.follow_up_id)
    assert follow_up.case_id == case_file.id
    assert follow_up.date == date(2024, 10, 20)
    assert follow_up.description == follow_up_service.DECE_FORM_FOLLOW_UP_TEXT
    assert form.q1_has_plan is True
    assert form.q2_plan_remitted is False
    assert follow_up_service.get_dece_form_for_follow_up(db, follow_up.id).id == form.id


def test_dece_form_for_missing_case_raises_not_found(db):
    with pytest.raises(RecordNotFoundError):
        follow_up_service.add_dece_follow_up_form(
            db, 555, DeceFollowUpFormCreate(), responsible="Coordinador DECE"
        )
    assert record_service.count(db, FollowUp) == 0


def test_deleting_case_removes_forms_and_follow_ups(db, case_file):
    follow_up_service.add_dece_follow_up_form(
        db, case_file.id, DeceFollowUpFormCreate(), responsible="Coordinador DECE"
    )

    record_service.delete(db, CaseFile, case_file.id)

    assert record_service.count(db, FollowUp) == 0
    assert record_service.count(db, DeceFollowUpForm) == 0


def test_saving_interview_twice_updates_in_place(db, case_file):
    first = interview_service.save_interview(
        db,
        InterviewSave(
            case_file_id=case_file.id,
            interview_type=InterviewType.STUDENT,
            form_data={"motivo": "inicial"},
            completed_date=date(2024, 10, 2),
        ),
    )
    second = interview_service.save_interview(
        db,
        InterviewSave(
            case_file_id=case_file.id,
            interview_type="Estudiante",
            form_data={"motivo": "actualizado"},
            completed_date=date(2024, 10, 9),
        ),
    )

    assert second.id == first.id
    assert record_service.count(db, PsychosocialInterview) == 1
    stored = interview_service.get_interview(db, case_file.id, InterviewType.STUDENT)
    assert stored.form_data == {"motivo": "actualizado"}
    assert stored.completed_date == date(2024, 10, 9)


def test_one_interview_per_type(db, case_file):
    for interview_type in (InterviewType.STUDENT, InterviewType.REPRESENTATIVE):
        interview_service.save_interview(
            db, InterviewSave(case_file_id=case_file.id, interview_type=interview_type)
        )

    types = [row.interview_type for row in interview_service.list_interviews(db, case_file.id)]
    assert types == ["Estudiante", "Representante"]
