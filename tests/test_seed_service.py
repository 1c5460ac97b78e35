"""Tests for the demonstration seed."""

import dataclasses
import random
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from dece.core.security import verify_secret
from dece.db.enums import (
    DEFAULT_CASE_CATEGORIES,
    PEF_HOURS_BY_MODALITY,
    PEF_PASSING_SCORE,
    SEXUAL_VIOLENCE_CATEGORY,
    AttendeeType,
    EvaluationStatus,
    Gender,
    PefModality,
)
from dece.db.models import (
    INSTITUTION_ID,
    Appointment,
    CaseCategory,
    CaseFile,
    Course,
    DeceFollowUpForm,
    EducandoEnFamilia,
    FollowUp,
    Institution,
    PefModule,
    PregnancyCase,
    Representative,
    SexualViolenceCaseDetails,
    SexualViolenceVictim,
    Student,
    Teacher,
    User,
)
from dece.db.session import open_store
from dece.services import record_service, user_service
from dece.services.seed_service import (
    PEF_MODULES,
    SEED_PASSWORD,
    SeedPlan,
    seed_database,
)


def test_seed_creates_planned_volumes(seeded_db, seed_plan):
    assert record_service.count(seeded_db, Teacher) == seed_plan.teachers
    assert record_service.count(seeded_db, Representative) == seed_plan.representatives
    assert record_service.count(seeded_db, Student) == seed_plan.students
    assert record_service.count(seeded_db, CaseFile) == seed_plan.case_files
    assert record_service.count(seeded_db, Appointment) == seed_plan.appointments
    assert record_service.count(seeded_db, EducandoEnFamilia) == seed_plan.pef_evaluations
    assert record_service.count(seeded_db, User) == 3
    assert record_service.count(seeded_db, Course) == 18
    assert record_service.count(seeded_db, PefModule) == len(PEF_MODULES)
    assert record_service.get(seeded_db, Institution, INSTITUTION_ID) is not None


def test_seed_categories_match_defaults(seeded_db):
    categories = {c.name: c.is_protected for c in record_service.list_all(seeded_db, CaseCategory)}
    assert categories == dict(DEFAULT_CASE_CATEGORIES)


def test_seeded_references_resolve(seeded_db):
    representative_ids = {r.id for r in record_service.list_all(seeded_db, Representative)}
    teachers = {t.id: t for t in record_service.list_all(seeded_db, Teacher)}
    courses = {c.id: c for c in record_service.list_all(seeded_db, Course)}
    students = record_service.list_all(seeded_db, Student)
    category_names = {c.name for c in record_service.list_all(seeded_db, CaseCategory)}

    for student in students:
        assert student.representative_id in representative_ids
        if student.tutor_id is not None:
            tutored = courses[teachers[student.tutor_id].tutor_of_course_id]
            assert (tutored.name, tutored.parallel) == (student.course, student.parallel)

    student_ids = {s.id for s in students}
    for case in record_service.list_all(seeded_db, CaseFile):
        assert case.student_id in student_ids
        assert case.category in category_names
        assert case.due_date > case.opening_date

    for appointment in record_service.list_all(seeded_db, Appointment):
        assert appointment.student_id in student_ids
        assert appointment.start_time < appointment.end_time


def test_every_seeded_case_has_follow_ups(seeded_db):
    case_ids = {case.id for case in record_service.list_all(seeded_db, CaseFile)}
    followed = {row.case_id for row in record_service.list_all(seeded_db, FollowUp)}
    assert followed == case_ids


def test_seeded_sexual_violence_cases_are_complete(seeded_db):
    sv_cases = record_service.find_by(seeded_db, CaseFile, category=SEXUAL_VIOLENCE_CATEGORY)
    details = record_service.list_all(seeded_db, SexualViolenceCaseDetails)

    assert sorted(d.case_file_id for d in details) == sorted(c.id for c in sv_cases)
    for row in details:
        victims = record_service.find_by(seeded_db, SexualViolenceVictim, sv_case_details_id=row.id)
        assert len(victims) == 1
        forms = record_service.find_by(seeded_db, DeceFollowUpForm, case_file_id=row.case_file_id)
        assert len(forms) == 1
        follow_up = record_service.get(seeded_db, FollowUp, forms[0].follow_up_id)
        assert follow_up.case_id == row.case_file_id


def test_seeded_sexual_violence_dates_follow_case_opening(seeded_db):
    for row in record_service.list_all(seeded_db, SexualViolenceCaseDetails):
        case = record_service.get(seeded_db, CaseFile, row.case_file_id)
        assert row.incident_date == case.opening_date
        assert case.opening_date <= row.denunciation_date <= date.today()


def test_seeded_appointment_attendees_point_into_their_table(db, seed_plan, seed_today):
    plan = dataclasses.replace(seed_plan, appointments=60)
    seed_database(db, plan, rng=random.Random(1), today=seed_today)
    db.commit()

    tables = {
        AttendeeType.STUDENT.value: Student,
        AttendeeType.REPRESENTATIVE.value: Representative,
        AttendeeType.TEACHER.value: Teacher,
    }
    appointments = record_service.list_all(db, Appointment)

    assert {a.attendee_type for a in appointments} == set(tables)
    for appointment in appointments:
        model = tables[appointment.attendee_type]
        attendee = record_service.get(db, model, appointment.attendee_id)
        assert attendee is not None
        if appointment.attendee_type != AttendeeType.REPRESENTATIVE.value:
            assert appointment.title == f"Cita con {attendee.full_name}"


def test_seeded_cedulas_are_unique(seeded_db):
    cedulas = (
        [s.cedula for s in record_service.list_all(seeded_db, Student)]
        + [t.cedula for t in record_service.list_all(seeded_db, Teacher)]
        + [r.cedula for r in record_service.list_all(seeded_db, Representative)]
        + [u.cedula for u in record_service.list_all(seeded_db, User)]
    )
    assert len(cedulas) == len(set(cedulas))


def test_seeded_pef_evaluations_follow_scoring_rules(seeded_db):
    for evaluation in record_service.list_all(seeded_db, EducandoEnFamilia):
        assert evaluation.score == sum(evaluation.criteria_met)
        if evaluation.score >= PEF_PASSING_SCORE:
            assert evaluation.status == EvaluationStatus.APPROVED.value
            assert evaluation.hours == PEF_HOURS_BY_MODALITY[PefModality(evaluation.modality)]
        else:
            assert evaluation.status == EvaluationStatus.NOT_APPROVED.value
            assert evaluation.hours == 0


def test_seeded_pregnancies_belong_to_female_students(seeded_db, seed_plan):
    females = record_service.find_by(seeded_db, Student, gender=Gender.FEMALE.value)
    pregnancies = record_service.list_all(seeded_db, PregnancyCase)

    assert len(pregnancies) == min(seed_plan.pregnancies, len(females))
    female_ids = {s.id for s in females}
    for case in pregnancies:
        assert case.student_id in female_ids
        assert (case.estimated_due_date - case.pregnancy_start_date).days == 280


def test_seeded_coordinator_can_log_in_and_recover(seeded_db):
    user = user_service.authenticate(seeded_db, "coordinador@dece.com", SEED_PASSWORD)

    assert user.status == "Activo"
    assert verify_secret(SEED_PASSWORD, user.password_hash)
    assert user_service.verify_security_answers(user, ["  FIRULAIS ", "Guayaquil"])


def test_seed_is_deterministic_for_same_rng(tmp_path, seed_plan, seed_today):
    names = []
    for index in range(2):
        store, _ = open_store(str(tmp_path / f"store{index}.db"), seed=False)
        try:
            with store.transaction() as db:
                seed_database(db, seed_plan, rng=random.Random(42), today=seed_today)
            with store.transaction() as db:
                names.append([s.full_name for s in record_service.list_all(db, Student)])
        finally:
            store.close()

    assert names[0] == names[1]


def test_empty_plan_still_creates_reference_data(db, seed_today):
    plan = SeedPlan(
        teachers=0,
        representatives=0,
        students=0,
        case_files=0,
        pregnancies=0,
        assisted_classes=0,
        appointments=0,
        preventive_activities=0,
        pef_evaluations=0,
    )
    report = seed_database(db, plan, rng=random.Random(1), today=seed_today)
    db.commit()

    assert report.counts["case_categories"] == len(DEFAULT_CASE_CATEGORIES)
    assert report.counts["students"] == 0
    assert record_service.count(db, User) == 3


def test_seed_is_not_rerunnable(seeded_db, seed_plan, seed_today):
    with pytest.raises(IntegrityError):
        seed_database(seeded_db, seed_plan, rng=random.Random(7), today=seed_today)
    seeded_db.rollback()


@pytest.mark.parametrize(
    "overrides",
    [
        {"teachers": -1},
        {"representatives": 0},
        {"students": 0},
        {"teachers": 0},
    ],
)
def test_seed_plan_rejects_impossible_volumes(overrides):
    with pytest.raises(ValueError):
        SeedPlan(**overrides)
