"""Demonstration data for a freshly created store.

``seed_database`` runs once, inside the transaction that creates the store.
It only flushes; the caller commits or rolls back. Every step uses the ids
assigned by the previous steps, so references in the seeded data always
resolve.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, timedelta

from sqlalchemy.orm import Session

from dece.core.config import settings
from dece.core.security import hash_secret, normalize_answer
from dece.core.structured_logging import build_log_context
from dece.db.enums import (
    DEFAULT_CASE_CATEGORIES,
    DEFAULT_FOLLOW_UP_DAYS,
    GESTATION_DAYS,
    PEF_CRITERIA_COUNT,
    SEXUAL_VIOLENCE_CATEGORY,
    AppointmentStatus,
    AttendeeType,
    AudienceType,
    CasePriority,
    CaseStatus,
    Gender,
    HealthCareType,
    InterventionType,
    ParticipantType,
    PefModality,
    Shift,
    UserRole,
    UserStatus,
)
from dece.db.models import (
    INSTITUTION_ID,
    Appointment,
    AssistedClass,
    CaseCategory,
    CaseFile,
    Course,
    DeceFollowUpForm,
    EducandoEnFamilia,
    FollowUp,
    Institution,
    PefModule,
    PregnancyCase,
    PreventiveActivity,
    Representative,
    SexualViolenceCaseDetails,
    SexualViolenceVictim,
    Student,
    Teacher,
    User,
)
from dece.services.pef_service import evaluate_criteria

logger = logging.getLogger(__name__)

# Sample data pools
FIRST_NAMES = [
    "Sofía", "Mateo", "Valentina", "Thiago", "Isabella", "Sebastián", "Camila",
    "Matías", "Valeria", "Benjamín", "Luciana", "Alejandro", "Mariana", "Samuel",
    "Gabriela", "Diego", "Daniela", "Leonardo", "Martina", "Adrián", "Ana",
    "Carlos", "Luis", "María", "José", "Juan", "David", "Emily", "Mía", "Lucas",
]

LAST_NAMES = [
    "García", "Rodríguez", "Martínez", "Hernández", "López", "González", "Pérez",
    "Sánchez", "Ramírez", "Torres", "Flores", "Rivera", "Gómez", "Díaz", "Reyes",
    "Morales", "Ortiz", "Zambrano", "Vera", "Cedeño", "Mendoza", "Macías",
    "Pincay", "Anchundia", "Intriago", "Alvarado", "Saltos", "Chávez", "Ponce",
    "Suárez",
]

COURSE_LEVELS = [
    "OCTAVO EGB", "NOVENO EGB", "DÉCIMO EGB",
    "PRIMERO BGU", "SEGUNDO BGU", "TERCERO BGU",
]
PARALLELS = ["A", "B", "C"]

SEED_PASSWORD = "dece2024"
SCHOOL_YEAR_START = date(2023, 9, 1)

INFRACTOR_RELATIONSHIPS = ["Docente", "Familiar", "Estudiante", "Externo"]
CRIME_TYPES = ["Abuso Sexual", "Violación"]
PREVENTION_TOPICS = ["bullying", "drogas", "violencia"]

PEF_MODULES = [
    ("Módulo 1: Convivencia Armónica", date(2024, 5, 1), date(2024, 6, 30)),
    ("Módulo 2: Prevención de Violencia", date(2024, 7, 1), date(2024, 8, 31)),
    ("Módulo 3: Uso de Drogas", date(2024, 9, 1), date(2024, 10, 31)),
]


@dataclass
class SeedPlan:
    """How many rows of each generated kind to create."""

    teachers: int = 25
    representatives: int = 150
    students: int = 200
    case_files: int = 50
    pregnancies: int = 5
    assisted_classes: int = 5
    appointments: int = 30
    preventive_activities: int = 15
    pef_evaluations: int = 15

    def __post_init__(self) -> None:
        for name, value in self.__dict__.items():
            if value < 0:
                raise ValueError(f"{name} must not be negative")
        if self.students and not self.representatives:
            raise ValueError("students need at least one representative")
        needs_students = (
            self.case_files or self.assisted_classes or self.appointments
        )
        if needs_students and not self.students:
            raise ValueError("case files, assisted classes and appointments need students")
        if self.pef_evaluations and not self.teachers:
            raise ValueError("PEF evaluations need at least one teacher")

    @classmethod
    def from_settings(cls) -> "SeedPlan":
        return cls(
            teachers=settings.SEED_TEACHERS,
            representatives=settings.SEED_REPRESENTATIVES,
            students=settings.SEED_STUDENTS,
            case_files=settings.SEED_CASE_FILES,
        )


@dataclass
class SeedReport:
    """Rows created per table."""

    counts: Counter = field(default_factory=Counter)

    def add(self, table: str, rows: int = 1) -> None:
        self.counts[table] += rows

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class _Generator:
    """Random helpers bound to one RNG; cédulas never repeat within a run."""

    def __init__(self, rng: random.Random, reserved: set[str]):
        self.rng = rng
        self._used_cedulas = set(reserved)

    def full_name(self) -> str:
        rng = self.rng
        return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)} {rng.choice(LAST_NAMES)}"

    def cedula(self) -> str:
        while True:
            value = str(self.rng.randint(1_000_000_000, 9_999_999_999))
            if value not in self._used_cedulas:
                self._used_cedulas.add(value)
                return value

    def phone(self) -> str:
        return f"09{self.rng.randint(10_000_000, 99_999_999)}"

    def date_between(self, start: date, end: date) -> date:
        if end <= start:
            return start
        return start + timedelta(days=self.rng.randint(0, (end - start).days))


def _seed_categories(db: Session, report: SeedReport) -> list[CaseCategory]:
    categories = [
        CaseCategory(name=name, is_protected=is_protected)
        for name, is_protected in DEFAULT_CASE_CATEGORIES
    ]
    db.add_all(categories)
    db.flush()
    report.add(CaseCategory.__tablename__, len(categories))
    return categories


def _seed_institution(db: Session, report: SeedReport) -> Institution:
    institution = Institution(
        id=INSTITUTION_ID,
        name='Unidad Educativa Fiscal "Simón Bolívar"',
        amie="09H00001",
        district="09D01",
        authority="MSc. Elena Rodríguez",
        phone="042123456",
        email="info@simonbolivar.edu.ec",
        address="Av. 9 de Octubre y Boyacá",
        school_year="2024-2025",
        zonal_coordination="ZONA 8",
        province="GUAYAS",
        canton="GUAYAQUIL",
        parish="ROCAFUERTE",
    )
    db.add(institution)
    db.flush()
    report.add(Institution.__tablename__)
    return institution


def _seed_users(db: Session, report: SeedReport) -> list[User]:
    coordinator = User(
        full_name="Coordinador DECE Principal",
        cedula="0999999999",
        email="coordinador@dece.com",
        password_hash=hash_secret(SEED_PASSWORD),
        role=UserRole.COORDINATOR.value,
        status=UserStatus.ACTIVE.value,
        first_login=False,
        position="Coordinador/a del DECE",
        security_questions=[
            {
                "question": "¿Cuál es el nombre de su primera mascota?",
                "answer_hash": hash_secret(normalize_answer("firulais")),
            },
            {
                "question": "¿En qué ciudad nació?",
                "answer_hash": hash_secret(normalize_answer("guayaquil")),
            },
        ],
    )
    analyst = User(
        full_name="Analista DECE",
        cedula="0988888888",
        email="analista@dece.com",
        password_hash=hash_secret(SEED_PASSWORD),
        role=UserRole.ANALYST.value,
        status=UserStatus.ACTIVE.value,
        first_login=False,
    )
    professional = User(
        full_name="Profesional DECE",
        cedula="0977777777",
        email="profesional@dece.com",
        password_hash=hash_secret(SEED_PASSWORD),
        role=UserRole.PROFESSIONAL.value,
        status=UserStatus.PENDING.value,
        first_login=True,
    )
    users = [coordinator, analyst, professional]
    db.add_all(users)
    db.flush()
    report.add(User.__tablename__, len(users))
    return users


def _seed_courses(db: Session, report: SeedReport) -> list[Course]:
    courses = [
        Course(name=level, parallel=parallel, shift=Shift.MORNING.value)
        for level in COURSE_LEVELS
        for parallel in PARALLELS
    ]
    db.add_all(courses)
    db.flush()
    report.add(Course.__tablename__, len(courses))
    return courses


def _seed_teachers(
    db: Session, gen: _Generator, courses: list[Course], count: int, report: SeedReport
) -> list[Teacher]:
    teachers = []
    for i in range(count):
        tutored = courses[i] if i < len(courses) else None
        teachers.append(
            Teacher(
                full_name=gen.full_name(),
                cedula=gen.cedula(),
                email=f"docente{i}@simonbolivar.edu.ec",
                phone=gen.phone(),
                tutor_of_course_id=tutored.id if tutored else None,
                is_tutor=tutored is not None,
            )
        )
    db.add_all(teachers)
    db.flush()
    report.add(Teacher.__tablename__, len(teachers))
    return teachers


def _seed_representatives(
    db: Session, gen: _Generator, count: int, report: SeedReport
) -> list[Representative]:
    representatives = [
        Representative(
            full_name=gen.full_name(),
            cedula=gen.cedula(),
            age=gen.rng.randint(28, 57),
            address=f"Dirección de prueba {i + 1}",
            phone=gen.phone(),
        )
        for i in range(count)
    ]
    db.add_all(representatives)
    db.flush()
    report.add(Representative.__tablename__, len(representatives))
    return representatives


def _seed_students(
    db: Session,
    gen: _Generator,
    courses: list[Course],
    teachers: list[Teacher],
    representatives: list[Representative],
    count: int,
    report: SeedReport,
) -> list[Student]:
    tutor_by_course = {
        teacher.tutor_of_course_id: teacher
        for teacher in teachers
        if teacher.tutor_of_course_id is not None
    }
    students = []
    for i in range(count):
        course = gen.rng.choice(courses)
        tutor = tutor_by_course.get(course.id)
        students.append(
            Student(
                full_name=gen.full_name(),
                cedula=gen.cedula(),
                gender=gen.rng.choice([Gender.MALE, Gender.FEMALE]).value,
                birth_date=gen.date_between(date(2006, 1, 1), date(2012, 12, 31)),
                course=course.name,
                parallel=course.parallel,
                tutor_id=tutor.id if tutor else None,
                representative_id=gen.rng.choice(representatives).id,
                special_condition="Dificultad de aprendizaje leve" if i % 20 == 0 else None,
            )
        )
    db.add_all(students)
    db.flush()
    report.add(Student.__tablename__, len(students))
    return students


def _seed_case_files(
    db: Session,
    gen: _Generator,
    categories: list[CaseCategory],
    students: list[Student],
    count: int,
    today: date,
    report: SeedReport,
) -> list[CaseFile]:
    cases = []
    for i in range(count):
        category = gen.rng.choice(categories).name
        student = gen.rng.choice(students)
        opening = gen.date_between(SCHOOL_YEAR_START, today)
        cases.append(
            CaseFile(
                student_id=student.id,
                code=f"{category[:3].upper()}-{student.cedula[:4]}-{i}",
                category=category,
                priority=gen.rng.choice(list(CasePriority)).value,
                status=gen.rng.choice(list(CaseStatus)).value,
                opening_date=opening,
                due_date=opening + timedelta(days=DEFAULT_FOLLOW_UP_DAYS),
                description=(
                    f"Descripción inicial del caso sobre {category.lower()} para el estudiante."
                ),
                attachments=[],
            )
        )
    db.add_all(cases)
    db.flush()
    report.add(CaseFile.__tablename__, len(cases))
    return cases


def _seed_follow_ups(
    db: Session,
    gen: _Generator,
    cases: list[CaseFile],
    users: list[User],
    today: date,
    report: SeedReport,
) -> None:
    follow_ups = []
    for case in cases:
        for i in range(gen.rng.randint(1, 5)):
            follow_ups.append(
                FollowUp(
                    case_id=case.id,
                    date=gen.date_between(case.opening_date, today),
                    description=f"Seguimiento N° {i + 1} del caso. Se conversó con el estudiante.",
                    responsible=gen.rng.choice(users).full_name,
                    intervention_type=gen.rng.choice(list(InterventionType)).value,
                    is_effective=gen.rng.random() > 0.2,
                    participant_types=[
                        ParticipantType.STUDENT.value,
                        ParticipantType.REPRESENTATIVE.value,
                    ],
                )
            )
    db.add_all(follow_ups)
    db.flush()
    report.add(FollowUp.__tablename__, len(follow_ups))


def _seed_sexual_violence(
    db: Session,
    gen: _Generator,
    cases: list[CaseFile],
    students_by_id: dict[int, Student],
    representatives_by_id: dict[int, Representative],
    users: list[User],
    institution: Institution,
    today: date,
    report: SeedReport,
) -> None:
    responsible, monitor = users[0], users[1]
    for case in cases:
        if case.category != SEXUAL_VIOLENCE_CATEGORY:
            continue
        student = students_by_id[case.student_id]
        representative = representatives_by_id.get(student.representative_id)
        incident_date = case.opening_date

        details = SexualViolenceCaseDetails(
            case_file_id=case.id,
            responsible_name=responsible.full_name,
            responsible_cedula=responsible.cedula,
            responsible_phone=institution.phone or "",
            responsible_cell_phone=responsible.phone or "",
            responsible_email=responsible.email,
            responsible_position=responsible.position or "",
            incident_institution_amie=institution.amie,
            incident_institution_name=institution.name,
            zone="8",
            district=institution.district,
            province=institution.province or "",
            canton=institution.canton or "",
            parish=institution.parish or "",
            has_dece=True,
            dece_professional_name=responsible.full_name,
            rector_name="MSc. Elena Rodríguez",
            rector_position="Rectora",
            infractor_full_name=gen.full_name(),
            infractor_sex=gen.rng.choice([Gender.MALE, Gender.FEMALE]).value,
            infractor_relationship=gen.rng.choice(INFRACTOR_RELATIONSHIPS),
            denunciation_date=gen.date_between(case.opening_date, today),
            denunciator_relationship="Representante Legal",
            incident_date=incident_date,
            crime_type=gen.rng.choice(CRIME_TYPES),
            has_fiscalia_denunciation=gen.rng.random() > 0.3,
        )
        db.add(details)
        db.flush()

        db.add(
            SexualViolenceVictim(
                sv_case_details_id=details.id,
                doc_type="CÉDULA",
                cedula=student.cedula,
                full_name=student.full_name,
                representative_cedula=representative.cedula if representative else "",
                representative_name=representative.full_name if representative else "",
                sex=student.gender,
                birth_date=student.birth_date,
                age_at_incident=incident_date.year - student.birth_date.year,
                education_level=student.course,
            )
        )

        follow_up = FollowUp(
            case_id=case.id,
            date=today,
            description="Formulario DECE de V.S. creado.",
            responsible=responsible.full_name,
        )
        db.add(follow_up)
        db.flush()

        db.add(
            DeceFollowUpForm(
                case_file_id=case.id,
                follow_up_id=follow_up.id,
                q1_has_plan=True,
                q2_plan_remitted=True,
                q3_plan_has_objective=True,
                q4_has_legal_support=gen.rng.random() > 0.5,
                q5_has_psychological_support=True,
                q6_has_family_psychological_support=gen.rng.random() > 0.5,
                q7_has_community_psychological_support=False,
                q8_has_medical_support=True,
                q9_has_family_medical_support=False,
                q10_has_community_medical_support=False,
                q11_has_pedagogical_support=True,
                q12_has_community_pedagogical_support=False,
                q13_has_infrastructure_measures=False,
                q14_plan_has_budget=False,
                q15_plan_has_schedule=True,
                q16_monitor_name=monitor.full_name,
                q17_monitor_position=monitor.position or "Analista",
                q18_victim_changed_institution=False,
                q19_psychological_support_provider="MSP",
                q20_has_intervention_plan=True,
                q21_victim_in_education_system=True,
                q22_dece_supports_in_new_institution=True,
                q23_resulted_in_pregnancy=False,
                observations="Se realiza seguimiento constante al caso.",
            )
        )
        db.flush()
        report.add(SexualViolenceCaseDetails.__tablename__)
        report.add(SexualViolenceVictim.__tablename__)
        report.add(FollowUp.__tablename__)
        report.add(DeceFollowUpForm.__tablename__)


def _seed_pregnancies(
    db: Session, gen: _Generator, students: list[Student], count: int, report: SeedReport
) -> None:
    female_students = [s for s in students if s.gender == Gender.FEMALE.value][:count]
    pregnancies = []
    for student in female_students:
        start = gen.date_between(SCHOOL_YEAR_START, date(2024, 3, 1))
        pregnancies.append(
            PregnancyCase(
                student_id=student.id,
                pregnancy_start_date=start,
                estimated_due_date=start + timedelta(days=GESTATION_DAYS),
                is_high_risk=gen.rng.random() > 0.8,
                needs_alternative_education=gen.rng.random() > 0.7,
                is_from_violence=gen.rng.random() > 0.9,
                receives_health_care=gen.rng.choice(list(HealthCareType)).value,
            )
        )
    db.add_all(pregnancies)
    db.flush()
    report.add(PregnancyCase.__tablename__, len(pregnancies))


def _seed_calendar(
    db: Session,
    gen: _Generator,
    plan: SeedPlan,
    students: list[Student],
    teachers: list[Teacher],
    users: list[User],
    today: date,
    report: SeedReport,
) -> None:
    assisted = [
        AssistedClass(
            student_id=gen.rng.choice(students).id,
            reason=f"Recuperación por procedimiento médico N° {i + 1}",
            permission_period="30 días",
            tentative_return_date=gen.date_between(today, today + timedelta(days=120)),
        )
        for i in range(plan.assisted_classes)
    ]
    db.add_all(assisted)
    report.add(AssistedClass.__tablename__, len(assisted))

    appointments = []
    for _ in range(plan.appointments):
        student = gen.rng.choice(students)
        hour = gen.rng.randint(8, 15)
        attendee_types = [AttendeeType.STUDENT, AttendeeType.REPRESENTATIVE]
        if teachers:
            attendee_types.append(AttendeeType.TEACHER)
        attendee_type = gen.rng.choice(attendee_types)
        if attendee_type is AttendeeType.STUDENT:
            attendee_id, title = student.id, f"Cita con {student.full_name}"
        elif attendee_type is AttendeeType.TEACHER:
            teacher = gen.rng.choice(teachers)
            attendee_id, title = teacher.id, f"Cita con {teacher.full_name}"
        else:
            attendee_id = student.representative_id
            title = f"Cita con representante de {student.full_name}"
        appointments.append(
            Appointment(
                date=gen.date_between(today - timedelta(days=30), today + timedelta(days=60)),
                start_time=f"{hour:02d}:00",
                end_time=f"{hour:02d}:45",
                title=title,
                attendee_id=attendee_id,
                attendee_type=attendee_type.value,
                reason="Seguimiento académico y conductual",
                status=AppointmentStatus.SCHEDULED.value,
                responsible_user_id=users[0].id,
                student_id=student.id,
            )
        )
    db.add_all(appointments)
    report.add(Appointment.__tablename__, len(appointments))

    activities = [
        PreventiveActivity(
            date=gen.date_between(SCHOOL_YEAR_START, today),
            start_time="10:00",
            end_time="11:00",
            topic=f"Taller sobre prevención de {gen.rng.choice(PREVENTION_TOPICS)}",
            is_executed=True,
            audience=[AudienceType.STUDENTS.value, AudienceType.PARENTS.value],
            attendees_male=gen.rng.randint(20, 49),
            attendees_female=gen.rng.randint(20, 49),
            results="Participación activa de la comunidad.",
        )
        for _ in range(plan.preventive_activities)
    ]
    db.add_all(activities)
    report.add(PreventiveActivity.__tablename__, len(activities))
    db.flush()


def _seed_pef(
    db: Session, gen: _Generator, teachers: list[Teacher], count: int, report: SeedReport
) -> None:
    modules = [
        PefModule(name=name, start_date=start, end_date=end)
        for name, start, end in PEF_MODULES
    ]
    db.add_all(modules)
    db.flush()
    report.add(PefModule.__tablename__, len(modules))

    evaluations = []
    for _ in range(count):
        module = gen.rng.choice(modules)
        score = gen.rng.randint(4, 8)
        criteria = [j < score for j in range(PEF_CRITERIA_COUNT)]
        result = evaluate_criteria(criteria, PefModality.IN_PERSON)
        evaluations.append(
            EducandoEnFamilia(
                teacher_id=gen.rng.choice(teachers).id,
                module_name=module.name,
                modality=PefModality.IN_PERSON.value,
                start_date=module.start_date,
                end_date=module.end_date,
                score=result.score,
                hours=result.hours,
                status=result.status.value,
                criteria_met=criteria,
            )
        )
    db.add_all(evaluations)
    db.flush()
    report.add(EducandoEnFamilia.__tablename__, len(evaluations))


def seed_database(
    db: Session,
    plan: SeedPlan | None = None,
    rng: random.Random | None = None,
    today: date | None = None,
) -> SeedReport:
    """
    Populate an empty store with demonstration data.

    Not idempotent: running it twice on the same store fails on the unique
    keys of the fixed rows. The store initializer only calls it for a store
    it has just created.
    """
    plan = plan or SeedPlan()
    rng = rng or random.Random()
    today = today or date.today()
    report = SeedReport()

    categories = _seed_categories(db, report)
    institution = _seed_institution(db, report)
    users = _seed_users(db, report)
    gen = _Generator(rng, reserved={user.cedula for user in users})

    courses = _seed_courses(db, report)
    teachers = _seed_teachers(db, gen, courses, plan.teachers, report)
    representatives = _seed_representatives(db, gen, plan.representatives, report)
    students = _seed_students(
        db, gen, courses, teachers, representatives, plan.students, report
    )
    cases = _seed_case_files(db, gen, categories, students, plan.case_files, today, report)
    _seed_follow_ups(db, gen, cases, users, today, report)
    _seed_sexual_violence(
        db,
        gen,
        cases,
        {student.id: student for student in students},
        {rep.id: rep for rep in representatives},
        users,
        institution,
        today,
        report,
    )
    _seed_pregnancies(db, gen, students, plan.pregnancies, report)
    if students:
        _seed_calendar(db, gen, plan, students, teachers, users, today, report)
    _seed_pef(db, gen, teachers, plan.pef_evaluations, report)

    logger.info(
        "Seeded %d rows across %d tables",
        report.total,
        len(report.counts),
        extra=build_log_context(operation="seed", row_count=report.total),
    )
    return report
