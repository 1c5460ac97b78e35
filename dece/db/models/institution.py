"""Institution singleton and the course catalog."""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base
from dece.db.enums import Shift

# The institution table holds exactly one row under this id
INSTITUTION_ID = 1


class Institution(Base):
    """
    The school this store belongs to.

    ``amie`` is the official Ministry of Education code.
    """

    __tablename__ = "institution"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    amie: Mapped[str] = mapped_column(String(20), nullable=False)
    district: Mapped[str] = mapped_column(String(20), nullable=False)
    authority: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    school_year: Mapped[str] = mapped_column(String(20), nullable=False)
    logo_base64: Mapped[str | None] = mapped_column(Text, nullable=True)
    zonal_coordination: Mapped[str | None] = mapped_column(String(50), nullable=True)
    province: Mapped[str | None] = mapped_column(String(100), nullable=True)
    canton: Mapped[str | None] = mapped_column(String(100), nullable=True)
    parish: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Course(Base):
    """A grade + parallel + shift combination (e.g. OCTAVO EGB / A / Matutina)."""

    __tablename__ = "courses"
    __table_args__ = (
        UniqueConstraint("name", "parallel", "shift", name="uq_course_name_parallel_shift"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    parallel: Mapped[str] = mapped_column(String(10), nullable=False)
    shift: Mapped[str] = mapped_column(String(20), default=Shift.MORNING.value, nullable=False)
