"""SQLAlchemy ORM models for school status SQLite persistence."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class TermRuleRecord(Base):
    __tablename__ = "term_rules"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    region: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)

    __table_args__ = (Index("idx_term_rules_year_region", "year", "region"),)


class SchoolRecord(Base):
    __tablename__ = "schools"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    region: Mapped[str] = mapped_column(String, nullable=False)
    # No foreign key: a dangling reference is reported at resolve time.
    term_rule_id: Mapped[str | None] = mapped_column(String, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)


class PublicHolidayRecord(Base):
    __tablename__ = "public_holidays"

    region: Mapped[str] = mapped_column(String, primary_key=True)
    # ISO YYYY-MM-DD
    holiday_date: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)


class SchoolEventRecord(Base):
    __tablename__ = "school_events"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    school_id: Mapped[str] = mapped_column(String, ForeignKey("schools.id"), nullable=False)
    # ISO YYYY-MM-DD
    event_date: Mapped[str] = mapped_column(String, nullable=False)
    is_closure: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)

    __table_args__ = (Index("idx_school_events_school_date", "school_id", "event_date"),)


__all__ = [
    "Base",
    "PublicHolidayRecord",
    "SchoolEventRecord",
    "SchoolRecord",
    "TermRuleRecord",
]
