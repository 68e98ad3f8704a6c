# /halaqat-backend/app/db/models/halaqa_models.py

"""
This module defines the SQLAlchemy ORM models for the relational backend.

Column names follow the snake_case schema convention; the repository
translates them to and from the application's camelCase field names.
"""

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, JSON

from ..base_class import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    gender = Column(String, nullable=False)  # 'male' or 'female'
    circle_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=True)


class Parent(Base):
    __tablename__ = "parents"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    father_name = Column(String, nullable=False)
    mother_name = Column(String, nullable=True)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)


class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    age = Column(Integer, nullable=False)
    phone = Column(String, nullable=True)
    level = Column(String, nullable=False)  # 'beginner', 'intermediate', 'advanced'
    teacher_id = Column(String, ForeignKey("teachers.id"), nullable=False, index=True)
    parent_id = Column(String, ForeignKey("parents.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=True)


class DailyRecord(Base):
    __tablename__ = "daily_records"

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    teacher_id = Column(String, ForeignKey("teachers.id"), nullable=False, index=True)

    hijri_date = Column(String, nullable=False)
    day = Column(String, nullable=False)

    # Memorization and review
    daily_lesson = Column(String, nullable=True)
    lesson_from_verse = Column(Integer, nullable=True)
    lesson_to_verse = Column(Integer, nullable=True)
    last_five_pages = Column(String, nullable=True)
    daily_review = Column(String, nullable=True)
    review_from = Column(String, nullable=True)
    review_to = Column(String, nullable=True)
    page_count = Column(Integer, nullable=True)
    errors = Column(String, nullable=True)
    reminders = Column(String, nullable=True)
    listener_name = Column(String, nullable=True)

    # Evaluation and behavior
    behavior = Column(String, nullable=True)  # 'good' or 'bad'
    other = Column(String, nullable=True)
    total_score = Column(Integer, nullable=True)  # manual entry only
    notes = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=True, index=True)


class QuranError(Base):
    __tablename__ = "quran_errors"

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    surah = Column(String, nullable=False)
    verse = Column(Integer, nullable=False)
    page_number = Column(Integer, nullable=False)
    error_type = Column(String, nullable=False)  # 'repeated' or 'previous'
    position = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
