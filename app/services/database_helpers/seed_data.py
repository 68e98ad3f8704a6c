# /halaqat-backend/app/services/database_helpers/seed_data.py

"""
Demo roster and deployment bootstrap accounts.

The in-memory backend loads the full roster at construction. Persistent
backends only get the two default teachers, and only when the teachers
table is completely empty (see `ensure_teachers_exist`).
"""

import logging
from itertools import cycle
from typing import Dict, List

from app.models.parent_model import ParentCreate
from app.models.student_model import StudentCreate
from app.models.teacher_model import TeacherCreate

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "123456"

MEN_TEACHERS = [
    ("abdalrazaq", "أ. عبدالرزاق", "حلقة عبدالرزاق"),
    ("ibrahim", "أ. إبراهيم كدوائي", "حلقة إبراهيم كدوائي"),
    ("hassan", "أ. حسن", "حلقة حسن"),
    ("saud", "أ. سعود", "حلقة سعود"),
    ("saleh", "أ. صالح", "حلقة صالح"),
    ("abdullah", "أ. عبدالله", "حلقة عبدالله"),
    ("nabil", "أ. نبيل", "حلقة نبيل"),
]

WOMEN_TEACHERS = [
    ("asma", "أ. أسماء", "حلقة أسماء"),
    ("raghad", "أ. رغد", "حلقة رغد"),
    ("madina", "أ. مدينة", "حلقة مدينة"),
    ("nashwa", "أ. نشوة", "حلقة نشوة"),
    ("nour", "أ. نور", "حلقة نور"),
    ("hind", "أ. هند", "حلقة هند"),
]

# Provisioned on an empty persistent store at first login.
DEFAULT_TEACHERS = [
    ("abdullah", "أ. عبدالله", "حلقة عبدالله", "male"),
    ("asma", "أ. أسماء", "حلقة أسماء", "female"),
]

SAMPLE_PARENTS = [
    ("parent1", "أحمد محمد الأحمد", "فاطمة علي", "0505123456", "ahmed@example.com"),
    ("parent2", "محمد عبدالله السعد", "عائشة يوسف", "0505234567", "mohammed@example.com"),
    ("parent3", "علي حسن الخالد", "خديجة أحمد", "0505345678", "ali@example.com"),
    ("parent4", "يوسف إبراهيم النور", "زينب محمد", "0505456789", "youssef@example.com"),
    ("parent5", "عبدالرحمن صالح الريس", "أم كلثوم", "0505567890", "abdulrahman@example.com"),
]

# (name, age, level, parent index, teacher gender)
SAMPLE_STUDENTS = [
    ("عبدالله أحمد", 8, "beginner", 0, "male"),
    ("فاطمة أحمد", 10, "intermediate", 0, "female"),
    ("محمد عبدالله", 12, "advanced", 1, "male"),
    ("عائشة محمد", 9, "beginner", 1, "female"),
    ("علي حسن", 11, "intermediate", 2, "male"),
    ("خديجة علي", 7, "beginner", 2, "female"),
    ("يوسف إبراهيم", 13, "advanced", 3, "male"),
    ("زينب يوسف", 8, "beginner", 3, "female"),
    ("عبدالرحمن صالح", 10, "intermediate", 4, "male"),
]


def load_sample_roster(repository) -> None:
    """Creates the demo teachers, parents and students."""
    teachers_by_gender: Dict[str, List] = {"male": [], "female": []}
    for gender, roster in (("male", MEN_TEACHERS), ("female", WOMEN_TEACHERS)):
        for username, name, circle_name in roster:
            teacher = repository.create_teacher(TeacherCreate(
                username=username,
                password=DEMO_PASSWORD,
                name=name,
                gender=gender,
                circleName=circle_name,
            ))
            if teacher is not None:
                teachers_by_gender[gender].append(teacher)

    parents = []
    for username, father_name, mother_name, phone, email in SAMPLE_PARENTS:
        parents.append(repository.create_parent(ParentCreate(
            username=username,
            password=DEMO_PASSWORD,
            fatherName=father_name,
            motherName=mother_name,
            phone=phone,
            email=email,
        )))

    # Round-robin within each gender keeps the demo roster reproducible.
    teacher_cycles = {
        gender: cycle(teachers) for gender, teachers in teachers_by_gender.items() if teachers
    }
    for name, age, level, parent_index, teacher_gender in SAMPLE_STUDENTS:
        parent = parents[parent_index]
        if teacher_gender not in teacher_cycles or parent is None:
            continue
        teacher = next(teacher_cycles[teacher_gender])
        repository.create_student(StudentCreate(
            name=name,
            age=age,
            level=level,
            teacherId=teacher.id,
            parentId=parent.id,
        ))

    logger.info(
        "Loaded demo roster: %d teachers, %d parents, %d students",
        len(repository.get_all_teachers()),
        len(repository.get_all_parents()),
        len(repository.get_all_students()),
    )


def ensure_teachers_exist(repository) -> bool:
    """
    Provisions the default teachers when the store has none at all.
    Returns True when teachers exist afterwards.
    """
    if repository.get_all_teachers():
        return True

    logger.warning("No teachers found in storage, creating default teachers")
    for username, name, circle_name, gender in DEFAULT_TEACHERS:
        teacher = repository.create_teacher(TeacherCreate(
            username=username,
            password=DEMO_PASSWORD,
            name=name,
            gender=gender,
            circleName=circle_name,
        ))
        if teacher is None:
            logger.error("Failed to create default teacher %s", username)
        else:
            logger.info("Created default teacher %s", username)
    return bool(repository.get_all_teachers())
