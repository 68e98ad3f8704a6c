# /tests/test_quran_error_service.py

import pytest

from app.models.quran_error_model import QuranErrorCreate
from app.services import quran_error_service


@pytest.fixture
def student(repo, teacher_payload):
    teacher = repo.create_teacher(teacher_payload)
    return repo.create_student({"name": "S1", "age": 10, "level": "beginner", "teacherId": teacher.id})


def mark(student, verse, page, error_type="repeated"):
    return QuranErrorCreate(studentId=student.id, surah="البقرة", verse=verse, pageNumber=page, errorType=error_type)


def test_toggle_adds_then_removes(repo, student):
    """Tests that toggling a verse twice adds and then removes the same mark."""
    action, added = quran_error_service.toggle_verse_error(mark(student, 8, 2), repo)
    assert action == "added"
    assert repo.get_quran_errors_by_student(student.id) == [added]

    action, removed = quran_error_service.toggle_verse_error(mark(student, 8, 2, "previous"), repo)
    assert action == "removed"
    assert removed.id == added.id
    assert repo.get_quran_errors_by_student(student.id) == []

def test_same_verse_on_another_page_is_a_separate_mark(repo, student):
    """Tests that the same verse number on another page is its own mark."""
    quran_error_service.toggle_verse_error(mark(student, 8, 2), repo)
    action, _ = quran_error_service.toggle_verse_error(mark(student, 8, 3), repo)
    assert action == "added"
    assert len(repo.get_quran_errors_by_student(student.id)) == 2

def test_find_verse_error(repo, student):
    """Tests finding a mark by student, verse and page."""
    created = quran_error_service.create_error(mark(student, 10, 3), repo)
    assert quran_error_service.find_verse_error(student.id, 10, 3, repo) == created
    assert quran_error_service.find_verse_error(student.id, 11, 3, repo) is None

def test_clear_page_removes_only_that_page(repo, student):
    """Tests that clearing a page removes its marks and keeps the rest."""
    for verse in (6, 7, 8):
        quran_error_service.create_error(mark(student, verse, 2), repo)
    kept = quran_error_service.create_error(mark(student, 20, 3), repo)

    assert quran_error_service.clear_page(student.id, 2, repo) == 3
    assert repo.get_quran_errors_by_student(student.id) == [kept]

def test_clear_empty_page(repo, student):
    """Tests that clearing a page with no marks removes nothing."""
    assert quran_error_service.clear_page(student.id, 5, repo) == 0

def test_clear_page_counts_only_successful_deletes(memory_repo, teacher_payload, monkeypatch):
    """Tests that the cleared count excludes deletes that failed."""
    teacher = memory_repo.create_teacher(teacher_payload)
    student = memory_repo.create_student({"name": "S1", "age": 10, "level": "beginner", "teacherId": teacher.id})
    first = quran_error_service.create_error(mark(student, 1, 2), memory_repo)
    quran_error_service.create_error(mark(student, 2, 2), memory_repo)

    real_delete = memory_repo.delete_quran_error
    monkeypatch.setattr(
        memory_repo, "delete_quran_error",
        lambda error_id: False if error_id == first.id else real_delete(error_id),
    )

    assert quran_error_service.clear_page(student.id, 2, memory_repo) == 1
    assert [e.id for e in memory_repo.get_quran_errors_by_student(student.id)] == [first.id]
