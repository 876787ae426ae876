# gradebook/__init__.py
"""Учёт студентов и их оценок: реестр, журнал баллов и CSV-хранилище."""
from .errors import (
    GradebookError,
    ValidationError,
    DuplicateError,
    InvalidArgumentError,
    StorageError,
)
from .models import Student, Score, Grade
from .registry import Repository, StudentRegistry
from .ledger import ScoreLedger

__all__ = [
    "GradebookError",
    "ValidationError",
    "DuplicateError",
    "InvalidArgumentError",
    "StorageError",
    "Student",
    "Score",
    "Grade",
    "Repository",
    "StudentRegistry",
    "ScoreLedger",
]
