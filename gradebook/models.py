# gradebook/models.py
"""Модуль, определяющий основные модели данных: Student, Score и Grade."""
import math
from enum import Enum
from functools import total_ordering
from typing import Optional

from .config import MIN_AGE, MAX_AGE, MIN_POINTS, MAX_POINTS
from .errors import ValidationError


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


@total_ordering
class Student:
    """Представляет студента с его ID, именем и возрастом.

    Поля доступны только для чтения. Равенство, хэш и порядок определяются
    исключительно по student_id: две записи с одинаковым ID считаются одним
    и тем же студентом, даже если имя или возраст отличаются.
    """
    def __init__(self, student_id: str, name: str, age: int):
        if _is_blank(student_id):
            raise ValidationError("ID студента не может быть пустым.")
        if _is_blank(name):
            raise ValidationError("Имя студента не может быть пустым.")
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValidationError(f"Возраст '{age}' должен быть целым числом.")
        if age < MIN_AGE or age > MAX_AGE:
            raise ValidationError(f"Возраст {age} недопустим. Разрешен диапазон {MIN_AGE}-{MAX_AGE}.")

        self._student_id = student_id
        self._name = name
        self._age = age

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def replace(self, name: Optional[str] = None, age: Optional[int] = None) -> "Student":
        """Возвращает копию студента с изменёнными полями. ID не меняется."""
        return Student(
            self._student_id,
            self._name if name is None else name,
            self._age if age is None else age,
        )

    def compare_to(self, other: Optional["Student"]) -> int:
        """Трёхзначное сравнение по ID (посимвольно): -1, 0 или 1."""
        if other is None:
            return 1
        if self._student_id < other.student_id:
            return -1
        if self._student_id > other.student_id:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id == other.student_id

    def __lt__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id < other.student_id

    def __hash__(self) -> int:
        return hash(self._student_id)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(student_id='{self._student_id}', name='{self._name}', age={self._age})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return f"ID: {self._student_id} | Имя: {self._name} | Возраст: {self._age}"


class Score:
    """Балл по одному предмету. Сравнивается по значению (предмет и баллы)."""
    def __init__(self, subject: str, points: float):
        if _is_blank(subject):
            raise ValidationError("Название предмета не может быть пустым.")
        if isinstance(points, bool) or not isinstance(points, (int, float)):
            raise ValidationError(f"Балл '{points}' должен быть числом.")
        if math.isnan(points) or points < MIN_POINTS or points > MAX_POINTS:
            raise ValidationError(f"Балл {points} недопустим. Разрешен диапазон {MIN_POINTS:g}-{MAX_POINTS:g}.")

        self._subject = subject
        self._points = float(points)

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def points(self) -> float:
        return self._points

    def __eq__(self, other) -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return (self._subject, self._points) == (other.subject, other.points)

    def __hash__(self) -> int:
        return hash((self._subject, self._points))

    def __repr__(self) -> str:
        return f"Score(subject='{self._subject}', points={self._points})"

    def __str__(self) -> str:
        return f"Предмет: {self._subject}, Баллы: {self._points:.1f}"


class Grade(Enum):
    """Буквенная оценка. Значение - нижняя граница диапазона (включительно)."""
    F = 0
    D = 60
    C = 70
    B = 80
    A = 90

    @classmethod
    def from_average(cls, value: float) -> "Grade":
        """Переводит средний балл в букву, проверяя пороги от старшего к младшему."""
        for grade in (cls.A, cls.B, cls.C, cls.D):
            if value >= grade.value:
                return grade
        return cls.F
