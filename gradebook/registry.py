# gradebook/registry.py
"""Модуль реестра студентов: добавление, удаление и поиск с проверкой уникальности ID."""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from .models import Student
from .errors import DuplicateError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Repository(ABC):
    """Общий контракт коллекции: добавить, удалить, получить всё, найти."""

    @abstractmethod
    def add(self, item) -> None:
        ...

    @abstractmethod
    def remove(self, item) -> bool:
        ...

    @abstractmethod
    def get_all(self) -> list:
        ...

    @abstractmethod
    def find(self, predicate: Callable) -> list:
        ...


class StudentRegistry(Repository):
    """Хранит студентов в порядке добавления, ID каждого студента уникален."""

    def __init__(self):
        self._students: List[Student] = []

    def add(self, student: Student) -> None:
        """Добавляет студента в конец списка, проверяя уникальность ID."""
        if student is None:
            raise InvalidArgumentError("Студент не передан.")
        if student in self._students:
            raise DuplicateError(f"Студент с ID {student.student_id} уже существует.")

        self._students.append(student)
        logger.debug("Добавлен студент %s", student.student_id)

    def remove(self, student: Optional[Student]) -> bool:
        """Удаляет студента с тем же ID. Возвращает True, если удаление произошло."""
        if student is None or student not in self._students:
            return False

        self._students.remove(student)
        logger.debug("Удален студент %s", student.student_id)
        return True

    def get_all(self) -> List[Student]:
        """Возвращает копию списка всех студентов."""
        return list(self._students)

    def find(self, predicate: Callable[[Student], bool]) -> List[Student]:
        """Возвращает студентов, для которых predicate вернул True, в порядке добавления."""
        if predicate is None or not callable(predicate):
            raise InvalidArgumentError("Условие поиска не передано.")
        return [s for s in self._students if predicate(s)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.student_id == student_id), None)

    def get_students_by_age(self, min_age: int, max_age: int) -> List[Student]:
        """Возвращает студентов с возрастом в диапазоне [min_age, max_age] включительно."""
        if min_age < 0 or max_age < min_age:
            raise InvalidArgumentError(f"Неверный диапазон возраста: {min_age}-{max_age}.")
        return self.find(lambda s: min_age <= s.age <= max_age)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.get_all())

    def __contains__(self, student) -> bool:
        return student in self._students
