# gradebook/io_utils.py
"""Модуль для операций ввода/вывода: сохранение и загрузка студентов в CSV.

Формат файла:

    StudentId,Name,Age
    <id>,<name>,<age>

Поля не экранируются, поэтому запятая в имени испортит строку: при загрузке
такая строка будет пропущена.
"""
import csv
import logging
import os
import re
from typing import Generic, Iterable, List, Optional, TypeVar

from .config import CSV_HEADER, CSV_DELIMITER, CSV_ENCODING
from .models import Student
from .errors import StorageError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_AGE_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
# Возраст в файле - 32-битное знаковое целое, иначе строка пропускается
_AGE_LIMITS = (-2**31, 2**31 - 1)


class IOResult(Generic[T]):
    """Результат файловой операции: данные и, возможно, ошибка.

    При ошибке data содержит то, что успели обработать до сбоя.
    """
    def __init__(self, data: T, error: Optional[StorageError] = None):
        self.data = data
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        return f"IOResult(data={self.data!r}, error={self.error!r})"


def _format_row(student: Student) -> str:
    return CSV_DELIMITER.join([student.student_id, student.name, str(student.age)])


def _parse_age(field: str) -> Optional[int]:
    if not _AGE_RE.fullmatch(field):
        return None
    age = int(field)
    if age < _AGE_LIMITS[0] or age > _AGE_LIMITS[1]:
        return None
    return age


def write_students(students: Iterable[Student], filepath) -> IOResult[int]:
    """Записывает студентов в CSV в переданном порядке.

    Возвращает количество записанных строк с данными.
    """
    written = 0
    try:
        # newline не задан: перевод строки зависит от платформы
        with open(filepath, mode="w", encoding=CSV_ENCODING) as file:
            file.write(CSV_DELIMITER.join(CSV_HEADER) + "\n")
            for student in students:
                file.write(_format_row(student) + "\n")
                written += 1
    except (OSError, UnicodeError) as e:
        return IOResult(written, StorageError(f"Ошибка записи в файл {filepath}: {e}"))

    logger.info("Сохранено %d студентов в %s", written, filepath)
    return IOResult(written)


def read_students(filepath) -> IOResult[List[Student]]:
    """Читает студентов из CSV. Отсутствующий файл - это пустой список без ошибки.

    Первая строка (заголовок) пропускается. Пустые строки и строки, где не
    ровно три поля или возраст не целое число, пропускаются. Если строка
    корректна по формату, но Student её не принимает, чтение прекращается.
    """
    students: List[Student] = []
    if not os.path.exists(filepath):
        return IOResult(students)

    try:
        # Некорректные байты заменяются на U+FFFD, чтение продолжается
        with open(filepath, mode="r", encoding=CSV_ENCODING, errors="replace", newline="") as file:
            reader = csv.reader(file, delimiter=CSV_DELIMITER, quoting=csv.QUOTE_NONE)
            next(reader, None)

            for row in reader:
                if not any(field.strip() for field in row):
                    continue
                if len(row) != 3:
                    continue
                age = _parse_age(row[2])
                if age is None:
                    continue
                students.append(Student(row[0], row[1], age))
    except (OSError, UnicodeError, csv.Error) as e:
        return IOResult(students, StorageError(f"Не удалось прочитать файл {filepath}: {e}"))
    except ValidationError as e:
        return IOResult(students, StorageError(f"Некорректные данные в файле {filepath}: {e}"))

    logger.info("Загружено %d студентов из %s", len(students), filepath)
    return IOResult(students)


def save_students(students: Iterable[Student], filepath) -> bool:
    """Сохраняет студентов; при ошибке пишет её в лог и не выбрасывает исключение."""
    result = write_students(students, filepath)
    if not result.ok:
        logger.error("%s", result.error)
    return result.ok


def load_students(filepath) -> List[Student]:
    """Загружает студентов; при ошибке пишет её в лог и возвращает прочитанное до сбоя."""
    result = read_students(filepath)
    if not result.ok:
        logger.error("%s", result.error)
    return result.data
