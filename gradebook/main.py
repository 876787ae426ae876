# gradebook/main.py
"""Главный модуль: демонстрация работы реестра студентов, журнала баллов и CSV."""
import sys
import logging
import traceback
from typing import List, Optional

from . import io_utils
from .config import DEFAULT_DATA_FILE, LOG_LEVEL, LOG_FORMAT
from .errors import GradebookError
from .models import Student, Score
from .registry import StudentRegistry
from .ledger import ScoreLedger

DEMO_STUDENTS = [
    ("2021001", "张三", 20),
    ("2021002", "李四", 19),
    ("2021003", "王五", 21),
]

DEMO_SCORES = [
    ("2021001", "数学", 95.5),
    ("2021001", "英语", 87.0),
    ("2021002", "数学", 78.5),
    ("2021002", "英语", 85.5),
    ("2021003", "数学", 88.0),
    ("2021003", "英语", 92.0),
]


def run_demo(data_file: str = DEFAULT_DATA_FILE) -> List[Student]:
    """Выполняет фиксированный сценарий и возвращает студентов, загруженных из файла."""
    registry = StudentRegistry()
    ledger = ScoreLedger()

    print("=== Система учета успеваемости ===\n")

    print("1. Добавление студентов:")
    for student_id, name, age in DEMO_STUDENTS:
        registry.add(Student(student_id, name, age))
    print("✅ Студенты добавлены")

    print("\n2. Добавление баллов:")
    for student_id, subject, points in DEMO_SCORES:
        ledger.add_score(student_id, Score(subject, points))
    print("✅ Баллы добавлены")

    print("\n3. Студенты в возрасте 19-20 лет:")
    for student in registry.get_students_by_age(19, 20):
        print(student)

    print("\n4. Успеваемость студентов:")
    for student in registry.get_all():
        average = ledger.average(student.student_id)
        grade = ledger.grade_for(average)
        print(f"{student} | Средний балл: {average:.1f} | Оценка: {grade.name}")
        for score in ledger.get_scores(student.student_id):
            print(f"  {score}")

    print("\n5. Лучший студент по среднему баллу:")
    for student_id, average in ledger.top_students(1):
        student = registry.get_by_id(student_id)
        name = student.name if student else "-"
        print(f"ID: {student_id} | Имя: {name} | Средний балл: {average:.1f}")

    print("\n6. Сохранение и загрузка:")
    if io_utils.save_students(registry.get_all(), data_file):
        print(f"✅ Данные сохранены в {data_file}")
    loaded = io_utils.load_students(data_file)
    print("Студенты, загруженные из файла:")
    for student in loaded:
        print(student)

    return loaded


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа: настраивает логирование и запускает демонстрацию."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    args = sys.argv[1:] if argv is None else argv
    data_file = args[0] if args else DEFAULT_DATA_FILE

    try:
        run_demo(data_file)
    except GradebookError as e:
        print(f"❌ Ошибка: {e}")
        return 1
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        sys.exit(1)
