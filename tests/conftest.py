# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student, Score
from gradebook.registry import StudentRegistry
from gradebook.ledger import ScoreLedger

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("2021001", "张三", 20),
        Student("2021002", "李四", 19),
        Student("2021003", "王五", 21),
    ]

@pytest.fixture
def registry(sample_students) -> StudentRegistry:
    reg = StudentRegistry()
    for s in sample_students:
        reg.add(s)
    return reg

@pytest.fixture
def ledger() -> ScoreLedger:
    """Журнал со средними баллами 91.25, 82.0 и 90.0."""
    led = ScoreLedger()
    led.add_score("2021001", Score("数学", 95.5))
    led.add_score("2021001", Score("英语", 87.0))
    led.add_score("2021002", Score("数学", 78.5))
    led.add_score("2021002", Score("英语", 85.5))
    led.add_score("2021003", Score("数学", 88.0))
    led.add_score("2021003", Score("英语", 92.0))
    return led
