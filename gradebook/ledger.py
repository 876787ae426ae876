# gradebook/ledger.py
"""Модуль журнала баллов: хранение оценок по ID студента, средний балл, рейтинг."""
import logging
from typing import Dict, List, Optional, Tuple

from .models import Score, Grade
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _check_student_id(student_id: str) -> None:
    if not isinstance(student_id, str) or not student_id.strip():
        raise InvalidArgumentError("ID студента не может быть пустым.")


class ScoreLedger:
    """Журнал баллов, сгруппированных по ID студента.

    Журнал не знает о реестре студентов: оценки можно записать и для ID,
    которого нет ни в одном реестре.
    """

    def __init__(self):
        self._scores: Dict[str, List[Score]] = {}

    def add_score(self, student_id: str, score: Score) -> None:
        """Добавляет балл в конец списка студента. Повторы по предмету сохраняются."""
        _check_student_id(student_id)
        if score is None:
            raise InvalidArgumentError("Балл не передан.")

        self._scores.setdefault(student_id, []).append(score)
        logger.debug("Студенту %s добавлен балл %s", student_id, score)

    def get_scores(self, student_id: str) -> List[Score]:
        """Возвращает копию списка баллов студента (пустой список, если баллов нет)."""
        _check_student_id(student_id)
        return list(self._scores.get(student_id, []))

    def average_or_none(self, student_id: str) -> Optional[float]:
        """Средний балл студента или None, если баллов нет."""
        _check_student_id(student_id)
        scores = self._scores.get(student_id)
        if not scores:
            return None
        return sum(s.points for s in scores) / len(scores)

    def average(self, student_id: str) -> float:
        """Рассчитывает средний балл студента. Возвращает 0.0, если оценок нет."""
        avg = self.average_or_none(student_id)
        return 0.0 if avg is None else avg

    @staticmethod
    def grade_for(score_value: float) -> Grade:
        return Grade.from_average(score_value)

    def top_students(self, count: int) -> List[Tuple[str, float]]:
        """Возвращает до count пар (ID, средний балл), по убыванию среднего.

        При равных средних баллах порядок определяется по возрастанию ID.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgumentError("Количество должно быть целым числом больше 0.")

        averages = [(sid, self.average(sid)) for sid in self.student_ids()]
        averages.sort(key=lambda pair: (-pair[1], pair[0]))
        return averages[:count]

    def student_ids(self) -> List[str]:
        """ID студентов, у которых есть хотя бы один балл, в порядке первого появления."""
        return [sid for sid, scores in self._scores.items() if scores]

    def get_all_scores(self) -> Dict[str, List[Score]]:
        """Возвращает копию всего журнала: словарь и списки внутри копируются."""
        return {sid: list(scores) for sid, scores in self._scores.items()}

    def __len__(self) -> int:
        return len(self.student_ids())
