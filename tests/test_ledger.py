# tests/test_ledger.py
import pytest
from gradebook.models import Score, Grade
from gradebook.ledger import ScoreLedger
from gradebook.errors import InvalidArgumentError

def test_average_and_grade(ledger):
    assert ledger.average("2021001") == pytest.approx(91.25)
    assert ledger.grade_for(91.25) is Grade.A
    assert ledger.average("2021002") == pytest.approx(82.0)

def test_average_without_scores():
    ledger = ScoreLedger()
    assert ledger.average("unknown") == 0.0
    assert ledger.average_or_none("unknown") is None

def test_add_score_for_unregistered_id():
    ledger = ScoreLedger()
    ledger.add_score("ghost", Score("Физика", 70))
    assert ledger.get_scores("ghost") == [Score("Физика", 70.0)]

def test_duplicate_subjects_are_kept():
    ledger = ScoreLedger()
    ledger.add_score("1", Score("Математика", 50))
    ledger.add_score("1", Score("Математика", 100))
    assert [s.points for s in ledger.get_scores("1")] == [50.0, 100.0]
    assert ledger.average("1") == pytest.approx(75.0)

@pytest.mark.parametrize("student_id", ["", "  ", None])
def test_blank_id_rejected(student_id):
    ledger = ScoreLedger()
    with pytest.raises(InvalidArgumentError):
        ledger.add_score(student_id, Score("Математика", 50))
    with pytest.raises(InvalidArgumentError):
        ledger.get_scores(student_id)
    with pytest.raises(InvalidArgumentError):
        ledger.average(student_id)

def test_add_none_score_rejected():
    with pytest.raises(InvalidArgumentError):
        ScoreLedger().add_score("1", None)

def test_get_scores_returns_copy(ledger):
    ledger.get_scores("2021001").clear()
    assert len(ledger.get_scores("2021001")) == 2
    assert ledger.get_scores("missing") == []

def test_grade_for_is_static():
    assert ScoreLedger.grade_for(60.0) is Grade.D
    assert ScoreLedger.grade_for(59.999) is Grade.F

def test_top_students(ledger):
    top = ledger.top_students(1)
    assert len(top) == 1
    assert top[0][0] == "2021001"
    assert top[0][1] == pytest.approx(91.25)

    assert [sid for sid, _ in ledger.top_students(10)] == ["2021001", "2021003", "2021002"]

def test_top_students_ties_by_ascending_id():
    ledger = ScoreLedger()
    ledger.add_score("b", Score("x", 80))
    ledger.add_score("c", Score("x", 90))
    ledger.add_score("a", Score("x", 80))
    assert ledger.top_students(3) == [("c", 90.0), ("a", 80.0), ("b", 80.0)]

@pytest.mark.parametrize("count", [0, -1])
def test_top_students_invalid_count(ledger, count):
    with pytest.raises(InvalidArgumentError):
        ledger.top_students(count)

def test_get_all_scores_is_deep_copy(ledger):
    snapshot = ledger.get_all_scores()
    assert set(snapshot) == {"2021001", "2021002", "2021003"}
    snapshot["2021001"].append(Score("Лишний", 0))
    snapshot["new"] = []
    assert len(ledger.get_scores("2021001")) == 2
    assert "new" not in ledger.get_all_scores()
    assert len(ledger) == 3
