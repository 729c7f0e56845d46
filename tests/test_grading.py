import pytest

from grading import (
    GRADING_SYSTEM,
    compute_assessment_marks,
    grade_to_point,
    is_passing_grade,
    marks_to_grade,
    point_to_grade,
    required_final_marks,
)
from schemas import Assessment


def test_points_never_increase_down_the_table():
    points = [grade_to_point(g.letter) for g in GRADING_SYSTEM]
    assert points == sorted(points, reverse=True)
    assert points[0] == 4.0 and points[-1] == 0.0


def test_lookups_are_lenient():
    assert grade_to_point("a-") == 3.67
    assert grade_to_point(" B+ ") == 3.33
    assert grade_to_point("Z") == 0.0
    assert grade_to_point("") == 0.0
    assert grade_to_point(None) == 0.0
    assert grade_to_point("W") == 0.0


@pytest.mark.parametrize("point,letter", [
    (4.0, "A"), (3.9, "A-"), (3.67, "A-"), (3.3299999, "B+"), (3.0, "B"),
    (1.1, "D"), (0.5, "F"), (0.0, "F"), (-1, "F"),
])
def test_point_to_grade_picks_nearest_at_or_below(point, letter):
    assert point_to_grade(point) == letter


def test_passing_grades():
    assert is_passing_grade("D")
    assert is_passing_grade("a")
    for g in ["F", "W", "I", "", None, "X"]:
        assert not is_passing_grade(g)


def test_marks_to_grade_bands():
    assert marks_to_grade(95).letter == "A"
    assert marks_to_grade(90).letter == "A"
    assert marks_to_grade(89.5).letter == "A-"
    assert marks_to_grade(85).letter == "B+"
    assert marks_to_grade(55).letter == "D"
    assert marks_to_grade(54.9).letter == "F"
    assert marks_to_grade(150).letter == "A"
    assert marks_to_grade(-5).letter == "F"


def test_best_class_tests_average_into_one_item():
    items = [
        Assessment(name="CT1", obtained=10, total=20, weight=20, is_ct=True),
        Assessment(name="CT2", obtained=20, total=20, weight=20, is_ct=True),
        Assessment(name="CT3", obtained=18, total=20, weight=20, is_ct=True),
        Assessment(name="CT4", obtained=2, total=20, weight=20, is_ct=True),
        Assessment(name="Mid", obtained=24, total=30, weight=30),
        Assessment(name="Final", obtained=40, total=50, weight=50),
    ]
    summary = compute_assessment_marks(items, ct_count=3)
    # CTs: (20 + 18 + 10) / 3 = 16 of 20; mid 24; final 40
    assert summary.weight == 100
    assert summary.marks == 80
    assert summary.grade == "B"
    assert summary.point == 3.0


def test_no_assessments_is_zero():
    summary = compute_assessment_marks([])
    assert summary.marks == 0 and summary.percent == 0
    assert summary.grade == "F"


def test_required_final_marks():
    items = [
        Assessment(name="CT", obtained=18, total=20, weight=20, is_ct=True),
        Assessment(name="Mid", obtained=20, total=30, weight=30),
        Assessment(name="Final Exam", obtained=0, total=100, weight=50),
    ]
    # 38 so far; an A needs 90, so 52 of the 50 weighted marks -> 104 raw
    assert required_final_marks(items, 4.0) == 104
    # B needs 78 -> 40 weighted -> 80 raw
    assert required_final_marks(items, 3.0) == 80
    assert required_final_marks(items, 0.0) == 0.0


def test_required_final_marks_without_final():
    items = [Assessment(name="Mid", obtained=20, total=30, weight=30)]
    assert required_final_marks(items, 4.0) is None
