import random

from cgpa import (
    build_completed_courses,
    calculate_cgpa,
    calculate_trimester_gpa,
    classify_standing,
    project_cgpa,
    required_gpa,
)
from schemas import CourseInput, TrimesterInput


def tri(*courses, name=""):
    return TrimesterInput(name=name, courses=[CourseInput(**c) for c in courses])


def test_two_trimester_series():
    results = calculate_cgpa([
        tri({"credit": 3, "grade": "A"}),
        tri({"credit": 3, "grade": "B"}),
    ])
    assert len(results) == 2
    assert results[0].gpa == 4.0 and results[0].cgpa == 4.0 and results[0].trimester_credits == 3
    assert results[1].gpa == 3.0 and results[1].cgpa == 3.5
    assert results[1].trimester_credits == 3 and results[1].total_credits == 6


def test_prior_credits_seed_the_running_totals():
    results = calculate_cgpa([
        tri({"credit": 3, "grade": "A"}),
        tri({"credit": 3, "grade": "B"}),
    ], prior_credits=30, prior_cgpa=3.0)
    assert results[0].cgpa == 3.09
    assert results[0].total_credits == 33
    assert results[0].earned_credits == 33


def test_empty_input():
    assert calculate_cgpa([]) == []
    results = calculate_cgpa([tri()])
    assert results[0].gpa == 0.0 and results[0].cgpa == 0.0


def test_withdrawn_and_incomplete_are_skipped_but_fail_counts():
    results = calculate_cgpa([
        tri(
            {"credit": 3, "grade": "A"},
            {"credit": 3, "grade": "W"},
            {"credit": 3, "grade": "I"},
            {"credit": 3, "grade": ""},
        ),
        tri({"credit": 3, "grade": "F"}),
    ])
    assert results[0].trimester_credits == 3 and results[0].gpa == 4.0
    assert results[1].gpa == 0.0
    assert results[1].cgpa == 2.0
    assert results[1].total_credits == 6
    assert results[1].earned_credits == 3


def test_zero_credit_courses_are_ignored():
    gpa = calculate_trimester_gpa([CourseInput(credit=0, grade="F"), CourseInput(credit=3, grade="B")])
    assert gpa.gpa == 3.0 and gpa.total_credits == 3


def test_retake_with_failed_previous_is_neutral():
    plain = calculate_cgpa([tri({"credit": 3, "grade": "B"}), tri({"code": "CSE 1111", "credit": 3, "grade": "A"})])
    retake = calculate_cgpa([
        tri({"credit": 3, "grade": "B"}),
        tri({"code": "CSE 1111", "credit": 3, "grade": "A", "is_retake": True, "previous_grade": "F"}),
    ])
    assert plain[-1].cgpa == retake[-1].cgpa
    assert plain[-1].total_credits == retake[-1].total_credits


def test_retake_replaces_earlier_attempt_in_input():
    results = calculate_cgpa([
        tri({"code": "CSE 1111", "credit": 3, "grade": "F"}, {"code": "CSE 2213", "credit": 3, "grade": "A"}),
        tri({"code": "cse1111", "credit": 3, "grade": "B", "is_retake": True, "previous_grade": "F"}),
    ])
    assert results[0].cgpa == 2.0
    # F attempt dropped: (3*4 + 3*3) / 6
    assert results[1].cgpa == 3.5
    assert results[1].total_credits == 6
    assert results[1].earned_credits == 6


def test_retake_matches_by_name_without_code():
    results = calculate_cgpa([
        tri({"name": "Physics", "credit": 3, "grade": "D"}),
        tri({"name": "physics", "credit": 3, "grade": "A", "is_retake": True, "previous_grade": "D"}),
    ])
    assert results[1].cgpa == 4.0
    assert results[1].total_credits == 3


def test_worse_retake_keeps_earned_credit():
    results = calculate_cgpa([
        tri({"code": "MATH 1151", "credit": 3, "grade": "D"}),
        tri({"code": "MATH 1151", "credit": 3, "grade": "F", "is_retake": True, "previous_grade": "D"}),
    ])
    assert results[1].cgpa == 0.0
    assert results[1].earned_credits == 3


def test_results_are_bounded_and_repeatable():
    rng = random.Random(7)
    letters = ["A", "A-", "B+", "B", "C", "D", "F", "W", "I", "", "Q"]
    trimesters = [
        tri(*[
            {"code": f"C{rng.randint(1, 6)}", "credit": rng.choice([0, 1, 3, 4.5]),
             "grade": rng.choice(letters), "is_retake": rng.random() < 0.3, "previous_grade": "F"}
            for _ in range(rng.randint(0, 5))
        ])
        for _ in range(8)
    ]
    first = calculate_cgpa(trimesters, 12, 3.2)
    second = calculate_cgpa(trimesters, 12, 3.2)
    assert first == second
    for r in first:
        assert 0.0 <= r.gpa <= 4.0
        assert 0.0 <= r.cgpa <= 4.0


def test_best_grade_wins_in_completed_courses():
    completed = build_completed_courses([
        tri({"code": "CSE1325", "credit": 3, "grade": "C"}),
        tri({"code": "CSE 1325", "credit": 3, "grade": "A"}),
        tri({"code": "CSE1325", "credit": 3, "grade": "B", "is_retake": True, "previous_grade": "A"}),
    ])
    assert len(completed) == 1
    assert completed[0].code == "CSE1325"
    assert completed[0].grade == "A" and completed[0].point == 4.0


def test_completed_courses_skip_failed_and_uncoded():
    completed = build_completed_courses([
        tri({"code": "CSE 1111", "credit": 3, "grade": "F"}, {"name": "No code", "credit": 3, "grade": "A"},
            {"code": "CSE 1110", "credit": 1, "grade": "W"}),
    ])
    assert completed == []


def test_projection_helpers():
    assert project_cgpa(3.0, 60, 137, 4.0) == round((180 + 77 * 4) / 137, 2)
    assert project_cgpa(0, 0, 0, 4.0) == 0.0
    assert required_gpa(3.0, 60, 3.5, 77) > 3.5
    assert required_gpa(2.0, 130, 4.0, 7) > 4.0
    assert required_gpa(3.0, 137, 3.5, 0) == 0.0


def test_standing_bands():
    assert classify_standing(3.8) == "Excellent Standing"
    assert classify_standing(3.5) == "Strong Performance"
    assert classify_standing(3.2) == "Good Foundation"
    assert classify_standing(2.6) == "Improvement Needed"
    assert classify_standing(1.9) == "At Risk"
