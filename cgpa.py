"""
Trimester GPA / cumulative CGPA aggregation.

GPA = sum(credit * point) / sum(credit) over countable courses. W and I are
not countable; F is (zero points, full credit). Results are rounded to two
decimals for display.

Retakes count credit-hours once with the latest grade's points: a retake
replaces the earlier attempt of the same course when that attempt is part of
the same input, otherwise it is scored like any other course.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from schemas import CGPAResult, CompletedCourse, CourseInput, TrimesterGPA, TrimesterInput
from grading import NON_GPA_GRADES, grade_to_point, is_passing_grade
from catalog import normalize_course_code
from trimesters import get_trimester_name

logger = logging.getLogger(__name__)

MAX_POINT = 4.0


@dataclass
class _Attempt:
    points: float
    credits: float
    earned: bool


def _counts(course: CourseInput) -> bool:
    return course.credit > 0 and bool(course.grade) and course.grade not in NON_GPA_GRADES


def _course_key(course: CourseInput) -> Optional[str]:
    if course.code:
        return normalize_course_code(course.code)
    if course.name.strip():
        return "name:" + course.name.strip().lower()
    return None


def _average(points: float, credits: float) -> float:
    if credits <= 1e-9:
        return 0.0
    return round(max(0.0, min(MAX_POINT, points / credits)), 2)


def calculate_trimester_gpa(courses: List[CourseInput]) -> TrimesterGPA:
    total_credits = 0.0
    total_points = 0.0
    earned_credits = 0.0
    for course in courses:
        if not _counts(course):
            continue
        total_credits += course.credit
        total_points += course.credit * grade_to_point(course.grade)
        if is_passing_grade(course.grade):
            earned_credits += course.credit
    return TrimesterGPA(
        gpa=_average(total_points, total_credits),
        total_credits=round(total_credits, 2),
        earned_credits=round(earned_credits, 2),
        total_points=round(total_points, 2),
    )


def calculate_cgpa(
    trimesters: List[TrimesterInput],
    prior_credits: float = 0,
    prior_cgpa: float = 0,
) -> List[CGPAResult]:
    """
    Running GPA/CGPA series, one result per trimester in the order given
    (oldest first). ``prior_credits`` / ``prior_cgpa`` seed the cumulative sums
    and are assumed to be earned credit.
    """
    cum_points = prior_credits * prior_cgpa
    cum_credits = float(prior_credits)
    cum_earned = float(prior_credits)
    attempts: Dict[str, _Attempt] = {}
    results: List[CGPAResult] = []

    for trimester in trimesters:
        tri_points = 0.0
        tri_credits = 0.0

        for course in trimester.courses:
            if not _counts(course):
                continue
            points = course.credit * grade_to_point(course.grade)
            passed = is_passing_grade(course.grade)
            tri_points += points
            tri_credits += course.credit

            key = _course_key(course)
            earlier = attempts.get(key) if (course.is_retake and key) else None
            if earlier is not None:
                logger.debug("Retake of %s replaces earlier attempt (%.2f pts)", key, earlier.points)
                cum_points -= earlier.points
                cum_credits -= earlier.credits
                if earlier.earned:
                    cum_earned -= earlier.credits
                # the better attempt decides earned credit
                passed = passed or earlier.earned

            cum_points += points
            cum_credits += course.credit
            if passed:
                cum_earned += course.credit
            if key:
                attempts[key] = _Attempt(points=points, credits=course.credit, earned=passed)

        results.append(CGPAResult(
            trimester_name=trimester.name or get_trimester_name(trimester.code or ""),
            trimester_credits=round(tri_credits, 2),
            gpa=_average(tri_points, tri_credits),
            cgpa=_average(cum_points, cum_credits),
            total_credits=round(max(cum_credits, 0.0), 2),
            earned_credits=round(max(cum_earned, 0.0), 2),
        ))

    return results


def build_completed_courses(trimesters: List[TrimesterInput]) -> List[CompletedCourse]:
    """
    Passed courses keyed by normalized code, keeping the best grade ever
    earned. Unlike the CGPA series, a worse retake never lowers the record.
    """
    best: Dict[str, CompletedCourse] = {}
    for trimester in trimesters:
        for course in trimester.courses:
            if not course.code or not is_passing_grade(course.grade):
                continue
            code = normalize_course_code(course.code)
            point = grade_to_point(course.grade)
            if code not in best or point > best[code].point:
                best[code] = CompletedCourse(code=code, grade=course.grade, point=point)
    return list(best.values())


def project_cgpa(current_cgpa: float, completed_credits: float, total_credits: float, projected_gpa: float) -> float:
    """Final CGPA if ``projected_gpa`` is kept over the remaining credits."""
    remaining = max(total_credits - completed_credits, 0.0)
    if completed_credits + remaining <= 0:
        return 0.0
    points = current_cgpa * completed_credits + projected_gpa * remaining
    return round(points / (completed_credits + remaining), 2)


def required_gpa(current_cgpa: float, completed_credits: float, target_cgpa: float, remaining_credits: float) -> float:
    # unclamped: above 4.0 means the target is out of reach
    if remaining_credits <= 0:
        return 0.0
    total = completed_credits + remaining_credits
    return (target_cgpa * total - current_cgpa * completed_credits) / remaining_credits


STANDING_BANDS = (
    (3.75, "Excellent Standing"),
    (3.50, "Strong Performance"),
    (3.00, "Good Foundation"),
    (2.50, "Improvement Needed"),
)


def classify_standing(cgpa: float) -> str:
    for threshold, label in STANDING_BANDS:
        if cgpa >= threshold:
            return label
    return "At Risk"
