"""
UIU grade table and the lookups built on it.

Lookups are lenient: unknown letters map to 0.0 / "F" instead of raising so a
half-edited transcript can still be scored. Validation of user input happens in
the API layer.
"""
from typing import Dict, List, Optional

from schemas import Assessment, AssessmentSummary, GradeEntry
from config import DEFAULT_CT_COUNT

GRADING_SYSTEM: tuple = (
    GradeEntry(letter="A", point=4.00, min_marks=90, max_marks=100, assessment="Outstanding"),
    GradeEntry(letter="A-", point=3.67, min_marks=86, max_marks=89, assessment="Excellent"),
    GradeEntry(letter="B+", point=3.33, min_marks=82, max_marks=85, assessment="Very Good"),
    GradeEntry(letter="B", point=3.00, min_marks=78, max_marks=81, assessment="Good"),
    GradeEntry(letter="B-", point=2.67, min_marks=74, max_marks=77, assessment="Above Average"),
    GradeEntry(letter="C+", point=2.33, min_marks=70, max_marks=73, assessment="Average"),
    GradeEntry(letter="C", point=2.00, min_marks=66, max_marks=69, assessment="Below Average"),
    GradeEntry(letter="C-", point=1.67, min_marks=62, max_marks=65, assessment="Poor"),
    GradeEntry(letter="D+", point=1.33, min_marks=58, max_marks=61, assessment="Very Poor"),
    GradeEntry(letter="D", point=1.00, min_marks=55, max_marks=57, assessment="Pass"),
    GradeEntry(letter="F", point=0.00, min_marks=0, max_marks=54, assessment="Fail"),
)

# Withdrawn / Incomplete: valid on a transcript, never part of GPA arithmetic
NON_GPA_GRADES = {"W", "I"}
FAILING_GRADES = {"F"} | NON_GPA_GRADES

GRADE_POINTS: Dict[str, float] = {g.letter: g.point for g in GRADING_SYSTEM}
VALID_GRADES = set(GRADE_POINTS) | NON_GPA_GRADES

CREDIT_OPTIONS = [0, 0.75, 1, 1.5, 2, 3, 4, 4.5, 6]


def grade_to_point(letter: Optional[str]) -> float:
    if not letter:
        return 0.0
    return GRADE_POINTS.get(letter.strip().upper(), 0.0)


def point_to_grade(point: float) -> str:
    """Letter whose point is the nearest at or below ``point``."""
    for entry in GRADING_SYSTEM:
        # tolerate float noise such as 3.3299999
        if point >= entry.point - 1e-6:
            return entry.letter
    return "F"


def is_passing_grade(letter: Optional[str]) -> bool:
    if not letter:
        return False
    g = letter.strip().upper()
    return g in GRADE_POINTS and g not in FAILING_GRADES


def get_grade_entry(letter: Optional[str]) -> Optional[GradeEntry]:
    g = (letter or "").strip().upper()
    for entry in GRADING_SYSTEM:
        if entry.letter == g:
            return entry
    return None


def marks_to_grade(marks: float) -> GradeEntry:
    """Classify a percentage; marks between bands (e.g. 89.5) fall to the lower band."""
    marks = max(0.0, min(100.0, marks))
    for entry in GRADING_SYSTEM:
        if marks >= entry.min_marks:
            return entry
    return GRADING_SYSTEM[-1]


def grade_options() -> List[dict]:
    return [{"value": g.letter, "label": f"{g.letter} ({g.point:.2f})", "point": g.point} for g in GRADING_SYSTEM]


# ---------- Assessment marks ----------

def _ratio(a: Assessment) -> float:
    return a.obtained / a.total if a.total > 0 else 0.0


def _contribution(a: Assessment) -> float:
    return _ratio(a) * a.weight


def compute_assessment_marks(assessments: List[Assessment], ct_count: int = DEFAULT_CT_COUNT) -> AssessmentSummary:
    """
    Weighted course marks from individual assessments.

    Regular items add ``obtained / total * weight``. Class tests are a best-N
    group: only the ``ct_count`` best by ratio are kept and the group adds the
    average of their weights and contributions, so three CTs of weight 20
    count as a single 20 mark item.
    """
    weight = 0.0
    marks = 0.0

    cts = [a for a in assessments if a.is_ct]
    for a in assessments:
        if a.is_ct:
            continue
        weight += a.weight
        marks += _contribution(a)

    best = sorted(cts, key=_ratio, reverse=True)[:max(ct_count, 1)]
    if best:
        weight += sum(a.weight for a in best) / len(best)
        marks += sum(_contribution(a) for a in best) / len(best)

    percent = marks / weight * 100 if weight > 0 else 0.0
    entry = marks_to_grade(percent)
    return AssessmentSummary(
        marks=round(marks, 2),
        weight=round(weight, 2),
        percent=round(percent, 2),
        grade=entry.letter,
        point=entry.point,
    )


def required_final_marks(
    assessments: List[Assessment],
    target_point: float,
    ct_count: int = DEFAULT_CT_COUNT,
) -> Optional[float]:
    """
    Raw score needed on the (still ungraded) final exam to reach the marks
    floor of ``target_point``'s letter.

    Returns None when there is no ungraded final. A value above the final's
    total means the target can no longer be reached.
    """
    final = next(
        (a for a in assessments if not a.is_ct and "final" in a.name.lower()),
        None,
    )
    if final is None or final.obtained > 0 or final.total <= 0 or final.weight <= 0:
        return None

    target = get_grade_entry(point_to_grade(target_point)) or GRADING_SYSTEM[0]
    current = compute_assessment_marks(assessments, ct_count).marks
    deficit = target.min_marks - current
    if deficit <= 0:
        return 0.0
    return round(deficit / final.weight * final.total, 2)
