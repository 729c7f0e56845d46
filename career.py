"""
Career matching, roadmap planning and degree progress.

Everything here works on the completed-course record (best grade per course
code) and the compiled-in catalog. Lookup misses and empty inputs produce
zeroed results, never exceptions.
"""
import logging
import math
from typing import Dict, List, Optional, Tuple

from schemas import (
    CareerRoadmap,
    CareerSuggestion,
    CareerTrack,
    CategoryProgress,
    CompletedCourse,
    CourseRecommendation,
    CourseTarget,
    DegreeProgress,
    DomainStrength,
    PlannedCourse,
    PlannedTrimester,
    ProgramCourse,
    ProgramDefinition,
    StudyTip,
)
from catalog import DOMAINS, get_career_track, get_career_tracks, normalize_course_code
from cgpa import project_cgpa, required_gpa
from grading import point_to_grade
from config import (
    DEFAULT_TARGET_CGPA,
    DEFAULT_TARGET_POINT,
    MAX_TRIMESTER_CREDITS,
    URGENT_DEFICIT,
)

logger = logging.getLogger(__name__)

# competitiveness tier -> (target grade point per key course, default target CGPA)
TIER_TARGETS: Dict[str, Tuple[float, float]] = {
    "elite": (3.67, 3.75),
    "competitive": (DEFAULT_TARGET_POINT, DEFAULT_TARGET_CGPA),
    "standard": (3.00, 3.25),
}

IMPORTANCE_ORDER = {"critical": 0, "important": 1, "helpful": 2}
PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

CATEGORY_LABELS = {
    "core": "Core Courses",
    "major": "Major Courses",
    "elective": "Electives",
    "ge": "General Education",
    "lab": "Lab Courses",
    "thesis": "Thesis/Project",
}

STRONG_AVG = 3.33
LOW_POINT = 2.0  # below C


def _round_percent(value: float) -> int:
    # half-up, not banker's rounding
    return max(0, min(100, int(math.floor(value + 0.5))))


def _completed_map(completed_courses: List[CompletedCourse]) -> Dict[str, CompletedCourse]:
    best: Dict[str, CompletedCourse] = {}
    for c in completed_courses:
        code = normalize_course_code(c.code)
        if code not in best or c.point > best[code].point:
            best[code] = c
    return best


def _course_index(program: Optional[ProgramDefinition]) -> Dict[str, ProgramCourse]:
    if program is None:
        return {}
    return {normalize_course_code(c.code): c for c in program.courses}


def _display(code: str, catalog: Dict[str, ProgramCourse]) -> str:
    course = catalog.get(code)
    return course.code if course else code


def _key_stats(track: CareerTrack, completed: Dict[str, CompletedCourse]):
    keys = [normalize_course_code(k) for k in track.key_course_codes]
    done = [completed[k] for k in keys if k in completed]
    rate = len(done) / len(keys) if keys else 0.0
    avg = sum(c.point for c in done) / len(done) if done else 0.0
    return keys, done, rate, avg


def _match_base(rate: float, avg: float) -> float:
    """Half the score is exposure (key courses taken), half is mastery (grades)."""
    return rate * 50 + (avg / 4.0) * 50


def _importance(index: int) -> str:
    if index < 2:
        return "critical"
    if index < 4:
        return "important"
    return "helpful"


# ---------- Suggestions ----------

def auto_suggest_careers(
    program: Optional[ProgramDefinition],
    completed_courses: List[CompletedCourse],
    program_id: str,
) -> List[CareerSuggestion]:
    completed = _completed_map(completed_courses)
    catalog = _course_index(program)
    suggestions: List[CareerSuggestion] = []

    for track in get_career_tracks(program_id):
        keys, done, rate, avg = _key_stats(track, completed)
        why_good_fit: List[str] = []
        why_not_yet: List[str] = []

        if not keys:
            why_not_yet.append("No key courses are defined for this track yet")
        else:
            if rate >= 0.5:
                why_good_fit.append(f"Completed {len(done)} of {len(keys)} key courses")
            if done and avg >= STRONG_AVG:
                why_good_fit.append(f"Strong performance in {len(done)} key courses (avg {avg:.2f})")
            excelled = [_display(normalize_course_code(c.code), catalog) for c in done if c.point >= 3.67]
            if excelled:
                why_good_fit.append("Excelled in " + ", ".join(excelled[:3]))

            if rate < 0.5:
                why_not_yet.append(f"Only {len(done)} of {len(keys)} key courses completed")
            for code in keys:
                course = completed.get(code)
                if course is None:
                    why_not_yet.append(f"Missing key course {_display(code, catalog)}")
                elif course.point < LOW_POINT:
                    why_not_yet.append(f"Low grade in {_display(code, catalog)} ({course.grade})")

        suggestions.append(CareerSuggestion(
            track=track,
            match_percent=_round_percent(_match_base(rate, avg)),
            key_courses_completed=done,
            why_good_fit=why_good_fit,
            why_not_yet=why_not_yet,
            grade_label=point_to_grade(round(avg, 2)) if done else "N/A",
        ))

    # stable: ties keep track declaration order
    suggestions.sort(key=lambda s: s.match_percent, reverse=True)
    return suggestions


# ---------- Roadmap ----------

def _relevant_remaining(
    program: ProgramDefinition,
    keys: List[str],
    completed: Dict[str, CompletedCourse],
    catalog: Dict[str, ProgramCourse],
) -> List[ProgramCourse]:
    """Uncompleted key courses plus their uncompleted catalog prerequisites, in catalog order."""
    wanted = set()
    stack = [k for k in keys if k in catalog and k not in completed]
    while stack:
        code = stack.pop()
        if code in wanted:
            continue
        wanted.add(code)
        for pre in catalog[code].prerequisites:
            pre_code = normalize_course_code(pre)
            if pre_code in catalog and pre_code not in completed and pre_code not in wanted:
                stack.append(pre_code)
    return [c for c in program.courses if normalize_course_code(c.code) in wanted]


def _plan_trimesters(
    courses: List[ProgramCourse],
    completed_codes: set,
    key_codes: set,
    current_cgpa: float,
    completed_credits: float,
    total_credits: float,
    target_cgpa: float,
) -> List[PlannedTrimester]:
    available = set(completed_codes)
    pending = list(courses)
    projected_points = current_cgpa * completed_credits
    credits_done = completed_credits
    plan: List[PlannedTrimester] = []

    while pending:
        remaining = max(total_credits - credits_done, 0.0)
        need = 0.0
        if remaining > 0:
            need = (target_cgpa * total_credits - projected_points) / remaining
        target_gpa = round(max(0.0, min(4.0, need)), 2)

        chosen: List[ProgramCourse] = []
        load = 0.0
        for course in pending:
            prereqs = [normalize_course_code(p) for p in course.prerequisites]
            if any(p not in available for p in prereqs):
                continue
            if load + course.credits > MAX_TRIMESTER_CREDITS:
                continue
            chosen.append(course)
            load += course.credits

        index = len(plan) + 1
        if not chosen:
            # nothing fit: each course is too large or still waiting on prerequisites
            oversized = [c for c in pending if c.credits > MAX_TRIMESTER_CREDITS]
            waiting = [c for c in pending if c.credits <= MAX_TRIMESTER_CREDITS]
            reasons = []
            if oversized:
                reasons.append(
                    ", ".join(f"{c.code} ({c.credits:g} credits)" for c in oversized)
                    + f" above the {MAX_TRIMESTER_CREDITS:g} credit trimester limit"
                )
            if waiting:
                reasons.append("unmet prerequisites for " + ", ".join(c.code for c in waiting))
            logger.debug("Trimester plan stuck at %d: %s", index, "; ".join(reasons))
            plan.append(PlannedTrimester(
                index=index,
                name=f"Trimester {index}",
                target_gpa=target_gpa,
                target_grade=point_to_grade(target_gpa),
                achievable=need <= 4.0,
                note="No remaining course can be scheduled; " + "; ".join(reasons),
            ))
            break

        plan.append(PlannedTrimester(
            index=index,
            name=f"Trimester {index}",
            courses=[
                PlannedCourse(
                    code=c.code, name=c.name, credits=c.credits,
                    is_key=normalize_course_code(c.code) in key_codes,
                )
                for c in chosen
            ],
            credits=round(load, 2),
            target_gpa=target_gpa,
            target_grade=point_to_grade(target_gpa),
            achievable=need <= 4.0,
            note="Heavy load" if load >= MAX_TRIMESTER_CREDITS else "",
        ))

        # prerequisites unlock only for the following trimester
        available.update(normalize_course_code(c.code) for c in chosen)
        chosen_ids = {id(c) for c in chosen}
        pending = [c for c in pending if id(c) not in chosen_ids]
        projected_points += target_gpa * load
        credits_done += load

    return plan


def _study_tip(target: CourseTarget, track: CareerTrack) -> StudyTip:
    deficit = round(target.target_point - (target.actual_point or 0.0), 2)
    if deficit >= URGENT_DEFICIT:
        priority = "urgent"
        tip = (
            f"Consider retaking {target.code}: {target.actual_grade} is {deficit:.2f} points "
            f"below the {target.target_grade} target. Rebuild the fundamentals before "
            f"advanced {track.title} courses."
        )
    else:
        priority = "important"
        tip = (
            f"Revisit {target.name}; closing the gap from {target.actual_grade} to "
            f"{target.target_grade} strengthens your {track.title} profile."
        )
    return StudyTip(
        course_code=target.code,
        course_name=target.name,
        priority=priority,
        deficit=deficit,
        tip=tip,
    )


def _action_items(
    track: CareerTrack,
    targets: List[CourseTarget],
    plan: List[PlannedTrimester],
    current_cgpa: float,
    completed_credits: float,
    total_credits: float,
    target_cgpa: float,
) -> List[str]:
    items: List[str] = []

    for t in targets:
        if t.meets_target is False and t.target_point - (t.actual_point or 0.0) >= URGENT_DEFICIT - 1e-9:
            items.append(f"Retake or improve grade in {t.code} ({t.actual_grade} → target {t.target_grade})")
        if len(items) == 2:
            break

    remaining = max(total_credits - completed_credits, 0.0)
    if current_cgpa >= target_cgpa:
        items.append(f"Maintain current pace: on track for target CGPA {target_cgpa:.2f}")
    elif remaining <= 0:
        items.append(f"No credits remain; final CGPA stays at {current_cgpa:.2f}")
    else:
        need = required_gpa(current_cgpa, completed_credits, target_cgpa, remaining)
        if need > 4.0:
            best = project_cgpa(current_cgpa, completed_credits, total_credits, 4.0)
            items.append(
                f"Target CGPA {target_cgpa:.2f} is out of reach with {remaining:g} credits left; "
                f"aim for {best:.2f}"
            )
        else:
            items.append(
                f"Average at least {need:.2f} GPA over the remaining {remaining:g} credits "
                f"to reach {target_cgpa:.2f}"
            )

    critical = next((t for t in targets if t.status == "remaining" and t.importance == "critical"), None)
    if critical is not None:
        items.append(f"Prioritize {critical.code} ({critical.name}), a critical course for {track.title}")

    if plan and plan[0].courses:
        first = plan[0]
        codes = ", ".join(c.code for c in first.courses[:4])
        items.append(f"Next trimester: take {codes} and aim for a {first.target_gpa:.2f} GPA")
    elif plan and plan[0].note:
        items.append("Talk to your advisor about unmet prerequisites blocking your track courses")

    for skill in track.skills:
        if len(items) >= 3:
            break
        items.append(f"Build hands-on {skill} experience through projects")

    return items[:5]


def build_career_roadmap(
    program: Optional[ProgramDefinition],
    completed_courses: List[CompletedCourse],
    program_id: str,
    track_id: str,
    current_cgpa: float,
    completed_credits: float,
    target_cgpa: Optional[float] = None,
) -> CareerRoadmap:
    """
    Readiness, per-course grade targets, a prerequisite-ordered trimester plan
    and study advice for one career track.

    An unknown track or an empty program yields an empty roadmap.
    """
    track = get_career_track(program_id, track_id)
    target_point, tier_cgpa = TIER_TARGETS[track.competitiveness if track else "competitive"]
    target = tier_cgpa if target_cgpa is None else target_cgpa

    if track is None or program is None or not program.courses:
        return CareerRoadmap(track=track, target_cgpa=target)

    completed = _completed_map(completed_courses)
    catalog = _course_index(program)
    keys, done, rate, avg = _key_stats(track, completed)

    proximity = 1.0 if target <= 0 else min(current_cgpa / target, 1.0)
    readiness = _round_percent(0.85 * _match_base(rate, avg) + 15 * proximity)

    target_grade = point_to_grade(target_point)
    targets: List[CourseTarget] = []
    for index, code in enumerate(keys):
        course = catalog.get(code)
        taken = completed.get(code)
        common = dict(
            code=_display(code, catalog),
            name=course.name if course else code,
            credits=course.credits if course else 0,
            importance=_importance(index),
            target_grade=target_grade,
            target_point=target_point,
        )
        if taken is not None:
            targets.append(CourseTarget(
                **common,
                status="completed",
                actual_grade=taken.grade,
                actual_point=taken.point,
                meets_target=taken.point >= target_point - 1e-9,
            ))
        else:
            targets.append(CourseTarget(**common, status="remaining"))

    targets.sort(key=lambda t: (
        0 if (t.status == "remaining" and t.importance == "critical") else 1,
        IMPORTANCE_ORDER[t.importance],
    ))

    total_credits = max(program.total_credits, completed_credits)
    plan = _plan_trimesters(
        _relevant_remaining(program, keys, completed, catalog),
        set(completed),
        set(keys),
        current_cgpa,
        completed_credits,
        total_credits,
        target,
    )

    tips = [_study_tip(t, track) for t in targets if t.meets_target is False]

    return CareerRoadmap(
        track=track,
        overall_readiness=readiness,
        current_avg_in_key=round(avg, 2),
        target_cgpa=target,
        action_items=_action_items(track, targets, plan, current_cgpa, completed_credits, total_credits, target),
        course_targets=targets,
        trimester_plan=plan,
        study_tips=tips,
    )


# ---------- Degree progress ----------

def calculate_degree_progress(program: ProgramDefinition, completed_codes: List[str]) -> DegreeProgress:
    done = {normalize_course_code(c) for c in completed_codes}
    totals = {key: [0.0, 0.0] for key in CATEGORY_LABELS}
    credits_completed = 0.0
    remaining: List[ProgramCourse] = []

    for course in program.courses:
        bucket = totals.get(course.category)
        if bucket is not None:
            bucket[0] += course.credits
        if normalize_course_code(course.code) in done:
            credits_completed += course.credits
            if bucket is not None:
                bucket[1] += course.credits
        else:
            remaining.append(course)

    categories = [
        CategoryProgress(
            category=key,
            label=CATEGORY_LABELS[key],
            total=total,
            completed=completed,
            percent=_round_percent(completed / total * 100),
        )
        for key, (total, completed) in totals.items()
        if total > 0
    ]

    percent = _round_percent(credits_completed / program.total_credits * 100) if program.total_credits > 0 else 0
    return DegreeProgress(
        total_credits_required=program.total_credits,
        credits_completed=round(credits_completed, 2),
        completion_percent=percent,
        category_counts=categories,
        completed_codes=sorted(done),
        remaining_courses=remaining,
    )


def get_recommended_courses(
    program: ProgramDefinition,
    completed_codes: List[str],
    program_id: str,
    career_goal_id: Optional[str] = None,
    limit: int = 8,
) -> List[CourseRecommendation]:
    """Courses whose prerequisites are all done, most pressing first."""
    done = {normalize_course_code(c) for c in completed_codes}
    tracks = get_career_tracks(program_id)
    recommendations: List[CourseRecommendation] = []

    for course in program.courses:
        code = normalize_course_code(course.code)
        if code in done:
            continue
        if not all(normalize_course_code(p) in done for p in course.prerequisites):
            continue

        if course.category == "core":
            priority, reason = "high", "Core requirement; must complete for graduation"
        elif course.category == "thesis":
            priority, reason = "medium", "Thesis/Project; start when ready"
        elif course.category == "major":
            priority, reason = "medium", "Major course; builds specialization"
        else:
            priority, reason = "low", "Broadens your skillset"

        relevant = [t for t in tracks if code in {normalize_course_code(k) for k in t.key_course_codes}]
        if relevant and priority != "high":
            priority = "medium"
            reason = "Key for: " + ", ".join(t.title for t in relevant)
        if career_goal_id and any(t.id == career_goal_id for t in relevant):
            priority = "high"
            reason = f"Key course for your goal: {next(t.title for t in relevant if t.id == career_goal_id)}"

        recommendations.append(CourseRecommendation(
            course=course,
            reason=reason,
            priority=priority,
            career_relevance=[t.title for t in relevant],
        ))

    recommendations.sort(key=lambda r: (PRIORITY_ORDER[r.priority], r.course.trimester))
    return recommendations[:limit]


def analyze_domain_strengths(
    program: ProgramDefinition,
    completed_courses: List[CompletedCourse],
) -> List[DomainStrength]:
    """Average grade point per knowledge domain (0-4), strongest first."""
    completed = _completed_map(completed_courses)
    scores: Dict[str, List[float]] = {}

    for course in program.courses:
        taken = completed.get(normalize_course_code(course.code))
        if taken is None:
            continue
        for domain in course.domains:
            scores.setdefault(domain, []).append(taken.point)

    strengths = []
    for domain_id, points in scores.items():
        domain = DOMAINS.get(domain_id)
        strengths.append(DomainStrength(
            domain_id=domain_id,
            domain_name=domain.name if domain else domain_id,
            score=round(sum(points) / len(points), 2),
            course_count=len(points),
            icon=domain.icon if domain else "📚",
        ))
    strengths.sort(key=lambda d: d.score, reverse=True)
    return strengths
