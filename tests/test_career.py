import pytest

import catalog
from career import (
    analyze_domain_strengths,
    auto_suggest_careers,
    build_career_roadmap,
    calculate_degree_progress,
    get_recommended_courses,
)
from catalog import get_program, normalize_course_code
from grading import grade_to_point
from schemas import CareerTrack, CompletedCourse, ProgramCourse, ProgramDefinition

BSCSE = get_program("bscse")


def done(**grades):
    return [CompletedCourse(code=code, grade=g, point=grade_to_point(g)) for code, g in grades.items()]


def check_plan(plan, completed_codes):
    available = {normalize_course_code(c) for c in completed_codes}
    by_code = {normalize_course_code(c.code): c for c in BSCSE.courses}
    seen = set()
    for trimester in plan:
        assert trimester.credits <= 15
        assert 0 <= trimester.target_gpa <= 4
        for pc in trimester.courses:
            code = normalize_course_code(pc.code)
            assert code not in seen
            for pre in by_code[code].prerequisites:
                assert normalize_course_code(pre) in available
        placed = {normalize_course_code(pc.code) for pc in trimester.courses}
        seen |= placed
        available |= placed
    return seen


def test_match_percent_is_exposure_plus_mastery():
    suggestions = auto_suggest_careers(BSCSE, done(CSE1115="A", CSE2215="A", CSE3521="B"), "bscse")
    se = next(s for s in suggestions if s.track.id == "software-eng")
    # 3 of 6 key courses, avg 3.67: 25 + 45.83
    assert se.match_percent == 71
    assert se.grade_label == "A-"
    assert {c.code for c in se.key_courses_completed} == {"CSE1115", "CSE2215", "CSE3521"}
    assert any("3 of 6" in reason for reason in se.why_good_fit)


def test_suggestions_sorted_and_bounded():
    suggestions = auto_suggest_careers(BSCSE, done(CSE2213="A", CSE2217="B", CSE3811="A-", MATH2205="C"), "bscse")
    percents = [s.match_percent for s in suggestions]
    assert percents == sorted(percents, reverse=True)
    assert len(suggestions) == len(catalog.get_career_tracks("bscse"))
    for s in suggestions:
        assert isinstance(s.match_percent, int)
        assert 0 <= s.match_percent <= 100


def test_nothing_completed_scores_zero():
    for s in auto_suggest_careers(BSCSE, [], "bscse"):
        assert s.match_percent == 0
        assert s.grade_label == "N/A"
        assert s.why_not_yet


def test_ties_keep_track_declaration_order():
    suggestions = auto_suggest_careers(BSCSE, [], "bscse")
    assert [s.track.id for s in suggestions] == [t.id for t in catalog.CSE_TRACKS]


def test_low_key_course_grade_is_called_out():
    suggestions = auto_suggest_careers(BSCSE, done(CSE2215="D", CSE1115="A"), "bscse")
    se = next(s for s in suggestions if s.track.id == "software-eng")
    assert "Low grade in CSE 2215 (D)" in se.why_not_yet
    assert not any("CSE 1115" in reason for reason in se.why_not_yet)
    # C is the floor, not low
    se = next(s for s in auto_suggest_careers(BSCSE, done(CSE2215="C"), "bscse") if s.track.id == "software-eng")
    assert not any(reason.startswith("Low grade") for reason in se.why_not_yet)


def test_unknown_program_has_no_suggestions():
    assert auto_suggest_careers(None, done(CSE1111="A"), "nope") == []


def test_track_without_key_courses_scores_zero(monkeypatch):
    monkeypatch.setitem(catalog.CAREER_MAPS, "empty", [CareerTrack(id="blank", title="Blank")])
    suggestions = auto_suggest_careers(None, done(CSE1111="A"), "empty")
    assert suggestions[0].match_percent == 0
    assert suggestions[0].why_good_fit == []


def test_roadmap_for_software_engineering():
    completed = done(CSE1110="A", CSE1111="A", CSE2215="C")
    roadmap = build_career_roadmap(BSCSE, completed, "bscse", "software-eng", 3.0, 30)

    assert roadmap.track.id == "software-eng"
    assert roadmap.target_cgpa == 3.5
    assert roadmap.overall_readiness == 41
    assert roadmap.current_avg_in_key == 2.0

    targets = roadmap.course_targets
    assert targets[0].code == "CSE 1115"
    assert targets[0].status == "remaining" and targets[0].importance == "critical"
    assert targets[0].meets_target is None
    dsa = next(t for t in targets if t.code == "CSE 2215")
    assert dsa.status == "completed" and dsa.meets_target is False
    assert [t.importance for t in targets] == ["critical", "critical", "important", "important", "helpful", "helpful"]

    assert len(roadmap.study_tips) == 1
    tip = roadmap.study_tips[0]
    assert tip.course_code == "CSE 2215"
    assert tip.priority == "urgent"
    assert tip.deficit == 1.33

    assert 3 <= len(roadmap.action_items) <= 5


def test_trimester_plan_respects_prerequisites():
    completed_codes = ["CSE1110", "CSE1111", "CSE2215"]
    roadmap = build_career_roadmap(
        BSCSE, done(CSE1110="A", CSE1111="A", CSE2215="C"), "bscse", "software-eng", 3.0, 30,
    )
    placed = check_plan(roadmap.trimester_plan, completed_codes)
    # key courses plus the lab chain CSE 4165 depends on
    assert placed == {
        "CSE1112", "CSE2216", "CSE1115", "CSE1116", "CSE3521", "CSE4165", "CSE3411", "CSE3421",
    }
    assert len(roadmap.trimester_plan) == 4
    first = {c.code for c in roadmap.trimester_plan[0].courses}
    assert first == {"CSE 1112", "CSE 1115", "CSE 3521", "CSE 3411"}
    assert roadmap.trimester_plan[-1].courses[0].code == "CSE 4165"


@pytest.mark.parametrize("track_id", [t.id for t in catalog.CSE_TRACKS])
def test_every_track_plans_from_scratch(track_id):
    roadmap = build_career_roadmap(BSCSE, [], "bscse", track_id, 0.0, 0)
    placed = check_plan(roadmap.trimester_plan, [])
    keys = {normalize_course_code(k) for k in roadmap.track.key_course_codes}
    assert keys <= placed
    assert 0 <= roadmap.overall_readiness <= 100
    assert all(t.note == "" or t.courses for t in roadmap.trimester_plan)


def test_small_gap_is_an_important_tip():
    roadmap = build_career_roadmap(BSCSE, done(CSE2215="B"), "bscse", "software-eng", 3.0, 30)
    assert len(roadmap.study_tips) == 1
    tip = roadmap.study_tips[0]
    assert tip.course_code == "CSE 2215"
    assert tip.deficit == 0.33
    assert tip.priority == "important"


def test_zero_target_cgpa_counts_as_reached():
    roadmap = build_career_roadmap(BSCSE, [], "bscse", "software-eng", 0.0, 0, target_cgpa=0)
    assert roadmap.target_cgpa == 0
    # no key courses, full proximity credit
    assert roadmap.overall_readiness == 15


def test_out_of_reach_target_is_flagged():
    roadmap = build_career_roadmap(BSCSE, done(CSE1110="A"), "bscse", "software-eng", 2.0, 120)
    first = roadmap.trimester_plan[0]
    assert first.target_gpa == 4.0
    assert first.achievable is False
    assert any("out of reach" in item for item in roadmap.action_items)


def test_explicit_target_cgpa_overrides_tier_default():
    roadmap = build_career_roadmap(BSCSE, [], "bscse", "ai-ml", 3.9, 100, target_cgpa=3.8)
    assert roadmap.target_cgpa == 3.8
    assert roadmap.course_targets[0].target_grade == "A-"


def test_unknown_track_gives_empty_roadmap():
    roadmap = build_career_roadmap(BSCSE, done(CSE1111="A"), "bscse", "astronaut", 3.5, 40)
    assert roadmap.track is None
    assert roadmap.overall_readiness == 0
    assert roadmap.course_targets == []
    assert roadmap.trimester_plan == []


def _lab_program(*courses):
    return ProgramDefinition(id="lab", name="Lab", short_name="LAB", school="", total_credits=12, duration="", courses=list(courses))


def test_course_with_missing_prerequisite_is_never_planned(monkeypatch):
    program = _lab_program(
        ProgramCourse(code="X 101", name="Blocked", credits=3, prerequisites=["X 999"]),
        ProgramCourse(code="X 102", name="Open", credits=3),
    )
    monkeypatch.setitem(catalog.CAREER_MAPS, "lab", [
        CareerTrack(id="t", title="T", key_course_codes=["X101", "X102"]),
    ])
    roadmap = build_career_roadmap(program, [], "lab", "t", 3.0, 0)
    planned = [c.code for t in roadmap.trimester_plan for c in t.courses]
    assert planned == ["X 102"]
    assert roadmap.trimester_plan[-1].courses == []
    assert "unmet prerequisites for X 101" in roadmap.trimester_plan[-1].note


def test_cyclic_prerequisites_do_not_loop(monkeypatch):
    program = _lab_program(
        ProgramCourse(code="Y 1", name="One", credits=3, prerequisites=["Y 2"]),
        ProgramCourse(code="Y 2", name="Two", credits=3, prerequisites=["Y 1"]),
    )
    monkeypatch.setitem(catalog.CAREER_MAPS, "lab", [CareerTrack(id="t", title="T", key_course_codes=["Y1"])])
    roadmap = build_career_roadmap(program, [], "lab", "t", 0.0, 0)
    assert len(roadmap.trimester_plan) == 1
    assert roadmap.trimester_plan[0].courses == []


def test_stuck_trimester_names_oversized_course(monkeypatch):
    program = _lab_program(
        ProgramCourse(code="Z 100", name="Open", credits=3),
        ProgramCourse(code="Z 200", name="Marathon", credits=16),
        ProgramCourse(code="Z 300", name="After", credits=3, prerequisites=["Z 200"]),
    )
    monkeypatch.setitem(catalog.CAREER_MAPS, "lab", [
        CareerTrack(id="t", title="T", key_course_codes=["Z100", "Z200", "Z300"]),
    ])
    roadmap = build_career_roadmap(program, [], "lab", "t", 0.0, 0)
    assert [c.code for c in roadmap.trimester_plan[0].courses] == ["Z 100"]
    stuck = roadmap.trimester_plan[-1]
    assert stuck.courses == []
    assert "Z 200 (16 credits) above the 15 credit trimester limit" in stuck.note
    assert "unmet prerequisites for Z 300" in stuck.note
    assert "Z 200" not in stuck.note.split("unmet prerequisites for ")[1]


def test_degree_progress():
    progress = calculate_degree_progress(BSCSE, ["CSE 1110", "cse1111", "ENG 1011"])
    assert progress.total_credits_required == 137
    assert progress.credits_completed == 7
    assert progress.completion_percent == 5
    core = next(c for c in progress.category_counts if c.category == "core")
    assert core.completed == 4
    assert len(progress.remaining_courses) == len(BSCSE.courses) - 3


def test_recommendations_follow_prerequisites_and_goal():
    recs = get_recommended_courses(BSCSE, [], "bscse", career_goal_id="ai-ml", limit=50)
    codes = {r.course.code for r in recs}
    assert "CSE 1110" in codes
    assert "CSE 1111" not in codes  # needs CSE 1110
    ai_lab = next(r for r in recs if r.course.code == "CSE 3812")
    assert ai_lab.priority == "high"
    assert "your goal" in ai_lab.reason
    order = [r.priority for r in recs]
    assert order == sorted(order, key=["high", "medium", "low"].index)

    assert len(get_recommended_courses(BSCSE, [], "bscse")) == 8


def test_domain_strengths():
    strengths = analyze_domain_strengths(BSCSE, done(**{"CSE 1111": "A", "CSE 2213": "B"}))
    assert strengths[0].domain_id == "programming"
    assert strengths[0].score == 4.0
    math = next(s for s in strengths if s.domain_id == "math")
    assert math.score == 3.0 and math.course_count == 1
