import csv
import logging
from io import BytesIO, StringIO
from typing import List, Dict, Any, Set
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from schemas import (
    AcademicPreferences,
    CareerRequest,
    CareerRoadmap,
    CareerSuggestion,
    CareerTrack,
    CGPACalcRequest,
    CGPAResponse,
    CompletedCourse,
    CourseInput,
    DegreeProgressRequest,
    DegreeProgressResponse,
    GPACalcRequest,
    MarksRequest,
    MarksResponse,
    ProgramDefinition,
    ProgramSummary,
    ProjectionRequest,
    ProjectionResponse,
    RoadmapRequest,
    StudentInfo,
    TrimesterGPA,
    TrimesterInput,
)
from config import CORS_ORIGINS, DEFAULT_PROGRAM_CREDITS, LOG_LEVEL, PORT
from grading import (
    CREDIT_OPTIONS,
    GRADE_POINTS,
    GRADING_SYSTEM,
    VALID_GRADES,
    compute_assessment_marks,
    grade_options,
    grade_to_point,
    required_final_marks,
)
from cgpa import (
    build_completed_courses,
    calculate_cgpa,
    calculate_trimester_gpa,
    classify_standing,
    project_cgpa,
    required_gpa,
)
from career import (
    analyze_domain_strengths,
    auto_suggest_careers,
    build_career_roadmap,
    calculate_degree_progress,
    get_recommended_courses,
)
from catalog import PROGRAMS, get_career_tracks, get_program, normalize_course_code
from trimesters import get_trimester_name, parse_student_id
import database

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# Optional heavy import for PDF generation
try:
    from reportlab.lib.pagesizes import A4
    from reportlab.pdfgen import canvas
    REPORTLAB_AVAILABLE = True
except ImportError:
    REPORTLAB_AVAILABLE = False

app = FastAPI(title="Trimester CGPA & Career Planner API", version="2.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def read_root():
    return {"message": "CGPA & Career Planner API running"}


@app.get("/test")
def test_database():
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_name": None,
        "connection_status": "Not Connected",
        "collections": [],
    }

    if database.db is None:
        return response
    response["database_name"] = getattr(database.db, "name", "unknown")
    try:
        response["collections"] = database.db.list_collection_names()[:10]
        response["connection_status"] = "Connected"
        response["database"] = "✅ Connected & Working"
    except PyMongoError as e:
        logger.error("Database check failed: %s", e)
        response["database"] = f"⚠️ Connected but Error: {str(e)[:80]}"
    return response


# ---------- Boundary validation ----------

def _trimester_label(trimester: TrimesterInput, index: int) -> str:
    return trimester.name or get_trimester_name(trimester.code or "") or f"Trimester {index + 1}"


def validate_courses(courses: List[CourseInput], label: str) -> None:
    seen: Set[str] = set()
    for c in courses:
        course = c.code or c.name or "course"
        if c.code:
            code = normalize_course_code(c.code)
            if code in seen:
                raise HTTPException(status_code=400, detail=f"Duplicate course entry in {label}: {c.code}")
            seen.add(code)
        if c.grade and c.grade not in VALID_GRADES:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid grade '{c.grade}' for {course}. Allowed: {sorted(VALID_GRADES)}",
            )
        if c.is_retake and c.grade and not c.previous_grade:
            raise HTTPException(status_code=400, detail=f"Select the previous grade for retake course {course} in {label}")
        if c.previous_grade and c.previous_grade not in VALID_GRADES:
            raise HTTPException(status_code=400, detail=f"Invalid previous grade '{c.previous_grade}' for {course}")


def validate_trimesters(trimesters: List[TrimesterInput], require_graded: bool = False) -> None:
    for i, t in enumerate(trimesters):
        validate_courses(t.courses, _trimester_label(t, i))
    if require_graded and not any(c.grade and c.credit > 0 for t in trimesters for c in t.courses):
        raise HTTPException(status_code=400, detail="Add at least one course with a grade and credits")


def _completed_from(req: CareerRequest) -> List[CompletedCourse]:
    if req.completed is not None:
        return [
            CompletedCourse(code=normalize_course_code(c.code), grade=c.grade.strip().upper(), point=c.point)
            for c in req.completed
        ]
    validate_trimesters(req.trimesters)
    return build_completed_courses(req.trimesters)


# ---------- Grades ----------

@app.get("/api/grades")
def api_grades():
    return {
        "grades": [g.model_dump() for g in GRADING_SYSTEM],
        "options": grade_options(),
        "credit_options": CREDIT_OPTIONS,
    }


@app.post("/api/grades/marks", response_model=MarksResponse)
def api_marks(req: MarksRequest):
    summary = compute_assessment_marks(req.assessments, req.ct_count)
    required = None
    if req.target_grade:
        if req.target_grade not in GRADE_POINTS:
            raise HTTPException(status_code=400, detail=f"Unknown target grade '{req.target_grade}'")
        required = required_final_marks(req.assessments, grade_to_point(req.target_grade), req.ct_count)
    return MarksResponse(summary=summary, required_final=required)


# ---------- GPA / CGPA ----------

@app.post("/api/gpa", response_model=TrimesterGPA)
def api_gpa(req: GPACalcRequest):
    validate_courses(req.courses, "this trimester")
    return calculate_trimester_gpa(req.courses)


def compute_cgpa(req: CGPACalcRequest) -> CGPAResponse:
    results = calculate_cgpa(req.trimesters, req.prior_credits, req.prior_cgpa)
    if results:
        last = results[-1]
        cgpa, total, earned = last.cgpa, last.total_credits, last.earned_credits
    else:
        cgpa, total, earned = round(req.prior_cgpa, 2), req.prior_credits, req.prior_credits
    return CGPAResponse(
        results=results,
        cgpa=cgpa,
        total_credits=total,
        earned_credits=earned,
        standing=classify_standing(cgpa),
    )


@app.post("/api/cgpa", response_model=CGPAResponse)
def api_cgpa(req: CGPACalcRequest):
    validate_trimesters(req.trimesters, require_graded=True)
    return compute_cgpa(req)


@app.post("/api/project", response_model=ProjectionResponse)
def api_project(req: ProjectionRequest):
    total = req.total_credits
    if total is None:
        program = get_program(req.program_id)
        total = program.total_credits if program else DEFAULT_PROGRAM_CREDITS
    total = max(total, req.completed_credits)
    remaining = total - req.completed_credits

    projected = None
    if req.projected_gpa is not None:
        projected = project_cgpa(req.current_cgpa, req.completed_credits, total, req.projected_gpa)

    if req.target_cgpa is None:
        msg = (
            f"Keeping a {req.projected_gpa:.2f} GPA leads to a final CGPA of {projected:.2f}."
            if projected is not None else
            "Provide a projected GPA or a target CGPA."
        )
        return ProjectionResponse(total_credits=total, remaining_credits=remaining, projected_cgpa=projected, message=msg)

    if remaining <= 0:
        return ProjectionResponse(
            total_credits=total,
            remaining_credits=0,
            projected_cgpa=projected,
            target_cgpa=req.target_cgpa,
            needed_avg_gpa=0.0,
            achievable=req.current_cgpa >= req.target_cgpa,
            message="No remaining credits. Your final CGPA is already determined.",
        )

    need = required_gpa(req.current_cgpa, req.completed_credits, req.target_cgpa, remaining)
    achievable = need <= 4.0
    if achievable:
        msg = f"You need an average GPA of {max(need, 0.0):.2f} across the remaining {remaining:g} credits to reach {req.target_cgpa:.2f}."
    else:
        msg = f"Even a 4.00 average can't reach {req.target_cgpa:.2f}. Aim for the highest possible and consult your advisor."

    return ProjectionResponse(
        total_credits=total,
        remaining_credits=remaining,
        projected_cgpa=projected,
        target_cgpa=req.target_cgpa,
        needed_avg_gpa=round(max(0.0, min(4.0, need)), 2),
        achievable=achievable,
        message=msg,
    )


# ---------- Programs & careers ----------

@app.get("/api/programs", response_model=List[ProgramSummary])
def api_programs():
    return [
        ProgramSummary(
            id=p.id, name=p.name, short_name=p.short_name, department=p.department,
            total_credits=p.total_credits, course_count=len(p.courses),
        )
        for p in PROGRAMS
    ]


@app.get("/api/programs/{program_id}", response_model=ProgramDefinition)
def api_program(program_id: str):
    program = get_program(program_id)
    if program is None:
        raise HTTPException(status_code=404, detail="Program not found")
    return program


@app.get("/api/careers/{program_id}", response_model=List[CareerTrack])
def api_career_tracks(program_id: str):
    return get_career_tracks(program_id)


@app.post("/api/careers/suggest", response_model=List[CareerSuggestion])
def api_career_suggest(req: CareerRequest):
    completed = _completed_from(req)
    return auto_suggest_careers(get_program(req.program_id), completed, req.program_id)


@app.post("/api/careers/roadmap", response_model=CareerRoadmap)
def api_career_roadmap(req: RoadmapRequest):
    completed = _completed_from(req)

    current_cgpa = req.current_cgpa
    completed_credits = req.completed_credits
    if current_cgpa is None or completed_credits is None:
        results = calculate_cgpa(req.trimesters, req.prior_credits, req.prior_cgpa)
        last_cgpa = results[-1].cgpa if results else req.prior_cgpa
        last_earned = results[-1].earned_credits if results else req.prior_credits
        current_cgpa = last_cgpa if current_cgpa is None else current_cgpa
        completed_credits = last_earned if completed_credits is None else completed_credits

    return build_career_roadmap(
        get_program(req.program_id),
        completed,
        req.program_id,
        req.track_id,
        current_cgpa,
        completed_credits,
        req.target_cgpa,
    )


@app.post("/api/degree-progress", response_model=DegreeProgressResponse)
def api_degree_progress(req: DegreeProgressRequest):
    program = get_program(req.program_id)
    if program is None:
        raise HTTPException(status_code=404, detail="Program not found")
    completed = _completed_from(req)
    codes = [c.code for c in completed]
    return DegreeProgressResponse(
        progress=calculate_degree_progress(program, codes),
        recommendations=get_recommended_courses(program, codes, program.id, req.career_goal_id, req.limit),
        domain_strengths=analyze_domain_strengths(program, completed),
    )


@app.get("/api/student-id/{student_id}", response_model=StudentInfo)
def api_student_id(student_id: str):
    info = parse_student_id(student_id)
    if info is None:
        raise HTTPException(status_code=404, detail="Unrecognized student ID")
    return info


# ---------- Export Endpoints ----------

@app.post("/api/export/csv")
def export_csv(req: CGPACalcRequest):
    validate_trimesters(req.trimesters)
    results = calculate_cgpa(req.trimesters, req.prior_credits, req.prior_cgpa)

    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["Trimester", "Code", "Name", "Credits", "Grade", "Retake", "Previous Grade"])
    for i, t in enumerate(req.trimesters):
        label = _trimester_label(t, i)
        for c in t.courses:
            writer.writerow([label, c.code or "", c.name, c.credit, c.grade, "yes" if c.is_retake else "", c.previous_grade or ""])
    writer.writerow([])
    writer.writerow(["Trimester", "Credits", "GPA", "CGPA", "Total Credits", "Earned Credits"])
    for r in results:
        writer.writerow([r.trimester_name, r.trimester_credits, f"{r.gpa:.2f}", f"{r.cgpa:.2f}", r.total_credits, r.earned_credits])

    csv_bytes = output.getvalue().encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": "attachment; filename=transcript.csv"})


@app.post("/api/export/pdf")
def export_pdf(req: CGPACalcRequest):
    if not REPORTLAB_AVAILABLE:
        raise HTTPException(status_code=503, detail="PDF engine not available on server.")
    validate_trimesters(req.trimesters)
    summary = compute_cgpa(req)

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, height - 40, "CGPA Report")
    c.setFont("Helvetica", 10)
    y = height - 70

    c.drawString(40, y, f"CGPA: {summary.cgpa:.2f}   Earned credits: {summary.earned_credits:g}")
    y -= 20
    c.drawString(40, y, f"Standing: {summary.standing}")
    y -= 30

    c.setFont("Helvetica-Bold", 11)
    c.drawString(40, y, "Trimesters")
    y -= 18
    c.setFont("Helvetica", 9)
    for i, (t, r) in enumerate(zip(req.trimesters, summary.results)):
        c.drawString(40, y, f"{_trimester_label(t, i)}  |  GPA {r.gpa:.2f}  |  CGPA {r.cgpa:.2f}")
        y -= 16
        for crs in t.courses:
            retake = f" (retake, was {crs.previous_grade})" if crs.is_retake else ""
            line = f" - {crs.code or ''} {crs.name} | {crs.credit:g} CR | Grade: {crs.grade or '-'}{retake}"
            c.drawString(48, y, line)
            y -= 14
            if y < 60:
                c.showPage()
                y = height - 60
                c.setFont("Helvetica", 9)
    c.showPage()
    c.save()

    pdf = buffer.getvalue()
    return Response(content=pdf, media_type="application/pdf", headers={"Content-Disposition": "attachment; filename=cgpa_report.pdf"})


# ---------- Persistence (simple CRUD) ----------

def _require_db() -> None:
    if database.db is None:
        raise HTTPException(status_code=500, detail="Database not connected")


@app.post("/api/records/{user_id}", response_model=Dict[str, Any])
def save_record(user_id: str, req: CGPACalcRequest):
    _require_db()
    validate_trimesters(req.trimesters)
    results = calculate_cgpa(req.trimesters, req.prior_credits, req.prior_cgpa)
    payload = {
        "user_id": user_id,
        "prior_credits": req.prior_credits,
        "prior_cgpa": req.prior_cgpa,
        "trimesters": [t.model_dump() for t in req.trimesters],
        "results": [r.model_dump() for r in results],
    }
    try:
        return database.upsert_document("cgpa_record", {"user_id": user_id}, payload)
    except PyMongoError as e:
        logger.error("Saving CGPA record for %s failed: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to save record")


@app.get("/api/records/{user_id}", response_model=Dict[str, Any])
def load_record(user_id: str):
    _require_db()
    items = database.get_documents("cgpa_record", {"user_id": user_id}, limit=1)
    if not items:
        return {"user_id": user_id, "prior_credits": 0, "prior_cgpa": 0, "trimesters": [], "results": []}
    return items[0]


@app.delete("/api/records/{user_id}", response_model=Dict[str, Any])
def delete_record(user_id: str):
    _require_db()
    deleted = database.delete_documents("cgpa_record", {"user_id": user_id})
    return {"user_id": user_id, "deleted": deleted}


@app.post("/api/preferences", response_model=Dict[str, Any])
def upsert_preferences(prefs: AcademicPreferences):
    _require_db()
    if prefs.program_id and get_program(prefs.program_id) is None:
        raise HTTPException(status_code=400, detail=f"Unknown program '{prefs.program_id}'")
    return database.upsert_document("academic_preferences", {"user_id": prefs.user_id}, prefs.model_dump())


@app.get("/api/preferences/{user_id}", response_model=Dict[str, Any])
def get_preferences(user_id: str):
    _require_db()
    items = database.get_documents("academic_preferences", {"user_id": user_id}, limit=1)
    if not items:
        raise HTTPException(status_code=404, detail="Preferences not found")
    return items[0]


# ---------- Self-test endpoint ----------

@app.get("/api/selftest")
def selftest():
    trimesters = [
        TrimesterInput(name="Spring 2024", courses=[
            CourseInput(code="CSE 1110", name="Intro", credit=1, grade="A"),
            CourseInput(code="CSE 1111", name="SPL", credit=3, grade="C"),
        ]),
        TrimesterInput(name="Summer 2024", courses=[
            CourseInput(code="CSE 1111", name="SPL", credit=3, grade="A-", is_retake=True, previous_grade="C"),
            CourseInput(code="CSE 2213", name="Discrete", credit=3, grade="B+"),
        ]),
    ]
    try:
        series = calculate_cgpa(trimesters)
        completed = build_completed_courses(trimesters)
        program = get_program("bscse")
        suggestions = auto_suggest_careers(program, completed, "bscse")
        roadmap = build_career_roadmap(
            program, completed, "bscse", suggestions[0].track.id,
            series[-1].cgpa, series[-1].earned_credits,
        )
    except Exception as e:
        logger.exception("Self-test failed")
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "ok": True,
        "pdf": REPORTLAB_AVAILABLE,
        "database": database.db is not None,
        "cgpa": [r.model_dump() for r in series],
        "top_career": {"track": suggestions[0].track.id, "match_percent": suggestions[0].match_percent},
        "roadmap": {"readiness": roadmap.overall_readiness, "trimesters": len(roadmap.trimester_plan)},
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
