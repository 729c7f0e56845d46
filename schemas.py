from typing import List, Optional, Literal
from pydantic import BaseModel, Field, field_validator

# Each stored model maps to a MongoDB collection with the lowercased snake name

CourseCategory = Literal['core', 'major', 'elective', 'ge', 'lab', 'thesis']
Importance = Literal['critical', 'important', 'helpful']
Competitiveness = Literal['elite', 'competitive', 'standard']


def _clean_grade(v: Optional[str]) -> str:
    return (v or "").strip().upper()


# ---------- Grade table ----------

class GradeEntry(BaseModel):
    letter: str
    point: float = Field(..., ge=0, le=4)
    min_marks: float
    max_marks: float
    assessment: str = ""


class Assessment(BaseModel):
    name: str = ""
    obtained: float = Field(0, ge=0)
    total: float = Field(0, ge=0)
    weight: float = Field(0, ge=0)
    is_ct: bool = False


class AssessmentSummary(BaseModel):
    marks: float
    weight: float
    percent: float
    grade: str
    point: float


# ---------- Academic record ----------

class CourseInput(BaseModel):
    id: str = ""
    name: str = ""
    code: Optional[str] = None
    credit: float = Field(3.0, ge=0, le=10)
    grade: str = ""  # empty while the course is planned or in progress
    is_retake: bool = False
    previous_grade: Optional[str] = None
    assessments: List[Assessment] = []

    @field_validator('grade')
    @classmethod
    def normalize_grade(cls, v: str) -> str:
        return _clean_grade(v)

    @field_validator('previous_grade')
    @classmethod
    def normalize_previous_grade(cls, v: Optional[str]) -> Optional[str]:
        cleaned = _clean_grade(v)
        return cleaned or None

    @field_validator('code')
    @classmethod
    def strip_code(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class TrimesterInput(BaseModel):
    id: str = ""
    name: str = ""
    code: Optional[str] = None  # YYT, e.g. "241"
    courses: List[CourseInput] = []


class TrimesterGPA(BaseModel):
    gpa: float
    total_credits: float
    earned_credits: float
    total_points: float


class CGPAResult(BaseModel):
    trimester_name: str
    trimester_credits: float
    gpa: float
    cgpa: float
    total_credits: float
    earned_credits: float


class CompletedCourse(BaseModel):
    code: str
    grade: str
    point: float


# ---------- Catalog ----------

class ProgramCourse(BaseModel):
    code: str
    name: str
    credits: float = Field(..., ge=0)
    category: CourseCategory = 'core'
    domains: List[str] = []
    prerequisites: List[str] = []
    trimester: int = Field(1, ge=1, le=12)  # suggested trimester


class ProgramDefinition(BaseModel):
    id: str
    name: str
    short_name: str
    department: str = ""
    school: str
    total_credits: float
    duration: str
    id_prefix: str = ""  # first 3 digits of the student ID
    courses: List[ProgramCourse] = []


class ProgramSummary(BaseModel):
    id: str
    name: str
    short_name: str
    department: str
    total_credits: float
    course_count: int


class CareerTrack(BaseModel):
    id: str
    title: str
    description: str = ""
    icon: str = ""
    relevant_domains: List[str] = []
    key_course_codes: List[str] = []
    skills: List[str] = []
    job_titles: List[str] = []
    avg_salary_bdt: str = ""
    growth: Literal['high', 'stable'] = 'stable'
    competitiveness: Competitiveness = 'competitive'


class Domain(BaseModel):
    id: str
    name: str
    icon: str = ""


# ---------- Career matcher output ----------

class CareerSuggestion(BaseModel):
    track: CareerTrack
    match_percent: int = Field(..., ge=0, le=100)
    key_courses_completed: List[CompletedCourse] = []
    why_good_fit: List[str] = []
    why_not_yet: List[str] = []
    grade_label: str = "N/A"


class CourseTarget(BaseModel):
    code: str
    name: str
    credits: float = 0
    importance: Importance
    target_grade: str
    target_point: float
    status: Literal['completed', 'remaining']
    actual_grade: Optional[str] = None
    actual_point: Optional[float] = None
    meets_target: Optional[bool] = None  # None until the course is taken


class PlannedCourse(BaseModel):
    code: str
    name: str
    credits: float
    is_key: bool = False


class PlannedTrimester(BaseModel):
    index: int
    name: str
    courses: List[PlannedCourse] = []
    credits: float = 0
    target_gpa: float = 0
    target_grade: str = ""
    achievable: bool = True
    note: str = ""


class StudyTip(BaseModel):
    course_code: str
    course_name: str
    priority: Literal['urgent', 'important']
    deficit: float
    tip: str


class CareerRoadmap(BaseModel):
    track: Optional[CareerTrack] = None
    overall_readiness: int = Field(0, ge=0, le=100)
    current_avg_in_key: float = 0
    target_cgpa: float = 0
    action_items: List[str] = []
    course_targets: List[CourseTarget] = []
    trimester_plan: List[PlannedTrimester] = []
    study_tips: List[StudyTip] = []


class CategoryProgress(BaseModel):
    category: str
    label: str
    total: float
    completed: float
    percent: int


class DegreeProgress(BaseModel):
    total_credits_required: float
    credits_completed: float
    completion_percent: int
    category_counts: List[CategoryProgress] = []
    completed_codes: List[str] = []
    remaining_courses: List[ProgramCourse] = []


class CourseRecommendation(BaseModel):
    course: ProgramCourse
    reason: str
    priority: Literal['high', 'medium', 'low']
    career_relevance: List[str] = []


class DomainStrength(BaseModel):
    domain_id: str
    domain_name: str
    score: float
    course_count: int
    icon: str = ""


class StudentInfo(BaseModel):
    student_id: str
    serial: str
    program_id: str
    program: str
    program_full_name: str
    program_code: str
    department: str
    school: str
    total_credits: float
    admission_trimester: str
    admission_term_code: str
    admission_year: int
    admission_term: int
    batch: str
    is_trimester: bool
    duration: str
    estimated_terms_completed: int


class AcademicPreferences(BaseModel):
    user_id: str
    program_id: Optional[str] = None
    career_goal_id: Optional[str] = None
    target_cgpa: Optional[float] = Field(None, ge=0, le=4)


# ---------- Requests / responses ----------

class GPACalcRequest(BaseModel):
    courses: List[CourseInput]


class CGPACalcRequest(BaseModel):
    trimesters: List[TrimesterInput]
    prior_credits: float = Field(0, ge=0)
    prior_cgpa: float = Field(0, ge=0, le=4)


class CGPAResponse(BaseModel):
    results: List[CGPAResult]
    cgpa: float
    total_credits: float
    earned_credits: float
    standing: str


class MarksRequest(BaseModel):
    assessments: List[Assessment]
    ct_count: int = Field(3, ge=1, le=10)
    target_grade: Optional[str] = None

    @field_validator('target_grade')
    @classmethod
    def normalize_target(cls, v: Optional[str]) -> Optional[str]:
        return _clean_grade(v) or None


class MarksResponse(BaseModel):
    summary: AssessmentSummary
    required_final: Optional[float] = None


class ProjectionRequest(BaseModel):
    current_cgpa: float = Field(..., ge=0, le=4)
    completed_credits: float = Field(..., ge=0)
    total_credits: Optional[float] = Field(None, gt=0)
    program_id: Optional[str] = None
    projected_gpa: Optional[float] = Field(None, ge=0, le=4)
    target_cgpa: Optional[float] = Field(None, ge=0, le=4)


class ProjectionResponse(BaseModel):
    total_credits: float
    remaining_credits: float
    projected_cgpa: Optional[float] = None
    target_cgpa: Optional[float] = None
    needed_avg_gpa: Optional[float] = None
    achievable: bool = True
    message: str


class CareerRequest(BaseModel):
    program_id: str
    trimesters: List[TrimesterInput] = []
    completed: Optional[List[CompletedCourse]] = None  # overrides trimesters when given


class RoadmapRequest(CareerRequest):
    track_id: str
    prior_credits: float = Field(0, ge=0)
    prior_cgpa: float = Field(0, ge=0, le=4)
    current_cgpa: Optional[float] = Field(None, ge=0, le=4)
    completed_credits: Optional[float] = Field(None, ge=0)
    target_cgpa: Optional[float] = Field(None, ge=0, le=4)


class DegreeProgressRequest(CareerRequest):
    career_goal_id: Optional[str] = None
    limit: int = Field(8, ge=1, le=50)


class DegreeProgressResponse(BaseModel):
    progress: DegreeProgress
    recommendations: List[CourseRecommendation]
    domain_strengths: List[DomainStrength]
