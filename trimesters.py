"""
Trimester codes and student IDs.

A trimester code is YYT: two year digits and a term digit (1 Spring,
2 Summer, 3 Fall), so "241" is Spring 2024. Student IDs are PPP YYT SSSS:
program prefix, admission trimester, serial.
"""
from datetime import date
from typing import Optional

from schemas import StudentInfo
from catalog import detect_program_from_id

TERM_NAMES = {"1": "Spring", "2": "Summer", "3": "Fall"}
TERM_DIGITS = {name: digit for digit, name in TERM_NAMES.items()}

# B.Pharm runs on semesters; everything else on trimesters
SEMESTER_PROGRAMS = {"bpharm"}


def get_trimester_name(code: str) -> str:
    if not code:
        return ""
    if any(name in code for name in TERM_DIGITS):
        return code
    if len(code) != 3 or not code.isdigit():
        return code
    term = TERM_NAMES.get(code[2])
    if term is None:
        return code
    return f"{term} 20{code[:2]}"


def get_trimester_code(name: str) -> str:
    if not name:
        return ""
    parts = name.split()
    if len(parts) != 2:
        return name
    season, year = parts
    digit = TERM_DIGITS.get(season)
    if digit is None or not year.isdigit():
        return name
    return f"{year[-2:]}{digit}"


def _current_term(today: date) -> int:
    if 5 <= today.month <= 8:
        return 2
    if today.month >= 9:
        return 3
    return 1


def parse_student_id(student_id: str, today: Optional[date] = None) -> Optional[StudentInfo]:
    if not student_id or len(student_id) < 9 or not student_id.isdigit():
        return None

    program = detect_program_from_id(student_id)
    if program is None:
        return None

    admission_code = student_id[3:6]
    admission_trimester = get_trimester_name(admission_code)
    if admission_trimester == admission_code:
        return None

    admission_year = 2000 + int(admission_code[:2])
    admission_term = int(admission_code[2])

    today = today or date.today()
    is_trimester = program.id not in SEMESTER_PROGRAMS
    terms_per_year = 3 if is_trimester else 2

    def term_index(year: int, term: int) -> int:
        slot = term if is_trimester else -(-term * 2 // 3)  # ceil(term * 2/3)
        return (year - 2000) * terms_per_year + slot

    elapsed = term_index(today.year, _current_term(today)) - term_index(admission_year, admission_term)

    return StudentInfo(
        student_id=student_id,
        serial=student_id[6:],
        program_id=program.id,
        program=program.short_name,
        program_full_name=program.name,
        program_code=student_id[:3],
        department=program.department,
        school=program.school,
        total_credits=program.total_credits,
        duration=program.duration,
        admission_trimester=admission_trimester,
        admission_term_code=admission_code,
        admission_year=admission_year,
        admission_term=admission_term,
        batch=f"{admission_trimester} Intake",
        is_trimester=is_trimester,
        estimated_terms_completed=max(0, elapsed),
    )
