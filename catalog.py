"""
Compiled-in program curricula and career tracks.

Twelve programs with their course plans, id prefixes and career tracks.
Every program runs on trimesters except B.Pharm, which uses semesters. Career
track key courses use normalized codes (no spaces, upper case).
"""
import re
from typing import Dict, List, Optional

from schemas import CareerTrack, Domain, ProgramCourse, ProgramDefinition


def normalize_course_code(code: Optional[str]) -> str:
    """'cse 1111' -> 'CSE1111'"""
    return re.sub(r"\s+", "", code or "").upper()


DOMAINS: Dict[str, Domain] = {d.id: d for d in [
    Domain(id="programming", name="Programming", icon="💻"),
    Domain(id="math", name="Mathematics", icon="📐"),
    Domain(id="algorithms", name="Algorithms & DS", icon="🧩"),
    Domain(id="hardware", name="Hardware & Systems", icon="🔧"),
    Domain(id="networking", name="Networking", icon="🌐"),
    Domain(id="database", name="Database Systems", icon="🗄️"),
    Domain(id="ai_ml", name="AI & Machine Learning", icon="🤖"),
    Domain(id="security", name="Cybersecurity", icon="🔒"),
    Domain(id="software_eng", name="Software Engineering", icon="⚙️"),
    Domain(id="web_mobile", name="Web & Mobile Dev", icon="📱"),
    Domain(id="statistics", name="Statistics", icon="📊"),
    Domain(id="communication", name="Communication", icon="🗣️"),
    Domain(id="language", name="Language", icon="🔤"),
    Domain(id="social_science", name="Social Science", icon="🏛️"),
    Domain(id="science", name="Natural Science", icon="🔬"),
    Domain(id="lab", name="Laboratory Work", icon="🧪"),
    Domain(id="electronics", name="Electronics", icon="🔌"),
    Domain(id="management", name="Management", icon="📋"),
    Domain(id="research", name="Research", icon="🎓"),
    Domain(id="general", name="General Education", icon="📚"),
    Domain(id="business_core", name="Business Core", icon="💼"),
    Domain(id="finance", name="Finance", icon="💰"),
    Domain(id="marketing", name="Marketing", icon="📊"),
    Domain(id="accounting", name="Accounting", icon="📋"),
    Domain(id="economics", name="Economics", icon="📈"),
    Domain(id="design", name="Design & Graphics", icon="🎨"),
    Domain(id="civil_core", name="Civil Engineering", icon="🏗️"),
    Domain(id="structural", name="Structural Eng", icon="🏢"),
    Domain(id="environmental", name="Environmental Eng", icon="🌿"),
    Domain(id="power_systems", name="Power Systems", icon="⚡"),
    Domain(id="telecom", name="Telecommunications", icon="📡"),
    Domain(id="signal_processing", name="Signal Processing", icon="📶"),
    Domain(id="biotech", name="Biotechnology", icon="🧬"),
    Domain(id="genetics", name="Genetics", icon="🔬"),
    Domain(id="pharma", name="Pharmaceutical Sci", icon="💊"),
    Domain(id="chemistry", name="Chemistry", icon="⚗️"),
    Domain(id="biology", name="Biology", icon="🦠"),
    Domain(id="media", name="Media Studies", icon="🎬"),
    Domain(id="journalism", name="Journalism", icon="📰"),
    Domain(id="education", name="Education", icon="🎓"),
]}


def _c(code, name, credits, category, domains, prerequisites, trimester) -> ProgramCourse:
    return ProgramCourse(
        code=code, name=name, credits=credits, category=category,
        domains=domains, prerequisites=prerequisites, trimester=trimester,
    )


BSCSE_COURSES: List[ProgramCourse] = [
    # Trimester 1
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("BDS 1201", "History of the Emergence of Bangladesh", 2.0, "ge", ["social_science"], [], 1),
    _c("CSE 1110", "Introduction to Computer Systems", 1.0, "core", ["programming"], [], 1),
    _c("MATH 1151", "Fundamental Calculus", 3.0, "core", ["math"], [], 1),
    # Trimester 2
    _c("ENG 1013", "Intensive English II", 3.0, "ge", ["language", "communication"], ["ENG 1011"], 2),
    _c("CSE 1111", "Structured Programming Language", 3.0, "core", ["programming"], ["CSE 1110"], 2),
    _c("CSE 1112", "Structured Programming Language Laboratory", 1.0, "lab", ["programming", "lab"], ["CSE 1110"], 2),
    _c("CSE 2213", "Discrete Mathematics", 3.0, "core", ["math", "algorithms"], [], 2),
    # Trimester 3
    _c("MATH 2183", "Calculus and Linear Algebra", 3.0, "core", ["math"], ["MATH 1151"], 3),
    _c("PHY 2105", "Physics", 3.0, "core", ["science"], [], 3),
    _c("PHY 2106", "Physics Laboratory", 1.0, "lab", ["science", "lab"], [], 3),
    _c("CSE 2215", "Data Structure and Algorithms I", 3.0, "core", ["programming", "algorithms"], ["CSE 1111"], 3),
    _c("CSE 2216", "Data Structure and Algorithms I Laboratory", 1.0, "lab", ["programming", "lab"], ["CSE 1112"], 3),
    # Trimester 4
    _c("MATH 2201", "Coordinate Geometry and Vector Analysis", 3.0, "core", ["math"], ["MATH 1151"], 4),
    _c("CSE 1325", "Digital Logic Design", 3.0, "core", ["hardware", "electronics"], [], 4),
    _c("CSE 1326", "Digital Logic Design Laboratory", 1.0, "lab", ["hardware", "lab"], [], 4),
    _c("CSE 1115", "Object Oriented Programming", 3.0, "core", ["programming", "software_eng"], ["CSE 2215"], 4),
    _c("CSE 1116", "Object Oriented Programming Laboratory", 1.0, "lab", ["programming", "lab"], ["CSE 2216"], 4),
    # Trimester 5
    _c("MATH 2205", "Probability and Statistics", 3.0, "core", ["statistics", "math"], ["MATH 1151"], 5),
    _c("SOC 2101", "Society, Environment and Engineering Ethics", 3.0, "ge", ["social_science"], [], 5),
    _c("CSE 2217", "Data Structure and Algorithms II", 3.0, "core", ["algorithms", "programming"], ["CSE 2215"], 5),
    _c("CSE 2218", "Data Structure and Algorithms II Laboratory", 1.0, "lab", ["algorithms", "lab"], ["CSE 2216"], 5),
    _c("EEE 2113", "Electrical Circuits", 3.0, "core", ["electronics"], [], 5),
    # Trimester 6
    _c("CSE 3521", "Database Management Systems", 3.0, "core", ["database"], [], 6),
    _c("CSE 3522", "Database Management Systems Laboratory", 1.0, "lab", ["database", "lab"], [], 6),
    _c("EEE 2123", "Electronics", 3.0, "core", ["electronics"], ["EEE 2113"], 6),
    _c("EEE 2124", "Electronics Laboratory", 1.0, "lab", ["electronics", "lab"], [], 6),
    _c("CSE 4165", "Web Programming", 3.0, "core", ["web_mobile", "programming"], ["CSE 1115", "CSE 1116"], 6),
    # Trimester 7
    _c("CSE 3313", "Computer Architecture", 3.0, "core", ["hardware"], ["CSE 1325"], 7),
    _c("CSE 2118", "Advanced Object Oriented Programming Laboratory", 1.0, "lab", ["programming", "lab"], ["CSE 1116"], 7),
    _c("BIO 3105", "Biology for Engineers", 3.0, "core", ["science"], [], 7),
    _c("CSE 3411", "System Analysis and Design", 3.0, "core", ["software_eng"], [], 7),
    _c("CSE 3412", "System Analysis and Design Laboratory", 1.0, "lab", ["software_eng", "lab"], [], 7),
    # Trimester 8
    _c("CSE 4325", "Microprocessors and Microcontrollers", 3.0, "core", ["hardware", "electronics"], ["CSE 3313"], 8),
    _c("CSE 4326", "Microprocessors and Microcontrollers Laboratory", 1.0, "lab", ["hardware", "lab"], [], 8),
    _c("CSE 3421", "Software Engineering", 3.0, "core", ["software_eng"], ["CSE 3411"], 8),
    _c("CSE 3422", "Software Engineering Laboratory", 1.0, "lab", ["software_eng", "lab"], ["CSE 3412"], 8),
    _c("CSE 3811", "Artificial Intelligence", 3.0, "major", ["ai_ml", "algorithms"], ["MATH 2205"], 8),
    _c("CSE 3812", "Artificial Intelligence Laboratory", 1.0, "lab", ["ai_ml", "lab"], [], 8),
    # Trimester 9
    _c("CSE 2233", "Theory of Computation", 3.0, "core", ["algorithms", "math"], [], 9),
    _c("GED OPT1", "General Education Optional I", 3.0, "ge", ["general"], [], 9),
    _c("PMG 4101", "Project Management", 3.0, "ge", ["management"], ["CSE 3411"], 9),
    _c("CSE 3711", "Computer Networks", 3.0, "core", ["networking"], [], 9),
    _c("CSE 3712", "Computer Networks Laboratory", 1.0, "lab", ["networking", "lab"], [], 9),
    # Trimester 10
    _c("GED OPT2", "General Education Optional II", 3.0, "ge", ["general"], [], 10),
    _c("CSE 4000A", "Final Year Design Project I", 2.0, "thesis", ["research", "software_eng"], [], 10),
    _c("CSE ELEC1", "Elective I", 3.0, "elective", [], [], 10),
    _c("CSE 4509", "Operating Systems", 3.0, "core", ["programming", "hardware"], [], 10),
    _c("CSE 4510", "Operating Systems Laboratory", 1.0, "lab", ["programming", "lab"], [], 10),
    # Trimester 11
    _c("GED OPT3", "General Education Optional III", 3.0, "ge", ["general"], [], 11),
    _c("CSE ELEC2", "Elective II", 3.0, "elective", [], [], 11),
    _c("CSE ELEC3", "Elective III", 3.0, "elective", [], [], 11),
    _c("CSE 4000B", "Final Year Design Project II", 2.0, "thesis", ["research", "software_eng"], ["CSE 4000A"], 11),
    _c("CSE 4531", "Computer Security", 3.0, "core", ["security", "networking"], ["CSE 3711"], 11),
    # Trimester 12
    _c("CSE 4000C", "Final Year Design Project III", 2.0, "thesis", ["research", "software_eng"], ["CSE 4000A", "CSE 4000B"], 12),
    _c("EEE 4261", "Green Computing", 3.0, "core", ["electronics"], [], 12),
    _c("CSE ELEC4", "Elective IV", 3.0, "elective", [], [], 12),
    _c("CSE ELEC5", "Elective V", 3.0, "elective", [], [], 12),
]

BSDS_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("MATH 1151", "Fundamental Calculus", 3.0, "core", ["math"], [], 1),
    _c("CSE 1111", "Structured Programming Language", 3.0, "core", ["programming"], [], 1),
    _c("ENG 1013", "Intensive English II", 3.0, "ge", ["language", "communication"], ["ENG 1011"], 2),
    _c("MATH 2183", "Calculus and Linear Algebra", 3.0, "core", ["math"], ["MATH 1151"], 2),
    _c("CSE 2215", "Data Structures", 3.0, "core", ["programming", "algorithms"], ["CSE 1111"], 2),
    _c("STA 1101", "Intro to Statistics", 3.0, "core", ["statistics"], [], 2),
    _c("STA 2101", "Probability & Statistics", 3.0, "core", ["statistics", "math"], ["STA 1101"], 3),
    _c("DS 1101", "Intro to Data Science", 3.0, "core", ["statistics", "programming"], [], 3),
    _c("CSE 2217", "Algorithm Design", 3.0, "core", ["algorithms"], ["CSE 2215"], 3),
    _c("DS 2101", "Data Wrangling & Visualization", 3.0, "core", ["statistics", "programming"], ["DS 1101"], 4),
    _c("CSE 3521", "Database Management Systems", 3.0, "core", ["database"], [], 4),
    _c("MAT 2201", "Linear Algebra", 3.0, "core", ["math"], [], 4),
    _c("DS 3101", "Statistical Learning", 3.0, "core", ["statistics", "ai_ml"], ["STA 2101"], 5),
    _c("DS 3201", "Big Data Technologies", 3.0, "core", ["database", "programming"], ["CSE 3521"], 5),
    _c("CSE 4821", "Machine Learning", 3.0, "core", ["ai_ml", "statistics"], ["STA 2101"], 5),
    _c("DS 4101", "Deep Learning", 3.0, "core", ["ai_ml"], ["CSE 4821"], 6),
    _c("DS 4201", "NLP & Text Analytics", 3.0, "core", ["ai_ml", "programming"], ["CSE 4821"], 6),
    _c("CSE 2233", "Theory of Computation", 3.0, "core", ["algorithms", "math"], [], 6),
    _c("DS 4301", "Computer Vision", 3.0, "core", ["ai_ml"], ["DS 4101"], 7),
    _c("DS 4401", "Data Engineering", 3.0, "core", ["database", "programming"], ["DS 3201"], 7),
    _c("BDS 2201", "Bangladesh Studies", 3.0, "ge", ["social_science"], [], 8),
    _c("BAN 2501", "Bangla", 3.0, "ge", ["language"], [], 9),
    _c("DS 4900", "Capstone Project I", 2.0, "thesis", ["research"], [], 10),
    _c("DS 4901", "Capstone Project II", 2.0, "thesis", ["research"], ["DS 4900"], 11),
    _c("DS 4902", "Capstone Project III", 2.0, "thesis", ["research"], ["DS 4901"], 12),
]


# BSEEE (140 Credits, 12 Trimesters)
BSEEE_COURSES: List[ProgramCourse] = [
    # Trimester 1
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("MAT 1101", "Calculus I", 3.0, "core", ["math"], [], 1),
    _c("EEE 1001", "Electrical Circuits I", 3.0, "core", ["electronics"], [], 1),
    # Trimester 2
    _c("ENG 1013", "Intensive English II", 3.0, "ge", ["language", "communication"], ["ENG 1011"], 2),
    _c("MAT 1103", "Calculus II", 3.0, "core", ["math"], ["MAT 1101"], 2),
    _c("EEE 1003", "Electrical Circuits II", 3.0, "core", ["electronics"], ["EEE 1001"], 2),
    _c("BDS 1201", "Bangladesh Studies", 2.0, "ge", ["social_science"], [], 2),
    # Trimester 3
    _c("EEE 1004", "Electrical Circuits Lab", 3.0, "lab", ["electronics", "lab"], ["EEE 1001"], 3),
    _c("PHY 1101", "Physics I", 3.0, "core", ["science"], [], 3),
    _c("EEE 2000", "Simulation Lab", 1.0, "lab", ["electronics", "lab"], ["EEE 1003"], 3),
    _c("EEE 2101", "Electronic Circuits I", 3.0, "core", ["electronics"], ["EEE 1003"], 3),
    # Trimester 4
    _c("PHY 1103", "Physics II", 3.0, "core", ["science"], ["PHY 1101"], 4),
    _c("PHY 1104", "Physics Lab", 1.0, "lab", ["science", "lab"], ["PHY 1101"], 4),
    _c("MAT 2105", "Linear Algebra & ODE", 3.0, "core", ["math"], ["MAT 1103"], 4),
    _c("EEE 2103", "Electronic Circuits II", 3.0, "core", ["electronics"], ["EEE 2101"], 4),
    _c("EEE 2104", "Electronics Lab", 1.0, "lab", ["electronics", "lab"], ["EEE 2101"], 4),
    _c("CHE 2101", "Chemistry", 3.0, "core", ["chemistry"], [], 4),
    # Trimester 5
    _c("CHE 2102", "Chemistry Lab", 1.0, "lab", ["chemistry", "lab"], [], 5),
    _c("MAT 2107", "Complex Variable & Fourier Analysis", 3.0, "core", ["math"], ["MAT 1103"], 5),
    _c("MAT 2109", "Vector Calculus", 3.0, "core", ["math"], ["MAT 1103"], 5),
    _c("EEE 2401", "Programming in C", 3.0, "core", ["programming"], [], 5),
    _c("EEE 2402", "Programming Lab", 1.0, "lab", ["programming", "lab"], [], 5),
    # Trimester 6
    _c("EEE 2301", "Signals & Systems", 3.0, "core", ["signal_processing"], ["EEE 1003", "MAT 2107"], 6),
    _c("EEE 2200", "Electrical Wiring & Installation", 1.0, "lab", ["electronics", "lab"], ["EEE 1003"], 6),
    _c("EEE 2201", "Energy Conversion I", 3.0, "core", ["power_systems"], ["EEE 1003"], 6),
    _c("EEE 2105", "Digital Logic Design", 3.0, "core", ["hardware"], ["EEE 2101"], 6),
    _c("EEE 2106", "Digital Logic Design Lab", 1.0, "lab", ["hardware", "lab"], ["EEE 2101"], 6),
    _c("ECO 2101", "Economics", 3.0, "ge", ["economics"], [], 6),
    # Trimester 7
    _c("ACT 3101", "Financial & Managerial Accounting", 3.0, "ge", ["accounting"], [], 7),
    _c("EEE 2203", "Energy Conversion II", 3.0, "core", ["power_systems"], ["EEE 2201"], 7),
    _c("EEE 2204", "Energy Conversion Lab", 1.0, "lab", ["power_systems", "lab"], ["EEE 2201"], 7),
    _c("EEE 3309", "Digital Signal Processing", 3.0, "core", ["signal_processing"], ["EEE 2301"], 7),
    _c("EEE 3303", "Probability & Statistics", 3.0, "core", ["statistics", "math"], ["EEE 2301"], 7),
    # Trimester 8
    _c("EEE 3107", "Solid State Devices", 3.0, "core", ["electronics"], ["PHY 1103", "MAT 2107"], 8),
    _c("EEE 3310", "DSP Lab", 1.0, "lab", ["signal_processing", "lab"], ["EEE 2301"], 8),
    _c("EEE 3205", "Power Systems I", 3.0, "core", ["power_systems"], ["EEE 2203"], 8),
    _c("EEE 3307", "Communication Theory", 3.0, "core", ["telecom"], ["EEE 3303"], 8),
    _c("EEE 3305", "Electromagnetic Fields & Waves", 3.0, "core", ["telecom", "electronics"], ["MAT 2109"], 8),
    _c("BAN 2501", "Bangla", 3.0, "ge", ["language"], [], 8),
    # Trimester 9
    _c("EEE 3403", "Microprocessors & Embedded Systems", 3.0, "core", ["hardware", "programming"], ["EEE 2105", "EEE 2401"], 9),
    _c("EEE 3404", "Microprocessor Lab", 1.0, "lab", ["hardware", "lab"], ["EEE 2105"], 9),
    _c("EEE 3501", "Control Systems", 3.0, "core", ["electronics", "signal_processing"], ["EEE 2301"], 9),
    _c("EEE 3206", "Power Systems Lab", 1.0, "lab", ["power_systems", "lab"], ["EEE 3205"], 9),
    _c("EEE 3308", "Communication Lab", 1.0, "lab", ["telecom", "lab"], ["EEE 3307"], 9),
    _c("EEE GED1", "GED Elective I", 3.0, "ge", ["general"], [], 9),
    # Trimester 10
    _c("EEE 4109", "Control Systems Lab", 1.0, "lab", ["electronics", "lab"], ["EEE 2103", "EEE 2301"], 10),
    _c("EEE 4901", "Capstone Project I", 1.0, "thesis", ["research"], [], 10),
    _c("EEE ELEC1", "EEE Elective I", 3.0, "elective", [], [], 10),
    _c("EEE ELEC2", "EEE Elective II", 3.0, "elective", [], [], 10),
    _c("EEE ELEC3", "EEE Elective III", 3.0, "elective", [], [], 10),
    # Trimester 11
    _c("EEE 4902", "Capstone Project II", 2.0, "thesis", ["research"], ["EEE 4901"], 11),
    _c("EEE ELEC4", "EEE Elective IV", 3.0, "elective", [], [], 11),
    _c("EEE ELEC5", "EEE Elective V", 3.0, "elective", [], [], 11),
    _c("EEE ELEC6", "EEE Elective VI", 3.0, "elective", [], [], 11),
    _c("EEE LAB1", "EEE Elective Lab", 1.0, "lab", ["lab"], [], 11),
    # Trimester 12
    _c("EEE 4903", "Capstone Project III", 2.0, "thesis", ["research"], ["EEE 4902"], 12),
    _c("EEE ELEC7", "EEE Elective VII", 3.0, "elective", [], [], 12),
    _c("EEE ELEC8", "EEE Elective VIII", 3.0, "elective", [], [], 12),
    _c("EEE GED2", "GED Elective II", 3.0, "ge", ["general"], [], 12),
]

# BSc Civil Engineering (151.5 Credits)
CIVIL_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("MAT 1101", "Calculus I", 3.0, "core", ["math"], [], 1),
    _c("CHE 1101", "Chemistry", 3.0, "core", ["chemistry"], [], 1),
    _c("CE 1101", "Engineering Mechanics", 3.0, "core", ["civil_core", "structural"], [], 2),
    _c("CE 1201", "Engineering Drawing", 1.5, "core", ["civil_core"], [], 2),
    _c("PHY 1101", "Physics I", 3.0, "core", ["science"], [], 2),
    _c("CE 2101", "Mechanics of Solids", 3.0, "core", ["structural"], ["CE 1101"], 3),
    _c("CE 2201", "Geology & Geomorphology", 3.0, "core", ["civil_core"], [], 3),
    _c("CE 2301", "Surveying", 3.0, "core", ["civil_core"], [], 4),
    _c("CE 3101", "Structural Analysis", 3.0, "core", ["structural"], ["CE 2101"], 5),
    _c("CE 3201", "Environmental Engineering", 3.0, "core", ["environmental"], [], 5),
    _c("CE 3301", "Construction Materials", 3.0, "core", ["civil_core", "structural"], [], 6),
    _c("CE 4101", "Reinforced Concrete Design", 3.0, "core", ["structural"], ["CE 3101"], 7),
    _c("CE 4201", "Transportation Engineering", 3.0, "core", ["civil_core"], [], 8),
    _c("CE 4301", "Water Resources Engineering", 3.0, "core", ["environmental", "civil_core"], ["CE 3201"], 8),
    _c("CE 4401", "Project Management", 3.0, "core", ["management", "civil_core"], [], 9),
    _c("CE 4501", "Steel Design", 3.0, "core", ["structural"], ["CE 3101"], 9),
    _c("CE 4900", "Capstone Project I", 2.0, "thesis", ["research"], [], 10),
    _c("CE 4901", "Capstone Project II", 2.0, "thesis", ["research"], ["CE 4900"], 11),
    _c("CE 4902", "Capstone Project III", 2.0, "thesis", ["research"], ["CE 4901"], 12),
]

# B.Pharm (160 Credits, 8 Semesters)
BPHARM_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("PHR 1101", "Pharmacy Orientation", 2.0, "core", ["pharma"], [], 1),
    _c("CHE 1101", "Physical Chemistry", 3.0, "core", ["chemistry"], [], 1),
    _c("BIO 1101", "General Biology", 3.0, "core", ["biology"], [], 1),
    _c("PHR 1201", "Anatomy & Histology", 3.0, "core", ["biology", "pharma"], [], 2),
    _c("PHR 2101", "Pharmacology I", 3.0, "core", ["pharma"], [], 3),
    _c("PHR 2201", "Pharmaceutical Organic Chemistry", 3.0, "core", ["chemistry", "pharma"], [], 3),
    _c("PHR 3101", "Pharmacology II", 3.0, "core", ["pharma"], ["PHR 2101"], 5),
    _c("PHR 3201", "Pharmaceutical Technology", 3.0, "core", ["pharma", "research"], [], 5),
    _c("PHR 4101", "Clinical Pharmacy", 3.0, "core", ["pharma"], ["PHR 3101"], 7),
    _c("PHR 4201", "Quality Control & Assurance", 3.0, "core", ["pharma", "lab"], ["PHR 3201"], 7),
    _c("PHR 4301", "Drug Design & Discovery", 3.0, "core", ["pharma", "research", "chemistry"], ["PHR 3201"], 7),
    _c("PHR 4900", "Research Project", 6.0, "thesis", ["research", "pharma"], [], 8),
]

# BBA (125 Credits, 12 Trimesters)
BBA_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("BUS 1101", "Intro to Business", 3.0, "core", ["business_core"], [], 1),
    _c("ACT 1101", "Principles of Accounting", 3.0, "core", ["accounting"], [], 1),
    _c("ECO 1101", "Principles of Microeconomics", 3.0, "core", ["economics"], [], 2),
    _c("ECO 1201", "Principles of Macroeconomics", 3.0, "core", ["economics"], ["ECO 1101"], 3),
    _c("MGT 2101", "Principles of Management", 3.0, "core", ["management"], [], 3),
    _c("FIN 2101", "Financial Management", 3.0, "core", ["finance"], ["ACT 1101"], 4),
    _c("MKT 2101", "Principles of Marketing", 3.0, "core", ["marketing"], [], 4),
    _c("HRM 2101", "Human Resource Management", 3.0, "core", ["management"], ["MGT 2101"], 5),
    _c("STA 2101", "Business Statistics", 3.0, "core", ["statistics"], [], 5),
    _c("MKT 3101", "Marketing Management", 3.0, "core", ["marketing"], ["MKT 2101"], 6),
    _c("FIN 3101", "Corporate Finance", 3.0, "core", ["finance"], ["FIN 2101"], 6),
    _c("MGT 3101", "Organizational Behavior", 3.0, "core", ["management"], ["MGT 2101"], 7),
    _c("MKT 4101", "Strategic Marketing", 3.0, "core", ["marketing"], ["MKT 3101"], 8),
    _c("FIN 4101", "Investment Analysis", 3.0, "core", ["finance"], ["FIN 3101"], 9),
    _c("FIN 4201", "Financial Institutions & Markets", 3.0, "core", ["finance"], ["FIN 3101"], 9),
    _c("MGT 4101", "Strategic Management", 3.0, "core", ["management", "business_core"], [], 10),
    _c("MGT 4201", "Entrepreneurship", 3.0, "core", ["business_core", "management"], [], 11),
    _c("BUS 4900", "Internship", 3.0, "thesis", ["business_core"], [], 12),
]

# BBA-AIS (125 Credits)
BBA_AIS_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("ACT 1101", "Principles of Accounting", 3.0, "core", ["accounting"], [], 1),
    _c("BUS 1101", "Intro to Business", 3.0, "core", ["business_core"], [], 1),
    _c("ACC 1201", "Financial Accounting", 3.0, "core", ["accounting"], ["ACT 1101"], 2),
    _c("ECO 1101", "Principles of Microeconomics", 3.0, "core", ["economics"], [], 2),
    _c("ACC 2101", "Cost & Management Accounting", 3.0, "core", ["accounting"], ["ACC 1201"], 3),
    _c("AIS 2101", "Accounting Information Systems", 3.0, "core", ["accounting", "programming"], ["ACC 1201"], 4),
    _c("ACC 3101", "Auditing", 3.0, "core", ["accounting"], ["ACC 2101"], 5),
    _c("ACC 3201", "Taxation", 3.0, "core", ["accounting", "finance"], ["ACC 2101"], 6),
    _c("AIS 3101", "IT Auditing & Controls", 3.0, "core", ["accounting", "security"], ["AIS 2101"], 7),
    _c("ACC 4101", "Advanced Accounting", 3.0, "core", ["accounting"], ["ACC 3101"], 8),
    _c("FIN 2101", "Financial Management", 3.0, "core", ["finance"], ["ACT 1101"], 4),
    _c("MGT 3101", "Organizational Behavior", 3.0, "core", ["management"], [], 7),
    _c("MGT 4101", "Strategic Management", 3.0, "core", ["management", "business_core"], [], 10),
    _c("BUS 4900", "Internship", 3.0, "thesis", ["business_core"], [], 12),
]

# BSS Economics (123 Credits)
BSECO_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("ECO 1101", "Principles of Microeconomics", 3.0, "core", ["economics"], [], 1),
    _c("MAT 1101", "Mathematics for Economics I", 3.0, "core", ["math"], [], 1),
    _c("ECO 1201", "Principles of Macroeconomics", 3.0, "core", ["economics"], ["ECO 1101"], 2),
    _c("STA 1101", "Intro to Statistics", 3.0, "core", ["statistics"], [], 2),
    _c("ECO 2101", "Intermediate Microeconomics", 3.0, "core", ["economics"], ["ECO 1101"], 3),
    _c("ECO 2201", "Intermediate Macroeconomics", 3.0, "core", ["economics"], ["ECO 1201"], 4),
    _c("STA 2101", "Econometrics I", 3.0, "core", ["statistics", "economics"], ["STA 1101"], 4),
    _c("ECO 3101", "Development Economics", 3.0, "core", ["economics", "social_science"], ["ECO 2201"], 5),
    _c("ECO 3201", "Public Finance", 3.0, "core", ["economics", "finance"], ["ECO 2201"], 6),
    _c("ECO 3301", "Money & Banking", 3.0, "core", ["economics", "finance"], ["ECO 2201"], 6),
    _c("ECO 4101", "International Economics", 3.0, "core", ["economics"], ["ECO 3101"], 8),
    _c("ECO 4201", "Financial Economics", 3.0, "core", ["economics", "finance"], ["ECO 3301"], 9),
    _c("ECO 4900", "Research Monograph", 3.0, "thesis", ["research", "economics"], [], 12),
]

# BA in English (123 Credits)
BA_ENGLISH_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("ENG 1201", "Intro to Literature", 3.0, "core", ["language"], [], 1),
    _c("ENG 1301", "Phonetics & Phonology", 3.0, "core", ["language"], [], 2),
    _c("ENG 2201", "Intro to Linguistics", 3.0, "core", ["language"], [], 3),
    _c("ENG 2301", "Academic Writing", 3.0, "core", ["language", "communication"], ["ENG 1011"], 3),
    _c("ENG 3101", "Applied Linguistics", 3.0, "core", ["language", "education"], ["ENG 2201"], 5),
    _c("ENG 3201", "Creative Writing", 3.0, "core", ["language", "communication"], [], 6),
    _c("ENG 3301", "Translation Studies", 3.0, "core", ["language"], ["ENG 2201"], 6),
    _c("ENG 4101", "TESOL Methodology", 3.0, "core", ["language", "education"], ["ENG 3101"], 8),
    _c("ENG 4201", "Professional Communication", 3.0, "core", ["communication"], [], 9),
    _c("ENG 4900", "Research Project", 3.0, "thesis", ["research", "language"], [], 12),
]

# BSS in Media Studies & Journalism (130 Credits)
BSSMSJ_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("MSJ 1101", "Intro to Mass Communication", 3.0, "core", ["journalism", "communication"], [], 1),
    _c("MSJ 1201", "News Writing & Reporting", 3.0, "core", ["journalism"], [], 2),
    _c("MSJ 2101", "Media Production Basics", 3.0, "core", ["media"], [], 3),
    _c("MSJ 2201", "Digital Media & Technology", 3.0, "core", ["media", "design"], [], 4),
    _c("MSJ 3101", "Public Relations", 3.0, "core", ["communication", "marketing"], [], 5),
    _c("MSJ 3201", "Investigative Journalism", 3.0, "core", ["journalism"], ["MSJ 1201"], 6),
    _c("MSJ 3301", "Corporate Communications", 3.0, "core", ["communication"], ["MSJ 3101"], 7),
    _c("MSJ 4101", "Media Law & Ethics", 3.0, "core", ["journalism"], [], 8),
    _c("MSJ 4201", "Advanced Media Production", 3.0, "core", ["media", "design"], ["MSJ 2201"], 9),
    _c("MSJ 4900", "Internship / Thesis", 3.0, "thesis", ["research"], [], 12),
]

# BSS in Education & Development Studies (123 Credits)
BSSEDS_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("EDS 1101", "Intro to Education", 3.0, "core", ["education"], [], 1),
    _c("EDS 1201", "Intro to Development Studies", 3.0, "core", ["social_science"], [], 2),
    _c("EDS 2101", "Educational Psychology", 3.0, "core", ["education"], [], 3),
    _c("EDS 2201", "Research Methods in Education", 3.0, "core", ["research", "education"], [], 4),
    _c("EDS 3101", "Curriculum & Instruction", 3.0, "core", ["education"], ["EDS 2101"], 5),
    _c("EDS 3201", "Education Policy & Planning", 3.0, "core", ["education", "research"], ["EDS 2201"], 6),
    _c("EDS 3301", "Community Development", 3.0, "core", ["social_science", "management"], [], 7),
    _c("EDS 4101", "Development Project Management", 3.0, "core", ["management", "social_science"], ["EDS 3301"], 8),
    _c("EDS 4900", "Internship / Thesis", 3.0, "thesis", ["research"], [], 12),
]

# BSc in Biotechnology & Genetic Engineering (140 Credits)
BSBGE_COURSES: List[ProgramCourse] = [
    _c("ENG 1011", "Intensive English I", 3.0, "ge", ["language", "communication"], [], 1),
    _c("CHE 1101", "General Chemistry", 3.0, "core", ["chemistry"], [], 1),
    _c("BIO 1101", "Cell Biology", 3.0, "core", ["biology"], [], 1),
    _c("BGE 1101", "Intro to Biotechnology", 3.0, "core", ["biotech"], [], 2),
    _c("BIO 2101", "Biochemistry", 3.0, "core", ["biology", "chemistry"], [], 3),
    _c("BGE 2101", "Microbiology", 3.0, "core", ["biology", "biotech"], [], 3),
    _c("BGE 3101", "Molecular Biology", 3.0, "core", ["genetics", "biology"], ["BIO 2101"], 5),
    _c("BGE 3201", "Genetics", 3.0, "core", ["genetics"], ["BGE 3101"], 6),
    _c("BGE 4101", "Genetic Engineering", 3.0, "core", ["genetics", "biotech"], ["BGE 3201"], 7),
    _c("BGE 4201", "Applied Biotechnology", 3.0, "core", ["biotech", "research"], ["BGE 4101"], 8),
    _c("BGE 4301", "Plant Biotechnology", 3.0, "core", ["biotech", "biology"], ["BGE 4201"], 9),
    _c("BGE 4900", "Research Project", 6.0, "thesis", ["research", "biotech"], [], 12),
    _c("STA 2101", "Biostatistics", 3.0, "core", ["statistics"], [], 4),
]

PROGRAMS: List[ProgramDefinition] = [
    ProgramDefinition(
        id="bscse", name="BSc in Computer Science & Engineering", short_name="BSCSE",
        department="Computer Science & Engineering", school="School of Science & Engineering",
        total_credits=137, duration="4 years (12 trimesters)", id_prefix="011",
        courses=BSCSE_COURSES,
    ),
    ProgramDefinition(
        id="bsds", name="BSc in Data Science", short_name="BSDS",
        department="Computer Science & Engineering", school="School of Science & Engineering",
        total_credits=138, duration="4 years (12 trimesters)", id_prefix="012",
        courses=BSDS_COURSES,
    ),
    ProgramDefinition(
        id="bseee", name="BSc in Electrical & Electronic Engineering", short_name="BSEEE",
        department="Electrical & Electronic Engineering", school="School of Science & Engineering",
        total_credits=140, duration="4 years (12 trimesters)", id_prefix="021",
        courses=BSEEE_COURSES,
    ),
    ProgramDefinition(
        id="bscivil", name="BSc in Civil Engineering", short_name="BSc Civil",
        department="Civil Engineering", school="School of Science & Engineering",
        total_credits=151.5, duration="4 years (12 trimesters)", id_prefix="031",
        courses=CIVIL_COURSES,
    ),
    ProgramDefinition(
        id="bpharm", name="Bachelor of Pharmacy", short_name="B.Pharm",
        department="Pharmacy", school="School of Life Sciences",
        total_credits=160, duration="4 years (8 semesters)", id_prefix="041",
        courses=BPHARM_COURSES,
    ),
    ProgramDefinition(
        id="bsbge", name="BSc in Biotechnology & Genetic Engineering", short_name="BSBGE",
        department="Biotechnology & Genetic Engineering", school="School of Life Sciences",
        total_credits=140, duration="4 years (12 trimesters)", id_prefix="051",
        courses=BSBGE_COURSES,
    ),
    ProgramDefinition(
        id="bba", name="Bachelor of Business Administration", short_name="BBA",
        department="School of Business & Economics", school="School of Business & Economics",
        total_credits=125, duration="4 years (12 trimesters)", id_prefix="111",
        courses=BBA_COURSES,
    ),
    ProgramDefinition(
        id="bba_ais", name="BBA in Accounting & Information Systems", short_name="BBA (AIS)",
        department="School of Business & Economics", school="School of Business & Economics",
        total_credits=125, duration="4 years (12 trimesters)", id_prefix="112",
        courses=BBA_AIS_COURSES,
    ),
    ProgramDefinition(
        id="bseco", name="BSS in Economics", short_name="BSECO",
        department="Economics", school="School of Business & Economics",
        total_credits=123, duration="4 years (12 trimesters)", id_prefix="121",
        courses=BSECO_COURSES,
    ),
    ProgramDefinition(
        id="bsseds", name="BSS in Education & Development Studies", short_name="BSSEDS",
        department="Education & Development Studies", school="School of Humanities & Social Sciences",
        total_credits=123, duration="4 years (12 trimesters)", id_prefix="131",
        courses=BSSEDS_COURSES,
    ),
    ProgramDefinition(
        id="ba_english", name="BA in English", short_name="BA English",
        department="English", school="School of Humanities & Social Sciences",
        total_credits=123, duration="4 years (12 trimesters)", id_prefix="132",
        courses=BA_ENGLISH_COURSES,
    ),
    ProgramDefinition(
        id="bssmsj", name="BSS in Media Studies & Journalism", short_name="BSSMSJ",
        department="Media Studies & Journalism", school="School of Humanities & Social Sciences",
        total_credits=130, duration="4 years (12 trimesters)", id_prefix="133",
        courses=BSSMSJ_COURSES,
    ),
]


CSE_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="software-eng", title="Software Engineering", icon="⚙️",
        description="Design, develop, and maintain software systems at scale.",
        relevant_domains=["programming", "software_eng", "database", "algorithms"],
        key_course_codes=["CSE1115", "CSE2215", "CSE3421", "CSE3521", "CSE3411", "CSE4165"],
        skills=["Clean Code", "System Design", "Version Control", "API Design", "Testing"],
        job_titles=["Software Engineer", "Backend Developer", "Full Stack Developer"],
        avg_salary_bdt="৳40,000 – ৳80,000", growth="high", competitiveness="competitive",
    ),
    CareerTrack(
        id="ai-ml", title="AI & Machine Learning", icon="🤖",
        description="Build intelligent systems using machine learning and data-driven approaches.",
        relevant_domains=["ai_ml", "statistics", "math", "programming"],
        key_course_codes=["CSE3811", "CSE2217", "MATH2205", "MATH2183", "CSE2215", "CSE3812"],
        skills=["Python", "Data Analysis", "Neural Networks", "Computer Vision", "Research"],
        job_titles=["ML Engineer", "AI Researcher", "Data Scientist"],
        avg_salary_bdt="৳50,000 – ৳1,20,000", growth="high", competitiveness="elite",
    ),
    CareerTrack(
        id="web-mobile", title="Web & Mobile Development", icon="📱",
        description="Create modern web applications and mobile apps.",
        relevant_domains=["web_mobile", "programming", "database"],
        key_course_codes=["CSE4165", "CSE3521", "CSE1115", "CSE2215", "CSE3522"],
        skills=["React", "Node.js", "REST APIs", "UI/UX", "Cloud Deployment"],
        job_titles=["Frontend Developer", "Mobile Developer", "Web Developer"],
        avg_salary_bdt="৳35,000 – ৳70,000", growth="high", competitiveness="standard",
    ),
    CareerTrack(
        id="cybersecurity", title="Cybersecurity", icon="🔒",
        description="Protect systems, networks, and data from cyber threats.",
        relevant_domains=["security", "networking", "hardware"],
        key_course_codes=["CSE4531", "CSE3711", "CSE4509", "CSE3712"],
        skills=["Network Security", "Penetration Testing", "Cryptography", "Risk Assessment"],
        job_titles=["Security Analyst", "Penetration Tester", "SOC Analyst"],
        avg_salary_bdt="৳45,000 – ৳90,000", growth="high", competitiveness="competitive",
    ),
    CareerTrack(
        id="hardware-embedded", title="Hardware & Embedded Systems", icon="🔧",
        description="Design digital hardware, microcontroller firmware, and embedded products.",
        relevant_domains=["hardware", "electronics"],
        key_course_codes=["CSE1325", "CSE3313", "CSE4325", "EEE2123"],
        skills=["Digital Design", "Microcontrollers", "C Programming", "PCB Design"],
        job_titles=["Embedded Engineer", "Firmware Developer", "Hardware Engineer"],
        avg_salary_bdt="৳35,000 – ৳65,000", growth="stable", competitiveness="standard",
    ),
    CareerTrack(
        id="research-academia", title="Research & Academia", icon="🎓",
        description="Pursue graduate studies and contribute to research or teach at universities.",
        relevant_domains=["research", "algorithms", "math", "ai_ml"],
        key_course_codes=["CSE2233", "CSE2213", "CSE3811", "MATH2205", "CSE2217", "CSE4000C"],
        skills=["Research Methods", "Paper Writing", "Mathematical Proofs", "Presentation"],
        job_titles=["Research Assistant", "Lecturer", "PhD Candidate"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="stable", competitiveness="elite",
    ),
]

DS_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="data-scientist", title="Data Scientist", icon="📊",
        description="Extract insights from data using statistical methods and machine learning.",
        relevant_domains=["statistics", "ai_ml", "programming", "math"],
        key_course_codes=["DS3101", "CSE4821", "DS4101", "STA2101", "DS2101"],
        skills=["Python/R", "Statistical Modeling", "Data Visualization", "A/B Testing"],
        job_titles=["Data Scientist", "Analytics Engineer", "Quantitative Analyst"],
        avg_salary_bdt="৳50,000 – ৳1,00,000", growth="high", competitiveness="elite",
    ),
    CareerTrack(
        id="ml-engineer", title="ML Engineer", icon="🤖",
        description="Productionize machine learning models and build ML infrastructure.",
        relevant_domains=["ai_ml", "programming", "database"],
        key_course_codes=["CSE4821", "DS4101", "DS4201", "DS4301", "DS3201"],
        skills=["PyTorch", "MLOps", "Model Serving", "Feature Engineering"],
        job_titles=["ML Engineer", "AI Engineer", "Deep Learning Engineer"],
        avg_salary_bdt="৳60,000 – ৳1,20,000", growth="high", competitiveness="competitive",
    ),
    CareerTrack(
        id="data-engineer", title="Data Engineer", icon="🗄️",
        description="Build and maintain data pipelines, warehouses, and infrastructure.",
        relevant_domains=["database", "programming", "statistics"],
        key_course_codes=["DS3201", "DS4401", "CSE3521", "CSE2233"],
        skills=["SQL/NoSQL", "Spark/Kafka", "ETL Pipelines", "Data Modeling"],
        job_titles=["Data Engineer", "ETL Developer", "Database Architect"],
        avg_salary_bdt="৳45,000 – ৳90,000", growth="high", competitiveness="competitive",
    ),
    CareerTrack(
        id="business-analyst", title="Business Analyst", icon="💼",
        description="Bridge business needs and data solutions.",
        relevant_domains=["statistics", "communication"],
        key_course_codes=["DS1101", "DS2101", "STA2101", "STA1101"],
        skills=["Data Storytelling", "SQL", "Tableau", "Requirements Gathering"],
        job_titles=["Business Analyst", "Product Analyst", "BI Analyst"],
        avg_salary_bdt="৳35,000 – ৳70,000", growth="stable", competitiveness="standard",
    ),
]


# EEE Career Tracks
EEE_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="power-systems", title="Power Systems", icon="⚡",
        description="Design and manage electrical power generation, transmission, and distribution.",
        relevant_domains=["power_systems", "electronics"],
        key_course_codes=["EEE4201", "EEE3301", "EEE4601"],
        skills=["Power Grid Design", "SCADA", "Load Flow Analysis", "Renewable Integration"],
        job_titles=["Power Systems Engineer", "Energy Analyst", "Grid Engineer"],
        avg_salary_bdt="৳35,000 – ৳70,000", growth="stable",
    ),
    CareerTrack(
        id="vlsi-design", title="VLSI & Chip Design", icon="🔌",
        description="Design integrated circuits and semiconductor devices for next-gen electronics.",
        relevant_domains=["electronics", "hardware"],
        key_course_codes=["EEE4101", "CSE1325", "EEE2101"],
        skills=["Verilog/VHDL", "ASIC Design", "FPGA", "EDA Tools", "Semiconductor Physics"],
        job_titles=["VLSI Engineer", "IC Designer", "Verification Engineer"],
        avg_salary_bdt="৳40,000 – ৳80,000", growth="stable",
    ),
    CareerTrack(
        id="embedded-systems", title="Embedded Systems & IoT", icon="🔧",
        description="Develop firmware and embedded solutions for IoT, automotive, and consumer electronics.",
        relevant_domains=["hardware", "programming", "electronics"],
        key_course_codes=["EEE4501", "CSE1111", "CSE1325", "EEE3501"],
        skills=["C/C++ Embedded", "Microcontrollers", "RTOS", "PCB Design", "IoT Protocols"],
        job_titles=["Embedded Engineer", "Firmware Developer", "IoT Engineer"],
        avg_salary_bdt="৳35,000 – ৳75,000", growth="high",
    ),
    CareerTrack(
        id="telecom", title="Telecommunications", icon="📡",
        description="Work on wireless communication, 5G networks, and signal processing systems.",
        relevant_domains=["telecom", "signal_processing"],
        key_course_codes=["EEE3401", "EEE4401", "EEE4301", "EEE3201"],
        skills=["RF Engineering", "5G/LTE", "Signal Processing", "Antenna Design", "Network Planning"],
        job_titles=["Telecom Engineer", "RF Engineer", "Network Planner"],
        avg_salary_bdt="৳30,000 – ৳65,000", growth="stable",
    ),
    CareerTrack(
        id="robotics", title="Robotics & Automation", icon="🤖",
        description="Build robotic systems combining electronics, programming, and control theory.",
        relevant_domains=["electronics", "programming", "ai_ml"],
        key_course_codes=["EEE4701", "EEE3501", "EEE4501", "CSE1111"],
        skills=["ROS", "Control Systems", "Sensor Integration", "PLC", "Motion Planning"],
        job_titles=["Robotics Engineer", "Automation Engineer", "Control Systems Engineer"],
        avg_salary_bdt="৳40,000 – ৳80,000", growth="high",
    ),
]

# BBA Career Tracks
BBA_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="marketing-mgmt", title="Marketing & Brand Management", icon="📊",
        description="Drive brand strategy, digital marketing campaigns, and consumer engagement.",
        relevant_domains=["marketing", "communication", "business_core"],
        key_course_codes=["MKT2101", "MKT3101", "MKT4101"],
        skills=["Digital Marketing", "SEO/SEM", "Brand Strategy", "Market Research", "Social Media"],
        job_titles=["Marketing Executive", "Brand Manager", "Digital Marketer"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="high",
    ),
    CareerTrack(
        id="finance-banking", title="Finance & Banking", icon="💰",
        description="Manage financial operations, investments, and banking services.",
        relevant_domains=["finance", "accounting", "economics"],
        key_course_codes=["FIN2101", "FIN3101", "FIN4101", "FIN4201"],
        skills=["Financial Modeling", "Risk Analysis", "Portfolio Management", "Corporate Finance"],
        job_titles=["Financial Analyst", "Bank Officer", "Investment Analyst", "Credit Analyst"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="stable",
    ),
    CareerTrack(
        id="hr-management", title="Human Resource Management", icon="👔",
        description="Manage talent acquisition, organizational development, and employee relations.",
        relevant_domains=["management", "communication"],
        key_course_codes=["HRM2101", "MGT3101", "MGT4101"],
        skills=["Recruitment", "Performance Management", "Labor Law", "Training & Development"],
        job_titles=["HR Executive", "Talent Acquisition Specialist", "HR Manager"],
        avg_salary_bdt="৳25,000 – ৳50,000", growth="stable",
    ),
    CareerTrack(
        id="entrepreneurship", title="Entrepreneurship", icon="🚀",
        description="Start and grow your own business. Build ventures from idea to market.",
        relevant_domains=["business_core", "management", "marketing", "finance"],
        key_course_codes=["MGT4201", "MGT4101", "MKT2101", "FIN2101"],
        skills=["Business Planning", "Fundraising", "Leadership", "Product-Market Fit", "Operations"],
        job_titles=["Founder/CEO", "Startup Consultant", "Business Development Manager"],
        avg_salary_bdt="Variable", growth="high",
    ),
]

# BBA-AIS Career Tracks
BBA_AIS_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="auditing", title="Auditing & Assurance", icon="📋",
        description="Audit financial statements and ensure regulatory compliance for organizations.",
        relevant_domains=["accounting"],
        key_course_codes=["ACC3101", "ACC2101", "ACC1201"],
        skills=["Audit Planning", "Internal Controls", "GAAP/IFRS", "Risk Assessment"],
        job_titles=["External Auditor", "Internal Auditor", "Audit Associate"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="stable",
    ),
    CareerTrack(
        id="tax-consulting", title="Tax Consulting", icon="📑",
        description="Advise businesses and individuals on tax planning and compliance.",
        relevant_domains=["accounting", "finance"],
        key_course_codes=["ACC3201", "ACC2101", "ACC1201"],
        skills=["Tax Law", "Tax Planning", "VAT/Income Tax", "Compliance"],
        job_titles=["Tax Consultant", "Tax Analyst", "Revenue Officer"],
        avg_salary_bdt="৳25,000 – ৳50,000", growth="stable",
    ),
    CareerTrack(
        id="it-auditing", title="IT Auditing", icon="🔒",
        description="Evaluate IT systems for security, integrity, and compliance with standards.",
        relevant_domains=["accounting", "security", "programming"],
        key_course_codes=["AIS3101", "AIS2101", "ACC3101"],
        skills=["IT Controls", "COBIT", "ISO 27001", "ERP Systems", "Data Analytics"],
        job_titles=["IT Auditor", "IS Analyst", "Compliance Officer"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="high",
    ),
    CareerTrack(
        id="forensic-accounting", title="Forensic Accounting", icon="🔍",
        description="Investigate financial fraud and disputes using accounting expertise.",
        relevant_domains=["accounting"],
        key_course_codes=["ACC4101", "ACC3101", "ACC2101"],
        skills=["Fraud Investigation", "Litigation Support", "Data Forensics", "Expert Testimony"],
        job_titles=["Forensic Accountant", "Fraud Examiner", "Investigation Analyst"],
        avg_salary_bdt="৳30,000 – ৳65,000", growth="stable",
    ),
]

# Civil Engineering Career Tracks
CIVIL_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="structural-eng", title="Structural Engineering", icon="🏗️",
        description="Design buildings, bridges, and infrastructure to withstand loads and forces.",
        relevant_domains=["structural", "civil_core", "math"],
        key_course_codes=["CE3101", "CE4101", "CE4501", "CE2101"],
        skills=["ETABS/SAP2000", "AutoCAD", "Structural Analysis", "Concrete Design", "Steel Design"],
        job_titles=["Structural Engineer", "Design Engineer", "Consultant"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="stable",
    ),
    CareerTrack(
        id="construction-mgmt", title="Construction Management", icon="👷",
        description="Manage construction projects from planning to completion.",
        relevant_domains=["civil_core", "management"],
        key_course_codes=["CE4401", "CE4201", "CE3301"],
        skills=["Project Management", "Cost Estimation", "MS Project", "Contract Admin", "Site Management"],
        job_titles=["Project Manager", "Site Engineer", "Construction Manager"],
        avg_salary_bdt="৳30,000 – ৳65,000", growth="high",
    ),
    CareerTrack(
        id="environmental-eng", title="Environmental Engineering", icon="🌿",
        description="Design systems for water treatment, waste management, and environmental protection.",
        relevant_domains=["environmental", "civil_core"],
        key_course_codes=["CE4301", "CE3201"],
        skills=["Water Treatment", "EIA", "Waste Management", "Environmental Modeling"],
        job_titles=["Environmental Engineer", "Water Resources Engineer", "EIA Consultant"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="stable",
    ),
]

# Pharmacy Career Tracks
PHARM_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="clinical-pharmacy", title="Clinical Pharmacy", icon="🏥",
        description="Provide pharmaceutical care in hospitals and clinical settings.",
        relevant_domains=["pharma", "biology"],
        key_course_codes=["PHR4101", "PHR3101", "PHR2101"],
        skills=["Drug Therapy", "Patient Counseling", "Drug Interactions", "Clinical Trials"],
        job_titles=["Clinical Pharmacist", "Hospital Pharmacist", "Drug Information Specialist"],
        avg_salary_bdt="৳25,000 – ৳50,000", growth="stable",
    ),
    CareerTrack(
        id="pharma-rd", title="Pharmaceutical R&D", icon="🧪",
        description="Research and develop new drugs, formulations, and delivery systems.",
        relevant_domains=["pharma", "chemistry", "research"],
        key_course_codes=["PHR4301", "PHR3201", "PHR4900"],
        skills=["Drug Formulation", "Analytical Chemistry", "HPLC", "GMP", "Clinical Research"],
        job_titles=["R&D Scientist", "Formulation Scientist", "Research Associate"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="stable",
    ),
    CareerTrack(
        id="pharma-qa", title="Quality Assurance & Regulatory", icon="✅",
        description="Ensure drug quality standards and regulatory compliance in pharmaceutical companies.",
        relevant_domains=["pharma", "lab"],
        key_course_codes=["PHR4201", "PHR3201"],
        skills=["cGMP", "FDA Guidelines", "SOP Writing", "Validation", "BSSS Standards"],
        job_titles=["QA Officer", "QC Analyst", "Regulatory Affairs Officer"],
        avg_salary_bdt="৳22,000 – ৳45,000", growth="stable",
    ),
]

# Economics Career Tracks
ECO_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="economic-research", title="Economic Research & Policy", icon="📈",
        description="Analyze economic data and advise on policy for government and think tanks.",
        relevant_domains=["economics", "statistics", "research"],
        key_course_codes=["ECO3101", "ECO3201", "ECO4101", "ECO4900"],
        skills=["Econometrics", "Stata/R", "Policy Analysis", "Report Writing"],
        job_titles=["Research Associate", "Policy Analyst", "Economist"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="stable",
    ),
    CareerTrack(
        id="banking-finance", title="Banking & Financial Services", icon="🏦",
        description="Work in commercial banking, central banking, or financial institutions.",
        relevant_domains=["economics", "finance"],
        key_course_codes=["ECO4201", "ECO2101", "ECO3301"],
        skills=["Financial Analysis", "Credit Assessment", "Basel Norms", "Monetary Policy"],
        job_titles=["Bank Officer", "Financial Analyst", "Credit Analyst"],
        avg_salary_bdt="৳30,000 – ৳60,000", growth="stable",
    ),
    CareerTrack(
        id="development-eco", title="Development Economics", icon="🌍",
        description="Work with NGOs, World Bank, UN agencies on development projects.",
        relevant_domains=["economics", "social_science"],
        key_course_codes=["ECO3201", "ECO4101"],
        skills=["Impact Evaluation", "Project Management", "Data Collection", "Grant Writing"],
        job_titles=["Development Researcher", "M&E Officer", "Program Coordinator"],
        avg_salary_bdt="৳30,000 – ৳70,000", growth="stable",
    ),
]

# English Career Tracks
ENGLISH_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="content-writing", title="Content & Copywriting", icon="✍️",
        description="Create compelling written content for digital, print, and marketing channels.",
        relevant_domains=["language", "communication"],
        key_course_codes=["ENG3201", "ENG1201", "ENG4201"],
        skills=["SEO Writing", "Copywriting", "Editing", "Content Strategy"],
        job_titles=["Content Writer", "Copywriter", "Content Strategist", "Editor"],
        avg_salary_bdt="৳20,000 – ৳45,000", growth="high",
    ),
    CareerTrack(
        id="teaching", title="Teaching & Education", icon="🎓",
        description="Teach English at schools, universities, or language institutes.",
        relevant_domains=["language", "education"],
        key_course_codes=["ENG4101", "ENG3101", "ENG2201"],
        skills=["TESOL/TEFL", "Curriculum Design", "Classroom Management", "Assessment"],
        job_titles=["English Teacher", "Lecturer", "IELTS Instructor"],
        avg_salary_bdt="৳20,000 – ৳40,000", growth="stable",
    ),
    CareerTrack(
        id="translation", title="Translation & Localization", icon="🌐",
        description="Translate and localize content between languages for global audiences.",
        relevant_domains=["language"],
        key_course_codes=["ENG3301", "ENG2201"],
        skills=["Bangla-English Translation", "Localization Tools", "Cultural Adaptation"],
        job_titles=["Translator", "Localization Specialist", "Interpreter"],
        avg_salary_bdt="৳20,000 – ৳50,000", growth="stable",
    ),
]

# MSJ Career Tracks
MSJ_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="journalism", title="Journalism", icon="📰",
        description="Report news and stories across print, digital, and broadcast media.",
        relevant_domains=["journalism", "communication"],
        key_course_codes=["MSJ3201", "MSJ1201", "MSJ4101"],
        skills=["News Writing", "Investigative Reporting", "Fact-Checking", "Ethics"],
        job_titles=["Reporter", "News Editor", "Correspondent"],
        avg_salary_bdt="৳20,000 – ৳45,000", growth="stable",
    ),
    CareerTrack(
        id="digital-media", title="Digital Media & Production", icon="🎬",
        description="Create and manage digital content including video, audio, and social media.",
        relevant_domains=["media", "design"],
        key_course_codes=["MSJ2201", "MSJ4201", "MSJ2101"],
        skills=["Video Editing", "Social Media", "Adobe Suite", "Storytelling"],
        job_titles=["Digital Media Producer", "Video Editor", "Social Media Manager"],
        avg_salary_bdt="৳20,000 – ৳50,000", growth="high",
    ),
    CareerTrack(
        id="pr-communications", title="PR & Corporate Communications", icon="🗣️",
        description="Manage public relations, corporate image, and strategic communications.",
        relevant_domains=["communication", "marketing"],
        key_course_codes=["MSJ3101", "MSJ3301"],
        skills=["Press Releases", "Crisis Communication", "Event Management", "Media Relations"],
        job_titles=["PR Executive", "Communications Manager", "Corporate Affairs Officer"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="stable",
    ),
]

# EDS Career Tracks
EDS_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="education-policy", title="Education Policy & Research", icon="🎓",
        description="Research and develop education policies for government and NGOs.",
        relevant_domains=["education", "research"],
        key_course_codes=["EDS3201", "EDS3101", "EDS2201"],
        skills=["Policy Analysis", "Research Design", "Data Analysis", "Report Writing"],
        job_titles=["Education Researcher", "Policy Analyst", "Program Officer"],
        avg_salary_bdt="৳25,000 – ৳50,000", growth="stable",
    ),
    CareerTrack(
        id="ngo-development", title="NGO & Development Work", icon="🌍",
        description="Work with NGOs on community development, social welfare, and empowerment.",
        relevant_domains=["social_science", "management"],
        key_course_codes=["EDS4101", "EDS3301"],
        skills=["Project Management", "M&E", "Community Engagement", "Grant Proposals"],
        job_titles=["NGO Coordinator", "Development Worker", "Field Officer"],
        avg_salary_bdt="৳20,000 – ৳45,000", growth="stable",
    ),
]

# BGE Career Tracks
BGE_TRACKS: List[CareerTrack] = [
    CareerTrack(
        id="biotech-rd", title="Biotechnology R&D", icon="🧬",
        description="Research and develop biotech products in pharmaceuticals, agriculture, and industry.",
        relevant_domains=["biotech", "genetics", "research"],
        key_course_codes=["BGE4201", "BGE4101", "BGE4900"],
        skills=["PCR/Cloning", "Bioinformatics", "Lab Techniques", "Research Paper Writing"],
        job_titles=["Research Scientist", "Biotech Researcher", "Lab Manager"],
        avg_salary_bdt="৳25,000 – ৳55,000", growth="stable",
    ),
    CareerTrack(
        id="genetic-research", title="Genetic Research", icon="🔬",
        description="Conduct genetic research in healthcare, forensics, or agricultural biotech.",
        relevant_domains=["genetics", "biology"],
        key_course_codes=["BGE3201", "BGE4201", "BGE3101"],
        skills=["Gene Sequencing", "CRISPR", "Genomics", "Statistical Genetics"],
        job_titles=["Genetic Researcher", "Genomics Analyst", "Clinical Geneticist"],
        avg_salary_bdt="৳25,000 – ৳50,000", growth="high",
    ),
    CareerTrack(
        id="agri-biotech", title="Agricultural Biotechnology", icon="🌾",
        description="Apply biotech methods to improve crops, livestock, and food production.",
        relevant_domains=["biotech", "biology"],
        key_course_codes=["BGE4301", "BGE4201"],
        skills=["Plant Tissue Culture", "GMO Development", "Field Trials", "Biosafety"],
        job_titles=["Agri-Biotech Scientist", "Plant Breeder", "Agricultural Researcher"],
        avg_salary_bdt="৳20,000 – ৳45,000", growth="stable",
    ),
]

CAREER_MAPS: Dict[str, List[CareerTrack]] = {
    "bscse": CSE_TRACKS,
    "bsds": DS_TRACKS,
    "bseee": EEE_TRACKS,
    "bscivil": CIVIL_TRACKS,
    "bpharm": PHARM_TRACKS,
    "bsbge": BGE_TRACKS,
    "bba": BBA_TRACKS,
    "bba_ais": BBA_AIS_TRACKS,
    "bseco": ECO_TRACKS,
    "bsseds": EDS_TRACKS,
    "ba_english": ENGLISH_TRACKS,
    "bssmsj": MSJ_TRACKS,
}


def get_program(program_id: Optional[str]) -> Optional[ProgramDefinition]:
    pid = (program_id or "").strip().lower()
    return next((p for p in PROGRAMS if p.id == pid), None)


def detect_program_from_id(student_id: Optional[str]) -> Optional[ProgramDefinition]:
    """Program from the first three digits of a student ID ("011..." -> BSCSE)."""
    if not student_id or len(student_id) < 3:
        return None
    prefix = student_id[:3]
    return next((p for p in PROGRAMS if p.id_prefix == prefix), None)


def get_career_tracks(program_id: Optional[str]) -> List[CareerTrack]:
    return CAREER_MAPS.get((program_id or "").strip().lower(), [])


def get_career_track(program_id: Optional[str], track_id: Optional[str]) -> Optional[CareerTrack]:
    return next((t for t in get_career_tracks(program_id) if t.id == track_id), None)
