import os

# Runtime settings come from the environment; policy constants sit beside them.

DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "app_db")
DATABASE_TIMEOUT_MS = int(os.getenv("DATABASE_TIMEOUT_MS", "3000"))

PORT = int(os.getenv("PORT", 8000))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------- Academic policy ----------

# UIU flags anything above this as a heavy trimester load
MAX_TRIMESTER_CREDITS = 15.0

DEFAULT_TARGET_CGPA = 3.50
DEFAULT_TARGET_POINT = 3.33  # B+

# Point deficit at which a study tip becomes urgent
URGENT_DEFICIT = 1.0

# Class tests counted toward the course total (best N)
DEFAULT_CT_COUNT = 3

# Fallback when a program definition is missing its credit total
DEFAULT_PROGRAM_CREDITS = 137.0
