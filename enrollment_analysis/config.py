"""
Configuration constants for enrollment analysis.
Centralized configuration for column names, session parsing rules, and logging.
"""

import os
from typing import Dict, List

from dotenv import load_dotenv

load_dotenv()

# CSV Columns
ENROLL_DATE_COLUMN = "Enroll Date"
SESSION_COLUMN = "Session"
CLASS_COLUMN = "Class"
REQUIRED_COLUMNS: List[str] = [ENROLL_DATE_COLUMN, SESSION_COLUMN]

# CSV Reading
CSV_SEPARATOR = ","
CSV_ENCODING = os.environ.get("ENROLLMENT_CSV_ENCODING", "utf-8")

# Class categories
UNKNOWN_CLASS_CATEGORY = "Unknown"

# Month names as they appear in session schedule fragments (case-sensitive)
MONTH_NAMES: List[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_NUMBERS: Dict[str, int] = {name: index for index, name in enumerate(MONTH_NAMES, start=1)}

# Enrollment Dates (MM/DD/YYYY)
ENROLL_DATE_SEPARATOR = "/"
ENROLL_DATE_PARTS = 3

# Grace Period
DEFAULT_GRACE_PERIOD_DAYS = 7
GRACE_PERIOD_ENV_VAR = "ENROLLMENT_GRACE_PERIOD_DAYS"  # Read by the CLI when no argument is given

# Session Ambiguity Rules
MIN_SESSION_DAY_TOKENS = 3  # Sessions with this many day tokens or fewer are ignored
CONSECUTIVE_BLOCK_TOKENS = 5  # "<Month> d d+1 d+2 d+3" fixed block pattern

# Logging
LOG_LEVEL = os.environ.get("ENROLLMENT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.environ.get("ENROLLMENT_LOG_FILE", "")
