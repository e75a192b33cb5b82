#file: aq_dashboard/config.py

import os
import pytz
from dotenv import load_dotenv

from aq_dashboard.breakpoints import DEFAULT_TABLES, load_breakpoint_tables

load_dotenv()

API_BASE_URL = os.getenv("AQ_API_BASE_URL", "https://xp-backend.sytes.net/api/v1").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("AQ_REQUEST_TIMEOUT", "15"))
REFRESH_SECONDS = int(os.getenv("AQ_REFRESH_SECONDS", "300"))
CITY_NAME = os.getenv("AQ_CITY_NAME", "Nairobi")
CONTACT_EMAIL = os.getenv("AQ_CONTACT_EMAIL", "environment@nairobi.go.ke")
TIMEZONE = os.getenv("AQ_TIMEZONE", "Africa/Nairobi")
TOP_N = int(os.getenv("AQ_TOP_N", "5"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
BREAKPOINTS_FILE = os.getenv("AQ_BREAKPOINTS_FILE")

# Validate environment variables
if not API_BASE_URL.startswith(("http://", "https://")) :
    raise ValueError(f"AQ_API_BASE_URL must be an http(s) URL, got {API_BASE_URL!r}")
if REQUEST_TIMEOUT <= 0 or REFRESH_SECONDS <= 0 or TOP_N <= 0 :
    raise ValueError("AQ_REQUEST_TIMEOUT, AQ_REFRESH_SECONDS and AQ_TOP_N must be positive")
if TIMEZONE not in pytz.all_timezones_set :
    raise ValueError(f"Unknown timezone in AQ_TIMEZONE: {TIMEZONE}")

BREAKPOINT_TABLES = load_breakpoint_tables(BREAKPOINTS_FILE) if BREAKPOINTS_FILE else DEFAULT_TABLES
