"""
Configuration constants for the video catalog.
"""
import re

# --- File Type Definitions ---
VIDEO_EXTS = {'.mp4', '.mkv', '.avi', '.mov', '.flv', '.wmv'}

# --- Placeholder Values ---
# Every record field resolves to UNKNOWN rather than being left empty
UNKNOWN = "Unknown"
# Implicit "no filter" selection; never stored in a facet set
ALL = "All"

# --- External Probe ---
FFPROBE_BIN = "ffprobe"
PROBE_TIMEOUT_SEC = 30.0

# --- Performance ---
# ffprobe spends most of its time in process start-up, so a few workers help a lot
DEFAULT_MAX_WORKERS = 4

# --- Name Parsing ---
# "<title> (<year>)", title is the shortest prefix before " (dddd)"
FOLDER_NAME_PATTERN = re.compile(r'(.+?) \((\d{4})\)')

# --- Classification ---
# Filename hints, checked in order. First match wins.
QUALITY_RULES = [
    (('2160p', '4k'), '4K'),
    (('1080p',), '1080p'),
    (('720p',), '720p'),
]

# Aspect ratios inside this inclusive range are grouped under one band label
ULTRAWIDE_LABEL = "UltraWide"
ULTRAWIDE_MIN = 2.2
ULTRAWIDE_MAX = 2.5

BYTES_PER_GB = 1024 ** 3

# --- Export ---
# Columns of the catalog table minus the presentation-only "Actions" column
EXPORT_COLUMNS = [
    "Title",
    "Year",
    "Decade",
    "Resolution",
    "Aspect Ratio",
    "Quality",
    "Path",
    "Size",
    "Duration",
    "Language",
]
