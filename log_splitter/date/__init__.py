"""Date detection and extraction for log lines.

Core philosophy: a log file usually sticks to one timestamp layout. Detect it once from a
bounded sample, then extract per line with a loose ISO-like fallback for the rest.
"""

from .types import DatePattern, DetectionPolicy, Detection
from .parsers import PATTERNS, get_pattern
from .detect import choose_pattern, detect_file, sample_lines
from .extract import extract_date
