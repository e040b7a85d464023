"""Line splitting, parsing, normalisation and validation for pasted contact text."""

from .lines import count_nonblank_lines, is_header_row, iter_qualifying_lines, split_lines
from .normalize import auto_fix_email
from .parser import detect_delimiter, parse_line
from .validation import validate_candidate, validate_form

__all__ = [
    "auto_fix_email",
    "count_nonblank_lines",
    "detect_delimiter",
    "is_header_row",
    "iter_qualifying_lines",
    "parse_line",
    "split_lines",
    "validate_candidate",
    "validate_form",
]
