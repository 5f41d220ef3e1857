"""
Redactor - Detect, highlight and redact sensitive text in HTML files.

This package finds sensitive data (emails, phone numbers, SSNs, credit card
numbers, or caller supplied regexes) in HTML treated as flat text.

Architecture:
    - compiler: Turns a pattern spec into ordered CompiledPatterns
    - RedactionEngine: identify / preview / redact over one text buffer
    - PatternProfile: Abstract base class for named pattern sets
    - profiles/: The default pattern set
    - file_processor: Runs the engine over a folder of HTML files

Example:
    from redactor import redact

    redact("Contact me at a@b.com or 555-123-4567")
    # "Contact me at [REDACTED] or [REDACTED]"
"""

from .base_profile import CompiledPattern, PatternProfile
from .compiler import compile_pattern, compile_patterns
from .engine import (
    HIGHLIGHT_CLASS,
    REDACTION_TOKEN,
    Match,
    RedactionEngine,
    ScanResult,
    identify,
    preview,
    redact,
)
from .exceptions import InvalidInputError, PatternCompilationError, RedactorError

__all__ = [
    "CompiledPattern",
    "PatternProfile",
    "compile_pattern",
    "compile_patterns",
    "HIGHLIGHT_CLASS",
    "REDACTION_TOKEN",
    "Match",
    "RedactionEngine",
    "ScanResult",
    "identify",
    "preview",
    "redact",
    "InvalidInputError",
    "PatternCompilationError",
    "RedactorError",
]
