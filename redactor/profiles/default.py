"""
Default Profile - Patterns used when the caller supplies none.

Patterns covered, in application order:
    - Email addresses
    - Phone numbers (optional country code, optional parenthesized area code)
    - Social Security Numbers (3-2-4 digits, optional - or . separators)
    - Credit card numbers (13 to 16 digits, optional space/dash separators)

Order matters: redact() and preview() rewrite the buffer pattern by pattern,
so a later pattern sees the output of the earlier ones.

All patterns are compiled with re.ASCII: only 0-9 count as digits.
"""

import re
from ..base_profile import PatternProfile, CompiledPattern


class DefaultProfile(PatternProfile):
    """Built-in sensitive data patterns."""

    @property
    def name(self) -> str:
        return "default"

    @property
    def description(self) -> str:
        return "Emails, phone numbers, SSNs and credit card numbers"

    def get_patterns(self) -> tuple[CompiledPattern, ...]:
        return (
            CompiledPattern(
                name="email",
                pattern=re.compile(
                    r'[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+',
                    re.ASCII
                ),
                description="Email address"
            ),

            # +44 (555) 123-4567, 555.123.4567, 5551234567 ...
            CompiledPattern(
                name="phone",
                pattern=re.compile(
                    r'(\+\d{1,3}[\s-])?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}',
                    re.ASCII
                ),
                description="Phone number"
            ),

            CompiledPattern(
                name="ssn",
                pattern=re.compile(
                    r'\b\d{3}[-.]?\d{2}[-.]?\d{4}\b',
                    re.ASCII
                ),
                description="US Social Security Number"
            ),

            # Lazy separator so the digit count, not the spacing, bounds the match
            CompiledPattern(
                name="credit_card",
                pattern=re.compile(
                    r'\b(?:\d[ -]*?){13,16}\b',
                    re.ASCII
                ),
                description="Credit card number"
            ),
        )


# Export the default profile
DEFAULT_PROFILE = DefaultProfile()

# Read-only, shared by every call that falls back to the defaults
DEFAULT_PATTERNS = DEFAULT_PROFILE.get_patterns()
