"""
Pattern Profiles Package

Available profiles:
    - default: emails, phone numbers, SSNs, credit card numbers

To add a new profile:
    1. Create a new module (e.g., hr.py)
    2. Subclass PatternProfile
    3. Implement get_patterns() returning CompiledPatterns in application order
    4. Pass list(profile.get_patterns()) as the pattern spec of any engine call
"""

from .default import DefaultProfile, DEFAULT_PROFILE, DEFAULT_PATTERNS

__all__ = ["DefaultProfile", "DEFAULT_PROFILE", "DEFAULT_PATTERNS"]
