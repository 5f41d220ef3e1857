"""
RedactionEngine - Scans text for sensitive data and rewrites it.

The engine offers three operations over (content, pattern spec):
1. identify: list every match with its offset, length and pattern
2. preview: wrap every match in a highlight marker
3. redact: replace every match with a fixed token

preview and redact apply the patterns one after another, each pattern
rewriting the buffer produced by the previous one. A later pattern can
therefore match text inside a marker or token inserted earlier; callers
rely on this ordering, so it is kept as is.

The engine holds no per-call state and is safe to share between threads.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .compiler import InvalidPatternSink, PatternSpec, compile_patterns
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

REDACTION_TOKEN = "[REDACTED]"
HIGHLIGHT_CLASS = "redact-highlight"
HIGHLIGHT_TEMPLATE = '<mark class="' + HIGHLIGHT_CLASS + '">{}</mark>'


@dataclass(frozen=True)
class Match:
    """One located occurrence of a pattern in the scanned content."""
    text: str
    index: int
    length: int
    pattern: str  # display form of the originating pattern

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "index": self.index,
            "length": self.length,
            "pattern": self.pattern,
        }


@dataclass(frozen=True)
class ScanResult:
    """Matches in pattern order, then by position within each pattern."""
    matches: tuple[Match, ...] = ()

    @property
    def count(self) -> int:
        return len(self.matches)

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": [match.to_dict() for match in self.matches],
            "count": self.count,
        }


def _ensure_text(content: Any) -> str:
    if not isinstance(content, str):
        raise InvalidInputError(content)
    return content


def _highlight(match) -> str:
    return HIGHLIGHT_TEMPLATE.format(match.group(0))


class RedactionEngine:
    """
    Engine for locating, highlighting and redacting sensitive text.

    Example:
        engine = RedactionEngine()

        engine.redact("Contact me at a@b.com or 555-123-4567")
        # "Contact me at [REDACTED] or [REDACTED]"

        engine.identify("SSN 123-45-6789", r"\\d{3}-\\d{2}-\\d{4}").count
        # 1

    Diagnostics:
        Buffer lengths and per-pattern match counts go to ``logger``;
        dropped pattern sources go to ``on_invalid`` (a warning on the
        compiler's logger by default). Neither affects returned values.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        on_invalid: Optional[InvalidPatternSink] = None,
    ):
        """
        Initialize the RedactionEngine.

        Args:
            logger: Diagnostic sink. Defaults to this module's logger.
            on_invalid: Callback for pattern sources dropped at compile time.
        """
        self._logger = logger or logging.getLogger(__name__)
        self._on_invalid = on_invalid

    def compile(self, patterns: PatternSpec = None):
        """Compile a pattern spec with this engine's invalid-pattern sink."""
        return compile_patterns(patterns, on_invalid=self._on_invalid)

    def identify(self, content: str, patterns: PatternSpec = None) -> ScanResult:
        """
        Find every match of every pattern in the content.

        Args:
            content: Text to scan. Not modified.
            patterns: Pattern spec; the defaults when omitted.

        Returns:
            A ScanResult. Offsets refer to the original content; matches of
            the second pattern follow all matches of the first.

        Raises:
            InvalidInputError: If content is not a str.
        """
        content = _ensure_text(content)
        matches = []

        for compiled in self.compile(patterns):
            for found in compiled.pattern.finditer(content):
                matches.append(Match(
                    text=found.group(0),
                    index=found.start(),
                    length=len(found.group(0)),
                    pattern=compiled.display,
                ))

        return ScanResult(tuple(matches))

    def preview(self, content: str, patterns: PatternSpec = None) -> str:
        """
        Wrap every match in ``<mark class="redact-highlight">``.

        Raises:
            InvalidInputError: If content is not a str.
        """
        preview_content = _ensure_text(content)

        for compiled in self.compile(patterns):
            preview_content = compiled.pattern.sub(_highlight, preview_content)

        return preview_content

    def redact(self, content: str, patterns: PatternSpec = None) -> str:
        """
        Replace every match with ``[REDACTED]``.

        Args:
            content: Text to redact. Not modified.
            patterns: Pattern spec; the defaults when omitted.

        Returns:
            The redacted text. Content without matches comes back unchanged.

        Raises:
            InvalidInputError: If content is not a str.

        Example:
            engine.redact("SSN: 123-45-6789")
            # "SSN: [REDACTED]"
        """
        redacted_content = _ensure_text(content)
        log = self._logger

        log.info("Starting redaction process")
        log.debug(f"Original content length: {len(redacted_content)}")

        compiled_patterns = self.compile(patterns)
        log.debug(f"Compiled patterns: {[p.display for p in compiled_patterns]}")

        for compiled in compiled_patterns:
            # Plain token, no group references, so subn needs no escaping
            redacted_content, match_count = compiled.pattern.subn(
                REDACTION_TOKEN, redacted_content
            )
            log.debug(f"Found {match_count} matches for pattern: {compiled.display}")

        log.debug(f"Redacted content length: {len(redacted_content)}")
        return redacted_content


# Shared instance behind the module-level helpers
_default_engine: Optional[RedactionEngine] = None


def get_default_engine() -> RedactionEngine:
    """
    Get the default RedactionEngine instance.

    This is a convenience function for simple use cases.
    For a custom diagnostic sink, instantiate RedactionEngine directly.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = RedactionEngine()
    return _default_engine


def identify(content: str, patterns: PatternSpec = None) -> ScanResult:
    """Module-level shortcut for ``get_default_engine().identify``."""
    return get_default_engine().identify(content, patterns)


def preview(content: str, patterns: PatternSpec = None) -> str:
    """Module-level shortcut for ``get_default_engine().preview``."""
    return get_default_engine().preview(content, patterns)


def redact(content: str, patterns: PatternSpec = None) -> str:
    """Module-level shortcut for ``get_default_engine().redact``."""
    return get_default_engine().redact(content, patterns)
