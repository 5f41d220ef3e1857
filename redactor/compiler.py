"""
Pattern compiler - turns a pattern spec into an ordered list of CompiledPatterns.

A pattern spec is one of:
    - None / "" / []               -> the default patterns
    - "foo, /bar\\d+/g"             -> comma separated sources
    - ["foo", re.compile("bar")]   -> one source per element
    - re.compile("foo")            -> a single precompiled pattern

A supplied spec replaces the defaults, it is never merged with them. Sources
that fail to compile are reported and dropped; the rest still compile.
"""

import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence, Union

from .base_profile import CompiledPattern
from .exceptions import PatternCompilationError
from .profiles import DEFAULT_PATTERNS

logger = logging.getLogger(__name__)

PatternSource = Union[str, Pattern[str], CompiledPattern]
PatternSpec = Optional[Union[str, Pattern[str], Sequence[PatternSource]]]
InvalidPatternSink = Callable[[PatternCompilationError], None]

# Strips "/.../flags" literal syntax; flags are dropped, all patterns are global
_LITERAL_DELIMITERS = re.compile(r'^/|/[gimuy]*\Z')


class SpecKind(enum.Enum):
    EMPTY = "empty"
    SINGLE_SOURCE = "single_source"
    SOURCE_LIST = "source_list"
    PRECOMPILED = "precompiled"


@dataclass(frozen=True)
class ResolvedSpec:
    """A pattern spec normalized to its variant and ordered sources."""
    kind: SpecKind
    sources: tuple = ()


def resolve_spec(spec: PatternSpec) -> ResolvedSpec:
    """Classify a pattern spec and split it into individual sources."""
    if spec is None:
        return ResolvedSpec(SpecKind.EMPTY)
    if isinstance(spec, str):
        if not spec:
            return ResolvedSpec(SpecKind.EMPTY)
        return ResolvedSpec(
            SpecKind.SINGLE_SOURCE,
            tuple(piece.strip() for piece in spec.split(",")),
        )
    if isinstance(spec, (re.Pattern, CompiledPattern)):
        return ResolvedSpec(SpecKind.PRECOMPILED, (spec,))
    if isinstance(spec, (bytes, bytearray)):
        # Iterating would yield ints; treat the whole thing as one bad source
        return ResolvedSpec(SpecKind.SOURCE_LIST, (spec,))

    sources = tuple(spec)
    if not sources:
        return ResolvedSpec(SpecKind.EMPTY)
    return ResolvedSpec(SpecKind.SOURCE_LIST, sources)


def compile_pattern(source: PatternSource) -> CompiledPattern:
    """
    Compile a single pattern source.

    Args:
        source: A regex string (optionally written as ``/body/flags``), a
                compiled ``re.Pattern`` or a CompiledPattern.

    Returns:
        The CompiledPattern. Precompiled inputs are passed through unchanged.

    Raises:
        PatternCompilationError: If the source is not a usable text pattern.
    """
    if isinstance(source, CompiledPattern):
        return source
    if isinstance(source, re.Pattern):
        if not isinstance(source.pattern, str):
            raise PatternCompilationError(source, "bytes patterns cannot scan text")
        return CompiledPattern(name="custom", pattern=source)
    if not isinstance(source, str):
        raise PatternCompilationError(
            source, f"expected str or compiled pattern, got {type(source).__name__}"
        )

    body = _LITERAL_DELIMITERS.sub("", source)
    if not body:
        raise PatternCompilationError(source, "empty pattern")

    try:
        return CompiledPattern(name="custom", pattern=re.compile(body))
    except re.error as e:
        raise PatternCompilationError(source, str(e)) from e


def _log_invalid(error: PatternCompilationError) -> None:
    logger.warning(f"Dropping pattern: {error}")


def compile_patterns(
    spec: PatternSpec = None,
    on_invalid: Optional[InvalidPatternSink] = None,
) -> tuple[CompiledPattern, ...]:
    """
    Compile a pattern spec into the ordered patterns the engine applies.

    Args:
        spec: See module docstring. Never mutated.
        on_invalid: Receives a PatternCompilationError for every dropped
                    source. Defaults to logging a warning.

    Returns:
        The default patterns for an empty spec, otherwise the compiled
        sources in spec order (possibly empty).
    """
    resolved = resolve_spec(spec)
    if resolved.kind is SpecKind.EMPTY:
        return DEFAULT_PATTERNS

    report = on_invalid or _log_invalid
    compiled = []
    for source in resolved.sources:
        try:
            compiled.append(compile_pattern(source))
        except PatternCompilationError as e:
            report(e)

    return tuple(compiled)
