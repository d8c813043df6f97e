"""Flatten a tree of ``#include``-connected files into one translation unit.

Usage:
    result = preprocess("a.glsl", text, FileLoader("shaders"))
    print(result.text)

Each include directive is replaced by the fully expanded text of its target.
Files declaring ``#pragma once`` contribute their text at the first
inclusion only and are wrapped in a synthesized include guard.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional

from .errors import CyclicInclusionError, IncludeDepthError
from .guards import DEFAULT_MAX_LENGTH, DEFAULT_PREFIX, guard_name, wrap_in_guard
from .loader import FileLoader, Loader
from .resolver import resolve_include
from .session import Session
from .transforms import strip_comments, strip_once_directive

logger = logging.getLogger(__name__)

INCLUDE_DIRECTIVE_RE = re.compile(r'#include\s*("[^"]+"|<[^>]+>)')
IDENTIFIER_START_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class Options:
    relative_to_includer: bool = False
    guard_prefix: str = DEFAULT_PREFIX
    max_guard_length: int = DEFAULT_MAX_LENGTH
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if not IDENTIFIER_START_RE.match(self.guard_prefix):
            raise ValueError(f"Invalid guard prefix: {self.guard_prefix!r}")
        if self.max_guard_length < 0:
            raise ValueError("max_guard_length must be non-negative")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")


@dataclass(frozen=True)
class PreprocessResult:
    text: str
    declares_once: bool


def expand(
    session: Session,
    path: str,
    text: str,
    load: Loader,
    options: Optional[Options] = None,
) -> PreprocessResult:
    """Expand ``text`` (the raw contents of ``path``) recursively.

    Raises CyclicInclusionError when a file without ``#pragma once`` is
    reached while it is its own ancestor, and IncludeNotFoundError when a
    target cannot be loaded.
    """
    options = options or Options()
    text, had_once = strip_once_directive(text)

    if session.is_active(path):
        if had_once:
            logger.debug("Skipping re-entry of once-only file %s", path)
            return PreprocessResult("", True)
        raise CyclicInclusionError(path)

    if session.depth >= options.max_depth:
        raise IncludeDepthError(path, options.max_depth)

    with session.expanding(path):
        logger.debug("Expanding %s (depth %d)", path, session.depth)
        text = strip_comments(text)

        pos = 0
        while True:
            m = INCLUDE_DIRECTIVE_RE.search(text, pos)
            if not m:
                break
            target = resolve_include(
                m.group(1), includer=path, relative_to_includer=options.relative_to_includer
            )
            target_text = load(target)
            seen_before = session.mark_included(target)

            try:
                included = expand(session, target, target_text, load, options)
            except RecursionError:
                # The interpreter stack ran out before max_depth was reached.
                raise IncludeDepthError(target, options.max_depth) from None
            deduplicated = included.declares_once and seen_before
            if deduplicated:
                logger.debug("Dropping repeated inclusion of %s in %s", target, path)
                replacement = ""
            else:
                replacement = included.text
            session.record(
                target,
                includer=path,
                depth=session.depth,
                spliced=not deduplicated,
                size=len(replacement),
            )

            # Resume after the replacement; expanded text is never rescanned.
            text = text[: m.start()] + replacement + text[m.end():]
            pos = m.start() + len(replacement)

    if had_once:
        name = guard_name(path, options.guard_prefix, options.max_guard_length)
        logger.debug("Guarding %s as %s", path, name)
        text = wrap_in_guard(text, name)

    return PreprocessResult(text, had_once)


def preprocess(
    path: str,
    text: str,
    load: Loader,
    options: Optional[Options] = None,
    session: Optional[Session] = None,
) -> PreprocessResult:
    """Flatten the root file ``path`` whose contents are ``text``."""
    if session is None:
        session = Session()
    return expand(session, path, text, load, options)


def preprocess_file(
    path: str,
    loader: Optional[Loader] = None,
    options: Optional[Options] = None,
) -> tuple[PreprocessResult, Session]:
    """Load ``path`` through ``loader`` and flatten it with a fresh session."""
    if loader is None:
        loader = FileLoader()
    path = str(PurePosixPath(path))
    session = Session()
    result = preprocess(path, loader(path), loader, options, session)
    return result, session
