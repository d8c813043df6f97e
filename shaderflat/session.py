"""State shared by every level of one top-level preprocessing run."""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class Inclusion:
    """One ``#include`` occurrence, recorded once its target has been spliced
    (a nested include is therefore logged before the one that contains it).
    """

    path: str
    includer: str
    depth: int
    spliced: bool
    size: int


@dataclass
class Session:
    """Cycle and once-only bookkeeping for a single run.

    ``active_stack`` holds the files currently being expanded (the ancestors
    of the recursion point). ``ever_included`` holds every path met as an
    include target so far; it only grows.
    """

    active_stack: set[str] = field(default_factory=set)
    ever_included: set[str] = field(default_factory=set)
    inclusions: list[Inclusion] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.active_stack)

    def is_active(self, path: str) -> bool:
        return path in self.active_stack

    @contextmanager
    def expanding(self, path: str) -> Iterator[None]:
        """Mark ``path`` active for the duration of the block."""
        if path in self.active_stack:
            raise RuntimeError(f"{path} is already being expanded")
        self.active_stack.add(path)
        try:
            yield
        finally:
            self.active_stack.discard(path)

    def mark_included(self, path: str) -> bool:
        """Record ``path`` as an include target; return whether it was seen before."""
        if path in self.ever_included:
            return True
        self.ever_included.add(path)
        return False

    def record(
        self,
        path: str,
        includer: str,
        depth: int,
        spliced: bool,
        size: int,
    ) -> Inclusion:
        inclusion = Inclusion(path, includer, depth, spliced, size)
        self.inclusions.append(inclusion)
        return inclusion

    def included_paths(self, spliced: Optional[bool] = None) -> list[str]:
        """Distinct include targets in first-seen order, optionally filtered."""
        seen: dict[str, None] = {}
        for inclusion in self.inclusions:
            if spliced is None or inclusion.spliced == spliced:
                seen.setdefault(inclusion.path, None)
        return list(seen)
