"""Flatten #include trees into a single translation unit."""

from .errors import (
    CyclicInclusionError,
    IncludeDepthError,
    IncludeNotFoundError,
    PreprocessError,
)
from .guards import guard_name, wrap_in_guard
from .loader import FileLoader, MappingLoader
from .preprocessor import Options, PreprocessResult, expand, preprocess, preprocess_file
from .resolver import resolve_include
from .session import Inclusion, Session
from .transforms import (
    strip_block_comments,
    strip_comments,
    strip_line_comments,
    strip_once_directive,
)

__version__ = "0.1.0"

__all__ = [
    "CyclicInclusionError",
    "FileLoader",
    "IncludeDepthError",
    "IncludeNotFoundError",
    "Inclusion",
    "MappingLoader",
    "Options",
    "PreprocessError",
    "PreprocessResult",
    "Session",
    "expand",
    "guard_name",
    "preprocess",
    "preprocess_file",
    "resolve_include",
    "strip_block_comments",
    "strip_comments",
    "strip_line_comments",
    "strip_once_directive",
    "wrap_in_guard",
]
