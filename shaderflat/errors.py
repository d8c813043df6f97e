"""Errors raised while flattening an include tree.

Every error aborts the run; there is no partial output.
"""


class PreprocessError(Exception):
    """Base class for preprocessing failures. ``path`` is the offending file."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class CyclicInclusionError(PreprocessError):
    def __init__(self, path: str):
        super().__init__(f"Cyclic inclusion: {path}", path)


class IncludeNotFoundError(PreprocessError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Cannot load file: {path}", path)

    def __str__(self) -> str:
        return self.args[0]


class IncludeDepthError(PreprocessError):
    def __init__(self, path: str, max_depth: int):
        super().__init__(
            f"Include depth exceeds {max_depth} while expanding: {path}", path
        )
        self.max_depth = max_depth
