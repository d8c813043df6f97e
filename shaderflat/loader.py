"""Sources of file text, keyed by canonical include path.

A loader is any callable ``load(path) -> str`` that raises
:class:`~shaderflat.errors.IncludeNotFoundError` when ``path`` cannot be read.
"""

import logging
import posixpath
from pathlib import Path
from typing import Callable, Mapping, Union

from .errors import IncludeNotFoundError

logger = logging.getLogger(__name__)

Loader = Callable[[str], str]
PathLike = Union[str, Path]


class FileLoader:
    """Read include targets from disk.

    Relative paths are read under ``working_dir``; rooted paths (from
    ``<...>`` includes) are read under ``system_root``.
    """

    def __init__(
        self,
        working_dir: PathLike = ".",
        system_root: PathLike = "/",
        encoding: str = "utf-8",
    ):
        self.working_dir = Path(working_dir)
        self.system_root = Path(system_root)
        self.encoding = encoding

    def locate(self, path: str) -> Path:
        if path.startswith("/"):
            # Rooted paths never leave system_root.
            return self.system_root / posixpath.normpath("/" + path.lstrip("/")).lstrip("/")
        return self.working_dir / path

    def __call__(self, path: str) -> str:
        location = self.locate(path)
        logger.debug("Loading %s from %s", path, location)
        try:
            # newline="" keeps the file's own line endings.
            with open(location, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IncludeNotFoundError(path) from e


class MappingLoader:
    """Serve file text from an in-memory mapping of canonical path to text."""

    def __init__(self, files: Mapping[str, str]):
        self.files = dict(files)
        self.reads: list[str] = []

    def __call__(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise IncludeNotFoundError(path) from None
