"""
Directory-wide character encoding conversion.

Re-encodes text files under a directory tree in place, e.g. from
windows-1252 to UTF-8, keeping accented characters intact. Typical build and
repository folders are skipped. A `.bak` copy of each file can be kept.

This converter works file by file and is independent of the transpiler.
"""

import codecs
import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from csh2sh.converter import Converter, PathLike
from csh2sh.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ENCODING = "windows-1252"
DEFAULT_TARGET_ENCODING = "utf-8"
DEFAULT_EXTENSIONS = [".java", ".js", ".jsp", ".xhtml", ".html", ".sql"]
EXCLUDED_DIRS = {"target", ".git", ".svn", "node_modules", "build", "out"}


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lowercase and dot-prefix extensions: ["JAVA", ".js"] -> [".java", ".js"]."""
    result = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        result.append(ext)
    return result


def _check_encoding(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise InvalidInputError(f"Unsupported encoding: {name}")


def list_files(root: PathLike, extensions: Iterable[str]) -> List[Path]:
    """Files under root matching one of the extensions, skipping EXCLUDED_DIRS."""
    wanted = tuple(normalize_extensions(extensions))
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
        for filename in sorted(filenames):
            if filename.lower().endswith(wanted):
                found.append(Path(dirpath) / filename)
    return found


def convert_file_encoding(
    path: Path,
    source_encoding: str,
    target_encoding: str,
    backup: bool = True,
    silent: bool = False,
) -> None:
    """
    Re-encode one file in place.

    An existing .bak file is never overwritten, so the first backup always
    holds the original bytes.

    Raises:
        OSError, UnicodeError: If the file cannot be read, decoded or written
    """
    with open(path, "r", encoding=source_encoding, newline="") as f:
        content = f.read()

    if backup:
        backup_path = path.with_name(path.name + ".bak")
        if not backup_path.exists():
            shutil.copyfile(path, backup_path)

    with open(path, "w", encoding=target_encoding, newline="") as f:
        f.write(content)

    if not silent:
        logger.info("Converted: %s", path)


def convert_directory(
    root: PathLike,
    source_encoding: str,
    target_encoding: str,
    extensions: Optional[Iterable[str]] = None,
    backup: bool = True,
    silent: bool = False,
) -> Path:
    """
    Convert every matching file under root from one encoding to another.

    Args:
        root: Directory to process recursively
        source_encoding: Current encoding of the files
        target_encoding: Encoding to write
        extensions: Suffixes to include (defaults to DEFAULT_EXTENSIONS)
        backup: Keep a <file>.bak copy of each original
        silent: Do not log each converted file

    Returns:
        The processed root directory

    Raises:
        InvalidInputError: If root is not a directory or an encoding is unknown
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise InvalidInputError(f"Not a valid directory: {root_path.absolute()}")
    source_encoding = _check_encoding(source_encoding)
    target_encoding = _check_encoding(target_encoding)

    if extensions is None:
        extensions = DEFAULT_EXTENSIONS

    for path in list_files(root_path, extensions):
        try:
            convert_file_encoding(path, source_encoding, target_encoding, backup=backup, silent=silent)
        except (OSError, UnicodeError) as e:
            logger.error("Error: %s -> %s", path, e)

    return root_path


class EncodingConverter(Converter):
    """Converter entry for the registry: windows-1252 -> UTF-8 over a directory."""

    def __init__(
        self,
        source_encoding: str = DEFAULT_SOURCE_ENCODING,
        target_encoding: str = DEFAULT_TARGET_ENCODING,
        extensions: Optional[Iterable[str]] = None,
        backup: bool = True,
        silent: bool = False,
    ):
        self.source_encoding = source_encoding
        self.target_encoding = target_encoding
        self.extensions = list(extensions) if extensions is not None else list(DEFAULT_EXTENSIONS)
        self.backup = backup
        self.silent = silent

    def convert(self, input_path: PathLike) -> Path:
        return convert_directory(
            input_path,
            self.source_encoding,
            self.target_encoding,
            self.extensions,
            backup=self.backup,
            silent=self.silent,
        )


__all__ = [
    "DEFAULT_EXTENSIONS",
    "EXCLUDED_DIRS",
    "EncodingConverter",
    "convert_directory",
    "convert_file_encoding",
    "list_files",
    "normalize_extensions",
]
