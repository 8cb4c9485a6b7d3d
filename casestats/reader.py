import bz2
from collections.abc import Iterator, Sequence
import gzip
import io
import logging
from pathlib import Path
import sys
from typing import BinaryIO, TextIO

from casestats.errors import InputError


logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


def open_input(path: Path, encoding: str) -> TextIO:
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding=encoding)
    if path.suffix == ".bz2":
        return bz2.open(path, "rt", encoding=encoding)
    return path.open("r", encoding=encoding)


def read_stdin(stream: BinaryIO, encoding: str) -> Iterator[str]:
    text = io.TextIOWrapper(stream, encoding=encoding)
    try:
        yield from text
    except UnicodeDecodeError as exc:
        raise InputError(STDIN_NAME, str(exc)) from exc
    finally:
        # Leave the underlying stream open for the caller.
        text.detach()


def read_lines(paths: Sequence[Path], *, encoding: str = "utf-8", stdin: BinaryIO | None = None) -> Iterator[str]:
    """Yield lines from every input in order, or from stdin when no paths are given."""
    if not paths:
        yield from read_stdin(stdin if stdin is not None else sys.stdin.buffer, encoding)
        return

    for path in paths:
        if not path.is_file():
            raise InputError(str(path), "file not found")

        logger.debug("reading input", extra={"path": str(path)})
        try:
            with open_input(path, encoding) as infile:
                yield from infile
        except (OSError, EOFError, UnicodeDecodeError) as exc:
            raise InputError(str(path), str(exc)) from exc
