#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdcompose/utils/io_utils.py
"""I/O utilities for writing generated source to its destination.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from mdcompose.exceptions import OutputWriteError

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def write_content(content: str, output: OutputTarget) -> None:
    """Write text to a file path or a text/binary file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8, creating parent directories.

    Raises
    ------
    OutputWriteError
        If a path cannot be written
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Could not write {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["OutputTarget", "write_content"]
