"""
File copy helpers for placing binaries into the install directory
"""

import os
import shutil
from pathlib import Path
from typing import Union

from .constants import DEFAULT_PERMISSIONS, CHUNK_SIZE
from .exceptions import CopyError


def copy_file(src: Union[str, Path], dst: Union[str, Path]) -> int:
    """Copy src over dst atomically and make it executable.

    Returns the number of bytes copied.
    """
    source = Path(src)
    target = Path(dst)

    if not source.is_file():
        raise CopyError(f"{source} is not a regular file")

    temp_target = target.with_name(f".{target.name}.tmp.{os.getpid()}")

    try:
        with open(source, "rb") as fsrc, open(temp_target, "wb") as fdst:
            shutil.copyfileobj(fsrc, fdst, CHUNK_SIZE)
            copied = fdst.tell()

        temp_target.chmod(DEFAULT_PERMISSIONS)

        # Atomic move to final location
        os.replace(temp_target, target)
    except Exception:
        # Clean up temporary file on error
        try:
            temp_target.unlink()
        except OSError:
            pass
        raise

    return copied
