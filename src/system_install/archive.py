"""
Tar archive extraction
"""

import os
import tarfile
from pathlib import Path, PurePosixPath
from typing import BinaryIO, List, Optional, Union

from .constants import CHUNK_SIZE
from .exceptions import ExtractionError


def _member_target(dest_dir: Path, name: str, strip_components: int) -> Optional[Path]:
    """Map an archive member name to its destination, or None when fully stripped"""
    member_path = PurePosixPath(name)
    if member_path.is_absolute():
        raise ExtractionError(f"Refusing to extract absolute path: {name}")

    parts = [p for p in member_path.parts if p not in ("", ".")]
    if ".." in parts:
        raise ExtractionError(f"Refusing to extract path outside destination: {name}")

    parts = parts[strip_components:]
    if not parts:
        return None

    target = dest_dir.joinpath(*parts)
    if os.path.commonpath([str(dest_dir), str(target)]) != str(dest_dir):
        raise ExtractionError(f"Refusing to extract path outside destination: {name}")
    return target


def untar(fileobj: BinaryIO, dest_dir: Union[str, Path], gzip: bool = True,
          strip_components: int = 0) -> List[Path]:
    """Extract a tar stream into dest_dir.

    Only directories and regular files are written; links and special
    files are skipped. Leading path components are dropped from every
    member name according to ``strip_components``.
    """
    dest = Path(dest_dir).resolve()
    mode = "r|gz" if gzip else "r|"
    extracted = []

    try:
        with tarfile.open(fileobj=fileobj, mode=mode) as tar:
            for member in tar:
                target = _member_target(dest, member.name, strip_components)
                if target is None:
                    continue

                if member.isdir():
                    target.mkdir(parents=True, exist_ok=True)
                elif member.isfile():
                    target.parent.mkdir(parents=True, exist_ok=True)
                    source = tar.extractfile(member)
                    with source, open(target, "wb") as out:
                        for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
                            out.write(chunk)
                    target.chmod(member.mode & 0o777)
                    extracted.append(target)
    except tarfile.TarError as e:
        raise ExtractionError(f"Failed to extract archive: {e}") from e

    return extracted
