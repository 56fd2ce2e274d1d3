""" Whole-file helpers used by the file variants of the encryption API. """

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def read_file_bytes(file_path: PathLike) -> bytes:

    # Reads the entire file; OSError subclasses propagate unchanged.

    with open(Path(file_path).expanduser(), 'rb') as f:
        return f.read()


def write_file_bytes(file_path: PathLike, data: bytes) -> int:

    # Writes data, replacing any existing file. Parent directories are created.

    destination = Path(file_path).expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    with open(destination, 'wb') as f:
        f.write(data)
    return len(data)
