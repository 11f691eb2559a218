"""Content-addressed path layout shared by asset stores."""

from pathlib import PurePosixPath

HASH_DIR_LENGTH = 10


def normalize_filename(filename: str) -> str:
    """Return a relative POSIX filename, rejecting paths that escape the store."""
    path = PurePosixPath(filename.replace("\\", "/").lstrip("/"))
    if not path.parts or ".." in path.parts:
        raise ValueError(f"Invalid asset filename: {filename!r}")
    return str(path)


def asset_path(filename: str, hash: str, variant: str = "") -> str:
    """Map a tuple to its relative location.

    ``css/site.css`` with hash ``abcdef0123...`` becomes
    ``css/abcdef0123/site.css``; a variant is appended to the stem,
    e.g. ``css/abcdef0123/site__min.css``.
    """
    path = PurePosixPath(normalize_filename(filename))
    name = path.name
    if variant:
        name = f"{path.stem}__{variant}{path.suffix}"
    return str(path.parent / hash[:HASH_DIR_LENGTH] / name)
