import enum
import os
import typing as ty


class Marker(str, enum.Enum):
    """Well-known files whose presence identifies a project root."""

    CARGO_LOCK = "Cargo.lock"
    CARGO_TOML = "Cargo.toml"
    PYPROJECT = "pyproject.toml"

    def __str__(self) -> str:
        return self.value


MarkerLike = ty.Union[Marker, str]


def marker_name(marker: MarkerLike) -> str:
    """The exact directory entry name to look for.

    Markers are single entry names, compared case-sensitively. Paths and globs are not supported.
    """
    name = marker.value if isinstance(marker, Marker) else str(marker)
    if not name:
        raise ValueError("Marker name must not be empty")
    if os.sep in name or (os.altsep and os.altsep in name):
        raise ValueError(f"Marker name must be a single file name, not a path: '{name}'")
    return name
