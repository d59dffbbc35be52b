"""Find the root of a project: the nearest directory, starting from the current working
directory and walking up through its parents, that directly contains a marker file such
as Cargo.lock or pyproject.toml.

Apart from one stat of an explicit start path, only directory listings are read. A
directory that cannot be listed aborts the search rather than being skipped. The returned
root contained the marker at the moment it was listed; nothing guarantees it still does
by the time the caller uses it.
"""

import os
import stat
import typing as ty
from pathlib import Path

from . import config
from .errors import ListingError, ProjectRootNotFoundError, WorkingDirectoryError
from .log import getLogger, logger_context
from .markers import Marker, MarkerLike, marker_name

DEFAULT_MARKER = config.item("thds.rootfind.marker", Marker.CARGO_LOCK.value, parse=marker_name)

logger = getLogger(__name__)


def _start_dir(start: ty.Optional[ty.Union[str, os.PathLike]]) -> Path:
    try:
        if start is None:
            return Path(os.getcwd())
        start_path = Path(os.path.abspath(start))
    except OSError as err:
        raise WorkingDirectoryError(f"Unable to determine the current working directory: {err}") from err

    try:
        start_stat = os.stat(start_path)
    except FileNotFoundError:
        return start_path  # reported by the first listing
    except OSError as err:
        raise ListingError(start_path, str(err)) from err

    if not stat.S_ISDIR(start_stat.st_mode):
        # e.g. a module's __file__
        return start_path.parent
    return start_path


def ancestors(start: ty.Union[str, os.PathLike]) -> ty.Iterator[Path]:
    """Yields `start` (made absolute), then each of its parents up to and including the filesystem root."""
    start_path = Path(os.path.abspath(start))
    yield start_path
    yield from start_path.parents


def _contains_marker(directory: Path, marker: str) -> bool:
    try:
        names = os.listdir(directory)
    except OSError as err:
        raise ListingError(directory, str(err)) from err
    return marker in names


def find_project_root(
    marker: ty.Optional[MarkerLike] = None,
    start: ty.Optional[ty.Union[str, os.PathLike]] = None,
) -> Path:
    """Return the nearest of `start` (default: the current working directory) and its
    parents that directly contains an entry named exactly `marker`.

    The marker defaults to the `thds.rootfind.marker` config item, which is Cargo.lock
    unless configured otherwise.

    Raises:
        WorkingDirectoryError: the current working directory is unavailable.
        ListingError: a directory along the way could not be listed.
        ProjectRootNotFoundError: no directory up to the filesystem root contains the marker.
    """
    name = marker_name(marker) if marker is not None else DEFAULT_MARKER()
    start_dir = _start_dir(start)

    with logger_context(marker=name):
        for directory in ancestors(start_dir):
            logger.debug("Checking for project root marker", directory=directory)
            if _contains_marker(directory, name):
                logger.debug("Found project root", root=directory)
                return directory

    raise ProjectRootNotFoundError(name, start_dir)


def project_path(
    *parts: ty.Union[str, os.PathLike],
    marker: ty.Optional[MarkerLike] = None,
    start: ty.Optional[ty.Union[str, os.PathLike]] = None,
) -> Path:
    """A path relative to the project root, e.g. `project_path("tests", "fixtures")`.

    The joined path is not checked for existence.
    """
    return find_project_root(marker, start).joinpath(*parts)
