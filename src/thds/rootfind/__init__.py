"""Locate a project's root directory by walking up from the working directory to the nearest marker file."""

from importlib.metadata import PackageNotFoundError, version

from . import config, log  # noqa: F401
from .errors import (  # noqa: F401
    ListingError,
    ProjectRootError,
    ProjectRootNotFoundError,
    WorkingDirectoryError,
)
from .markers import Marker, marker_name  # noqa: F401
from .project_root import DEFAULT_MARKER, ancestors, find_project_root, project_path  # noqa: F401

try:
    __version__ = version("thds.rootfind")
except PackageNotFoundError:
    __version__ = ""
