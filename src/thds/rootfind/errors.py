from pathlib import Path


class ProjectRootError(Exception):
    """Base class for every failure to determine a project root."""


class WorkingDirectoryError(ProjectRootError):
    """The current working directory could not be determined."""


class ListingError(ProjectRootError):
    """An ancestor directory could not be listed, so the search was abandoned."""

    def __init__(self, directory: Path, reason: str):
        super().__init__(f"Unable to list '{directory}' while searching for the project root: {reason}")
        self.directory = directory


class ProjectRootNotFoundError(ProjectRootError, LookupError):
    def __init__(self, marker: str, start: Path):
        super().__init__(f"No directory containing '{marker}' found in '{start}' or any of its parents")
        self.marker = marker
        self.start = start
