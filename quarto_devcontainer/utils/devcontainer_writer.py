"""Locate and write devcontainer.json files."""

import logging
from pathlib import Path
from typing import Optional

from ..core.constants import DEVCONTAINER_DIR_NAME, DEVCONTAINER_FILE_NAME
from ..models.devcontainer import DevContainer

logger = logging.getLogger(__name__)


def devcontainer_path(kind: str = "directory", name: Optional[str] = None) -> Path:
    """Return the devcontainer.json location relative to the project root.

    Args:
        kind: 'file' for a root .devcontainer.json, 'directory' for
            .devcontainer/devcontainer.json, or 'subdirectory' for a named
            container under .devcontainer/
        name: Container name, required for 'subdirectory'

    Raises:
        ValueError: If a subdirectory is requested without a name
    """
    if kind == "file":
        return Path(f".{DEVCONTAINER_FILE_NAME}")
    if kind == "subdirectory":
        if not name:
            raise ValueError(
                "In order to create a subdirectory devcontainer, you must provide a devcontainer name"
            )
        return Path(DEVCONTAINER_DIR_NAME) / name / DEVCONTAINER_FILE_NAME
    return Path(DEVCONTAINER_DIR_NAME) / DEVCONTAINER_FILE_NAME


class DevContainerWriter:
    """Writes devcontainer documents into a project."""

    def __init__(self, project_root: Path, kind: str = "directory", name: Optional[str] = None):
        """Initialize writer."""
        self.project_root = project_root
        self.path = project_root / devcontainer_path(kind, name)

    def exists(self) -> bool:
        """Check whether a devcontainer already exists at the target path."""
        return self.path.exists()

    def write(self, devcontainer: DevContainer) -> Path:
        """Write the devcontainer, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(devcontainer.to_json())
        logger.debug("Wrote devcontainer to %s", self.path)
        return self.path
