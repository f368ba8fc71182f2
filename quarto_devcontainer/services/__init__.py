"""Services for inspecting Quarto projects."""

from .exceptions import (
    ConfigurationError,
    DevContainerError,
    ProjectConfigError,
    ProjectError,
    ProjectNotFoundError,
)
from .project_service import ProjectService

__all__ = [
    'ConfigurationError',
    'DevContainerError',
    'ProjectConfigError',
    'ProjectError',
    'ProjectNotFoundError',
    'ProjectService',
]
