"""Custom exceptions for Quarto DevContainer."""


class DevContainerError(Exception):
    """Base exception for all devcontainer generation errors."""

    pass


class ProjectError(DevContainerError):
    """Exception raised for Quarto project inspection."""

    pass


class ProjectNotFoundError(ProjectError):
    """Exception raised when no Quarto project encloses the directory."""

    pass


class ProjectConfigError(ProjectError):
    """Exception raised when the project configuration cannot be read."""

    pass


class ConfigurationError(DevContainerError):
    """Exception raised when a container cannot be configured for the project."""

    pass
