"""Models for Quarto DevContainer."""

from .container import (
    CodeEnvironment,
    ContainerContext,
    ContainerDefaults,
    DEFAULT_CONTAINER_DEFAULTS,
    EnvironmentOptions,
    PortAttribute,
    QuartoChannel,
    Tool,
)
from .devcontainer import Codespaces, Customizations, DevContainer, VSCodeCustomizations
from .project import ProjectContext

__all__ = [
    'CodeEnvironment',
    'ContainerContext',
    'ContainerDefaults',
    'DEFAULT_CONTAINER_DEFAULTS',
    'EnvironmentOptions',
    'PortAttribute',
    'QuartoChannel',
    'Tool',
    'Codespaces',
    'Customizations',
    'DevContainer',
    'VSCodeCustomizations',
    'ProjectContext',
]
