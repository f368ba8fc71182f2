"""Assemble devcontainer.json documents from a container context."""

import logging
from typing import Optional

from .command_composer import CommandComposer
from .feature_mapper import FeatureMapper
from ..models.container import ContainerContext, ContainerDefaults, DEFAULT_CONTAINER_DEFAULTS
from ..models.devcontainer import Codespaces, DevContainer
from ..services.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def validate_context(ctx: ContainerContext) -> None:
    """Ensure the context can produce a usable container.

    Raises:
        ConfigurationError: If no dependency file was found
    """
    if not ctx.environments:
        raise ConfigurationError(
            "Unable to determine dependencies for this project. "
            "Please ensure that a dependencies file is present."
        )


class DevContainerBuilder:
    """Builds DevContainer documents."""

    def __init__(self, defaults: Optional[ContainerDefaults] = None):
        """Initialize builder."""
        self.defaults = defaults or DEFAULT_CONTAINER_DEFAULTS
        self.feature_mapper = FeatureMapper(self.defaults)
        self.command_composer = CommandComposer(self.defaults)

    def build(self, ctx: ContainerContext) -> DevContainer:
        """Validate the context and assemble the devcontainer document."""
        validate_context(ctx)

        devcontainer = DevContainer(
            name=ctx.title or self.defaults.default_title,
            image=self.feature_mapper.image(ctx),
            features=self.feature_mapper.features(ctx),
        )

        devcontainer.postCreateCommand = self.command_composer.post_create(ctx)
        devcontainer.postAttachCommand = self.command_composer.post_attach(ctx)
        devcontainer.postStartCommand = self.command_composer.post_start(ctx)

        ports = self.command_composer.port_attributes(ctx)
        if ports:
            devcontainer.forwardPorts = [int(port) for port in ports]
            devcontainer.portsAttributes = ports

        if ctx.open_files:
            devcontainer.codespaces = Codespaces(openFiles=list(ctx.open_files))

        if ctx.env_vars:
            devcontainer.containerEnv = dict(ctx.env_vars)

        logger.debug("Built devcontainer '%s' from image %s", devcontainer.name, devcontainer.image)
        return devcontainer
