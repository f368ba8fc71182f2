"""Lifecycle commands and port forwarding for devcontainers."""

from typing import Dict, Optional

from .constants import COMMAND_SEPARATOR, JUPYTERLAB_ATTACH_COMMANDS, RSTUDIO_ATTACH_COMMANDS
from ..models.container import (
    CodeEnvironment,
    ContainerContext,
    ContainerDefaults,
    DEFAULT_CONTAINER_DEFAULTS,
    PortAttribute,
)


class CommandComposer:
    """Composes the commands a container runs as it is created and attached."""

    def __init__(self, defaults: Optional[ContainerDefaults] = None):
        """Initialize composer."""
        self.defaults = defaults or DEFAULT_CONTAINER_DEFAULTS

    def post_create(self, ctx: ContainerContext) -> Optional[str]:
        """Restore every detected dependency file."""
        commands = []
        for env_file in ctx.environments:
            options = self.defaults.environment_commands.get(env_file)
            if options is not None and options.restore:
                commands.append(options.restore)

        if commands:
            return COMMAND_SEPARATOR.join(commands)
        return None

    def post_attach(self, ctx: ContainerContext) -> Optional[str]:
        """Start the editor server, if the code environment has one."""
        if ctx.code_environment == CodeEnvironment.RSTUDIO:
            commands = RSTUDIO_ATTACH_COMMANDS
        elif ctx.code_environment == CodeEnvironment.JUPYTERLAB:
            commands = JUPYTERLAB_ATTACH_COMMANDS
        else:
            return None
        return COMMAND_SEPARATOR.join(commands)

    def post_start(self, ctx: ContainerContext) -> Optional[str]:
        """Nothing runs on start yet."""
        return None

    def port_attributes(self, ctx: ContainerContext) -> Optional[Dict[str, PortAttribute]]:
        """Return the ports to forward, keyed by port number."""
        ports = self.defaults.port_attributes.get(ctx.code_environment.value)
        if not ports:
            return None
        return {port: attrs.model_copy() for port, attrs in ports.items()}
