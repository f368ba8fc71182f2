"""Container context and configuration models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core import constants


class Tool(str, Enum):
    """Auxiliary tools installed alongside Quarto."""
    TINYTEX = "tinytex"
    CHROMIUM = "chromium"


class CodeEnvironment(str, Enum):
    """Editor the container is tuned for."""
    VSCODE = "vscode"
    RSTUDIO = "rstudio"
    JUPYTERLAB = "jupyterlab"


class QuartoChannel(str, Enum):
    """Quarto release channel installed in the container."""
    RELEASE = "release"
    PRERELEASE = "prerelease"


class PortAttribute(BaseModel):
    """Attributes of a forwarded port."""
    label: str
    requireLocalPort: bool = True
    onAutoForward: str = "ignore"


class EnvironmentOptions(BaseModel):
    """How a dependency file is restored inside the container."""
    restore: Optional[str] = None
    features: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class ContainerContext(BaseModel):
    """Everything inferred about a project that shapes its container."""
    title: Optional[str] = None
    tools: List[Tool] = Field(default_factory=list)
    code_environment: CodeEnvironment = CodeEnvironment.VSCODE
    engines: List[str] = Field(default_factory=list)
    quarto: QuartoChannel = QuartoChannel.PRERELEASE
    environments: List[str] = Field(default_factory=list)
    open_files: List[str] = Field(default_factory=list)
    env_vars: Dict[str, str] = Field(default_factory=dict)

    def has_tool(self, tool: Tool) -> bool:
        """Check whether a tool is required."""
        return tool in self.tools

    def add_tool(self, tool: Tool) -> None:
        """Require a tool, keeping the list free of duplicates."""
        if tool not in self.tools:
            self.tools.append(tool)


class ContainerDefaults(BaseModel):
    """Images, registries and lookup tables used to build containers."""

    model_config = ConfigDict(frozen=True)

    base_image: str = constants.BASE_CONTAINER_IMAGE
    rstudio_image: str = constants.RSTUDIO_CONTAINER_IMAGE
    default_title: str = constants.DEFAULT_CONTAINER_TITLE
    quarto_channel: QuartoChannel = QuartoChannel(constants.DEFAULT_QUARTO_CHANNEL)
    chromium_hint: str = constants.CHROMIUM_HINT
    environment_commands: Dict[str, EnvironmentOptions] = Field(
        default_factory=lambda: {
            name: EnvironmentOptions(**options)
            for name, options in constants.ENVIRONMENT_COMMANDS.items()
        }
    )
    port_attributes: Dict[str, Dict[str, PortAttribute]] = Field(
        default_factory=lambda: {
            environment: {port: PortAttribute(**attrs) for port, attrs in ports.items()}
            for environment, ports in constants.PORT_ATTRIBUTES.items()
        }
    )


DEFAULT_CONTAINER_DEFAULTS = ContainerDefaults()
