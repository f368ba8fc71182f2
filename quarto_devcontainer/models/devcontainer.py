"""Models for the devcontainer.json document.

Field names follow the Development Container specification so the model
serializes directly into a file the devcontainer tooling understands.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .container import PortAttribute


class VSCodeCustomizations(BaseModel):
    """VS Code specific customizations."""
    extensions: Optional[List[str]] = None


class Customizations(BaseModel):
    """Tool specific customizations."""
    vscode: Optional[VSCodeCustomizations] = None


class Codespaces(BaseModel):
    """GitHub Codespaces settings."""
    openFiles: Optional[List[str]] = None


class DevContainer(BaseModel):
    """A devcontainer.json document."""

    name: str
    image: str
    customizations: Optional[Customizations] = None
    features: Optional[Dict[str, Dict[str, Any]]] = None
    postCreateCommand: Optional[str] = None
    postAttachCommand: Optional[str] = None
    postStartCommand: Optional[str] = None
    forwardPorts: Optional[List[int]] = None
    portsAttributes: Optional[Dict[str, PortAttribute]] = None
    codespaces: Optional[Codespaces] = None
    containerEnv: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out unset fields."""
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        """Serialize to the JSON written to devcontainer.json."""
        return json.dumps(self.to_dict(), indent=2)
