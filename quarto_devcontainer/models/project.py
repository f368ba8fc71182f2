"""Quarto project model."""

from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import MANUSCRIPT_TYPE


class ProjectContext(BaseModel):
    """What a project scan knows about a Quarto project."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dir: Path
    engines: List[str] = Field(default_factory=list)
    input_files: List[str] = Field(default_factory=list)
    title: Optional[str] = None
    project_type: str = "default"
    manuscript_article: Optional[str] = None
    format_resolver: Optional[Callable[[str], Dict[str, str]]] = Field(default=None, exclude=True)

    @property
    def is_manuscript(self) -> bool:
        """Whether the project is a manuscript driven by one article."""
        return self.project_type == MANUSCRIPT_TYPE

    def render_formats(self, input_file: str) -> Dict[str, str]:
        """Map each format the input renders to onto its pandoc writer."""
        if self.format_resolver is None:
            return {}
        return self.format_resolver(input_file)
