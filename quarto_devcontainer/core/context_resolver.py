"""Infer the container context from a Quarto project."""

import logging
import re
from collections import Counter
from pathlib import Path
from typing import Optional

from .constants import IPYNB_EXTENSION, KNITR_ENGINE, PDF_WRITERS, QMD_EXTENSION
from ..models.container import (
    CodeEnvironment,
    ContainerContext,
    ContainerDefaults,
    DEFAULT_CONTAINER_DEFAULTS,
    QuartoChannel,
    Tool,
)
from ..models.project import ProjectContext

logger = logging.getLogger(__name__)


def is_pdf_output(writer: str) -> bool:
    """Check whether a pandoc writer produces PDF through LaTeX."""
    return writer in PDF_WRITERS


class ContainerContextResolver:
    """Resolves the editor, tools and dependency files a project needs."""

    def __init__(self, defaults: Optional[ContainerDefaults] = None):
        """Initialize resolver."""
        self.defaults = defaults or DEFAULT_CONTAINER_DEFAULTS
        self.chromium_hint = re.compile(
            self.defaults.chromium_hint, re.IGNORECASE | re.MULTILINE
        )

    def resolve(self, project: ProjectContext, quarto: QuartoChannel) -> ContainerContext:
        """Build the container context for a project.

        Args:
            project: The scanned Quarto project
            quarto: Release channel of Quarto to install

        Returns:
            The resolved ContainerContext
        """
        ctx = ContainerContext(
            engines=list(project.engines),
            quarto=quarto,
        )

        ctx.code_environment = self._resolve_code_environment(project, ctx)
        ctx.title = project.title

        tinytex, chromium = self._resolve_tools(project)
        if tinytex:
            ctx.add_tool(Tool.TINYTEX)
        if chromium:
            ctx.add_tool(Tool.CHROMIUM)

        for env_file in self.defaults.environment_commands:
            if (project.dir / env_file).exists():
                ctx.environments.append(env_file)

        logger.debug(
            "Resolved container context: ide=%s tools=%s environments=%s",
            ctx.code_environment.value,
            [tool.value for tool in ctx.tools],
            ctx.environments,
        )
        return ctx

    def _resolve_code_environment(self, project: ProjectContext,
                                  ctx: ContainerContext) -> CodeEnvironment:
        if KNITR_ENGINE in project.engines:
            qmd_tool = CodeEnvironment.RSTUDIO
        else:
            qmd_tool = CodeEnvironment.VSCODE
        ipynb_tool = CodeEnvironment.JUPYTERLAB

        # Manuscripts are driven by their main article
        if project.is_manuscript and project.manuscript_article:
            article = project.manuscript_article
            ctx.open_files.insert(0, article)
            if Path(article).suffix == QMD_EXTENSION:
                return qmd_tool
            return ipynb_tool

        exts = Counter(Path(input_file).suffix for input_file in project.input_files)
        qmd_count = exts[QMD_EXTENSION]
        ipynb_count = exts[IPYNB_EXTENSION]
        logger.debug("Found %d qmd and %d ipynb inputs", qmd_count, ipynb_count)
        if qmd_count >= ipynb_count:
            return qmd_tool
        return ipynb_tool

    def _resolve_tools(self, project: ProjectContext) -> tuple[bool, bool]:
        tinytex = False
        chromium = False

        for input_file in project.input_files:
            if not tinytex:
                formats = project.render_formats(input_file)
                tinytex = any(is_pdf_output(writer) for writer in formats.values())

            if not chromium:
                chromium = self._has_chromium_hint(project.dir / input_file)

            if tinytex and chromium:
                break

        return tinytex, chromium

    def _has_chromium_hint(self, path: Path) -> bool:
        try:
            contents = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Unable to read %s: %s", path, e)
            return False
        return self.chromium_hint.search(contents) is not None
