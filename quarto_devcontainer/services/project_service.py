"""Project service for scanning Quarto projects."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ProjectConfigError, ProjectNotFoundError
from ..core.constants import (
    IGNORED_DIRS,
    IGNORED_INPUTS,
    INPUT_EXTENSIONS,
    IPYNB_EXTENSION,
    JUPYTER_ENGINE,
    KNITR_ENGINE,
    MANUSCRIPT_ARTICLE_DEFAULTS,
    MANUSCRIPT_TYPE,
    MARKDOWN_ENGINE,
    PROJECT_CONFIG_FILES,
)
from ..models.project import ProjectContext

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A\s*---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(\r?\n|\Z)", re.DOTALL)
KNITR_CHUNK_PATTERN = re.compile(r"^[ \t]*```+[ \t]*\{r[ \t,}]", re.MULTILINE)
JUPYTER_CHUNK_PATTERN = re.compile(r"^[ \t]*```+[ \t]*\{(python|julia)[ \t,}]", re.MULTILINE)

DEFAULT_FORMAT = "html"


def find_project_root(path: Path) -> Optional[Path]:
    """Find the nearest directory at or above path holding a Quarto config."""
    path = path.resolve()
    for candidate in [path, *path.parents]:
        if any((candidate / name).is_file() for name in PROJECT_CONFIG_FILES):
            return candidate
    return None


def format_writer(name: str, options: Any = None) -> str:
    """Resolve a format name such as 'acm-pdf' or 'html+toc' to its pandoc writer."""
    if isinstance(options, dict) and isinstance(options.get("to"), str):
        return options["to"]
    base = name.split("+")[0]
    if "-" in base:
        base = base.rsplit("-", 1)[1]
    return base


def normalize_formats(value: Any) -> Dict[str, Any]:
    """Normalize a 'format' value (string, list or mapping) into a mapping."""
    if value is None:
        return {}
    if isinstance(value, str):
        return {value: "default"}
    if isinstance(value, list):
        formats: Dict[str, Any] = {}
        for item in value:
            formats.update(normalize_formats(item))
        return formats
    if isinstance(value, dict):
        return dict(value)
    return {}


def read_front_matter(path: Path) -> Dict[str, Any]:
    """Read the YAML front matter of a document or notebook.

    Returns an empty mapping when the file has no front matter or it is not
    valid YAML.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Unable to read %s: %s", path, e)
        return {}

    if path.suffix == IPYNB_EXTENSION:
        text = _notebook_front_matter_source(text)

    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.debug("Invalid front matter in %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _notebook_front_matter_source(text: str) -> str:
    try:
        notebook = json.loads(text)
    except ValueError:
        return ""
    cells = notebook.get("cells") if isinstance(notebook, dict) else None
    if not (isinstance(cells, list) and cells and isinstance(cells[0], dict)):
        return ""
    source = cells[0].get("source", "")
    if isinstance(source, list):
        source = "".join(part for part in source if isinstance(part, str))
    return source if isinstance(source, str) else ""


class ProjectService:
    """Service for reading Quarto projects from disk."""

    def __init__(self, path: Path):
        """Initialize project service.

        Args:
            path: Directory inside the project

        Raises:
            ProjectNotFoundError: If no Quarto project encloses path
        """
        root = find_project_root(path)
        if root is None:
            raise ProjectNotFoundError(
                "The use devcontainer command expects to be run in a Quarto project"
            )
        self.root = root
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        for name in PROJECT_CONFIG_FILES:
            config_file = self.root / name
            if config_file.is_file():
                try:
                    data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
                except yaml.YAMLError as e:
                    raise ProjectConfigError(f"Invalid project configuration {config_file}: {e}") from e
                if data is None:
                    return {}
                if not isinstance(data, dict):
                    raise ProjectConfigError(
                        f"Invalid project configuration {config_file}: expected a mapping"
                    )
                return data
        return {}

    @property
    def project_config(self) -> Dict[str, Any]:
        project = self.config.get("project")
        return project if isinstance(project, dict) else {}

    def scan(self) -> ProjectContext:
        """Scan the project for inputs, engines and configuration."""
        inputs = self.input_files()
        engines = self.engines(inputs)
        project_type = str(self.project_config.get("type", "default"))

        article = None
        if project_type == MANUSCRIPT_TYPE:
            article = self.manuscript_article()

        title = self.project_config.get("title")
        context = ProjectContext(
            dir=self.root,
            engines=engines,
            input_files=inputs,
            title=str(title) if title is not None else None,
            project_type=project_type,
            manuscript_article=article,
            format_resolver=self.render_formats,
        )
        logger.debug(
            "Scanned project %s: type=%s inputs=%d engines=%s",
            self.root, project_type, len(inputs), engines,
        )
        return context

    def input_files(self) -> List[str]:
        """List the project's input files relative to the root."""
        render = self.project_config.get("render")
        if isinstance(render, list) and render:
            return self._render_list_inputs(render)

        output_dir = self.project_config.get("output-dir")
        output_path = (self.root / output_dir).resolve() if output_dir else None

        inputs = []
        for path in self.root.rglob("*"):
            if not path.is_file() or path.suffix not in INPUT_EXTENSIONS:
                continue
            relative = path.relative_to(self.root)
            if any(part.startswith((".", "_")) for part in relative.parts):
                continue
            if any(part in IGNORED_DIRS for part in relative.parts[:-1]):
                continue
            if path.name in IGNORED_INPUTS:
                continue
            if output_path and output_path in path.resolve().parents:
                continue
            inputs.append(relative.as_posix())
        return sorted(inputs)

    def _render_list_inputs(self, render: List[Any]) -> List[str]:
        included = set()
        excluded = set()
        for entry in render:
            pattern = str(entry)
            target = excluded if pattern.startswith("!") else included
            for path in self.root.glob(pattern.lstrip("!")):
                if path.is_file() and path.suffix in INPUT_EXTENSIONS:
                    target.add(path.relative_to(self.root).as_posix())
        return sorted(included - excluded)

    def engines(self, inputs: List[str]) -> List[str]:
        """Determine the computation engines used by the inputs, in first-seen order."""
        engines: List[str] = []

        declared = self.config.get("engines", self.config.get("engine"))
        if isinstance(declared, str):
            declared = [declared]
        if isinstance(declared, list):
            for engine in declared:
                if isinstance(engine, str) and engine not in engines:
                    engines.append(engine)

        for input_file in inputs:
            engine = self.file_engine(self.root / input_file)
            if engine not in engines:
                engines.append(engine)
        return engines

    def file_engine(self, path: Path) -> str:
        """Determine the engine that executes a single input."""
        front_matter = read_front_matter(path)
        engine = front_matter.get("engine")
        if isinstance(engine, str):
            return engine
        if "jupyter" in front_matter:
            return JUPYTER_ENGINE
        if "knitr" in front_matter:
            return KNITR_ENGINE

        if path.suffix == IPYNB_EXTENSION:
            return JUPYTER_ENGINE
        if path.suffix == ".Rmd":
            return KNITR_ENGINE

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return MARKDOWN_ENGINE
        if KNITR_CHUNK_PATTERN.search(text):
            return KNITR_ENGINE
        if JUPYTER_CHUNK_PATTERN.search(text):
            return JUPYTER_ENGINE
        return MARKDOWN_ENGINE

    def manuscript_article(self) -> str:
        """Return the main article of a manuscript project."""
        manuscript = self.config.get(MANUSCRIPT_TYPE)
        if isinstance(manuscript, dict) and manuscript.get("article"):
            return str(manuscript["article"])
        for candidate in MANUSCRIPT_ARTICLE_DEFAULTS:
            if (self.root / candidate).exists():
                return candidate
        return MANUSCRIPT_ARTICLE_DEFAULTS[0]

    def render_formats(self, input_file: str) -> Dict[str, str]:
        """Map each format an input renders to onto its pandoc writer."""
        formats = normalize_formats(self.config.get("format"))
        document = normalize_formats(read_front_matter(self.root / input_file).get("format"))
        formats.update(document)
        if not formats:
            formats = {DEFAULT_FORMAT: "default"}
        return {name: format_writer(name, options) for name, options in formats.items()}
