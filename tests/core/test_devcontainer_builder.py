"""Tests for devcontainer_builder.py module."""

import json

import pytest

from quarto_devcontainer.core.constants import QUARTO_FEATURE, RSTUDIO_CONTAINER_IMAGE
from quarto_devcontainer.core.context_resolver import ContainerContextResolver
from quarto_devcontainer.core.devcontainer_builder import DevContainerBuilder, validate_context
from quarto_devcontainer.models.container import (
    CodeEnvironment,
    ContainerContext,
    ContainerDefaults,
    QuartoChannel,
)
from quarto_devcontainer.models.devcontainer import DevContainer
from quarto_devcontainer.services.exceptions import ConfigurationError


class TestValidateContext:
    """Test suite for validate_context."""

    def test_empty_environments_fail(self):
        with pytest.raises(ConfigurationError, match="dependencies file"):
            validate_context(ContainerContext())

    def test_environments_pass(self):
        validate_context(ContainerContext(environments=["renv.lock"]))


class TestDevContainerBuilder:
    """Test suite for DevContainerBuilder class."""

    def test_build_rejects_invalid_context(self):
        """Building without dependency files fails."""
        with pytest.raises(ConfigurationError):
            DevContainerBuilder().build(ContainerContext(title="Paper"))

    def test_jupyterlab_container(self, make_context):
        """A notebook project forwards the Jupyter port."""
        project = make_context(
            engines=["jupyter"],
            inputs={"a.ipynb": "{}", "b.ipynb": "{}"},
            manifests=["requirements.txt"],
        )
        ctx = ContainerContextResolver().resolve(project, QuartoChannel.PRERELEASE)

        devcontainer = DevContainerBuilder().build(ctx)

        assert devcontainer.postAttachCommand == (
            "python3 -m pip install jupyterlab-quarto && python3 -m jupyterlab"
        )
        assert devcontainer.forwardPorts == [8888]
        assert list(devcontainer.portsAttributes) == ["8888"]
        assert devcontainer.postCreateCommand == "python3 -m pip install -r requirements.txt"
        assert devcontainer.postStartCommand is None

    def test_rstudio_container(self, make_context):
        """A knitr project with PDF output uses the RStudio image."""
        project = make_context(
            engines=["knitr"],
            inputs={"a.qmd": ""},
            formats={"a.qmd": {"pdf": "pdf"}},
            manifests=["renv.lock"],
        )
        ctx = ContainerContextResolver().resolve(project, QuartoChannel.PRERELEASE)

        devcontainer = DevContainerBuilder().build(ctx)

        assert devcontainer.image == RSTUDIO_CONTAINER_IMAGE
        assert devcontainer.postCreateCommand == 'Rscript -e "renv::restore();"'
        assert devcontainer.forwardPorts == [8787]
        assert devcontainer.features[QUARTO_FEATURE]["installTinyTex"] is True

    def test_default_name(self):
        """Untitled contexts use the default container name."""
        devcontainer = DevContainerBuilder().build(ContainerContext(environments=["renv.lock"]))

        assert devcontainer.name == "Default Container"

    def test_injected_default_name(self):
        defaults = ContainerDefaults(default_title="Workspace")

        devcontainer = DevContainerBuilder(defaults).build(ContainerContext(environments=["renv.lock"]))

        assert devcontainer.name == "Workspace"

    def test_vscode_container_omits_unset_fields(self):
        """Unset commands, ports, files and env vars are left out of the JSON."""
        ctx = ContainerContext(
            title="Site",
            code_environment=CodeEnvironment.VSCODE,
            environments=["requirements.txt"],
        )

        data = DevContainerBuilder().build(ctx).to_dict()

        assert set(data) == {"name", "image", "features", "postCreateCommand"}

    def test_open_files_and_env_vars(self):
        ctx = ContainerContext(
            environments=["renv.lock"],
            open_files=["paper.qmd"],
            env_vars={"QUARTO_PRINT_STACK": "true"},
        )

        data = DevContainerBuilder().build(ctx).to_dict()

        assert data["codespaces"] == {"openFiles": ["paper.qmd"]}
        assert data["containerEnv"] == {"QUARTO_PRINT_STACK": "true"}

    def test_json_round_trip(self):
        """Serializing and parsing a built container yields the same document."""
        ctx = ContainerContext(
            title="Paper",
            engines=["knitr", "jupyter"],
            code_environment=CodeEnvironment.RSTUDIO,
            environments=["renv.lock", "environment.yml"],
            open_files=["index.qmd"],
            env_vars={"A": "1"},
        )
        devcontainer = DevContainerBuilder().build(ctx)

        parsed = DevContainer.model_validate(json.loads(devcontainer.to_json()))

        assert parsed.to_dict() == devcontainer.to_dict()
        assert parsed.portsAttributes["8787"].label == "Rstudio"
