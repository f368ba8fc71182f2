"""Tests for CLI helper functions."""

import pytest

from quarto_devcontainer.cli.helpers import (
    format_context_table,
    format_devcontainer_table,
    get_project_context,
)
from quarto_devcontainer.models.container import CodeEnvironment, ContainerContext, Tool
from quarto_devcontainer.models.devcontainer import DevContainer


class TestFormatContextTable:
    """Test suite for format_context_table."""

    def test_all_rows(self):
        ctx = ContainerContext(
            title="Paper",
            tools=[Tool.TINYTEX, Tool.CHROMIUM],
            engines=["knitr", "jupyter"],
            code_environment=CodeEnvironment.RSTUDIO,
            environments=["renv.lock", "requirements.txt"],
        )

        lines = format_context_table(ctx).splitlines()

        assert len(lines) == 6
        assert lines[0].split() == ["Name:", "Paper"]
        assert lines[1].split() == ["Quarto:", "prerelease"]
        assert lines[2].split() == ["Tools:", "tinytex,chromium"]
        assert lines[3].split() == ["Engines:", "knitr,jupyter"]
        assert lines[4].split() == ["IDE:", "rstudio"]
        assert lines[5].split() == ["Environment:", "renv.lock,requirements.txt"]

    def test_optional_rows_omitted(self):
        table = format_context_table(ContainerContext())

        assert "Name:" not in table
        assert "Environment:" not in table
        assert "vscode" in table


def test_format_devcontainer_table():
    devcontainer = DevContainer(
        name="Paper",
        image="ubuntu",
        postCreateCommand='Rscript -e "renv::restore();"',
        forwardPorts=[8787],
    )

    table = format_devcontainer_table(devcontainer)

    assert "Docker Image:" in table
    assert "renv::restore" in table
    assert "8787" in table


class TestGetProjectContext:
    """Test suite for get_project_context."""

    def test_scans_project(self, make_project):
        root = make_project(files={"index.qmd": ""})

        project = get_project_context(root)

        assert project.input_files == ["index.qmd"]

    def test_outside_project_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            get_project_context(tmp_path)

        assert exc_info.value.code == 1
        assert "Quarto project" in capsys.readouterr().err
