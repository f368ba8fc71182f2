import json

import pytest
from click.testing import CliRunner

from quarto_devcontainer.models.project import ProjectContext


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path):
    """Creates a Quarto project on disk from a config string and a file mapping."""
    def _make(config="project:\n  type: default\n", files=None):
        (tmp_path / "_quarto.yml").write_text(config)
        for name, content in (files or {}).items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path
    return _make


@pytest.fixture
def make_context(tmp_path):
    """Builds a ProjectContext directly, writing each input's contents to disk."""
    def _make(engines=None, inputs=None, formats=None, manifests=None, **kwargs):
        inputs = inputs or {}
        for name, content in inputs.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        for manifest in manifests or []:
            (tmp_path / manifest).write_text("")

        formats = formats or {}
        return ProjectContext(
            dir=tmp_path,
            engines=engines or [],
            input_files=list(inputs),
            format_resolver=lambda input_file: formats.get(input_file, {"html": "html"}),
            **kwargs
        )
    return _make


@pytest.fixture
def notebook():
    """Returns minimal notebook JSON with the given cell sources."""
    def _notebook(*sources, cell_type="markdown"):
        return json.dumps({
            "cells": [{"cell_type": cell_type, "metadata": {}, "source": source} for source in sources],
            "metadata": {},
            "nbformat": 4,
            "nbformat_minor": 5,
        })
    return _notebook
