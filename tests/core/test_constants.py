"""Tests for constants.py module."""

from quarto_devcontainer.core.constants import ENVIRONMENT_COMMANDS


def test_requirements_restore_runs_pip_module():
    restore = ENVIRONMENT_COMMANDS["requirements.txt"]["restore"]

    assert restore == "python3 -m pip install -r requirements.txt"
    assert "pip3" not in restore
