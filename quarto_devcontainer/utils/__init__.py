"""Utility modules for Quarto DevContainer."""

from .devcontainer_writer import DevContainerWriter, devcontainer_path

__all__ = ['DevContainerWriter', 'devcontainer_path']
