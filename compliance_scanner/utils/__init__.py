"""Utility helpers for the scanner."""

from .fileio import read_json_file, read_text_file, read_toml_file, read_yaml_file, write_text_file
from .files import iter_project_files
from .manifest import dependency_names, load_manifest

__all__ = [
    "read_yaml_file",
    "read_json_file",
    "read_toml_file",
    "read_text_file",
    "write_text_file",
    "iter_project_files",
    "load_manifest",
    "dependency_names",
]
