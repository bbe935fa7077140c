"""Core eventmodel functionality: syntax tree, parser, project manifest and file discovery."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    EventModelError,
    ParseError,
)
from .fileset import discover_model_files
from .manifest import ProjectManifest, load_manifest
from .parser import parse_model_files
from .parser_impl import parse_model

__all__ = [
    "ir",
    "EventModelError",
    "ParseError",
    "ConfigError",
    "ErrorContext",
    "ProjectManifest",
    "load_manifest",
    "discover_model_files",
    "parse_model",
    "parse_model_files",
]
