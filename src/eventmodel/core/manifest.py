import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

DEFAULT_EXTENSION = ".evm"


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from eventmodel.toml.

    Contains project metadata and where model files live.
    """

    name: str
    version: str
    model_paths: list[str] = field(default_factory=lambda: ["."])
    extension: str = DEFAULT_EXTENSION


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load an eventmodel.toml manifest.

    Raises:
        ConfigError: If the file is missing or not valid TOML
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Manifest not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid manifest {path}: {e}") from e

    project = data.get("project", {})
    models = data.get("models", {})
    for table, value in (("project", project), ("models", models)):
        if not isinstance(value, dict):
            raise ConfigError(f"Invalid manifest {path}: [{table}] must be a table")

    paths = models.get("paths", ["."])
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigError(f"Invalid manifest {path}: [models].paths must be a list of strings")

    extension = models.get("extension", DEFAULT_EXTENSION)
    if not isinstance(extension, str):
        raise ConfigError(f"Invalid manifest {path}: [models].extension must be a string")
    if not extension.startswith("."):
        extension = f".{extension}"

    return ProjectManifest(
        name=project.get("name", path.parent.name),
        version=project.get("version", "0.0.0"),
        model_paths=paths,
        extension=extension,
    )
