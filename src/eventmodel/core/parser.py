import logging
from pathlib import Path

from . import ir
from .parser_impl import parse_model

logger = logging.getLogger(__name__)


def parse_model_files(files: list[Path]) -> list[ir.ModelFile]:
    """
    Parse model source files into ModelFile structures.

    Each file is read as raw bytes and parsed on its own; the file stem
    becomes the model name.

    Args:
        files: List of model file paths to parse

    Returns:
        List of ModelFile objects in the order given

    Raises:
        ParseError: On the first file that fails to parse
    """
    models: list[ir.ModelFile] = []

    for f in files:
        data = f.read_bytes()
        logger.debug("Parsing %s (%d bytes)", f, len(data))
        document = parse_model(data, source=str(f))
        models.append(ir.ModelFile(name=f.stem, file=f, document=document))

    return models
