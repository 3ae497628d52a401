"""Palette file loading.

Decodes a palette document from TOML, YAML or JSON into the raw Palette
model and runs structural validation on it.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml
from pydantic import ValidationError

from .errors import PaletteLoadError
from .schema import Palette
from .validator import validate_palette

logger = logging.getLogger(__name__)


def _load_toml_file(file_path: Path) -> Dict[str, Any]:
    """Load TOML file safely."""
    try:
        with open(file_path, 'rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PaletteLoadError(file_path, f"invalid TOML: {e}") from e


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load YAML file safely."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise PaletteLoadError(file_path, f"invalid YAML: {e}") from e


def _load_json_file(file_path: Path) -> Dict[str, Any]:
    """Load JSON file safely."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise PaletteLoadError(file_path, f"invalid JSON: {e}") from e


_DECODERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    '.toml': _load_toml_file,
    '.yaml': _load_yaml_file,
    '.yml': _load_yaml_file,
    '.json': _load_json_file,
}


def read_palette_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and decode a palette file into a plain dictionary.

    Args:
        path: Palette file; the suffix selects the decoder

    Returns:
        Decoded document

    Raises:
        PaletteLoadError: If the file cannot be read or decoded
    """
    file_path = Path(path)
    decoder = _DECODERS.get(file_path.suffix.lower())
    if decoder is None:
        raise PaletteLoadError(file_path, f"unsupported file format: {file_path.suffix or '<none>'}")

    try:
        data = decoder(file_path)
    except OSError as e:
        raise PaletteLoadError(file_path, f"cannot read file: {e}") from e

    if not isinstance(data, dict):
        raise PaletteLoadError(file_path, "document root must be a table/mapping")

    logger.debug(f"Decoded palette document {file_path}")
    return data


def parse_palette(data: Dict[str, Any], source: Any = "<palette>") -> Palette:
    """Build a validated Palette from an already decoded document.

    Raises:
        PaletteLoadError: If the document does not have the palette shape
        InvalidHexColor: If a literal slot is malformed
        MalformedPath: If a reference slot has no ``.`` separator
    """
    try:
        palette = Palette.model_validate(data)
    except ValidationError as e:
        raise PaletteLoadError(source, f"invalid palette document: {e}") from e

    validate_palette(palette)
    return palette


def load_palette(path: Union[str, Path]) -> Palette:
    """Read, decode and validate a palette file."""
    return parse_palette(read_palette_document(path), source=Path(path))
