"""Saved creature templates: one pretty-printed JSON file per creature."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import settings
from .config import CreatureConfig

_UNSAFE_CHARS = re.compile(r"[^a-z0-9_]+")


def _library(directory: Optional[Path] = None) -> Path:
    folder = Path(settings.TEMPLATE_DIR if directory is None else directory)
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def _slugify(name: str) -> str:
    slug = _UNSAFE_CHARS.sub("", name.strip().lower().replace(" ", "_"))
    return slug or "template"


def _existing(name: str, directory: Optional[Path]) -> Path:
    path = template_path(name, directory=directory)
    if not path.is_file():
        raise FileNotFoundError(f"Template '{name}' not found at {path}")
    return path


def template_path(name: str, *, directory: Optional[Path] = None) -> Path:
    return _library(directory) / f"{_slugify(name)}.json"


def list_templates(*, directory: Optional[Path] = None) -> List[str]:
    return sorted(path.stem for path in _library(directory).glob("*.json"))


def save_template(name: str, config: CreatureConfig, *, directory: Optional[Path] = None) -> Path:
    """Validate ``config`` and write it under the slug of ``name``, replacing any previous file."""

    config.validate()
    path = template_path(name, directory=directory)
    payload = {"name": name}
    payload.update(config.to_dict())
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def read_template_file(path: Path) -> CreatureConfig:
    """Parse and validate a template file from anywhere on disk."""

    text = Path(path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"Invalid JSON in template file {path}") from error
    if not isinstance(payload, dict):
        raise ValueError(f"Template file {path} must define an object")
    return CreatureConfig.from_dict(payload)


def load_template(name: str, *, directory: Optional[Path] = None) -> CreatureConfig:
    return read_template_file(_existing(name, directory))


def import_templates(files: Iterable[Path], *, directory: Optional[Path] = None) -> List[Path]:
    """Copy external template files into the library, named after their file stem."""

    return [
        save_template(Path(source).stem, read_template_file(Path(source)), directory=directory)
        for source in files
    ]


def delete_template(name: str, *, directory: Optional[Path] = None) -> None:
    _existing(name, directory).unlink()


def rename_template(old_name: str, new_name: str, *, directory: Optional[Path] = None) -> Path:
    if not new_name.strip():
        raise ValueError("New template name cannot be empty")
    source = _existing(old_name, directory)
    target = template_path(new_name, directory=directory)
    if target == source:
        return save_template(new_name, read_template_file(source), directory=directory)
    if target.exists():
        raise FileExistsError(f"Template '{new_name}' already exists")
    save_template(new_name, read_template_file(source), directory=directory)
    source.unlink()
    return target
