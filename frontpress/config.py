from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

CONFIG_FILENAME = "frontpress.yml"


class ErrorPolicy(str, Enum):
    """What a batch load does when a single content file fails."""

    HALT = "halt"
    SKIP = "skip"


class Config(BaseModel):
    project_name: str = Field(default="frontpress project")
    content_dir: Path = Field(default=Path("content"))
    suffixes: list[str] = Field(
        default_factory=lambda: [".md", ".markdown"],
        description="File suffixes treated as content items.",
    )
    on_error: ErrorPolicy = Field(
        default=ErrorPolicy.HALT,
        description="Stop at the first broken file ('halt') or report and continue ('skip').",
    )
    build_future: bool = Field(
        default=False,
        description="Include items dated in the future when listing publishable content.",
    )

    @field_validator("content_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("suffixes")
    def _normalize_suffixes(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for suffix in value:
            text = suffix.strip().lower()
            if not text:
                continue
            if not text.startswith("."):
                text = f".{text}"
            normalized.append(text)
        if not normalized:
            raise ValueError("At least one content suffix is required.")
        return normalized


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    The ``path`` argument may point to a file (e.g., ``/site/frontpress.yml``) or
    a directory containing that file. All relative paths inside the configuration
    are interpreted relative to the directory holding the config file.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    base_dir: Path
    if candidate.is_dir():
        # Allow pointing at a project directory without a config file; use defaults.
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            data = _read_yaml(config_file)
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        data = _read_yaml(candidate)
        base_dir = candidate.parent.resolve()

    try:
        cfg = Config(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc

    if not cfg.content_dir.is_absolute():
        cfg.content_dir = (base_dir / cfg.content_dir).resolve()
    return cfg


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at {path}, received {type(data).__name__}")
    return data
