"""Application configuration: settings schema and richmd.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "richmd.yaml"


class Settings(BaseModel):
    app_name:      str = "richmd"
    output_dir:    str = Field(default="dist", description="Directory for rendered MD/HTML files")
    output_format: str = Field(default="md", pattern="^(md|html)$", description="md or html")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt preset used for html output")
    frontmatter:   bool = Field(default=False, description="Prepend a frontmatter header to md output")
    frontmatter_fields: dict[str, Any] = Field(default_factory=dict, description="Seed frontmatter values")
    words_per_minute:   int = Field(default=200, ge=1, description="Reading speed for reading-time estimates")
    plain_text_separator: str = Field(default="\n", description="Separator between blocks in plain text")
    minify:        bool = Field(default=False, description="Reduce embedded payloads before rendering")
    keep_entry_fields: Optional[list[str]] = Field(default=None, description="Entry fields kept by minify")
    keep_asset_fields: Optional[list[str]] = Field(default=None, description="Asset fields kept by minify")
    remove_empty:  bool = Field(default=False, description="Drop empty paragraphs before rendering")
    strip_marks:   list[str] = Field(default_factory=list, description="Mark kinds removed before rendering")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from richmd.yaml, then RICHMD_<FIELD> env vars, then non-None CLI overrides.

    Env values are read as YAML so lists, mappings and booleans can be set
    from the environment.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"RICHMD_{name.upper()}"):
            try:
                data[name] = yaml.safe_load(val)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid RICHMD_{name.upper()}: {e}") from e

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
