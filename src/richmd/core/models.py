"""Render option models and hook signatures"""

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)

Node = Mapping[str, Any]
NextRenderer = Callable[[Node], str]
NodeRenderer = Callable[[Node, NextRenderer], str]
EmbedRenderer = Callable[[Node], str]


class RenderOptions(BaseModel):
    """Caller-supplied hooks and frontmatter seed for a single render call.

    Hooks are stored as given and only called while rendering, so a hook
    that is not callable fails inside the node it was meant to render.
    Both snake_case and camelCase option names are accepted.
    """
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    # replaces default embedded-asset output; EmbedRenderer
    asset_renderer: Any = Field(None, validation_alias=AliasChoices("asset_renderer", "assetRenderer"))
    # block and inline embedded entries; EmbedRenderer
    entry_renderer: Any = Field(None, validation_alias=AliasChoices("entry_renderer", "entryRenderer"))
    # kind -> NodeRenderer
    node_renderers: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("node_renderers", "nodeRenderers"),
    )
    frontmatter: Optional[dict[str, Any]] = None        # None disables the header

    @field_validator("node_renderers", mode="before")
    @classmethod
    def _kind_keys(cls, value: Any) -> Any:
        """Key overrides by wire string so enum members and plain strings both match."""
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {str(getattr(k, "value", k)): fn for k, fn in value.items()}
        return value


def coerce_options(options: "RenderOptions | Mapping[str, Any] | None") -> RenderOptions:
    """Return options as a RenderOptions instance.

    Options that cannot be read at all are logged and replaced by the
    defaults, so rendering still produces output.
    """
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    if not isinstance(options, Mapping):
        logger.warning("Ignoring render options of type %s", type(options).__name__)
        return RenderOptions()
    try:
        return RenderOptions.model_validate(dict(options))
    except ValidationError as e:
        logger.warning("Ignoring invalid render options: %s", e)
        return RenderOptions()
