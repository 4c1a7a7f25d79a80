"""Detail-pane and header formatting for the selected entity.

This is the one place entity metadata is rendered; ``detail_lines`` dispatches
over every entity kind and rejects anything else.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .ansi import clip_ansi_line
from .entity import Container, Entity, Filter, Leaf, SourceFile
from .rendering import format_size
from .ui_theme import DEFAULT_THEME, UITheme

ATTRIBUTE_VALUE_MAX_CHARS = 60


def _field(key: str, value: object, theme: UITheme) -> str:
    return f"{theme.detail_key}{key:<11}{theme.reset}{theme.detail_value}{value}{theme.reset}"


def _format_shape(shape: Sequence[int]) -> str:
    if not shape:
        return "scalar"
    return "(" + ", ".join(str(dim) for dim in shape) + ")"


def _format_filters(filters: Iterable[Filter]) -> str:
    parts: list[str] = []
    for stage in filters:
        if stage.options:
            parts.append(f"{stage.name}({', '.join(str(opt) for opt in stage.options)})")
        else:
            parts.append(stage.name)
    return ", ".join(parts) if parts else "none"


def _format_attribute_value(value: object) -> str:
    text = repr(value) if isinstance(value, (bytes, str)) else str(value)
    text = text.replace("\n", " ")
    if len(text) > ATTRIBUTE_VALUE_MAX_CHARS:
        text = text[: ATTRIBUTE_VALUE_MAX_CHARS - 1] + "…"
    return text


def _attribute_lines(attributes: dict[str, object], theme: UITheme) -> list[str]:
    if not attributes:
        return []
    lines = ["", f"{theme.detail_heading}Attributes{theme.reset}"]
    for key in sorted(attributes):
        lines.append(
            f"  {theme.detail_key}{key}{theme.reset}{theme.detail_dim} = {theme.reset}"
            f"{theme.detail_value}{_format_attribute_value(attributes[key])}{theme.reset}"
        )
    return lines


def entity_path_text(roots: Sequence[Entity], path: Sequence[int]) -> str:
    """Return the slash-separated HDF5 name for ``path`` (best effort)."""
    names: list[str] = []
    candidates: Sequence[Entity] = roots
    for index in path:
        if index < 0 or index >= len(candidates):
            break
        entity = candidates[index]
        names.append(entity.name)
        candidates = entity.children if isinstance(entity, Container) else ()
    return "/" + "/".join(names)


def detail_lines(entity: Entity, location: str = "", theme: UITheme | None = None) -> list[str]:
    """Return detail-pane lines describing ``entity``."""
    if not isinstance(entity, (Container, Leaf)):
        raise TypeError(f"unknown entity type: {type(entity).__name__}")
    active_theme = theme or DEFAULT_THEME
    lines = [f"{active_theme.detail_heading}{entity.name}{active_theme.reset}"]
    if location:
        lines.append(f"{active_theme.detail_dim}{location}{active_theme.reset}")
    lines.append("")

    if isinstance(entity, Container):
        lines.append(_field("Kind", "group", active_theme))
        lines.append(_field("Link", entity.link.value, active_theme))
        lines.append(_field("Children", len(entity.children), active_theme))
    else:
        lines.append(_field("Kind", "dataset", active_theme))
        lines.append(_field("Link", entity.link.value, active_theme))
        lines.append(_field("Shape", _format_shape(entity.shape), active_theme))
        lines.append(_field("Type", entity.dtype or "unknown", active_theme))
        lines.append(_field("Size", format_size(entity.size), active_theme))
        lines.append(_field("Layout", entity.layout.value, active_theme))
        if entity.chunks is not None:
            lines.append(_field("Chunks", _format_shape(entity.chunks), active_theme))
        lines.append(_field("Filters", _format_filters(entity.filters), active_theme))

    lines.extend(_attribute_lines(entity.attributes, active_theme))
    return lines


def header_line(source: SourceFile, width: int, theme: UITheme | None = None) -> str:
    """Return the top bar: file name on the left, file size on the right."""
    active_theme = theme or DEFAULT_THEME
    size_text = format_size(source.size)
    name_cols = max(0, width - len(size_text) - 1)
    name = source.name
    if len(name) > name_cols:
        name = name[: max(0, name_cols - 1)] + "…" if name_cols > 0 else ""
    gap = " " * max(1, width - len(name) - len(size_text))
    line = (
        f"{active_theme.header_name}{name}{active_theme.reset}"
        f"{gap}{active_theme.header_size}{size_text}{active_theme.reset}"
    )
    return clip_ansi_line(line, width)
