"""Snapshot encoding/decoding helpers for BarChartConfig payloads.

Payloads are plain JSON/YAML-safe dictionaries. Colors and modifiers are
stored by name, glyph sets and formatters by registry key.
"""

from __future__ import annotations

from typing import Any, cast

from cellgrid.block import Block, Borders, BorderType
from cellgrid.style import Color, Modifier, Style
from cellgrid.symbols import BAR_SETS, BarSet, bar_set_name

from .builder import build_bar_chart_config, config_from_groups
from .formatters import CompactFormatter, OffsetFormatter, ValueFormatter, formatter_from_name
from .schema import BarChartConfig

SNAPSHOT_VERSION = "bar_chart_config_v1"

_SIDES: tuple[tuple[str, Borders], ...] = (
    ("top", Borders.TOP),
    ("right", Borders.RIGHT),
    ("bottom", Borders.BOTTOM),
    ("left", Borders.LEFT),
)


def encode_bar_chart_config(config: BarChartConfig) -> dict[str, Any]:
    """Encode a BarChartConfig into a JSON-serializable dictionary.

    Args:
        config: BarChartConfig to encode.

    Returns:
        Dict payload accepted by `decode_bar_chart_config`.

    Raises:
        ValueError: When the config uses a function formatter, which has no
            serializable form.
    """

    payload: dict[str, Any] = {
        "version": SNAPSHOT_VERSION,
        "groups": [list(group) for group in config.groups],
        "labels": list(config.labels),
        "bar_styles": [encode_style(style) for style in config.bar_styles],
        "value_styles": [encode_style(style) for style in config.value_styles],
        "label_style": encode_style(config.label_style),
        "style": encode_style(config.style),
        "bar_width": config.bar_width,
        "bar_gap": config.bar_gap,
        "group_gap": config.group_gap,
        "bar_set": _encode_bar_set(config.bar_set),
        "value_formatter": _encode_formatter(config.value_formatter),
        "max_value": config.max_value,
    }
    if config.block is not None:
        payload["block"] = _encode_block(config.block)
    return payload


def decode_bar_chart_config(payload: dict[str, Any]) -> BarChartConfig:
    """Decode a BarChartConfig from a payload dictionary.

    Data may be given per group (`groups`) or per series (`series`).

    Args:
        payload: Payload previously produced by `encode_bar_chart_config`, or
            a hand-written chart definition.

    Returns:
        Validated BarChartConfig.

    Raises:
        ValueError: When fields are missing or invalid (ChartConfigError for
            validation failures).
    """

    if "groups" in payload and "series" in payload:
        raise ValueError("Chart payload must define either 'groups' or 'series', not both.")

    options: dict[str, Any] = {
        "labels": [str(label) for label in payload.get("labels") or ()],
        "bar_styles": [decode_style(raw) for raw in payload.get("bar_styles") or ()],
        "value_styles": [decode_style(raw) for raw in payload.get("value_styles") or ()],
        "label_style": decode_style(payload.get("label_style")),
        "style": decode_style(payload.get("style")),
        "bar_width": _parse_int(payload.get("bar_width"), field="bar_width", default=1),
        "bar_gap": _parse_int(payload.get("bar_gap"), field="bar_gap", default=1),
        "group_gap": _parse_int(payload.get("group_gap"), field="group_gap", default=1),
        "bar_set": _decode_bar_set(payload.get("bar_set")),
        "value_formatter": _decode_formatter(payload.get("value_formatter")),
        "max_value": _parse_optional_int(payload.get("max_value"), field="max_value"),
        "block": _decode_block(payload.get("block")),
    }

    if "series" in payload:
        series = [_parse_values(raw, field=f"series[{idx}]") for idx, raw in enumerate(payload["series"] or ())]
        return build_bar_chart_config(series=series, **options)
    groups = [_parse_values(raw, field=f"groups[{idx}]") for idx, raw in enumerate(payload.get("groups") or ())]
    return config_from_groups(groups, **options)


def encode_style(style: Style) -> dict[str, Any]:
    """Encode a Style by color and modifier names."""

    payload: dict[str, Any] = {}
    if style.fg is not None:
        payload["fg"] = style.fg.name
    if style.bg is not None:
        payload["bg"] = style.bg.name
    if style.add_modifier:
        payload["modifiers"] = _modifier_names(style.add_modifier)
    if style.sub_modifier:
        payload["remove_modifiers"] = _modifier_names(style.sub_modifier)
    return payload


def decode_style(raw: object) -> Style:
    """Decode a Style payload; None or an empty mapping is the default style.

    Raises:
        ValueError: On unknown color or modifier names.
    """

    if raw is None:
        return Style()
    if not isinstance(raw, dict):
        raise ValueError(f"Style payload must be a mapping, got {raw!r}.")
    data = cast(dict[str, Any], raw)
    return Style(
        fg=_parse_color(data.get("fg")),
        bg=_parse_color(data.get("bg")),
        add_modifier=_parse_modifiers(data.get("modifiers")),
        sub_modifier=_parse_modifiers(data.get("remove_modifiers")),
    )


def _modifier_names(modifier: Modifier) -> list[str]:
    return [member.name.lower() for member in Modifier if member.name and member.value and member in modifier]


def _parse_color(value: object) -> Color | None:
    if value is None or value == "":
        return None
    try:
        return Color[str(value).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown color: {value!r}. Expected one of {[c.name for c in Color]}.") from None


def _parse_modifiers(value: object) -> Modifier:
    if value is None:
        return Modifier.NONE
    names = [value] if isinstance(value, str) else list(cast(list[object], value))
    result = Modifier.NONE
    for name in names:
        try:
            result |= Modifier[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown text modifier: {name!r}.") from None
    return result


def _encode_bar_set(bar_set: BarSet) -> str | list[str]:
    """Encode a bar set by registry name, or as its nine glyphs."""

    name = bar_set_name(bar_set)
    if name is not None:
        return name
    return list(bar_set.levels())


def _decode_bar_set(value: object) -> BarSet:
    if value is None:
        return BAR_SETS["nine_levels"]
    if isinstance(value, str):
        try:
            return BAR_SETS[value]
        except KeyError:
            raise ValueError(f"Unknown bar set: {value!r}. Expected one of {sorted(BAR_SETS)}.") from None
    glyphs = [str(glyph) for glyph in cast(list[object], value)]
    if len(glyphs) != 9:
        raise ValueError(f"A custom bar set needs 9 glyphs (empty to full), got {len(glyphs)}.")
    return BarSet(
        empty=glyphs[0],
        one_eighth=glyphs[1],
        one_quarter=glyphs[2],
        three_eighths=glyphs[3],
        half=glyphs[4],
        five_eighths=glyphs[5],
        three_quarters=glyphs[6],
        seven_eighths=glyphs[7],
        full=glyphs[8],
    )


def _encode_formatter(formatter: ValueFormatter) -> str | dict[str, Any]:
    if isinstance(formatter, OffsetFormatter):
        return {"kind": formatter.key, "offset": formatter.offset}
    if isinstance(formatter, CompactFormatter):
        return {"kind": formatter.key, "precision": formatter.precision}
    if formatter.key == "custom":
        raise ValueError("Function value formatters cannot be encoded; use a named formatter.")
    return formatter.key


def _decode_formatter(value: object) -> ValueFormatter:
    if value is None:
        return formatter_from_name("decimal")
    if isinstance(value, str):
        return formatter_from_name(value)
    if not isinstance(value, dict):
        raise ValueError(f"value_formatter must be a name or a mapping, got {value!r}.")
    data = cast(dict[str, Any], value)
    return formatter_from_name(
        str(data.get("kind") or "decimal"),
        offset=_parse_optional_int(data.get("offset"), field="value_formatter.offset"),
        precision=_parse_optional_int(data.get("precision"), field="value_formatter.precision"),
    )


def _encode_block(block: Block) -> dict[str, Any]:
    if block.borders == Borders.ALL:
        borders: str | list[str] = "all"
    else:
        borders = [name for name, side in _SIDES if side in block.borders]
    return {
        "title": block.title,
        "borders": borders,
        "border_type": block.border_type.name,
        "border_style": encode_style(block.border_style),
        "title_style": encode_style(block.title_style),
        "style": encode_style(block.style),
    }


def _decode_block(value: object) -> Block | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"block must be a mapping, got {value!r}.")
    data = cast(dict[str, Any], value)
    border_type_name = str(data.get("border_type") or "plain")
    try:
        border_type = BorderType[border_type_name]
    except KeyError:
        raise ValueError(f"Unknown border_type: {border_type_name!r}.") from None
    title = data.get("title")
    return Block(
        title=None if title is None else str(title),
        borders=_parse_borders(data.get("borders")),
        border_type=border_type,
        border_style=decode_style(data.get("border_style")),
        title_style=decode_style(data.get("title_style")),
        style=decode_style(data.get("style")),
    )


def _parse_borders(value: object) -> Borders:
    if value is None or value == "none":
        return Borders.NONE
    if value == "all":
        return Borders.ALL
    sides = dict(_SIDES)
    result = Borders.NONE
    for name in [value] if isinstance(value, str) else cast(list[object], value):
        try:
            result |= sides[str(name).strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown border side: {name!r}.") from None
    return result


def _parse_values(raw: object, *, field: str) -> list[int]:
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"{field} must be a list of integers, got {raw!r}.")
    return [_parse_int(value, field=f"{field}[{idx}]", default=0) for idx, value in enumerate(raw)]


def _parse_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer, got {value!r}.")
    try:
        return int(str(value))
    except ValueError:
        raise ValueError(f"{field} must be an integer, got {value!r}.") from None


def _parse_optional_int(value: object, *, field: str) -> int | None:
    if value is None or value == "":
        return None
    return _parse_int(value, field=field, default=0)
