"""Load bar chart definitions from YAML files.

A definitions file holds a top-level `charts` list. Each entry is a chart
payload in the snapshot format (see `barchart.snapshot_codec`) plus an
optional `title`, for example::

    charts:
      - title: Temperatures
        series:
          - [9, 12, 5, 8]
          - [6, 11, 4, 5]
        labels: ["30°C", "50°C", "60°C", "80°C"]
        bar_width: 5
        bar_styles: [{fg: green}, {fg: yellow}]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .schema import BarChartConfig
from .snapshot_codec import decode_bar_chart_config


class ChartDefinitionError(ValueError):
    """Raised when a chart definitions file cannot be loaded."""

    def __init__(self, *, path: Path, message: str) -> None:
        """Initialize the error.

        Args:
            path: Definitions file that failed to load.
            message: What was wrong with it.
        """

        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


@dataclass(frozen=True, slots=True)
class ChartDefinition:
    """A named chart loaded from a definitions file.

    Args:
        title: Display title (also used as the block title when the entry
            defines no block of its own).
        config: Validated chart configuration.
    """

    title: str
    config: BarChartConfig


def parse_chart_definitions(document: object, *, path: Path) -> tuple[ChartDefinition, ...]:
    """Parse an already-loaded YAML document into chart definitions.

    Args:
        document: Result of `yaml.safe_load`.
        path: Source path, used in error messages.

    Returns:
        ChartDefinition entries in file order.

    Raises:
        ChartDefinitionError: When the document shape or any chart is invalid.
    """

    if not isinstance(document, dict) or not isinstance(document.get("charts"), list):
        raise ChartDefinitionError(path=path, message="expected a mapping with a 'charts' list.")

    definitions: list[ChartDefinition] = []
    for idx, entry in enumerate(document["charts"]):
        if not isinstance(entry, dict):
            raise ChartDefinitionError(path=path, message=f"charts[{idx}] must be a mapping.")
        payload: dict[str, Any] = dict(entry)
        title = str(payload.pop("title", None) or f"Chart {idx + 1}")
        if "block" not in payload:
            payload["block"] = {"title": title, "borders": "all"}
        try:
            config = decode_bar_chart_config(payload)
        except ValueError as exc:
            raise ChartDefinitionError(path=path, message=f"charts[{idx}] ({title}): {exc}") from exc
        definitions.append(ChartDefinition(title=title, config=config))
    return tuple(definitions)


def load_chart_definitions(path: str | Path) -> tuple[ChartDefinition, ...]:
    """Read and validate a YAML chart definitions file.

    Args:
        path: Path to the YAML file.

    Returns:
        ChartDefinition entries in file order.

    Raises:
        ChartDefinitionError: When the file is unreadable, not valid YAML, or
            defines an invalid chart.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ChartDefinitionError(path=source, message=f"cannot read file ({exc.strerror}).") from exc
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ChartDefinitionError(path=source, message=f"invalid YAML ({exc}).") from exc
    return parse_chart_definitions(document, path=source)
