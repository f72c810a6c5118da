"""Tests for loading chart definitions from YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from barchart.definitions import ChartDefinitionError, load_chart_definitions
from barchart.formatters import CompactFormatter
from cellgrid.block import Borders, BorderType
from cellgrid.style import Color, Style

pytestmark = pytest.mark.integration


def test_load_definitions_builds_configs_with_default_block(tmp_path: Path) -> None:
    """Entries without a block get a bordered block titled after the chart."""

    path = tmp_path / "charts.yml"
    path.write_text(
        "charts:\n"
        "  - title: Temps\n"
        "    series:\n"
        "      - [9, 12, 5, 8]\n"
        "      - [6, 11, 4, 5]\n"
        "    labels: [a, b, c, d]\n"
        "    bar_styles: [{fg: green}, {fg: yellow}]\n",
        encoding="utf-8",
    )

    (definition,) = load_chart_definitions(path)

    assert definition.title == "Temps"
    assert definition.config.groups == ((9, 6), (12, 11), (5, 4), (8, 5))
    assert definition.config.bar_styles == (Style(fg=Color.green), Style(fg=Color.yellow))
    assert definition.config.block is not None
    assert definition.config.block.title == "Temps"
    assert definition.config.block.borders == Borders.ALL


def test_load_definitions_reports_the_failing_chart(tmp_path: Path) -> None:
    """Validation failures name the chart index and title."""

    path = tmp_path / "charts.yml"
    path.write_text(
        "charts:\n"
        "  - title: Broken\n"
        "    series:\n"
        "      - [1, 2, 3]\n"
        "      - [1, 2]\n",
        encoding="utf-8",
    )

    with pytest.raises(ChartDefinitionError) as excinfo:
        load_chart_definitions(path)

    assert "charts[0] (Broken)" in str(excinfo.value)
    assert excinfo.value.path == path


def test_load_definitions_rejects_bad_documents(tmp_path: Path) -> None:
    """Missing files, invalid YAML and wrong shapes raise ChartDefinitionError."""

    missing = tmp_path / "missing.yml"
    invalid = tmp_path / "invalid.yml"
    invalid.write_text("charts: [unclosed\n", encoding="utf-8")
    wrong_shape = tmp_path / "wrong.yml"
    wrong_shape.write_text("- just a list\n", encoding="utf-8")

    with pytest.raises(ChartDefinitionError, match="cannot read file"):
        load_chart_definitions(missing)
    with pytest.raises(ChartDefinitionError, match="invalid YAML"):
        load_chart_definitions(invalid)
    with pytest.raises(ChartDefinitionError, match="'charts' list"):
        load_chart_definitions(wrong_shape)


def test_example_definitions_file_loads(repo_root: Path) -> None:
    """The bundled example file stays valid."""

    definitions = load_chart_definitions(repo_root / "scripts" / "example_charts.yml")

    assert [definition.title for definition in definitions] == ["Temperatures", "Requests per day"]
    requests = definitions[1].config
    assert requests.value_formatter == CompactFormatter()
    assert requests.block is not None
    assert requests.block.border_type == BorderType.rounded
