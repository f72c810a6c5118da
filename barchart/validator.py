"""Validation for BarChartConfig values.

Configs may come from code, YAML definitions or stored snapshots, so
validation collects every problem instead of stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .schema import BarChartConfig


class ChartConfigError(ValueError):
    """Raised when a bar chart configuration fails validation."""

    def __init__(self, *, errors: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            errors: Every validation error found.
        """

        super().__init__("Invalid bar chart configuration: " + " ".join(errors))
        self.errors = tuple(errors)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a bar chart config.

    Args:
        is_valid: True when no errors exist.
        errors: Fatal validation errors.
        warnings: Non-fatal findings (e.g. styles that fall back to defaults).
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def raise_for_errors(self) -> None:
        """Raise ChartConfigError when the result is invalid."""

        if not self.is_valid:
            raise ChartConfigError(errors=self.errors)


def _is_count(value: object) -> bool:
    """Return True for non-negative ints (bools excluded)."""

    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_series(series: Sequence[Sequence[object]]) -> ValidationResult:
    """Validate series-major input before it is zipped into groups.

    Every series must have as many values as the first one, since the first
    series fixes the number of groups.

    Args:
        series: One sequence of values per series.

    Returns:
        ValidationResult listing length mismatches and invalid values.
    """

    errors: list[str] = []
    if not series:
        return ValidationResult(is_valid=True)

    expected = len(series[0])
    for idx, values in enumerate(series):
        if len(values) != expected:
            errors.append(
                f"series[{idx}] has {len(values)} values; expected {expected} to match series[0]."
            )
        for pos, value in enumerate(values):
            if not _is_count(value):
                errors.append(f"series[{idx}][{pos}] must be a non-negative int, got {value!r}.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def validate_bar_chart_config(config: BarChartConfig) -> ValidationResult:
    """Validate a BarChartConfig.

    Args:
        config: Config to validate.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    series_count = config.series_count
    for idx, group in enumerate(config.groups):
        if len(group) != series_count:
            errors.append(f"groups[{idx}] has {len(group)} values; every group must have {series_count}.")
        for pos, value in enumerate(group):
            if not _is_count(value):
                errors.append(f"groups[{idx}][{pos}] must be a non-negative int, got {value!r}.")
    if config.groups and series_count == 0:
        errors.append("groups must contain at least one series value each.")

    if not isinstance(config.bar_width, int) or isinstance(config.bar_width, bool) or config.bar_width < 1:
        errors.append(f"bar_width must be an int >= 1, got {config.bar_width!r}.")
    if not _is_count(config.bar_gap):
        errors.append(f"bar_gap must be an int >= 0, got {config.bar_gap!r}.")
    if not _is_count(config.group_gap):
        errors.append(f"group_gap must be an int >= 0, got {config.group_gap!r}.")
    if config.max_value is not None and not _is_count(config.max_value):
        errors.append(f"max_value must be None or an int >= 0, got {config.max_value!r}.")

    for idx, label in enumerate(config.labels):
        if not isinstance(label, str):
            errors.append(f"labels[{idx}] must be a string, got {label!r}.")

    if len(config.labels) > config.group_count:
        warnings.append(
            f"{len(config.labels)} labels given for {config.group_count} groups; extra labels are never drawn."
        )
    if 0 < len(config.bar_styles) < series_count:
        warnings.append(
            f"{len(config.bar_styles)} bar styles for {series_count} series; missing ones use the default style."
        )
    if 0 < len(config.value_styles) < series_count:
        warnings.append(
            f"{len(config.value_styles)} value styles for {series_count} series; missing ones use the default style."
        )

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
