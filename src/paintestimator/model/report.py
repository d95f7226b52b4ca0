"""
Result Formatting
Turns an EstimateResult into the lines shown in the results panel.
Area, cost and hours are rounded for display; volumes are shown raw.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from paintestimator.config import AREA_UNIT, CURRENCY_SYMBOL, DISPLAY_DECIMALS, VOLUME_UNIT
from paintestimator.model.estimator import EstimateResult
from paintestimator.model.parameters import ResolvedParameters


@dataclass(frozen=True)
class ResultLine:
    key: str
    text: str


def _fixed(value: float) -> str:
    return f"{value:.{DISPLAY_DECIMALS}f}"


def _raw(value: float) -> str:
    """Unrounded value; whole numbers lose the trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_result(result: EstimateResult) -> List[ResultLine]:
    return [
        ResultLine(
            "paintable_area",
            f"Paintable Surface Area: {_fixed(result.paintable_area)} {AREA_UNIT}",
        ),
        ResultLine(
            "total_cost",
            f"Total Cost: {CURRENCY_SYMBOL}{_fixed(result.total_cost)}",
        ),
        ResultLine(
            "total_hours_needed",
            f"Estimated Time: {_fixed(result.total_hours_needed)} hours",
        ),
        ResultLine(
            "primer",
            f"Primer Required: {_raw(result.primer_volume_needed)} {VOLUME_UNIT} or "
            f"{result.primer_cans_needed} cans of paint.",
        ),
        ResultLine(
            "paint",
            f"Paint Required: {_raw(result.paint_volume_needed)} {VOLUME_UNIT} or "
            f"{result.paint_cans_needed} cans of paint.",
        ),
    ]


def format_result_text(result: EstimateResult) -> str:
    return "\n".join(line.text for line in format_result(result))


def cost_split(result: EstimateResult, parameters: ResolvedParameters) -> Tuple[float, float]:
    """Primer and paint share of the total cost."""
    primer = result.primer_cans_needed * parameters.primer_unit_cost
    paint = result.paint_cans_needed * parameters.paint_unit_cost
    return primer, paint
