"""
Tests for result formatting.
"""
import pytest

from paintestimator.model.estimator import EstimateResult
from paintestimator.model.report import cost_split, format_result, format_result_text


@pytest.fixture
def result():
    return EstimateResult(
        paintable_area=4.0,
        primer_volume_needed=0.4,
        paint_volume_needed=0.8,
        primer_cans_needed=1,
        paint_cans_needed=1,
        total_cost=50.0,
        total_hours_needed=0.008,
    )


class TestFormatResult:
    def test_lines(self, result):
        texts = [line.text for line in format_result(result)]
        assert texts == [
            "Paintable Surface Area: 4.00 m²",
            "Total Cost: $50.00",
            "Estimated Time: 0.01 hours",
            "Primer Required: 0.4 litres or 1 cans of paint.",
            "Paint Required: 0.8 litres or 1 cans of paint.",
        ]

    def test_keys_are_unique(self, result):
        keys = [line.key for line in format_result(result)]
        assert len(keys) == len(set(keys))

    def test_volumes_are_not_rounded(self):
        r = EstimateResult(
            paintable_area=10.0 / 3.0,
            primer_volume_needed=1.0 / 3.0,
            paint_volume_needed=2.0 / 3.0,
            primer_cans_needed=1,
            paint_cans_needed=1,
            total_cost=12.345,
            total_hours_needed=1.0 / 3.0,
        )
        text = format_result_text(r)
        assert "Paintable Surface Area: 3.33 m²" in text
        assert f"Primer Required: {1.0 / 3.0} litres" in text
        assert "Estimated Time: 0.33 hours" in text

    def test_whole_volumes_have_no_decimal_point(self, result):
        r = EstimateResult(**{**result.to_dict(), "primer_volume_needed": 2.0, "paint_volume_needed": 4.0,
                              "primer_cans_needed": 2, "paint_cans_needed": 4})
        texts = [line.text for line in format_result(r)]
        assert texts[3] == "Primer Required: 2 litres or 2 cans of paint."
        assert texts[4] == "Paint Required: 4 litres or 4 cans of paint."

    def test_negative_area(self, result):
        r = EstimateResult(**{**result.to_dict(), "paintable_area": -3.0})
        assert format_result(r)[0].text == "Paintable Surface Area: -3.00 m²"

    def test_text_has_one_line_per_entry(self, result):
        assert len(format_result_text(result).splitlines()) == len(format_result(result))


class TestCostSplit:
    def test_split_sums_to_total(self, result, complete_parameters):
        primer, paint = cost_split(result, complete_parameters.validate())
        assert (primer, paint) == (20.0, 30.0)
        assert primer + paint == pytest.approx(result.total_cost)
