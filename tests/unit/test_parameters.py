"""
Tests for parameter validation.
"""
import pytest

from paintestimator.model.parameters import (
    EstimateParameters, MissingParametersError, ResolvedParameters, PARAMETER_LABELS
)


class TestValidate:
    def test_complete(self, complete_parameters):
        resolved = complete_parameters.validate()
        assert isinstance(resolved, ResolvedParameters)
        assert resolved.primer_coverage == 10.0
        assert resolved.worker_count == 2
        assert isinstance(resolved.coat_count, int)

    def test_empty_reports_every_field(self):
        with pytest.raises(MissingParametersError) as exc:
            EstimateParameters().validate()
        assert set(exc.value.names) == set(PARAMETER_LABELS)

    def test_single_missing_field(self, complete_parameters):
        complete_parameters.paint_coverage = None
        with pytest.raises(MissingParametersError) as exc:
            complete_parameters.validate()
        assert exc.value.names == ["paint_coverage"]
        assert "Paint Coverage" in str(exc.value)

    @pytest.mark.parametrize("name", ["primer_coverage", "paint_coverage", "worker_count", "coat_count"])
    def test_zero_is_missing(self, complete_parameters, name):
        setattr(complete_parameters, name, 0)
        with pytest.raises(MissingParametersError) as exc:
            complete_parameters.validate()
        assert name in exc.value.names

    def test_negative_cost_is_missing(self, complete_parameters):
        complete_parameters.primer_unit_cost = -5.0
        assert complete_parameters.missing() == ["primer_unit_cost"]

    def test_fractional_count_is_missing(self, complete_parameters):
        complete_parameters.coat_count = 1.5
        assert complete_parameters.missing() == ["coat_count"]

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    @pytest.mark.parametrize("name", ["primer_coverage", "paint_unit_cost", "coat_count"])
    def test_non_finite_is_missing(self, complete_parameters, name, value):
        setattr(complete_parameters, name, value)
        assert complete_parameters.missing() == [name]
        with pytest.raises(MissingParametersError):
            complete_parameters.validate()

    def test_error_is_value_error(self):
        assert issubclass(MissingParametersError, ValueError)

    def test_resolved_is_frozen(self, complete_parameters):
        resolved = complete_parameters.validate()
        with pytest.raises(AttributeError):
            resolved.worker_count = 3


class TestSet:
    def test_set_known(self):
        params = EstimateParameters()
        params.set("coat_count", 2)
        assert params.coat_count == 2
        assert not params.is_complete()

    def test_set_unknown(self):
        with pytest.raises(KeyError):
            EstimateParameters().set("brush_size", 3)

    def test_clear(self, complete_parameters):
        complete_parameters.set("worker_count", None)
        assert complete_parameters.missing() == ["worker_count"]
