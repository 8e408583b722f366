import logging
import pytest
from pydantic import ValidationError
from domain.geometry.constants import EQUAL_POINT, EQUAL_VECTOR
from domain.geometry.tolerance import (
    Tolerance,
    get_global_tolerance,
    set_global_tolerance,
    resolve_tolerance,
)


@pytest.fixture
def restore_global_tolerance():
    previous = get_global_tolerance()
    yield
    set_global_tolerance(previous)


class TestTolerance:
    def test_defaults(self):
        tol = Tolerance()
        assert tol.equal_point == EQUAL_POINT
        assert tol.equal_vector == EQUAL_VECTOR

    def test_zero_is_valid(self):
        assert Tolerance(equal_point=0.0).equal_point == 0.0

    @pytest.mark.parametrize("value", [-1e-6, float('nan'), float('inf')])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError):
            Tolerance(equal_point=value)
        with pytest.raises(ValueError):
            Tolerance(equal_vector=value)

    def test_with_changes_revalidates(self):
        tol = Tolerance(equal_point=0.01)
        assert tol.with_changes(equal_point=0.1).equal_point == 0.1
        with pytest.raises(ValidationError):
            tol.with_changes(equal_point=-0.1)


class TestGlobalTolerance:
    def test_global_default(self):
        assert Tolerance.global_tolerance() is get_global_tolerance()

    def test_set_global_tolerance(self, restore_global_tolerance, caplog):
        caplog.set_level(logging.INFO, logger="domain.geometry.tolerance")
        new = Tolerance(equal_point=0.5)

        previous = set_global_tolerance(new)

        assert get_global_tolerance() is new
        assert previous is not new
        assert "Global tolerance changed" in caplog.text

    def test_set_global_tolerance_requires_tolerance(self):
        with pytest.raises(TypeError):
            set_global_tolerance(0.5)


class TestResolveTolerance:
    def test_none_selects_global(self, restore_global_tolerance):
        custom = Tolerance(equal_point=0.25)
        set_global_tolerance(custom)
        assert resolve_tolerance(None) is custom

    def test_tolerance_passthrough(self):
        tol = Tolerance(equal_point=0.01)
        assert resolve_tolerance(tol) is tol

    def test_number(self):
        assert resolve_tolerance(0.5).equal_point == 0.5
        assert resolve_tolerance(0).equal_point == 0.0

    def test_negative_number(self):
        with pytest.raises(ValidationError):
            resolve_tolerance(-0.5)

    @pytest.mark.parametrize("value", [True, "0.1", [0.1]])
    def test_invalid_types(self, value):
        with pytest.raises(TypeError):
            resolve_tolerance(value)
