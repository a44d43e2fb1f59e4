"""Tests for predicates and container classification."""

from collections import OrderedDict

import pytest
import gunderscore as g_
from gunderscore import InvalidArgument, Kind


class TestKindOf:
    @pytest.mark.parametrize("value", [[], (), "abc", range(3)])
    def test_sequences(self, value):
        assert g_.kind_of(value) is Kind.SEQUENCE

    @pytest.mark.parametrize("value", [{}, OrderedDict()])
    def test_mappings(self, value):
        assert g_.kind_of(value) is Kind.MAPPING

    @pytest.mark.parametrize("value", [None, 1, 1.5, {1}, object()])
    def test_rejected(self, value):
        with pytest.raises(InvalidArgument):
            g_.kind_of(value)


def test_is_existential():
    assert g_.is_existential(0)
    assert g_.is_existential(False)
    assert not g_.is_existential(None)


def test_is_truthy():
    assert g_.is_truthy(0)
    assert g_.is_truthy("")
    assert not g_.is_truthy(False)
    assert not g_.is_truthy(None)


def test_is_function():
    assert g_.is_function(len)
    assert g_.is_function(lambda: None)
    assert not g_.is_function("len")


def test_is_number():
    assert g_.is_number(1)
    assert g_.is_number(2.5)
    assert g_.is_number(10 ** 400)
    assert not g_.is_number(float("nan"))
    assert not g_.is_number(True)
    assert not g_.is_number("1")


def test_is_string():
    assert g_.is_string("x")
    assert not g_.is_string(b"x")


def test_container_predicates():
    assert g_.is_indexed("abc")
    assert g_.is_indexed([1])
    assert not g_.is_indexed({})
    assert g_.is_associative({})
    assert not g_.is_associative([])
    assert g_.is_array([1])
    assert g_.is_array((1,))
    assert not g_.is_array("abc")
