"""
Tests for the ValidationResult container
"""

import pytest

from dnsguard.core.exceptions import ValidationResultAccessError
from dnsguard.validation.result import ValidationResult


def test_success_carries_data():
    result = ValidationResult.success({"hostname": "www.example.com"})

    assert result.is_valid()
    assert result.get_data() == {"hostname": "www.example.com"}


def test_failure_carries_message():
    result = ValidationResult.failure("Invalid value")

    assert not result.is_valid()
    assert result.get_message() == "Invalid value"


def test_wrong_accessor_is_a_programming_error():
    with pytest.raises(ValidationResultAccessError):
        ValidationResult.failure("nope").get_data()
    with pytest.raises(ValidationResultAccessError):
        ValidationResult.success(1).get_message()


def test_results_are_immutable():
    result = ValidationResult.success(0)
    with pytest.raises(AttributeError):
        result.valid = False


def test_results_compare_structurally():
    assert ValidationResult.success({"ttl": 60}) == ValidationResult.success({"ttl": 60})
    assert ValidationResult.failure("x") == ValidationResult.failure("x")
    assert ValidationResult.success(0) != ValidationResult.failure("x")
