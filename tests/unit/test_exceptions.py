"""Tests for the exceptions module."""

from sandwich_guard.exceptions import (
    ConfigurationError,
    DecodeError,
    SandwichDetectedError,
    SandwichGuardError,
)


def test_base_exception():
    """Test the base exception class."""
    error = SandwichGuardError("Test error")
    assert str(error) == "Test error"
    assert error.details == {}

    error_with_details = SandwichGuardError("Test error", {"key": "value"})
    assert error_with_details.details == {"key": "value"}


def test_configuration_error():
    error = ConfigurationError("Config error", {"config_file": "detector.yaml"})
    assert error.details["config_file"] == "detector.yaml"
    assert isinstance(error, SandwichGuardError)


def test_decode_error():
    error = DecodeError("Bad log")
    assert str(error) == "Bad log"
    assert isinstance(error, SandwichGuardError)


def test_sandwich_detected_error():
    error = SandwichDetectedError("0xabc", pattern="liquidity")
    assert str(error) == "sandwich attack detected on pool: 0xabc"
    assert error.pool == "0xabc"
    assert error.pattern == "liquidity"
    assert isinstance(error, SandwichGuardError)
