"""Pytest configuration and fixtures for jsonschema_checker tests"""
import logging

import pytest

from jsonschema_checker import CheckMode, ValidationContext, Validator, ValidatorConfig
from jsonschema_checker.utils.logging_utils import PACKAGE_LOGGER


@pytest.fixture
def validator():
    """Validator in normal (strict) check mode"""
    return Validator()


@pytest.fixture
def type_cast_validator():
    """Validator that coerces scalar strings during comparisons"""
    return Validator(ValidatorConfig(check_mode=CheckMode.TYPE_CAST))


@pytest.fixture
def context():
    return ValidationContext()


@pytest.fixture
def messages(validator):
    """Validate and return only the error messages"""
    def _messages(value, schema):
        return [error.message for error in validator.validate(value, schema)]
    return _messages


@pytest.fixture
def clean_package_logger():
    """Drop handlers installed on the package logger during a test"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
