import logging
from logging import Logger

import pytest

from test_doubles import double_source
from test_doubles.domain.answer_engine import AnswerEngine
from test_doubles.domain.stub_registry import StubRegistry
from test_doubles.domain.test_double_source import TestDoubleSource


@pytest.fixture(scope="session")
def logger() -> Logger:
    return logging.getLogger()


@pytest.fixture(scope='function')
def stub_registry(logger: Logger) -> StubRegistry:
    return StubRegistry(logger)


@pytest.fixture(scope='function')
def answer_engine(logger: Logger) -> AnswerEngine:
    return AnswerEngine(logger)


@pytest.fixture(scope='function')
def test_double_source(logger: Logger) -> TestDoubleSource:
    return double_source(logger)
