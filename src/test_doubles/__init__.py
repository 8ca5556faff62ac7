from logging import Logger
from typing import Any, Optional

from test_doubles.domain.answer_arity_error import AnswerArityError
from test_doubles.domain.answer_engine import AnswerEngine
from test_doubles.domain.argument_matcher import ArgumentMatcher, any_value, equal_to
from test_doubles.domain.behavior import Behavior, ComputeAnswer, InvocationAnswer, ReturnValue, ThrowError
from test_doubles.domain.default_behavior_policy import DefaultBehaviorPolicy
from test_doubles.domain.invalid_registration_error import InvalidRegistrationError
from test_doubles.domain.invocation import Invocation
from test_doubles.domain.return_value_for_unstubbed_calls import ReturnValueForUnstubbedCalls
from test_doubles.domain.stub_registry import StubRegistry
from test_doubles.domain.stubbing import Stubbing
from test_doubles.domain.stubbing_error import StubbingError
from test_doubles.domain.test_double import StubbableMethod, handle_of
from test_doubles.domain.test_double_source import TestDoubleSource
from test_doubles.domain.unstubbed_call_error import UnstubbedCallError

__all__ = [
    "double_source", "when_calling", "whenever", "any_value", "equal_to", "handle_of",
    "TestDoubleSource", "Stubbing", "StubRegistry", "AnswerEngine", "Invocation", "ArgumentMatcher",
    "Behavior", "ReturnValue", "ThrowError", "ComputeAnswer", "InvocationAnswer",
    "DefaultBehaviorPolicy", "ReturnValueForUnstubbedCalls",
    "StubbingError", "InvalidRegistrationError", "UnstubbedCallError", "AnswerArityError",
]


def double_source(logger: Logger, default_behavior_policy: Optional[DefaultBehaviorPolicy] = None) -> TestDoubleSource:
    return TestDoubleSource(StubRegistry(logger, default_behavior_policy), AnswerEngine(logger), logger)


def when_calling(method: Any, *argument_matchers: Any) -> Stubbing:
    if not isinstance(method, StubbableMethod):
        raise InvalidRegistrationError(f'Cannot stub {method!r} as it is not a method of a test double')

    return method.with_arguments(*argument_matchers)


whenever = when_calling
