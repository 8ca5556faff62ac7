from typing import Any, Optional

from test_doubles.domain.behavior import Behavior, ReturnValue
from test_doubles.domain.default_behavior_policy import DefaultBehaviorPolicy
from test_doubles.domain.invocation import Invocation


class ReturnValueForUnstubbedCalls(DefaultBehaviorPolicy):
    def __init__(self, value: Any = None):
        self.__behavior = ReturnValue(value)

    def behavior_for(self, invocation: Invocation) -> Optional[Behavior]:
        return self.__behavior
