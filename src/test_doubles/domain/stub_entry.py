from typing import Sequence, Tuple

from test_doubles.domain.argument_matcher import ArgumentMatcher
from test_doubles.domain.behavior import Behavior
from test_doubles.domain.behavior_queue import BehaviorQueue
from test_doubles.domain.invocation import Invocation
from test_doubles.domain.method_signature import MethodSignature


class StubEntry:
    def __init__(self, signature: MethodSignature, matchers: Sequence[ArgumentMatcher],
                 behaviors: Sequence[Behavior]):
        self.__signature = signature
        self.__matchers = tuple(matchers)
        self.__behavior_queue = BehaviorQueue(behaviors)

    @property
    def signature(self) -> MethodSignature:
        return self.__signature

    @property
    def matchers(self) -> Tuple[ArgumentMatcher, ...]:
        return self.__matchers

    @property
    def behavior_queue(self) -> BehaviorQueue:
        return self.__behavior_queue

    def has_pattern(self, signature: MethodSignature, matchers: Sequence[ArgumentMatcher]) -> bool:
        return self.__signature == signature and self.__matchers == tuple(matchers)

    def matches(self, invocation: Invocation) -> bool:
        if invocation.signature != self.__signature or len(invocation.arguments) != len(self.__matchers):
            return False

        return all(matcher.matches(argument) for matcher, argument in zip(self.__matchers, invocation.arguments))

    def next_behavior(self) -> Behavior:
        return self.__behavior_queue.next()

    def add_behaviors(self, behaviors: Sequence[Behavior]) -> None:
        self.__behavior_queue.extend(behaviors)

    def __str__(self) -> str:
        return f'{self.__signature.name}({", ".join(str(matcher) for matcher in self.__matchers)})'
