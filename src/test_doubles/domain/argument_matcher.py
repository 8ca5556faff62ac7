from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any


class ArgumentMatcher(metaclass=ABCMeta):
    @abstractmethod
    def matches(self, argument: Any) -> bool:
        pass


@dataclass(frozen=True)
class EqualTo(ArgumentMatcher):
    value: Any

    def matches(self, argument: Any) -> bool:
        return bool(argument == self.value)

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class AnyValue(ArgumentMatcher):
    def matches(self, argument: Any) -> bool:
        return True

    def __str__(self) -> str:
        return '<any>'


def any_value() -> ArgumentMatcher:
    return AnyValue()


def equal_to(value: Any) -> ArgumentMatcher:
    return EqualTo(value)


def as_matcher(value_or_matcher: Any) -> ArgumentMatcher:
    if isinstance(value_or_matcher, ArgumentMatcher):
        return value_or_matcher

    return EqualTo(value_or_matcher)
