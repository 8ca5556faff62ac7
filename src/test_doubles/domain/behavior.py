from dataclasses import dataclass
from typing import Any, Callable, Type, TypeAlias, Union

from test_doubles.domain.invalid_registration_error import InvalidRegistrationError
from test_doubles.domain.invocation import Invocation


@dataclass(frozen=True)
class ReturnValue:
    value: Any


@dataclass(frozen=True)
class ThrowError:
    error: BaseException | Type[BaseException]

    def __post_init__(self) -> None:
        if isinstance(self.error, BaseException):
            return

        if not (isinstance(self.error, type) and issubclass(self.error, BaseException)):
            raise InvalidRegistrationError(f'Cannot throw {self.error!r} as it is not an exception')

        try:
            self.error()
        except TypeError as e:
            raise InvalidRegistrationError(
                f'Cannot throw {self.error.__qualname__} as it cannot be created without arguments, '
                f'register an instance instead: {e}'
            ) from e

    def instantiate(self) -> BaseException:
        return self.error() if isinstance(self.error, type) else self.error


@dataclass(frozen=True)
class ComputeAnswer:
    function: Callable[..., Any]


@dataclass(frozen=True)
class InvocationAnswer:
    function: Callable[[Invocation], Any]


Behavior: TypeAlias = Union[ReturnValue, ThrowError, ComputeAnswer, InvocationAnswer]
