from typing import Any, Callable, List, Sequence, Type

from test_doubles.domain.argument_matcher import ArgumentMatcher
from test_doubles.domain.behavior import Behavior, ComputeAnswer, InvocationAnswer, ReturnValue, ThrowError
from test_doubles.domain.invalid_registration_error import InvalidRegistrationError
from test_doubles.domain.invocation import Invocation
from test_doubles.domain.method_signature import MethodSignature
from test_doubles.domain.mock_handle import MockHandle
from test_doubles.domain.stub_registry import StubRegistry


class Stubbing:
    """Registers behaviours for one method and argument pattern of a test double.

    The first call registers the pattern, replacing any earlier registration of it. Later calls on the same
    Stubbing append to the queue, so ``stubbing.then_return(1).then_raise(KeyError)`` returns 1 and then raises
    KeyError for every subsequent call.
    """

    def __init__(self, stub_registry: StubRegistry, mock: MockHandle, signature: MethodSignature,
                 matchers: Sequence[ArgumentMatcher]):
        self.__stub_registry = stub_registry
        self.__mock = mock
        self.__signature = signature
        self.__matchers: List[ArgumentMatcher] = list(matchers)
        self.__registered = False

    def stub(self, *behaviors: Behavior) -> 'Stubbing':
        if self.__registered:
            self.__stub_registry.append(self.__mock, self.__signature, self.__matchers, behaviors)
        else:
            self.__stub_registry.register(self.__mock, self.__signature, self.__matchers, behaviors)
            self.__registered = True

        return self

    def then_return(self, value: Any, *values: Any) -> 'Stubbing':
        return self.stub(*(ReturnValue(each_value) for each_value in (value, *values)))

    def then_return_consecutively(self, values: Sequence[Any]) -> 'Stubbing':
        if len(values) == 0:
            raise InvalidRegistrationError(f'No values given to return from {self.__mock}.{self.__signature.name}')

        return self.then_return(*values)

    def then_raise(self, error: BaseException | Type[BaseException],
                   *errors: BaseException | Type[BaseException]) -> 'Stubbing':
        return self.stub(*(ThrowError(each_error) for each_error in (error, *errors)))

    def then_answer(self, answer: Callable[..., Any]) -> 'Stubbing':
        return self.stub(ComputeAnswer(answer))

    def then_answer_invocation(self, answer: Callable[[Invocation], Any]) -> 'Stubbing':
        return self.stub(InvocationAnswer(answer))

    do_return = then_return
    do_return_consecutively = then_return_consecutively
    do_throw = then_raise
    do_answer = then_answer
