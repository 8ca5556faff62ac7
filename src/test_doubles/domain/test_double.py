from copy import deepcopy
from inspect import Signature
from typing import Any, Dict, List, Tuple

from test_doubles.domain.answer_engine import AnswerEngine
from test_doubles.domain.argument_matcher import AnyValue, as_matcher
from test_doubles.domain.invocation import Invocation
from test_doubles.domain.method_signature import MethodSignature
from test_doubles.domain.mock_handle import MockHandle
from test_doubles.domain.stub_registry import StubRegistry
from test_doubles.domain.stubbing import Stubbing


class StubbableMethod:

    def __init__(self, mock: MockHandle, signature: MethodSignature, python_signature: Signature,
                 stub_registry: StubRegistry, answer_engine: AnswerEngine):
        self.__mock = mock
        self.__signature = signature
        self.__python_signature = python_signature
        self.__stub_registry = stub_registry
        self.__answer_engine = answer_engine
        self.__invocations: List[Invocation] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        invocation = Invocation(self.__mock, self.__signature, self.__positional_arguments_for(args, kwargs))
        self.__invocations.append(invocation)
        behavior = self.__stub_registry.resolve(invocation)
        return self.__answer_engine.execute(behavior, invocation)

    def with_arguments(self, *argument_matchers: Any) -> Stubbing:
        matchers = (
            [as_matcher(argument_matcher) for argument_matcher in argument_matchers]
            if argument_matchers
            else [AnyValue()] * self.__signature.arity
        )

        return Stubbing(self.__stub_registry, self.__mock, self.__signature, matchers)

    @property
    def mock(self) -> MockHandle:
        return self.__mock

    @property
    def signature(self) -> MethodSignature:
        return self.__signature

    @property
    def invocation_count(self) -> int:
        return len(self.__invocations)

    @property
    def invocations(self) -> List[List[Any]]:
        return deepcopy([list(invocation.arguments) for invocation in self.__invocations])

    def forget_invocations(self) -> None:
        self.__invocations = []

    def __positional_arguments_for(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Tuple[Any, ...]:
        # Raises TypeError, as the real method would, when the arguments do not fit
        bound_arguments = self.__python_signature.bind(*args, **kwargs)
        bound_arguments.apply_defaults()
        return tuple(bound_arguments.arguments.values())

    def __repr__(self) -> str:
        return f'<StubbableMethod {self.__mock}.{self.__signature}>'


class TestDouble:
    # Tell pytest to treat this class as a normal class
    __test__ = False

    def __init__(self, handle: MockHandle, python_signatures: Dict[str, Signature], stub_registry: StubRegistry,
                 answer_engine: AnswerEngine):
        self._handle = handle
        self._methods = {
            signature.name: StubbableMethod(
                handle, signature, python_signatures[signature.name], stub_registry, answer_engine
            )
            for signature in handle.signatures
        }

    def __getattr__(self, name: str) -> StubbableMethod:
        # Only reached for attributes not set in __init__, including during copying before __init__ has run
        if name.startswith('_'):
            raise AttributeError(name)

        method = self._methods.get(name)

        if method is None:
            raise AttributeError(f'{self._handle} has no method "{name}"')

        return method

    def __copy__(self) -> 'TestDouble':
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'TestDouble':
        return self

    def __repr__(self) -> str:
        return f'<TestDouble {self._handle}>'


def handle_of(double: Any) -> MockHandle:
    if not isinstance(double, TestDouble):
        raise TypeError(f'{double!r} is not a test double')

    return double._handle
