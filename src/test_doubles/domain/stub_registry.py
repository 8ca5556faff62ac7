from contextlib import contextmanager
from logging import Logger
from threading import Lock
from typing import Dict, Iterator, List, Optional, Sequence

from test_doubles.domain.argument_matcher import ArgumentMatcher
from test_doubles.domain.behavior import Behavior
from test_doubles.domain.default_behavior_policy import DefaultBehaviorPolicy
from test_doubles.domain.invalid_registration_error import InvalidRegistrationError
from test_doubles.domain.invocation import Invocation
from test_doubles.domain.method_signature import MethodSignature
from test_doubles.domain.mock_handle import MockHandle
from test_doubles.domain.stub_entry import StubEntry
from test_doubles.domain.unstubbed_call_error import UnstubbedCallError


class _MockStubs:
    def __init__(self) -> None:
        self.lock = Lock()
        # Set once the table has been detached by forget or reset
        self.forgotten = False
        # Registration order, most recent last
        self.entries: List[StubEntry] = []

    def entry_with_pattern(self, signature: MethodSignature,
                           matchers: Sequence[ArgumentMatcher]) -> Optional[StubEntry]:
        return next((entry for entry in self.entries if entry.has_pattern(signature, matchers)), None)


class StubRegistry:

    def __init__(self, logger: Logger, default_behavior_policy: Optional[DefaultBehaviorPolicy] = None):
        self.__logger = logger
        self.__default_behavior_policy = default_behavior_policy
        self.__stubs_by_mock: Dict[MockHandle, _MockStubs] = dict()
        self.__stubs_by_mock_lock = Lock()

    def register(self, mock: MockHandle, signature: MethodSignature, matchers: Sequence[ArgumentMatcher],
                 behaviors: Sequence[Behavior]) -> None:
        self.__validate_pattern(mock, signature, matchers)
        new_entry = StubEntry(signature, matchers, behaviors)

        with self.__locked_stubs_for(mock) as stubs:
            replaced_entry = stubs.entry_with_pattern(signature, matchers)

            if replaced_entry is not None:
                stubs.entries.remove(replaced_entry)

            stubs.entries.append(new_entry)

        self.__logger.debug(
            f'{"Replaced" if replaced_entry else "Registered"} {len(behaviors)} behaviour(s) for {mock}.{new_entry}'
        )

    def append(self, mock: MockHandle, signature: MethodSignature, matchers: Sequence[ArgumentMatcher],
               behaviors: Sequence[Behavior]) -> None:
        self.__validate_pattern(mock, signature, matchers)

        if len(behaviors) == 0:
            raise InvalidRegistrationError(f'No behaviours given to append to {mock}.{signature.name}')

        with self.__locked_stubs_for(mock) as stubs:
            existing_entry = stubs.entry_with_pattern(signature, matchers)

            if existing_entry is None:
                stubs.entries.append(StubEntry(signature, matchers, behaviors))
            else:
                existing_entry.add_behaviors(behaviors)

        self.__logger.debug(f'Appended {len(behaviors)} behaviour(s) for {mock}.{signature.name}')

    def resolve(self, invocation: Invocation) -> Behavior:
        with self.__stubs_by_mock_lock:
            stubs = self.__stubs_by_mock.get(invocation.mock)

        if stubs is not None:
            with stubs.lock:
                for entry in reversed(stubs.entries):
                    if entry.matches(invocation):
                        behavior = entry.next_behavior()
                        self.__logger.debug(f'Resolved {invocation} to {behavior} using stub {entry}')
                        return behavior

        default_behavior = (
            self.__default_behavior_policy.behavior_for(invocation)
            if self.__default_behavior_policy
            else None
        )

        if default_behavior is None:
            raise UnstubbedCallError(f'No behaviour has been stubbed for call to {invocation}')

        self.__logger.debug(f'Resolved unstubbed call {invocation} to default {default_behavior}')
        return default_behavior

    def forget(self, mock: MockHandle) -> None:
        with self.__stubs_by_mock_lock:
            forgotten_stubs = self.__stubs_by_mock.pop(mock, None)

        if forgotten_stubs is not None:
            with forgotten_stubs.lock:
                forgotten_stubs.forgotten = True

        self.__logger.debug(f'Forgot stubs for {mock}')

    def reset(self) -> None:
        with self.__stubs_by_mock_lock:
            forgotten_stubs_by_mock = self.__stubs_by_mock
            self.__stubs_by_mock = dict()

        for forgotten_stubs in forgotten_stubs_by_mock.values():
            with forgotten_stubs.lock:
                forgotten_stubs.forgotten = True

        self.__logger.debug('Forgot stubs for all test doubles')

    def stub_count(self, mock: MockHandle) -> int:
        with self.__stubs_by_mock_lock:
            stubs = self.__stubs_by_mock.get(mock)

        if stubs is None:
            return 0

        with stubs.lock:
            return len(stubs.entries)

    @contextmanager
    def __locked_stubs_for(self, mock: MockHandle) -> Iterator[_MockStubs]:
        while True:
            stubs = self.__stubs_for(mock)

            with stubs.lock:
                # A concurrent forget may have detached the table between lookup and locking
                if not stubs.forgotten:
                    yield stubs
                    return

    def __stubs_for(self, mock: MockHandle) -> _MockStubs:
        with self.__stubs_by_mock_lock:
            stubs = self.__stubs_by_mock.get(mock)

            if stubs is None:
                stubs = _MockStubs()
                self.__stubs_by_mock[mock] = stubs

            return stubs

    @staticmethod
    def __validate_pattern(mock: MockHandle, signature: MethodSignature,
                           matchers: Sequence[ArgumentMatcher]) -> None:
        if not mock.declares(signature):
            raise InvalidRegistrationError(f'{mock} does not declare a method with signature {signature}')

        if len(matchers) != signature.arity:
            raise InvalidRegistrationError(
                f'{mock}.{signature} takes {signature.arity} argument(s) but {len(matchers)} matcher(s) were given'
            )
