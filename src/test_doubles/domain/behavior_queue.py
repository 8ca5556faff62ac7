from typing import List, Sequence, Tuple

from test_doubles.domain.behavior import Behavior
from test_doubles.domain.invalid_registration_error import InvalidRegistrationError


class BehaviorQueue:
    def __init__(self, behaviors: Sequence[Behavior]):
        if len(behaviors) == 0:
            raise InvalidRegistrationError('At least one behaviour must be registered')

        self.__behaviors: List[Behavior] = list(behaviors)
        self.__cursor = 0

    def next(self) -> Behavior:
        behavior = self.__behaviors[self.__cursor]

        # The last behaviour repeats once the others have been consumed
        if self.__cursor < len(self.__behaviors) - 1:
            self.__cursor += 1

        return behavior

    def extend(self, behaviors: Sequence[Behavior]) -> None:
        if len(behaviors) == 0:
            raise InvalidRegistrationError('At least one behaviour must be appended')

        self.__behaviors.extend(behaviors)

    @property
    def cursor(self) -> int:
        return self.__cursor

    @property
    def behaviors(self) -> Tuple[Behavior, ...]:
        return tuple(self.__behaviors)

    def __len__(self) -> int:
        return len(self.__behaviors)
