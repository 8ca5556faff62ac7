from abc import ABCMeta, abstractmethod
from typing import Optional

from test_doubles.domain.behavior import Behavior
from test_doubles.domain.invocation import Invocation


class DefaultBehaviorPolicy(metaclass=ABCMeta):
    @abstractmethod
    def behavior_for(self, invocation: Invocation) -> Optional[Behavior]:
        pass
