from dataclasses import dataclass
from typing import Any, Tuple

from test_doubles.domain.method_signature import MethodSignature
from test_doubles.domain.mock_handle import MockHandle


@dataclass(frozen=True)
class Invocation:
    mock: MockHandle
    signature: MethodSignature
    arguments: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        arguments = ', '.join(repr(argument) for argument in self.arguments)
        return f'{self.mock}.{self.signature.name}({arguments})'
