from dataclasses import dataclass, field
from typing import Optional, Tuple
from uuid import UUID, uuid4

from test_doubles.domain.method_signature import MethodSignature


@dataclass(frozen=True)
class MockHandle:
    name: str = field(compare=False)
    signatures: Tuple[MethodSignature, ...] = field(default=(), compare=False)
    id: UUID = field(default_factory=uuid4)

    def signature_named(self, method_name: str) -> Optional[MethodSignature]:
        return next((signature for signature in self.signatures if signature.name == method_name), None)

    def declares(self, signature: MethodSignature) -> bool:
        return signature in self.signatures

    def __str__(self) -> str:
        return self.name
