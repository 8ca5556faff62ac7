from dataclasses import dataclass
from inspect import Parameter, Signature, getattr_static, isfunction, signature
from types import GenericAlias
from typing import Any, Callable, Dict, Tuple, Type


@dataclass(frozen=True)
class MethodSignature:
    name: str
    parameter_names: Tuple[str, ...] = ()
    parameter_types: Tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.parameter_names)

    def __str__(self) -> str:
        parameters = ', '.join(
            f'{parameter_name}: {parameter_type}'
            for parameter_name, parameter_type in zip(self.parameter_names, self.parameter_types)
        )
        return f'{self.name}({parameters})'


def method_signature_of(name: str, python_signature: Signature) -> MethodSignature:
    parameters = list(python_signature.parameters.values())

    return MethodSignature(
        name,
        tuple(parameter.name for parameter in parameters),
        tuple(_describe_annotation(parameter.annotation) for parameter in parameters)
    )


def declared_methods_of(cls: Type[Any] | Callable[..., Any]) -> Dict[str, Signature]:
    declared_methods: Dict[str, Signature] = dict()

    for name in dir(cls):
        if name.startswith('_'):
            continue

        static_attribute = getattr_static(cls, name)

        if isinstance(static_attribute, (staticmethod, classmethod)):
            # Looked up through the class, static methods have no receiver and class methods come pre-bound
            declared_methods[name] = signature(getattr(cls, name))
        elif isfunction(static_attribute):
            instance_method_signature = signature(static_attribute)
            declared_methods[name] = instance_method_signature.replace(
                parameters=list(instance_method_signature.parameters.values())[1:]
            )

    return declared_methods


def _describe_annotation(annotation: Any) -> str:
    if annotation is Parameter.empty:
        return 'Any'

    if isinstance(annotation, str):
        return annotation

    if isinstance(annotation, type) and not isinstance(annotation, GenericAlias):
        return annotation.__qualname__

    return str(annotation).replace('typing.', '')
