from inspect import Parameter, Signature, signature
from logging import Logger
from types import GenericAlias
from typing import Any, Callable, Dict, Optional, Tuple, is_typeddict

from test_doubles.domain.answer_arity_error import AnswerArityError
from test_doubles.domain.behavior import Behavior, ComputeAnswer, InvocationAnswer, ReturnValue, ThrowError
from test_doubles.domain.invocation import Invocation

# int is acceptable where float is expected, and both where complex is
_NUMERIC_PROMOTIONS: Dict[type, Tuple[type, ...]] = {float: (int, float), complex: (int, float, complex)}


class AnswerEngine:

    def __init__(self, logger: Logger):
        self.__logger = logger

    def execute(self, behavior: Behavior, invocation: Invocation) -> Any:
        if isinstance(behavior, ReturnValue):
            return behavior.value

        if isinstance(behavior, ThrowError):
            error = behavior.instantiate()
            self.__logger.debug(f'Raising {error!r} for {invocation}')
            # A registered instance is raised on every call, so drop the frames left by the previous raise
            raise error.with_traceback(None)

        if isinstance(behavior, ComputeAnswer):
            self.__check_answer_accepts_arguments(behavior.function, invocation)
            return behavior.function(*invocation.arguments)

        if isinstance(behavior, InvocationAnswer):
            return behavior.function(invocation)

        raise TypeError(f'Unsupported behaviour {behavior!r} for {invocation}')

    @staticmethod
    def __check_answer_accepts_arguments(answer: Callable[..., Any], invocation: Invocation) -> None:
        answer_signature = _signature_of(answer)

        # Builtins and some C extensions expose no signature, so are invoked unchecked
        if answer_signature is None:
            return

        try:
            bound_arguments = answer_signature.bind(*invocation.arguments)
        except TypeError as e:
            raise AnswerArityError(
                f'Answer {_name_of(answer)}{answer_signature} cannot be applied to the '
                f'{len(invocation.arguments)} argument(s) of {invocation}: {e}'
            ) from e

        for parameter_name, value in bound_arguments.arguments.items():
            parameter = answer_signature.parameters[parameter_name]

            if parameter.kind is Parameter.VAR_KEYWORD or not _is_checkable(parameter.annotation):
                continue

            values = value if parameter.kind is Parameter.VAR_POSITIONAL else (value,)
            accepted_types = _NUMERIC_PROMOTIONS.get(parameter.annotation, parameter.annotation)

            for argument in values:
                if not isinstance(argument, accepted_types):
                    raise AnswerArityError(
                        f'Answer {_name_of(answer)} expects parameter "{parameter_name}" to be '
                        f'{parameter.annotation.__qualname__} but {invocation} passed {argument!r}'
                    )


def _signature_of(answer: Callable[..., Any]) -> Optional[Signature]:
    try:
        return signature(answer)
    except (TypeError, ValueError):
        return None


def _is_checkable(annotation: Any) -> bool:
    return (
        isinstance(annotation, type)
        and not isinstance(annotation, GenericAlias)
        and annotation not in (Any, Parameter.empty)
        and not is_typeddict(annotation)
        # isinstance refuses protocols not decorated with @runtime_checkable
        and not (getattr(annotation, '_is_protocol', False)
                 and not getattr(annotation, '_is_runtime_protocol', False))
    )


def _name_of(answer: Callable[..., Any]) -> str:
    return getattr(answer, '__qualname__', repr(answer))
