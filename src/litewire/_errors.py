from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence


class ContainerError(RuntimeError):
    pass


class ContainerStateError(ContainerError):
    pass


class InstantiationError(ContainerError):
    """A registered type could not be constructed with no arguments."""

    def __init__(self, bean_type: object, reason: str) -> None:
        super().__init__(f"Cannot instantiate {_name(bean_type)}: {reason}")
        self.bean_type = bean_type


class ResolutionError(ContainerError):
    pass


class NotFoundError(ResolutionError, LookupError):
    def __init__(self, requested: type) -> None:
        super().__init__(f"No bean found for type {_name(requested)}")
        self.requested = requested


class AmbiguousBeanError(ResolutionError):
    """More than one bean implements the requested capability and none has it as its exact type."""

    def __init__(self, requested: type, candidates: Sequence[type]) -> None:
        names = ", ".join(sorted(_name(c) for c in candidates))
        super().__init__(f"Ambiguous bean for type {_name(requested)}: candidates are {names}")
        self.requested = requested
        self.candidates = tuple(candidates)


class InjectionError(ContainerError):
    def __init__(self, bean_type: type, field_name: str, reason: str) -> None:
        super().__init__(f"Cannot inject field '{field_name}' of {_name(bean_type)}: {reason}")
        self.bean_type = bean_type
        self.field_name = field_name


def _name(tp: object) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)
