from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from ._errors import ContainerStateError
from ._injector import Injector
from ._markers import is_component
from ._policy import InjectabilityPolicy, Policy, TypeDrivenPolicy, resolve_policy
from ._scanner import discover_types
from ._store import BeanStore


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import ModuleType

    T = TypeVar("T")


class ContainerState(Enum):
    UNINITIALIZED = "uninitialized"
    INSTANTIATING = "instantiating"
    INJECTING = "injecting"
    READY = "ready"
    FAILED = "failed"


class Container:
    """Field-injection container.

    - instantiates every registered class once, with no arguments
    - then injects beans into the fields the policy selects
    - read-only lookup by exact type or capability afterwards.
    """

    def __init__(
        self,
        types: Iterable[type],
        policy: InjectabilityPolicy | Policy | str | None = None,
    ) -> None:
        self._policy = TypeDrivenPolicy() if policy is None else resolve_policy(policy)
        self._state = ContainerState.UNINITIALIZED
        self._store: BeanStore | None = None
        self._build(types)

    @classmethod
    def for_package(
        cls,
        package: str | ModuleType,
        *,
        predicate: Callable[[type], bool] = is_component,
        policy: InjectabilityPolicy | Policy | str = Policy.MARKER,
    ) -> Container:
        """Build a container from the component classes found under ``package``.

        Example:
          container = Container.for_package("myapp.services")

        """
        return cls(discover_types(package, predicate), policy=policy)

    def _build(self, types: Iterable[type]) -> None:
        if self._state is not ContainerState.UNINITIALIZED:
            msg = f"Container construction already ran (state: {self._state.value})"
            raise ContainerStateError(msg)

        try:
            self._state = ContainerState.INSTANTIATING
            store = BeanStore.build(types)

            self._state = ContainerState.INJECTING
            injected = Injector(self._policy).inject_all(store)
        except Exception:
            self._state = ContainerState.FAILED
            raise

        self._store = store
        self._state = ContainerState.READY
        logger.info("Container ready: %d bean(s), %d injected field(s), policy %r", len(store), injected, self._policy)

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def policy(self) -> InjectabilityPolicy:
        return self._policy

    @property
    def types(self) -> frozenset[type]:
        return self._ready_store().types

    def get_bean(self, tp: type[T]) -> T:
        """Return the bean of exact type ``tp``, or the single bean implementing it.

        Always the same object for the same type.
        """
        return self._ready_store().find_by_capability(tp)

    def _ready_store(self) -> BeanStore:
        if self._state is not ContainerState.READY or self._store is None:
            msg = f"Container is not ready (state: {self._state.value})"
            raise ContainerStateError(msg)
        return self._store

    def __contains__(self, tp: object) -> bool:
        return tp in self._ready_store()

    def __len__(self) -> int:
        return len(self._ready_store())

    def __repr__(self) -> str:
        return f"Container(state={self._state.value}, beans={len(self._store) if self._store else 0})"
