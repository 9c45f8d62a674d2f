from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import InjectionError, ResolutionError
from ._introspect import describe


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ._introspect import FieldSpec
    from ._policy import InjectabilityPolicy
    from ._store import BeanStore


class Injector:
    """Second construction phase: assign beans into the fields the policy selects."""

    def __init__(self, policy: InjectabilityPolicy) -> None:
        self._policy = policy

    def inject_all(self, store: BeanStore) -> int:
        """Wire every bean in ``store`` and return the number of assigned fields.

        No bean is created here; every dependency must already be in the store.
        """
        injected = 0
        for bean in store:
            injected += self.inject(bean, store)
        return injected

    def inject(self, bean: object, store: BeanStore) -> int:
        bean_type = type(bean)
        injected = 0
        for field in describe(bean_type).fields:
            if not self._policy.is_injectable(field, store):
                continue
            self._assign(bean, field, store)
            injected += 1
        return injected

    def _assign(self, bean: object, field: FieldSpec, store: BeanStore) -> None:
        bean_type = type(bean)
        if not field.resolved:
            raise InjectionError(bean_type, field.name, f"unresolvable annotation ({field.unresolved})")

        if not field.is_class:
            msg = f"declared type {field.declared_type!r} is not a class"
            raise InjectionError(bean_type, field.name, msg)

        try:
            dependency = store.find_by_capability(field.declared_type)
        except ResolutionError as exc:
            raise InjectionError(bean_type, field.name, str(exc)) from exc

        try:
            # Bypasses custom __setattr__ and frozen dataclasses.
            object.__setattr__(bean, field.name, dependency)
        except AttributeError as exc:
            raise InjectionError(bean_type, field.name, f"attribute is not writable ({exc})") from exc
        logger.debug(
            "Injected %s into %s.%s", type(dependency).__qualname__, bean_type.__qualname__, field.name
        )
