import unittest

import pytest
import sample_app
from sample_app.repositories import InMemoryUserRepository, UnmarkedRepository, UserRepository
from sample_app.services.users import AuditedUserService, UserService

from litewire import (
    Container,
    ContainerState,
    MarkerDrivenPolicy,
    component,
    component_kind,
    discover_types,
    is_component,
    repository,
    service,
)


class TestMarkers(unittest.TestCase):
    def test_component_kind_names_the_decorator(self):
        assert component_kind(UserService) == "service"
        assert component_kind(InMemoryUserRepository) == "repository"
        assert component_kind(UnmarkedRepository) is None

    def test_marker_is_not_inherited(self):
        assert is_component(UserService)
        assert not is_component(AuditedUserService)

    def test_decorators_return_the_class(self):
        class Plain: ...

        assert component(Plain) is Plain
        assert component_kind(Plain) == "component"

    def test_decorating_a_function_raises(self):
        with pytest.raises(TypeError):
            service(lambda: None)  # type: ignore[arg-type]

    def test_decorator_names(self):
        assert [d.__name__ for d in (component, service, repository)] == ["component", "service", "repository"]


class TestDiscoverTypes(unittest.TestCase):
    def test_discovers_marked_classes_in_subpackages(self):
        assert discover_types("sample_app") == {InMemoryUserRepository, UserService}

    def test_accepts_module_object(self):
        assert discover_types(sample_app) == {InMemoryUserRepository, UserService}

    def test_scans_plain_module(self):
        assert discover_types("sample_app.repositories") == {InMemoryUserRepository}

    def test_imported_classes_are_found_once_in_their_defining_module(self):
        assert discover_types("sample_app.services") == {UserService}

    def test_custom_predicate(self):
        found = discover_types("sample_app", predicate=lambda cls: cls.__name__.startswith("Unmarked"))
        assert found == {UnmarkedRepository}

    def test_missing_package_raises(self):
        with pytest.raises(ModuleNotFoundError):
            discover_types("sample_app_does_not_exist")


class TestContainerForPackage(unittest.TestCase):
    def setUp(self):
        self.container = Container.for_package("sample_app")

    def test_uses_marker_policy(self):
        assert self.container.state is ContainerState.READY
        assert isinstance(self.container.policy, MarkerDrivenPolicy)
        assert self.container.types == frozenset({InMemoryUserRepository, UserService})

    def test_marked_field_is_wired_by_capability(self):
        svc = self.container.get_bean(UserService)
        assert svc.repository is self.container.get_bean(UserRepository)
        assert svc.name_of(1) == "ada"

    def test_unmarked_field_is_left_alone(self):
        assert self.container.get_bean(UserService).unmarked is None
