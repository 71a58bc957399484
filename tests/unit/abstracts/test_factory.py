##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `factory.py` module of the `abstracts/` directory.
"""

from typing import Any, Type

import pytest
from pytest_mock import MockerFixture

from assortsync.abstracts import AssortsyncBaseFactory


# --- Dummy Components ---
class DummyComponent:
    """A testable dummy component."""


class DummyComponentWithInit:
    def __init__(self, foo=None, bar=None):
        self.foo = foo
        self.bar = bar


class ExplodingComponent:
    def __init__(self):
        raise RuntimeError("boom")


# --- Concrete Subclass for Testing ---
class TestableFactory(AssortsyncBaseFactory):
    def _register_builtins(self) -> None:
        self.register("dummy", DummyComponent, aliases=["alias_dummy"])

    def _validate_component(self, component_class: Any) -> None:
        if not isinstance(component_class, type):
            raise TypeError("Component must be a class")

    def _entry_point_group(self) -> str:
        return "assortsync.test_plugins"

    def _raise_component_error_class(self, msg: str) -> Type[Exception]:
        raise LookupError(msg)  # Use a distinct error type for test verification


class TestAssortsyncBaseFactory:
    """
    Unit test suite for the `AssortsyncBaseFactory` abstract base class.

    The tests run against a concrete subclass (`TestableFactory`) with simple
    dummy components, so no real entry points or plugins are involved.
    """

    @pytest.fixture
    def factory(self, mocker: MockerFixture) -> TestableFactory:
        """
        An instance of the dummy `TestableFactory` class. Resets on each test.

        Entry point discovery is stubbed out so installed plugins never leak in.

        Args:
            mocker: PyTest mocker fixture.

        Returns:
            An instance of the dummy `TestableFactory` class for testing.
        """
        mocker.patch("assortsync.abstracts.factory.entry_points", return_value=[])
        return TestableFactory()

    def test_register_and_list(self, factory: TestableFactory):
        """
        Test that components are registered and listed properly.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        assert "dummy" in factory.list_available()
        assert factory._registry["dummy"] is DummyComponent
        assert factory._aliases["alias_dummy"] == "dummy"

    def test_create_component_without_config(self, factory: TestableFactory):
        """
        Test instantiation of a registered component with no config.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        instance = factory.create("dummy")
        assert isinstance(instance, DummyComponent)

    def test_create_component_with_config(self, factory: TestableFactory):
        """
        Test instantiation of a component with constructor args.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        factory.register("with_init", DummyComponentWithInit)
        instance = factory.create("with_init", config={"foo": "a", "bar": 42})
        assert isinstance(instance, DummyComponentWithInit)
        assert instance.foo == "a"
        assert instance.bar == 42

    def test_create_component_using_alias(self, factory: TestableFactory):
        """
        Test alias resolution in component creation.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        assert isinstance(factory.create("alias_dummy"), DummyComponent)

    def test_create_unregistered_component_raises(self, factory: TestableFactory):
        """
        Test that creating an unknown component raises the subclass's error type.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        with pytest.raises(LookupError, match="not supported"):
            factory.create("unknown")

    def test_create_wraps_constructor_failures(self, factory: TestableFactory):
        """
        Test that an exception raised while instantiating is wrapped in a ValueError.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        factory.register("exploding", ExplodingComponent)
        with pytest.raises(ValueError, match="Failed to create component 'exploding': boom"):
            factory.create("exploding")

    def test_register_invalid_component_raises(self, factory: TestableFactory):
        """
        Test that register raises TypeError for non-class input.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        with pytest.raises(TypeError):
            factory.register("bad", object())  # not a class

    def test_get_component_info(self, factory: TestableFactory):
        """
        Test metadata returned from `get_component_info`.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        info = factory.get_component_info("alias_dummy")
        assert info["name"] == "dummy"
        assert info["class"] == "DummyComponent"
        assert info["module"] == DummyComponent.__module__
        assert info["description"] == "A testable dummy component."

    def test_get_component_info_for_invalid_component(self, factory: TestableFactory):
        """
        Test that get_component_info raises when the component is unknown.

        Args:
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        with pytest.raises(LookupError, match="not supported"):
            factory.get_component_info("not_registered")

    def test_discover_plugins_registers_entry_points(self, mocker: MockerFixture, factory: TestableFactory):
        """
        Test that plugins found through entry points are registered under their entry point name.

        Args:
            mocker: PyTest mocker fixture.
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        entry_point = mocker.MagicMock()
        entry_point.name = "plugin"
        entry_point.load.return_value = DummyComponentWithInit
        mocker.patch("assortsync.abstracts.factory.entry_points", return_value=[entry_point])

        assert "plugin" in factory.list_available()
        assert isinstance(factory.create("plugin"), DummyComponentWithInit)

    def test_discover_plugins_skips_broken_plugins(self, mocker: MockerFixture, factory: TestableFactory):
        """
        Test that a plugin failing to load is skipped with a warning.

        Args:
            mocker: PyTest mocker fixture.
            factory: An instance of the dummy `TestableFactory` class for testing.
        """
        entry_point = mocker.MagicMock()
        entry_point.name = "broken"
        entry_point.load.side_effect = ImportError("missing module")
        mocker.patch("assortsync.abstracts.factory.entry_points", return_value=[entry_point])

        assert "broken" not in factory.list_available()
