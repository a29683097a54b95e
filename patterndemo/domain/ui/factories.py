"""Widget factories. A factory only ever builds products of its own family."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from patterndemo.domain.ui.value_objects import UIFamily
from patterndemo.domain.ui.widgets import (
    Button,
    Checkbox,
    MacOSButton,
    MacOSCheckbox,
    WindowsButton,
    WindowsCheckbox,
)


class GUIFactory(ABC):
    """Abstract factory for a matched widget family."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacOSFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacOSButton()

    def create_checkbox(self) -> Checkbox:
        return MacOSCheckbox()


_FACTORIES: Dict[UIFamily, Type[GUIFactory]] = {
    UIFamily.WINDOWS: WindowsFactory,
    UIFamily.MACOS: MacOSFactory,
}


def get_gui_factory(family: str) -> GUIFactory:
    """
    Select the widget factory for a family.

    Raises:
        UnsupportedKindError: If family is not 'windows' or 'macos'
    """
    return _FACTORIES[UIFamily.parse(family)]()
