"""UI bounded context - the Abstract Factory demonstration with widget families."""

from .factories import GUIFactory, MacOSFactory, WindowsFactory, get_gui_factory
from .widgets import (
    Button,
    Checkbox,
    MacOSButton,
    MacOSCheckbox,
    WindowsButton,
    WindowsCheckbox,
)
from .value_objects import UIFamily

__all__: list[str] = [
    "Button",
    "Checkbox",
    "WindowsButton",
    "WindowsCheckbox",
    "MacOSButton",
    "MacOSCheckbox",
    "GUIFactory",
    "WindowsFactory",
    "MacOSFactory",
    "UIFamily",
    "get_gui_factory",
]
