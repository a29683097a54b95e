"""Widget products. Every family provides one button and one checkbox."""
from abc import ABC, abstractmethod


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class WindowsButton(Button):
    def render(self) -> str:
        return "Rendering a button in Windows style"


class WindowsCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering a checkbox in Windows style"


class MacOSButton(Button):
    def render(self) -> str:
        return "Rendering a button in macOS style"


class MacOSCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering a checkbox in macOS style"
