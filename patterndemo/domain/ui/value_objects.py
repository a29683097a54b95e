"""UI value objects."""
from patterndemo.domain.base.value_objects import Selector


class UIFamily(Selector):
    WINDOWS = "windows"
    MACOS = "macos"

    @classmethod
    def selector_name(cls) -> str:
        return "UI family"
