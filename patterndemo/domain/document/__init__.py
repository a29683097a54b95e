"""Document bounded context - the Prototype demonstration."""

from .document import EDITABLE_FIELDS, Document
from .templates import default_templates

__all__: list[str] = ["Document", "EDITABLE_FIELDS", "default_templates"]
