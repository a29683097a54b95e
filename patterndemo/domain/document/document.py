"""Clonable document template."""
import copy
from typing import Any, Dict, List, Mapping

import pydantic
from pydantic import Field

from patterndemo.domain.base.entity import Prototype, new_entity_id, utc_now
from patterndemo.domain.core.exceptions import UnsupportedKindError, ValidationError

EDITABLE_FIELDS = ("title", "content", "metadata")
METADATA_PREFIX = "metadata."


class Document(Prototype):
    """A document that serves as a template for independent copies."""

    title: str
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def clone(self) -> "Document":
        """
        Produce a value-independent copy.

        Field handling:
            metadata          deep-copied
            id, created_at    regenerated
            updated_at        reset
            title, content    passed through (immutable strings)
        """
        return Document(
            id=new_entity_id(),
            created_at=utc_now(),
            updated_at=None,
            title=self.title,
            content=self.content,
            metadata=copy.deepcopy(self.metadata),
        )

    def apply_edits(self, edits: Mapping[str, Any]) -> None:
        """
        Apply field edits in place.

        Recognized fields are 'title', 'content', 'metadata' (a mapping merged
        into the existing metadata) and 'metadata.<key>' (a single entry).

        Raises:
            UnsupportedKindError: If an edit names any other field
            ValidationError: If an edited value has the wrong type
        """
        for field_name, value in edits.items():
            if field_name in ("title", "content"):
                try:
                    setattr(self, field_name, value)
                except pydantic.ValidationError as e:
                    raise ValidationError(
                        f"Invalid value for document field '{field_name}': {value!r}",
                        details={"field": field_name, "errors": e.errors()},
                    ) from e
            elif field_name == "metadata":
                if not isinstance(value, Mapping):
                    raise UnsupportedKindError("metadata edit", type(value).__name__, ["mapping"])
                self.metadata = {**self.metadata, **copy.deepcopy(dict(value))}
            elif field_name.startswith(METADATA_PREFIX) and len(field_name) > len(METADATA_PREFIX):
                self.metadata = {**self.metadata, field_name[len(METADATA_PREFIX):]: value}
            else:
                raise UnsupportedKindError(
                    "document field", field_name, list(EDITABLE_FIELDS) + [f"{METADATA_PREFIX}<key>"]
                )
        if edits:
            self.touch()

    def describe(self) -> List[str]:
        if self.metadata:
            rendered = ", ".join(f"{key}={self.metadata[key]}" for key in sorted(self.metadata))
        else:
            rendered = "(none)"
        return [
            f"Title: {self.title}",
            f"Content: {self.content}",
            f"Metadata: {rendered}",
        ]
