"""Tests for the clonable document prototype."""

import pytest

from patterndemo.domain.core.exceptions import UnsupportedKindError, ValidationError
from patterndemo.domain.document import Document, default_templates


class TestDocumentClone:
    """Test clone field handling."""

    def setup_method(self):
        self.original = Document(
            title="Report",
            content="Body",
            metadata={"author": "Ann", "tags": ["draft"]},
        )

    def test_clone_passes_through_title_and_content(self):
        clone = self.original.clone()

        assert clone.title == "Report"
        assert clone.content == "Body"

    def test_clone_regenerates_identity(self):
        clone = self.original.clone()

        assert clone.id != self.original.id
        assert clone != self.original
        assert clone.created_at >= self.original.created_at
        assert clone.updated_at is None

    def test_clone_deep_copies_metadata(self):
        clone = self.original.clone()

        clone.metadata["tags"].append("final")
        clone.metadata["author"] = "Bob"

        assert self.original.metadata == {"author": "Ann", "tags": ["draft"]}

    def test_mutating_original_does_not_affect_clone(self):
        clone = self.original.clone()

        self.original.title = "Changed"
        self.original.metadata["tags"].append("x")

        assert clone.title == "Report"
        assert clone.metadata["tags"] == ["draft"]


class TestDocumentEdits:
    """Test edit application."""

    def test_title_and_content_edits(self):
        document = Document(title="T", content="C")

        document.apply_edits({"title": "T2", "content": "C2"})

        assert document.title == "T2"
        assert document.content == "C2"
        assert document.updated_at is not None

    def test_metadata_mapping_is_merged(self):
        document = Document(title="T", content="C", metadata={"a": 1})

        document.apply_edits({"metadata": {"b": 2}})

        assert document.metadata == {"a": 1, "b": 2}

    def test_single_metadata_entry(self):
        document = Document(title="T", content="C", metadata={"a": 1})

        document.apply_edits({"metadata.a": 5})

        assert document.metadata == {"a": 5}

    def test_metadata_edit_does_not_alias_value(self):
        document = Document(title="T", content="C")
        new_metadata = {"nested": {"k": "v"}}

        document.apply_edits({"metadata": new_metadata})
        new_metadata["nested"]["k"] = "changed"

        assert document.metadata["nested"] == {"k": "v"}

    @pytest.mark.parametrize("field_name", ["id", "author", "metadata."])
    def test_unknown_field_rejected(self, field_name):
        document = Document(title="T", content="C")

        with pytest.raises(UnsupportedKindError, match="document field"):
            document.apply_edits({field_name: "x"})

    def test_metadata_edit_requires_mapping(self):
        document = Document(title="T", content="C")

        with pytest.raises(UnsupportedKindError):
            document.apply_edits({"metadata": "not-a-mapping"})

    @pytest.mark.parametrize("field_name,value", [("title", 5), ("content", None), ("title", ["T2"])])
    def test_wrongly_typed_edit_raises_domain_error(self, field_name, value):
        document = Document(title="T", content="C")

        with pytest.raises(ValidationError) as exc_info:
            document.apply_edits({field_name: value})

        assert exc_info.value.details["field"] == field_name
        assert exc_info.value.details["errors"]
        assert (document.title, document.content) == ("T", "C")

    def test_empty_edits_leave_document_untouched(self):
        document = Document(title="T", content="C")

        document.apply_edits({})

        assert document.updated_at is None


class TestDocumentDescribe:
    """Test trace lines."""

    def test_describe_sorts_metadata_keys(self):
        document = Document(title="T", content="C", metadata={"z": 1, "a": 2})

        assert document.describe() == ["Title: T", "Content: C", "Metadata: a=2, z=1"]

    def test_describe_without_metadata(self):
        assert Document(title="T", content="C").describe()[-1] == "Metadata: (none)"

    def test_default_templates(self):
        templates = default_templates()

        assert set(templates) == {"report", "invoice"}
        assert templates["invoice"].metadata["terms"] == "net-30"
