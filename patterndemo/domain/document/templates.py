"""Built-in document templates registered with the prototype registry."""
from typing import Dict

from patterndemo.domain.document.document import Document


def default_templates() -> Dict[str, Document]:
    return {
        "report": Document(
            title="Quarterly Report",
            content="Summary of results for the quarter.",
            metadata={"author": "Finance", "classification": "internal"},
        ),
        "invoice": Document(
            title="Invoice",
            content="Amount due within 30 days.",
            metadata={"currency": "USD", "terms": "net-30"},
        ),
    }
