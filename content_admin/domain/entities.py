"""Collection domain entity.

Represents a logical content type as declared by the schema, independent
of how documents are stored or fetched.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Collection:
    """A content type: name, label, storage format and shape variants.

    ``documents`` stays None unless the collection was fetched together
    with its documents; the facade only ever fills it from one remote call.
    """

    name: str
    label: str | None = None
    format: str | None = None
    path: str | None = None
    templates: list[dict[str, Any]] = field(default_factory=list)
    fields: list[dict[str, Any]] = field(default_factory=list)
    documents: dict[str, Any] | None = None

    @classmethod
    def from_schema(cls, raw: dict[str, Any]) -> "Collection":
        """Build a Collection from one entry of the schema's ``collections`` list."""
        return cls(
            name=raw["name"],
            label=raw.get("label"),
            format=raw.get("format"),
            path=raw.get("path"),
            templates=list(raw.get("templates") or []),
            fields=list(raw.get("fields") or []),
        )

    def title_field_name(self) -> str | None:
        """Return the name of the field flagged ``isTitle``, if any.

        Only collections declared with top-level ``fields`` can carry a
        title field; template-based collections return None.
        """
        if self.templates:
            return None
        for f in self.fields:
            if f.get("isTitle"):
                return f.get("name")
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "format": self.format,
            "path": self.path,
            "templates": self.templates,
            "fields": self.fields,
        }
        if self.documents is not None:
            data["documents"] = self.documents
        return data
