"""Per-run report of unresolved link targets."""

from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Unresolved targets per document, in the order they were found.

    A document is only recorded when it has at least one unresolved target.
    """

    invalid_links: dict[str, list[str]] = field(default_factory=dict)

    def add(self, document: str, invalid: list[str]) -> None:
        """Record the unresolved targets of ``document`` (ignored when empty)."""
        if invalid:
            self.invalid_links.setdefault(document, []).extend(invalid)

    def __bool__(self) -> bool:
        return bool(self.invalid_links)

    def __len__(self) -> int:
        return len(self.invalid_links)

    def to_dict(self) -> dict[str, list[str]]:
        """Copy of the mapping, safe to serialize."""
        return {document: list(targets) for document, targets in self.invalid_links.items()}
