"""Parse Report.

Structured summary of every problem found during one parse pass.
"""

from pydantic import BaseModel, Field


class ParseReport(BaseModel):
    """Problems found in one pass, grouped by category.

    Entries keep the full environment name (prefix included) so each one
    points at the offending variable.
    """

    missing_keys: list[str] = Field(
        default_factory=list, description="Declared settings with no variable (PREFIXNAME)"
    )
    extra_keys: list[str] = Field(
        default_factory=list, description="Variables with no declared setting (PREFIXNAME)"
    )
    malformed_entries: list[str] = Field(
        default_factory=list, description="Values that failed parsing (PREFIXNAME=VALUE)"
    )
    unclassified_errors: list[str] = Field(
        default_factory=list, description="Other setter failures (PREFIXNAME=VALUE: reason)"
    )

    @property
    def is_error(self) -> bool:
        return bool(
            self.missing_keys or self.extra_keys or self.malformed_entries or self.unclassified_errors
        )

    def __str__(self) -> str:
        sections = [
            ("missing environment variables", self.missing_keys),
            ("unexpected environment variables", self.extra_keys),
            ("malformed values", self.malformed_entries),
            ("setting errors", self.unclassified_errors),
        ]
        parts = [f"{title}: {', '.join(entries)}" for title, entries in sections if entries]
        if not parts:
            return "no environment problems"
        return "; ".join(parts)
