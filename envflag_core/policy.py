"""Settings Policy.

Immutable record of the prefix and error-handling choices of one engine.
"""

from pydantic import BaseModel, ConfigDict, Field


class SettingsPolicy(BaseModel):
    """Prefix plus the problem categories treated as errors."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., description="Case-sensitive prefix of every recognized variable")
    error_on_extra_keys: bool = Field(
        default=False, description="Report prefixed variables with no declared setting"
    )
    error_on_missing_keys: bool = Field(
        default=False, description="Report declared settings with no variable"
    )
    error_on_parse_errors: bool = Field(
        default=True, description="Report values that fail type-specific parsing"
    )
    usage_on_error: bool = Field(
        default=False, description="Write the usage listing to stderr when a pass fails"
    )
