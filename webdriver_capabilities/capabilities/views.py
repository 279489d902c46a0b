"""Data models describing the session parameters document."""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Capabilities(BaseModel):
    """The ``capabilities`` object of a new session request."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    always_match: Dict[str, Any] = Field(
        default_factory=dict,
        alias="alwaysMatch",
        description="Capabilities required of the session"
    )
    first_match: List[Dict[str, Any]] = Field(
        default_factory=list,
        alias="firstMatch",
        description="Ordered alternatives, the first satisfiable one wins"
    )

    @model_validator(mode='after')
    def validate_single_key_entries(self):
        """Ensure each firstMatch entry names exactly one capability."""
        for index, entry in enumerate(self.first_match):
            if len(entry) != 1:
                raise ValueError(
                    f"firstMatch[{index}] must have exactly one key, got {len(entry)}"
                )
        return self


class SessionParameters(BaseModel):
    """
    Validated view of a session parameters document.

    Root keys other than ``capabilities`` (e.g. credentials set with
    ``set_root_key``) are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    capabilities: Capabilities = Field(default_factory=Capabilities)

    @classmethod
    def empty_document(cls) -> Dict[str, Any]:
        """Build the minimal document every store starts from."""
        return cls().to_document()

    def to_document(self) -> Dict[str, Any]:
        """Convert back to the wire-shaped dictionary."""
        return self.model_dump(by_alias=True)
