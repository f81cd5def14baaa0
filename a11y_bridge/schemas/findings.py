"""
Audit engine finding schemas.

Mirrors the JSON the audit engine returns from POST /check:

    {"results": [{"ruleId": "...", "path": {"dom": "/html[1]/body[1]/..."},
                  "reasonId": "...", "message": "...", "messageArgs": [...]}]}
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class FindingPath(BaseModel):
    """Structural locators attached to a finding."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    dom: str = Field(..., description="XPath locating the offending node in the scanned document")


class Finding(BaseModel):
    """One raw violation reported by the audit engine."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    rule_id: str = Field(..., alias="ruleId", description="Audit engine rule identifier")
    path: FindingPath = Field(..., description="Structural path pointer")
    reason_id: str = Field("", alias="reasonId", description="Rule-specific reason code")
    message: str = Field("", description="Message template, may contain placeholders")
    message_args: List[Any] = Field(
        default_factory=list,
        alias="messageArgs",
        description="Ordered placeholder substitution values",
    )

    @field_validator("reason_id", "message", "message_args", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Engines send null for absent reason/message fields; treat it as empty."""
        if v is None:
            return [] if info.field_name == "message_args" else ""
        return v

    @property
    def path_query(self) -> str:
        return self.path.dom


class EngineResponse(BaseModel):
    """Top-level audit engine response."""

    model_config = ConfigDict(extra="ignore")

    results: List[Finding] = Field(..., description="Findings in engine order")
