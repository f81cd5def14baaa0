"""Metadata synthesizer for rule-specific dynamic values."""

from typing import Any, Optional, Sequence

from ..schemas.report import IssueMetadata


def synthesize(
    reason_id: str,
    message: str,
    message_args: Optional[Sequence[Any]] = None,
) -> IssueMetadata:
    """
    Package a finding's reason, message template and arguments verbatim.

    Placeholder count is not checked against the arguments; rendering is the
    UI's job.
    """
    return IssueMetadata(
        reason_id=reason_id,
        message=message,
        message_args=list(message_args or []),
    )
