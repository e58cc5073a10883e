"""
Classification of generation failures by their message text.

The Gemini service does not give a stable error code for a missing or revoked
key, so failures are matched on substrings of the error message. The rules are
plain data: the first rule with a marker contained in the message wins, and
anything unmatched becomes an UnknownFailure carrying the original message.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from titles.domain.models import (
    CredentialFailure,
    Outcome,
    OutcomeKind,
    UnknownFailure,
)


INVALID_KEY_MESSAGE = "Your API key appears to be invalid. Please select a valid key."
FAILURE_PREFIX = "Failed to generate titles. "

CREDENTIAL_ERROR_MARKERS: Tuple[str, ...] = (
    "API Key must be set",
    "Requested entity was not found",
)


@dataclass(frozen=True)
class ErrorRule:
    """Maps any of ``markers`` found in an error message to an outcome."""

    markers: Tuple[str, ...]
    kind: OutcomeKind
    message: str
    invalidates_credential: bool = field(default=False)

    def __post_init__(self):
        if not self.markers:
            raise ValueError("An error rule needs at least one marker")
        if self.kind not in (
            OutcomeKind.CREDENTIAL_FAILURE,
            OutcomeKind.UNKNOWN_FAILURE,
        ):
            raise ValueError(f"Error rules cannot produce {self.kind.value}")

    def matches(self, error_message: str) -> bool:
        return any(marker in error_message for marker in self.markers)

    def to_outcome(self) -> Outcome:
        if self.kind is OutcomeKind.CREDENTIAL_FAILURE:
            return CredentialFailure(self.message)
        return UnknownFailure(self.message)


def credential_rule(extra_markers: Iterable[str] = ()) -> ErrorRule:
    """The invalid/missing key rule, optionally extended with more markers."""
    markers = CREDENTIAL_ERROR_MARKERS + tuple(
        m for m in extra_markers if m not in CREDENTIAL_ERROR_MARKERS
    )
    return ErrorRule(
        markers=markers,
        kind=OutcomeKind.CREDENTIAL_FAILURE,
        message=INVALID_KEY_MESSAGE,
        invalidates_credential=True,
    )


def error_message_of(error: BaseException) -> str:
    message = str(error)
    return message if message else "An unknown error occurred."


class ErrorClassifier:
    """Turns an exception raised during generation into an Outcome."""

    def __init__(
        self,
        rules: Optional[List[ErrorRule]] = None,
        fallback_prefix: str = FAILURE_PREFIX,
    ):
        self.rules = list(rules) if rules is not None else [credential_rule()]
        self.fallback_prefix = fallback_prefix

    def match(self, error: BaseException) -> Optional[ErrorRule]:
        message = error_message_of(error)
        for rule in self.rules:
            if rule.matches(message):
                return rule
        return None

    def classify(self, error: BaseException) -> Outcome:
        rule = self.match(error)
        if rule is not None:
            return rule.to_outcome()
        return UnknownFailure(self.fallback_prefix + error_message_of(error))

    def invalidates_credential(self, error: BaseException) -> bool:
        rule = self.match(error)
        return rule is not None and rule.invalidates_credential
