"""Tests for message based failure classification."""

import pytest

from titles.domain.error_rules import (
    CREDENTIAL_ERROR_MARKERS,
    INVALID_KEY_MESSAGE,
    ErrorClassifier,
    ErrorRule,
    credential_rule,
)
from titles.domain.models import CredentialFailure, OutcomeKind, UnknownFailure


class TestErrorClassifier:
    def test_missing_key_marker_is_credential_failure(self):
        classifier = ErrorClassifier()
        error = RuntimeError("An API Key must be set when running in a browser")

        assert classifier.classify(error) == CredentialFailure(INVALID_KEY_MESSAGE)
        assert classifier.invalidates_credential(error)

    def test_entity_not_found_marker_is_credential_failure(self):
        classifier = ErrorClassifier()
        error = Exception("404 NOT_FOUND. Requested entity was not found.")

        assert classifier.classify(error) == CredentialFailure(INVALID_KEY_MESSAGE)
        assert classifier.invalidates_credential(error)

    def test_unrelated_message_keeps_original_text(self):
        classifier = ErrorClassifier()
        error = Exception("rate limit exceeded")

        outcome = classifier.classify(error)

        assert outcome == UnknownFailure("Failed to generate titles. rate limit exceeded")
        assert not classifier.invalidates_credential(error)

    def test_empty_message_gets_generic_text(self):
        outcome = ErrorClassifier().classify(ValueError())

        assert outcome == UnknownFailure(
            "Failed to generate titles. An unknown error occurred."
        )

    def test_marker_wins_over_malformed_looking_message(self):
        error = ValueError("Expecting value: API Key must be set {garbled")

        assert ErrorClassifier().classify(error).kind is OutcomeKind.CREDENTIAL_FAILURE

    def test_markers_are_case_sensitive(self):
        error = Exception("api key must be set")

        assert ErrorClassifier().classify(error).kind is OutcomeKind.UNKNOWN_FAILURE

    def test_first_matching_rule_wins(self):
        quota_rule = ErrorRule(
            markers=("RESOURCE_EXHAUSTED",),
            kind=OutcomeKind.UNKNOWN_FAILURE,
            message="Quota exhausted, try again later.",
        )
        classifier = ErrorClassifier([quota_rule, credential_rule()])

        outcome = classifier.classify(Exception("429 RESOURCE_EXHAUSTED"))

        assert outcome == UnknownFailure("Quota exhausted, try again later.")
        assert not classifier.invalidates_credential(Exception("429 RESOURCE_EXHAUSTED"))


class TestCredentialRule:
    def test_default_markers(self):
        assert credential_rule().markers == CREDENTIAL_ERROR_MARKERS

    def test_extra_markers_are_appended_once(self):
        rule = credential_rule(["API key not valid", "API Key must be set"])

        assert rule.markers == CREDENTIAL_ERROR_MARKERS + ("API key not valid",)
        assert rule.matches("400 INVALID_ARGUMENT. API key not valid.")
        assert rule.invalidates_credential


class TestErrorRuleValidation:
    def test_rule_needs_markers(self):
        with pytest.raises(ValueError):
            ErrorRule(markers=(), kind=OutcomeKind.UNKNOWN_FAILURE, message="x")

    def test_rule_cannot_produce_success(self):
        with pytest.raises(ValueError):
            ErrorRule(markers=("x",), kind=OutcomeKind.SUCCESS, message="x")
