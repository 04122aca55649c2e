"""Tests for the dispatch outcome aggregator."""

import pytest

from app.services.outcome import DispatchOutcome, aggregate_outcomes


def outcome(succeeded: bool) -> DispatchOutcome:
    return DispatchOutcome(attempted=True, succeeded=succeeded)


class TestAggregateOutcomes:
    """Tests for aggregate_outcomes with a record store configured."""

    @pytest.mark.parametrize(
        "email_ok, record_ok, status_code, key, text",
        [
            (True, True, 200, "message", "Success! Data saved and email sent."),
            (True, False, 200, "message", "Email sent but failed to save to sheet."),
            (False, True, 200, "message", "Data saved to sheet but email failed to send."),
            (False, False, 500, "error", "Both email and sheet operations failed."),
        ],
    )
    def test_decision_table(self, email_ok, record_ok, status_code, key, text):
        """Each combination maps to exactly one status and message."""
        result_status, body = aggregate_outcomes(outcome(email_ok), outcome(record_ok))

        assert result_status == status_code
        assert body == {key: text, "email": email_ok, "sheet": record_ok}

    def test_partial_success_is_not_an_error(self):
        """A single landed side effect is still a 200."""
        status_code, body = aggregate_outcomes(outcome(False), outcome(True))

        assert status_code == 200
        assert "error" not in body


class TestEmailOnlyConfiguration:
    """Tests for aggregate_outcomes without a record store."""

    def test_email_success(self):
        status_code, body = aggregate_outcomes(outcome(True))

        assert status_code == 200
        assert body == {"message": "Success!", "email": True, "sheet": False}

    def test_email_failure(self):
        status_code, body = aggregate_outcomes(outcome(False), None)

        assert status_code == 500
        assert body == {"error": "Email failed to send", "email": False, "sheet": False}
