"""Combine the email and record dispatch results into one HTTP response"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of one outbound call"""
    attempted: bool
    succeeded: bool


# (email ok, record ok) -> (status, key, text)
OUTCOME_TABLE = {
    (True, True): (200, "message", "Success! Data saved and email sent."),
    (True, False): (200, "message", "Email sent but failed to save to sheet."),
    (False, True): (200, "message", "Data saved to sheet but email failed to send."),
    (False, False): (500, "error", "Both email and sheet operations failed."),
}

EMAIL_ONLY_TABLE = {
    True: (200, "message", "Success!"),
    False: (500, "error", "Email failed to send"),
}


def aggregate_outcomes(
    email: DispatchOutcome,
    record: Optional[DispatchOutcome] = None
) -> Tuple[int, Dict[str, Any]]:
    """
    Map the dispatch outcomes to a status code and JSON body

    Any partial success is a 200. Only total failure is a 500.

    Args:
        email: Outcome of the notification email
        record: Outcome of the record append, or None when no record
            store is configured

    Returns:
        (status_code, body) where body always carries the per-channel flags
    """
    if record is None:
        status_code, key, text = EMAIL_ONLY_TABLE[email.succeeded]
        sheet_ok = False
    else:
        status_code, key, text = OUTCOME_TABLE[(email.succeeded, record.succeeded)]
        sheet_ok = record.succeeded

    return status_code, {key: text, "email": email.succeeded, "sheet": sheet_ok}
