"""Record stores that log each submission to a spreadsheet

Two interchangeable backends exist: a webhook relay that performs the
spreadsheet write on our behalf, and a direct Google Sheets append using a
service account. Both report a plain bool and never raise from append().
"""
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from zoneinfo import ZoneInfo
import asyncio
import base64
import json
import logging

import gspread
import httpx
from google.oauth2.service_account import Credentials

from app.config import Settings
from app.errors import ConfigurationError

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def format_timestamp(moment: datetime, tz_name: str) -> str:
    """Format like en-US locale output, e.g. '3/7/2026, 9:05:02 PM'"""
    local = moment.astimezone(ZoneInfo(tz_name))
    hour = local.hour % 12 or 12
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {local:%p}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Base record store: append one row per submission"""

    enabled = True
    backend = "base"

    def ensure_configured(self) -> None:
        """Raise ConfigurationError if the backend cannot be used at all"""

    async def append(self, name: str, email: str, details: str) -> bool:
        raise NotImplementedError


class DisabledRecordStore(RecordStore):
    """Email-only configuration; nothing is recorded"""

    enabled = False
    backend = "none"

    async def append(self, name: str, email: str, details: str) -> bool:
        return False


class WebhookRecordStore(RecordStore):
    """Posts submissions to an automation webhook that writes the sheet row"""

    backend = "webhook"

    def __init__(
        self,
        url: str,
        success_field: str = "result",
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url
        self.success_field = success_field
        self._transport = transport

    async def append(self, name: str, email: str, details: str) -> bool:
        """
        Send the submission to the webhook relay

        Returns:
            True only for a 2xx response whose success field equals "success"
        """
        if not self.url:
            logger.error("Record webhook URL is not set; skipping sheet save")
            return False

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    json={"name": name, "email": email, "message": details}
                )

            if not response.is_success:
                logger.error(f"Record webhook failed: {response.status_code} - {response.text}")
                return False

            body = response.json()
            if not isinstance(body, dict) or body.get(self.success_field) != "success":
                logger.error(f"Record webhook did not confirm success: {response.text}")
                return False

            logger.info(f"Submission from {name} saved via webhook")
            return True

        except Exception as e:
            logger.error(f"Record webhook error: {e}")
            return False


class SheetsRecordStore(RecordStore):
    """Appends submissions directly to a Google Sheet with a service account"""

    backend = "sheets"

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_name: str = "Form Submissions",
        credentials_file: str = "",
        credentials_base64: str = "",
        tz_name: str = "America/New_York",
        clock: Callable[[], datetime] = _utcnow
    ):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self._credentials_file = credentials_file
        self._credentials_base64 = credentials_base64
        self.tz_name = tz_name
        self._clock = clock
        self._client: Optional[gspread.Client] = None

    def ensure_configured(self) -> None:
        if not self.spreadsheet_id or not (self._credentials_file or self._credentials_base64):
            raise ConfigurationError("Google Sheets not configured")

    def _load_credentials(self) -> Credentials:
        """Prefer the credentials file; otherwise decode the base64 JSON blob"""
        if self._credentials_file:
            return Credentials.from_service_account_file(
                self._credentials_file,
                scopes=SHEETS_SCOPES,
            )
        info = json.loads(base64.b64decode(self._credentials_base64).decode("utf-8"))
        return Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)

    def _get_client(self) -> gspread.Client:
        if self._client is None:
            self._client = gspread.authorize(self._load_credentials())
        return self._client

    def build_row(self, name: str, email: str, details: str) -> List[str]:
        return [format_timestamp(self._clock(), self.tz_name), name, email, details]

    def _append_sync(self, row: List[str]) -> None:
        worksheet = self._get_client().open_by_key(self.spreadsheet_id).worksheet(self.sheet_name)
        worksheet.append_row(row, value_input_option="RAW")

    async def append(self, name: str, email: str, details: str) -> bool:
        try:
            row = self.build_row(name, email, details)
            await asyncio.to_thread(self._append_sync, row)
            logger.info(f"Submission from {name} appended to sheet '{self.sheet_name}'")
            return True
        except Exception as e:
            logger.error(f"Google Sheets append failed: {e}")
            return False


def build_record_store(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> RecordStore:
    """Select the record store adapter named by settings.record_backend"""
    if settings.record_backend == "sheets":
        return SheetsRecordStore(
            spreadsheet_id=settings.google_sheet_id,
            sheet_name=settings.google_sheet_name,
            credentials_file=settings.google_service_account_file,
            credentials_base64=settings.google_service_account_base64,
            tz_name=settings.sheet_timezone,
        )
    if settings.record_backend == "webhook":
        return WebhookRecordStore(
            url=settings.record_webhook_url,
            success_field=settings.webhook_success_field,
            transport=transport,
        )
    return DisabledRecordStore()


RECORD_SETTINGS_FIELDS = (
    "record_backend",
    "record_webhook_url",
    "webhook_success_field",
    "google_sheet_id",
    "google_sheet_name",
    "google_service_account_file",
    "google_service_account_base64",
    "sheet_timezone",
)

_record_stores: Dict[tuple, RecordStore] = {}


def get_cached_record_store(settings: Settings) -> RecordStore:
    """Reuse one record store per distinct record configuration

    Keeps the authorized Sheets client alive across submissions.
    """
    key = tuple(getattr(settings, field) for field in RECORD_SETTINGS_FIELDS)
    store = _record_stores.get(key)
    if store is None:
        store = _record_stores[key] = build_record_store(settings)
    return store
