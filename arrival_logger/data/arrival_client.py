"""Gyeonggi bus arrival API client."""

from __future__ import annotations

import logging
import re
from urllib.parse import quote, quote_plus

import requests

from arrival_logger.data.models import ArrivalResponse
from arrival_logger.data.parser import parse_arrival_body
from arrival_logger.errors import FetchError

logger = logging.getLogger(__name__)

ARRIVAL_API_URL = "https://apis.data.go.kr/6410000/busarrivalservice/v2/getBusArrivalListv2"
RESPONSE_FORMAT = "json"
REDACTED = "***"

_SERVICE_KEY_PARAM = re.compile(r"(serviceKey=)[^&\s'\"]*")


class BusArrivalClient:
    """Thin wrapper around getBusArrivalListv2 for a single station using requests."""

    def __init__(
        self,
        service_key: str,
        station_id: str,
        base_url: str = ARRIVAL_API_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        self._service_key = service_key
        self._station_id = station_id
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds

    @property
    def station_id(self) -> str:
        return self._station_id

    def get_arrivals(self) -> ArrivalResponse:
        """Fetch and decode the current arrival list for the station."""
        response = parse_arrival_body(self.fetch_body())
        logger.debug(
            "Arrival API answered resultCode=%s resultMessage=%s with %d entries",
            response.result_code,
            response.result_message,
            len(response.arrivals),
        )
        return response

    def fetch_body(self) -> bytes:
        """Issue the GET request and return the raw response body."""
        params = {
            "serviceKey": self._service_key,
            "stationId": self._station_id,
            "format": RESPONSE_FORMAT,
        }
        try:
            response = requests.get(self._base_url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise FetchError(self._redact(f"Arrival API request failed: {exc}")) from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise FetchError(self._redact(f"Arrival API request failed: {detail}"))

        return response.content

    def _redact(self, message: str) -> str:
        """Strip the service key from text that may echo the request URL."""
        message = _SERVICE_KEY_PARAM.sub(rf"\g<1>{REDACTED}", message)
        if self._service_key:
            for form in {self._service_key, quote(self._service_key, safe=""), quote_plus(self._service_key)}:
                message = message.replace(form, REDACTED)
        return message
