"""Decoder for the getBusArrivalListv2 JSON envelope."""

from __future__ import annotations

import json
from typing import Any

from arrival_logger.data.models import ArrivalRecord, ArrivalResponse
from arrival_logger.errors import ParseError


def _arrival_record(item: dict[str, Any]) -> ArrivalRecord:
    station_name = item.get("stationNm1")
    return ArrivalRecord(
        route_name=item.get("routeName"),
        station_name="" if station_name is None else str(station_name),
        predicted_minutes=item.get("predictTime1"),
        remaining_seats=item.get("remainSeatCnt1"),
    )


def _arrival_items(msg_body: Any) -> list[dict[str, Any]]:
    if not isinstance(msg_body, dict):
        return []
    items = msg_body.get("busArrivalList")
    # A lone arrival comes back as an object rather than a one-element list.
    if isinstance(items, dict):
        return [items]
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def parse_arrival_envelope(payload: Any) -> ArrivalResponse:
    """Walk ``response.msgBody.busArrivalList`` of an already-decoded document."""
    if not isinstance(payload, dict):
        raise ParseError("Arrival API response must be a JSON object")

    response = payload.get("response")
    if not isinstance(response, dict):
        raise ParseError("Arrival API response is missing the 'response' envelope")

    header = response.get("msgHeader")
    if not isinstance(header, dict):
        header = {}

    return ArrivalResponse(
        query_time=header.get("queryTime"),
        result_code=header.get("resultCode"),
        result_message=header.get("resultMessage"),
        arrivals=[_arrival_record(item) for item in _arrival_items(response.get("msgBody"))],
    )


def parse_arrival_body(body: bytes | str) -> ArrivalResponse:
    """Decode an HTTP response body into an :class:`ArrivalResponse`."""
    try:
        payload = json.loads(body)
    except (ValueError, TypeError) as exc:
        raise ParseError(f"Arrival API response was not valid JSON: {exc}") from exc
    return parse_arrival_envelope(payload)
