"""Response classification and JSON decoding.

Every response goes through :func:`classify_response` first.  A 2xx status
is success whatever the body holds; anything else must carry the API error
envelope::

    {"error": {"statuscode": 400, "statusdesc": "Bad Request", "errormessage": "..."}}

A non-2xx body that is not such an envelope is reported as a
:class:`DecodeError`, never as success.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, TypeVar

import httpx

from .errors import ApiError, DecodeError, PingdomClientError

T = TypeVar("T")


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _load_json(response: httpx.Response) -> Any:
    text = response.text
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DecodeError(f"invalid JSON in {response.status_code} response: {exc}", text, response) from exc


def classify_response(response: httpx.Response) -> PingdomClientError | None:
    if is_success(response.status_code):
        return None

    try:
        data = _load_json(response)
    except DecodeError as exc:
        return exc

    envelope = data.get("error") if isinstance(data, dict) else None
    if not isinstance(envelope, dict):
        return DecodeError(
            f"{response.status_code} response without an error envelope",
            response.text,
            response,
        )

    status_code = envelope.get("statuscode")
    return ApiError(
        status_code if isinstance(status_code, int) else response.status_code,
        str(envelope.get("statusdesc") or ""),
        str(envelope.get("errormessage") or ""),
        response,
    )


def _build_dataclass(target: type[T], data: Any) -> T:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    names = {f.name for f in dataclasses.fields(target) if f.init}
    return target(**{k: v for k, v in data.items() if k in names})


def decode_response(response: httpx.Response, target: type[T] | Callable[[Any], T] | None) -> T:
    if target is None:
        raise TypeError("no target provided")

    data = _load_json(response)
    try:
        if hasattr(target, "from_dict"):
            return target.from_dict(data)
        if dataclasses.is_dataclass(target) and isinstance(target, type):
            return _build_dataclass(target, data)
        return target(data)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        name = getattr(target, "__name__", repr(target))
        raise DecodeError(f"cannot decode response into {name}: {exc}", response.text, response) from exc
