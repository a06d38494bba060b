import logging
import time
from dataclasses import dataclass, field
from enum import Enum

import requests


logger = logging.getLogger(__name__)

INVALID_STATUS = 65535
INVALID_STATUS_TEXT = "Invalid Request"


class Method(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @classmethod
    def from_verb(cls, verb: str) -> "Method":
        try:
            return cls(verb.upper())
        except ValueError:
            return cls.GET


@dataclass
class Request:
    method: Method = Method.GET
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> dict:
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Request":
        headers = data.get("headers") or {}
        if not isinstance(headers, dict):
            raise ValueError("headers must be an object")
        return cls(
            method=Method.from_verb(str(data.get("method", "GET"))),
            url=str(data.get("url", "")),
            headers={str(k): str(v) for k, v in headers.items()},
            body=str(data.get("body", "")),
        )


@dataclass
class Response:
    status: int
    status_text: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    elapsed_ms: int = 0

    @classmethod
    def invalid(cls) -> "Response":
        return cls(INVALID_STATUS, INVALID_STATUS_TEXT)

    @property
    def is_invalid(self) -> bool:
        return self.status == INVALID_STATUS


class TransportError(Exception):
    pass


def send_request(request: Request) -> Response:
    """Perform one blocking exchange. Raises TransportError on any failure."""
    start = time.monotonic()
    try:
        resp = requests.request(
            request.method.value,
            request.url,
            headers=request.headers or None,
            data=request.body.encode("utf-8") if request.body else None,
        )
        body = resp.content.decode("utf-8")
    # header text outside latin-1 fails to encode, bodies outside utf-8 fail
    # to decode; both are ValueError
    except (requests.RequestException, ValueError) as exc:
        raise TransportError(str(exc)) from exc
    elapsed_ms = int((time.monotonic() - start) * 1000)

    logger.info(
        "%s %s -> %s in %d ms",
        request.method.value,
        request.url,
        resp.status_code,
        elapsed_ms,
    )
    return Response(
        status=resp.status_code,
        status_text=resp.reason or "",
        headers=dict(resp.headers),
        body=body,
        elapsed_ms=elapsed_ms,
    )


def format_response(response: Response) -> str:
    lines = [
        f"Status: {response.status} {response.status_text} ({response.elapsed_ms} ms)".rstrip(),
        "",
    ]
    if response.headers:
        lines.extend(f"{key}: {value}" for key, value in response.headers.items())
        lines.append("")
    lines.append(response.body)
    return "\n".join(lines)
