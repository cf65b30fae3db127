import json
from typing import Any, List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter

from razorpayx import RazorpayxClient

KEY_ID = "rzp_test_key"
KEY_SECRET = "rzp_test_secret"

BAD_REQUEST = {
    "error": {
        "code": "BAD_REQUEST_ERROR",
        "description": "The count may not be greater than 100.",
        "source": "business",
        "reason": "input_validation_failed",
        "step": "NA",
        "field": "count",
        "metadata": {},
    }
}


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and replies from a queue."""

    def __init__(self) -> None:
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self._replies: List[Any] = []

    def reply(self, status: int = 200, body: Any = None, *, text: Optional[str] = None) -> None:
        if text is not None:
            content = text.encode("utf-8")
        elif body is None:
            content = json.dumps({"success": True}).encode("utf-8")
        else:
            content = json.dumps(body).encode("utf-8")
        self._replies.append((status, content))

    def fail_with(self, exc: BaseException) -> None:
        self._replies.append(exc)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.body)

    def send(self, request, **kwargs):
        self.requests.append(request)
        reply = self._replies.pop(0) if self._replies else (200, b'{"success": true}')
        if isinstance(reply, BaseException):
            raise reply

        status, content = reply
        response = requests.Response()
        response.status_code = status
        response._content = content
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def session(adapter: RecordingAdapter) -> requests.Session:
    http_session = requests.Session()
    http_session.trust_env = False
    http_session.mount("https://", adapter)
    http_session.mount("http://", adapter)
    return http_session


@pytest.fixture
def client(session: requests.Session) -> RazorpayxClient:
    return RazorpayxClient(KEY_ID, KEY_SECRET, session=session)
