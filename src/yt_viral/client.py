from __future__ import annotations
import json
import logging
from typing import Optional
import requests
from pydantic import ValidationError

from yt_viral.schemas import PredictionResponse

log = logging.getLogger(__name__)

class RequestFailed(Exception):
    """Network error, non-2xx status or unusable response body from the prediction API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class PredictClient:
    def __init__(self, url: str, timeout: Optional[float] = 20.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def predict(self, payload: dict) -> bool:
        # allow_nan=False: invalid numbers must already be None so they go out as null
        body = json.dumps(payload, allow_nan=False)
        log.debug("POST %s %s", self.url, body)
        try:
            r = self.session.post(self.url, data=body.encode("utf-8"),
                                  headers={"Content-Type": "application/json"}, timeout=self.timeout)
        except requests.RequestException as e:
            raise RequestFailed(f"Request to {self.url} failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise RequestFailed(f"Server error: {r.status_code}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise RequestFailed(f"Response is not JSON: {r.text[:200]!r}") from e
        try:
            out = PredictionResponse.model_validate(data)
        except ValidationError as e:
            raise RequestFailed(f"Unexpected response body: {data!r}") from e
        return out.viral
