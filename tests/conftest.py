import json
import pytest
import requests

class FakePredictor:
    """Stands in for PredictClient; records payloads and what the controller looked like mid-call."""

    def __init__(self, responses=(True,)):
        self.responses = list(responses)
        self.payloads = []
        self.in_flight_seen = []
        self.controller = None

    def predict(self, payload):
        self.payloads.append(payload)
        if self.controller is not None:
            self.in_flight_seen.append(self.controller.in_flight)
        out = self.responses.pop(0)
        if isinstance(out, Exception):
            raise out
        return out

class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)

class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

@pytest.fixture
def notes():
    return []

@pytest.fixture
def make_controller(notes):
    from yt_viral.controller import PredictionFormController

    def _make(responses=(True,), policy="lenient"):
        fake = FakePredictor(responses)
        ctl = PredictionFormController(fake, notes.append, numeric_policy=policy)
        fake.controller = ctl
        return ctl, fake
    return _make

@pytest.fixture
def timeout_error():
    return requests.Timeout("read timed out")

@pytest.fixture
def session_factory():
    def _make(status_code=200, body=None, text=None, exc=None):
        resp = None if exc is not None else FakeResponse(status_code, body, text)
        return FakeSession(resp, exc)
    return _make
