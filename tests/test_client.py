import json
import pytest
import requests

from yt_viral.client import PredictClient, RequestFailed

URL = "http://predictor.test/predict"


def _client(session, timeout=5.0):
    return PredictClient(URL, timeout=timeout, session=session)


def test_posts_json_and_returns_viral(session_factory):
    session = session_factory(body={"viral": True, "probability": 0.93})
    payload = {"likes": 5000, "title": "x", "publish_day": None}
    assert _client(session).predict(payload) is True

    call = session.calls[0]
    assert call["url"] == URL
    assert call["headers"] == {"Content-Type": "application/json"}
    assert call["timeout"] == 5.0
    assert json.loads(call["data"]) == payload
    assert b'"publish_day": null' in call["data"]


def test_false_result(session_factory):
    assert _client(session_factory(body={"viral": False})).predict({}) is False


def test_nan_is_never_sent(session_factory):
    session = session_factory(body={"viral": True})
    with pytest.raises(ValueError):
        _client(session).predict({"likes": float("nan")})
    assert session.calls == []


@pytest.mark.parametrize("status", [300, 304, 400, 404, 500, 503])
def test_non_success_status(session_factory, status):
    with pytest.raises(RequestFailed) as ei:
        _client(session_factory(status_code=status, body={"detail": "nope"})).predict({})
    assert ei.value.status_code == status
    assert str(status) in str(ei.value)


@pytest.mark.parametrize("status", [301, 304])
def test_redirect_status_with_viral_body_is_not_success(session_factory, status):
    with pytest.raises(RequestFailed) as ei:
        _client(session_factory(status_code=status, body={"viral": True})).predict({})
    assert ei.value.status_code == status


def test_network_errors_become_request_failed(session_factory, timeout_error):
    with pytest.raises(RequestFailed) as ei:
        _client(session_factory(exc=timeout_error)).predict({})
    assert ei.value.status_code is None
    assert isinstance(ei.value.__cause__, requests.Timeout)

    with pytest.raises(RequestFailed):
        _client(session_factory(exc=requests.ConnectionError("refused"))).predict({})


@pytest.mark.parametrize("text", [
    "<html>502 Bad Gateway</html>",
    "[]",
    '{"label": "viral"}',
    '{"viral": "yes"}',
    '{"viral": 1}',
    '{"viral": null}',
])
def test_malformed_bodies(session_factory, text):
    with pytest.raises(RequestFailed):
        _client(session_factory(text=text)).predict({})


def test_default_session_is_created():
    client = PredictClient(URL)
    assert isinstance(client.session, requests.Session)
    assert client.timeout == 20.0
