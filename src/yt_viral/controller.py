"""Form state for the viral predictor page, independent of any UI toolkit.

The controller owns the eight raw field values, the last prediction and the
in-flight flag. The HTTP call and the user-facing alert are injected so the
same object drives the Streamlit page, the CLI and the tests.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import replace
from typing import Callable, Optional, Protocol

from yt_viral.client import RequestFailed
from yt_viral.schemas import EXAMPLE, FIELD_NAMES, InvalidFieldValue, PredictionForm

log = logging.getLogger(__name__)

GENERIC_ERROR = "API error. Please try again later."

class Predictor(Protocol):
    def predict(self, payload: dict) -> bool: ...

Notifier = Callable[[str], None]

class ResultBadge(str, enum.Enum):
    VIRAL = "✅ Likely to go VIRAL"
    NOT_VIRAL = "⚠️ Unlikely to go viral"

def badge_for(result: Optional[bool]) -> Optional[ResultBadge]:
    if result is None:
        return None
    return ResultBadge.VIRAL if result else ResultBadge.NOT_VIRAL

def log_notifier(message: str) -> None:
    log.warning(message)

class PredictionFormController:
    def __init__(self, client: Predictor, notify: Notifier = log_notifier, numeric_policy: str = "lenient"):
        self.client = client
        self.notify = notify
        self.strict = numeric_policy == "strict"
        self.form = PredictionForm()
        self.result: Optional[bool] = None
        self.in_flight = False

    def update_field(self, name: str, value) -> None:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown field: {name!r}")
        setattr(self.form, name, "" if value is None else str(value))

    def prefill(self) -> None:
        self.form = replace(EXAMPLE)

    @property
    def badge(self) -> Optional[ResultBadge]:
        return badge_for(self.result)

    def submit(self) -> Optional[bool]:
        """Send the current form to the prediction API.

        Failures never propagate: the user gets a generic alert and the
        previous result stays in place.
        """
        self.in_flight = True
        try:
            payload = self.form.to_payload(strict=self.strict)
            log.debug("Submitting %s", payload)
            viral = self.client.predict(payload)
            self.result = viral
            log.info("Prediction: viral=%s", viral)
        except InvalidFieldValue as e:
            log.warning("Rejected before sending: %s", e)
            self.notify(f"{GENERIC_ERROR} ({e})")
        except RequestFailed:
            log.exception("Prediction request failed")
            self.notify(GENERIC_ERROR)
        except Exception:
            log.exception("Prediction client raised an unexpected error")
            self.notify(GENERIC_ERROR)
        finally:
            self.in_flight = False
        return self.result
