from __future__ import annotations
import math
import re
import sys
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, StrictBool

Number = Union[int, float]

NUMERIC_FIELDS = ("likes", "dislikes", "comment_count", "publish_hour", "publish_day")
TEXT_FIELDS = ("title", "description", "tags")
# wire order
FIELD_NAMES = ("likes", "dislikes", "comment_count", "title", "description", "tags",
               "publish_hour", "publish_day")

INT_RE = re.compile(r"[+-]?[0-9]+")

class InvalidFieldValue(ValueError):
    def __init__(self, field: str, value: str):
        super().__init__(f"{field} must be a number, got {value!r}")
        self.field = field
        self.value = value

def to_number(raw) -> Optional[Number]:
    """Parse form text into a number; None stands for an invalid number (JSON null on the wire)."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw if math.isfinite(raw) else None
    s = (raw or "").strip()
    # float() takes "1_000", number inputs don't
    if not s or "_" in s:
        return None
    if INT_RE.fullmatch(s):
        # too long for int() (digit limit) or past float range: overflows like a number input
        try:
            n = int(s)
        except ValueError:
            return None
        return n if abs(n) <= sys.float_info.max else None
    try:
        x = float(s)
    except ValueError:
        return None
    return x if math.isfinite(x) else None

@dataclass
class PredictionForm:
    likes: str = ""
    dislikes: str = ""
    comment_count: str = ""
    title: str = ""
    description: str = ""
    tags: str = ""
    publish_hour: str = ""
    publish_day: str = ""

    def to_payload(self, strict: bool = False) -> Dict[str, object]:
        payload = {}
        for name in FIELD_NAMES:
            raw = getattr(self, name)
            if name in NUMERIC_FIELDS:
                num = to_number(raw)
                if num is None and strict:
                    raise InvalidFieldValue(name, raw)
                payload[name] = num
            else:
                payload[name] = raw
        return payload

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

EXAMPLE = PredictionForm(
    likes="5000",
    dislikes="120",
    comment_count="800",
    title="Latest iPhone 15 Review – Hands-On!",
    description="We tested Apple’s new iPhone 15 for a full week…",
    tags="iphone|review|tech",
    publish_hour="18",
    publish_day="4",  # Friday
)

class PredictionResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")
    viral: StrictBool
