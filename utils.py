import os
from datetime import datetime
from typing import Iterable, List, Optional, Type, TypeVar
from pydantic import BaseModel
import pytz

API_URL = os.environ.get("CF_API_URL", "https://codeforces.com/api")
REQUEST_TIMEOUT = float(os.environ.get("CF_REQUEST_TIMEOUT", "15"))
TIMEZONE = pytz.timezone(os.environ.get("CF_TIMEZONE", "UTC"))

T = TypeVar("T", bound=BaseModel)

def dict_to_model(model_cls: Type[T], data: dict) -> T:
    valid_keys = set(model_cls.model_fields.keys())
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return model_cls(**filtered)

def dicts_to_models(model_cls: Type[T], items: Iterable[dict]) -> List[T]:
    return [dict_to_model(model_cls, item) for item in items]

def normalize_handle(handle: Optional[str]) -> str:
    handle = (handle or "").strip()
    if not handle:
        raise ValueError("Handle must not be empty")
    return handle

def format_contest_time(timestamp: Optional[int], timezone=TIMEZONE) -> str:
    if not timestamp:
        return "Unknown"
    return datetime.fromtimestamp(timestamp, tz=timezone).strftime("%b %d %Y %H:%M")
