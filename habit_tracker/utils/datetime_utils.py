from datetime import datetime, timedelta, tzinfo
from typing import Union
import pytz

DEFAULT_TZ = pytz.utc

Timestamp = Union[datetime, str]

def now_in(tz: tzinfo = DEFAULT_TZ) -> datetime:
    return datetime.now(tz)

def localize(dt: datetime, tz: tzinfo = DEFAULT_TZ) -> datetime:
    """Наивное время считаем временем в зоне tz"""
    if dt.tzinfo is not None:
        return dt
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)

def parse_timestamp(value: Timestamp, tz: tzinfo = DEFAULT_TZ) -> datetime:
    """Приводит datetime или ISO-строку к aware datetime"""
    if isinstance(value, datetime):
        return localize(value, tz)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    text = value.strip()
    # fromisoformat до 3.11 не понимает суффикс Z
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return localize(datetime.fromisoformat(text), tz)

def format_timestamp(dt: datetime) -> str:
    return dt.isoformat()

def format_date(dt: datetime, fmt: str = "%d.%m.%Y") -> str:
    return dt.strftime(fmt)

def days_between(start: datetime, end: datetime) -> int:
    return (end - start) // timedelta(days=1)
