# stockroom/core/dates.py

"""
목록 뷰에서 사용하는 날짜 해석 유틸리티 모듈입니다.

- 기간 필터 입력('dd/mm/yyyy')을 달력상 유효한 날짜로 해석합니다.
- 기간의 시작일은 그날 00:00:00.000, 종료일은 23:59:59.999 로 확장합니다.
- 레코드의 날짜 필드(ISO-8601 문자열, datetime, date)를 epoch 밀리초로 변환해
  문자열 순서가 아닌 실제 시각으로 비교할 수 있게 합니다.
"""

import logging
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DDMMYYYY_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
END_OF_DAY = time(23, 59, 59, 999000)


def resolve_timezone(name: Optional[str]) -> ZoneInfo:
    """IANA 시간대 이름을 ZoneInfo 로 변환합니다. 알 수 없는 이름은 UTC 로 대체합니다."""
    try:
        return ZoneInfo(name or "UTC")
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", name)
        return ZoneInfo("UTC")


def parse_ddmmyyyy(text: Optional[str]) -> Optional[date]:
    """
    'dd/mm/yyyy' 형식의 문자열을 date 로 변환합니다.
    형식이 맞지 않거나 존재하지 않는 날짜(예: 31/02/2024)이면 None 을 반환합니다.
    """
    if not text or not DDMMYYYY_PATTERN.match(text):
        return None
    day, month, year = (int(part) for part in text.split("/"))
    try:
        return date(year, month, day)
    except ValueError:
        return None


def start_of_day(value: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(value, time.min, tzinfo=tz)


def end_of_day(value: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(value, END_OF_DAY, tzinfo=tz)


def epoch_ms(moment: datetime) -> int:
    """aware datetime 을 epoch 밀리초(정수)로 변환합니다."""
    return (moment - EPOCH) // timedelta(milliseconds=1)


def to_epoch_ms(value: Any, tz: ZoneInfo) -> Optional[int]:
    """
    레코드의 날짜 값을 epoch 밀리초로 디코딩합니다.
    시간대 정보가 없는 값은 tz 기준으로 해석하며, 해석할 수 없는 값은 None 입니다.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return epoch_ms(moment)


def date_bounds(
    start_text: Optional[str], end_text: Optional[str], tz: ZoneInfo
) -> Tuple[Optional[int], Optional[int]]:
    """
    기간 필터 입력을 (하한, 상한) epoch 밀리초 쌍으로 변환합니다.
    해석할 수 없는 입력은 해당 경계가 없는 것으로 취급합니다.
    """
    start = parse_ddmmyyyy(start_text)
    end = parse_ddmmyyyy(end_text)
    if start_text and start is None:
        logger.debug("Ignoring unparseable start date %r", start_text)
    if end_text and end is None:
        logger.debug("Ignoring unparseable end date %r", end_text)

    lower = epoch_ms(start_of_day(start, tz)) if start else None
    upper = epoch_ms(end_of_day(end, tz)) if end else None
    return lower, upper
