import time
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal('0.01')


def to_money(value: Union[int, float, Decimal]) -> Decimal:
    """Round a number to cents, half away from zero."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Union[int, float, Decimal]) -> str:
    """Fixed two-decimal string, e.g. 150 -> '150.00'."""
    return f'{to_money(value):.2f}'


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def epoch_millis() -> int:
    return int(time.time() * 1000)
