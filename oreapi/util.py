from datetime import datetime
import re

# Seconds fraction of any length, as long as it is followed by nothing or an offset
FRACTION = re.compile(r'(?<=:\d\d)\.(\d+)(?=$|[+-])')


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 offset date-time, such as Ore's ``expires`` and
    ``created_at`` fields, into an aware datetime.

    Fractions of a second may have any number of digits; anything past
    microseconds is dropped.

    Raises:
        ValueError: if the value is not a timestamp or carries no UTC offset
    """
    # fromisoformat() only learned about "Z" and odd-length fractions in 3.11
    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    value = FRACTION.sub(lambda m: '.' + (m.group(1) + '000000')[:6], value, count=1)
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        raise ValueError(f'timestamp has no UTC offset: {value!r}')
    return dt
