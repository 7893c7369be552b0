"""Resolve the site timezone from host options."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pressutils.interfaces.options import OptionStore

logger = logging.getLogger(__name__)

TIMEZONE_STRING_OPTION = "timezone_string"
GMT_OFFSET_OPTION = "gmt_offset"
UTC = "UTC"

# The Etc area only covers whole hours from GMT-14 to GMT+12 (inverted sign).
MIN_OFFSET = -12
MAX_OFFSET = 14


def get_timezone(options: OptionStore) -> ZoneInfo:
    """Return the configured site timezone.

    Precedence:
    1. The ``timezone_string`` option, if set and resolvable.
    2. An ``Etc/GMT±N`` zone derived from a non-zero ``gmt_offset`` option.
       Offsets are truncated to whole hours; the Etc area inverts the sign,
       so ``+5`` becomes ``Etc/GMT-5``.
    3. ``UTC``.

    Never raises: settings that do not resolve are logged and skipped.
    """
    if tzstring := options.get(TIMEZONE_STRING_OPTION):
        if (zone := _load_zone(str(tzstring))) is not None:
            return zone

    offset = _parse_offset(options.get(GMT_OFFSET_OPTION))
    if offset != 0:
        if MIN_OFFSET <= offset <= MAX_OFFSET:
            name = f"Etc/GMT{'-' if offset > 0 else '+'}{abs(offset)}"
            if (zone := _load_zone(name)) is not None:
                return zone
        else:
            logger.warning("GMT offset %s is out of range; using %s", offset, UTC)

    return ZoneInfo(UTC)


def _parse_offset(raw: object) -> int:
    if raw is None or raw == "":
        return 0
    try:
        return int(float(raw))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric GMT offset %r", raw)
        return 0


def _load_zone(name: str) -> ZoneInfo | None:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown timezone %r", name)
        return None
