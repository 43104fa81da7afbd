# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""Date label conversion from ``dd.MM.yyyy`` to ``dd MMMM``."""

import datetime
import logging
import re

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Pattern letters understood in DateLabelFormat patterns; ASCII digits only
INPUT_FIELDS = {
    "dd": r"(?P<day>[0-9]{2})",
    "MM": r"(?P<month>[0-9]{2})",
    "yyyy": r"(?P<year>[0-9]{4})",
}
TOKEN_RE = re.compile(r"dd|MMMM|MM|yyyy")


class ParseError(ValueError):
    """Raised when a date string does not match the input pattern."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Cannot parse date {value!r}: {reason}")
        self.value = value
        self.reason = reason


class DateLabelFormat(BaseModel):
    """Fixed locale and patterns used by :func:`format_date_label`.

    Patterns use ``dd`` (two-digit day), ``MM`` (two-digit month), ``yyyy``
    (four-digit year) and, in the output only, ``MMMM`` (month name). Any
    other character is matched or written literally.
    """

    model_config = ConfigDict(frozen=True)

    locale: str
    input_pattern: str
    output_pattern: str
    # Genitive forms, as used after a day number
    month_names: tuple[str, ...]

    def input_regex(self) -> re.Pattern[str]:
        """Compile the input pattern into a regex with day/month/year groups.

        Returns:
            A compiled pattern meant for ``fullmatch``.

        Raises:
            ValueError: If the pattern uses a field that cannot be parsed.
        """
        parts = []
        position = 0
        for match in TOKEN_RE.finditer(self.input_pattern):
            token = match.group()
            if token not in INPUT_FIELDS:
                raise ValueError(f"Unsupported input field {token!r}")
            parts.append(re.escape(self.input_pattern[position : match.start()]))
            parts.append(INPUT_FIELDS[token])
            position = match.end()
        parts.append(re.escape(self.input_pattern[position:]))
        return re.compile("".join(parts))

    def render(self, date: datetime.date) -> str:
        """Write ``date`` using the output pattern.

        Args:
            date: The date to render.

        Returns:
            The rendered label.
        """
        fields = {
            "dd": f"{date.day:02d}",
            "MM": f"{date.month:02d}",
            "MMMM": self.month_names[date.month - 1],
            "yyyy": f"{date.year:04d}",
        }
        return TOKEN_RE.sub(lambda match: fields[match.group()], self.output_pattern)


DATE_LABEL_FORMAT = DateLabelFormat(
    locale="ru",
    input_pattern="dd.MM.yyyy",
    output_pattern="dd MMMM",
    month_names=(
        "января",
        "февраля",
        "марта",
        "апреля",
        "мая",
        "июня",
        "июля",
        "августа",
        "сентября",
        "октября",
        "ноября",
        "декабря",
    ),
)

INPUT_RE = DATE_LABEL_FORMAT.input_regex()


def parse_date(value: str) -> datetime.date:
    """Parse a ``dd.MM.yyyy`` string strictly.

    Args:
        value: Date text such as ``"25.12.2024"``.

    Returns:
        The calendar date.

    Raises:
        ParseError: If the text does not match the pattern exactly or does
            not name a real calendar date.
    """
    if not isinstance(value, str):
        raise ParseError(value, "expected a string")

    match = INPUT_RE.fullmatch(value)
    if not match:
        raise ParseError(value, f"expected {DATE_LABEL_FORMAT.input_pattern}")

    try:
        return datetime.date(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
        )
    except ValueError as e:
        raise ParseError(value, str(e)) from e


def format_date_label(value: str) -> str:
    """Convert ``dd.MM.yyyy`` into a ``dd MMMM`` label.

    The day keeps its two-digit padding and the month is rendered in the
    configured locale, e.g. ``"01.01.2024"`` becomes ``"01 января"``.

    Args:
        value: Date text in ``dd.MM.yyyy`` layout.

    Returns:
        The formatted label.

    Raises:
        ParseError: If ``value`` is not a valid ``dd.MM.yyyy`` date.
    """
    label = DATE_LABEL_FORMAT.render(parse_date(value))
    logger.debug("Formatted %s as %s", value, label)
    return label
