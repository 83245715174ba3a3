"""Task normalizer - tolerant conversion of feed rows into Task records.

Spreadsheet feeds are edited by hand, so header labels drift in casing,
spacing and wording. Each logical field has an ordered list of accepted
header aliases; cells that are missing or malformed fall back to the
field's default instead of failing the whole load. Only a document that
cannot be read as a table at all raises ``SourceFormatError``.
"""

from __future__ import annotations

import csv
import io
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta

import dateparser

from taskfeed_cli.models import SourceFormatError, Task
from taskfeed_cli.models.task import (
    DEFAULT_PERSON,
    DEFAULT_SPOTS_NEEDED,
    DEFAULT_SUB_TEAM,
    DEFAULT_TASK_NAME,
    DEFAULT_TOTAL_DAYS,
)
from taskfeed_cli.services.view_model import LEAD_PADDING_DAYS, TRAIL_PADDING_DAYS
from taskfeed_cli.utils.logger import get_logger

RawRow = Mapping[str | None, str | None]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("Task", "Task Name"),
    "overview": ("Simple Overview", "Overview", "Description"),
    "sub_team": ("Sub-Team", "Sub Team", "Team"),
    "pre_requisites": ("Pre-Requisites", "Prerequisites"),
    "required_for": ("Required For", "RequiredFor"),
    "start_date": ("Start-Date", "Start Date"),
    "deadline": ("Deadline", "Due Date"),
    "total_days": ("Total Days", "Duration"),
    "person_responsible": ("Person Responsible", "Owner"),
    "completed": ("Completed", "Status"),
    "spots_needed": ("Spots Needed", "Spots", "Slots"),
}

COMPLETED_TOKENS = frozenset({"true", "yes", "y", "1", "done", "complete"})

_WHITESPACE_RE = re.compile(r"\s+")
_LIST_SPLIT_RE = re.compile(r"[;,]")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_HTML_PREFIXES = ("<!doctype html", "<html")

# Dates this close to the calendar limits cannot be padded on the timeline.
_EARLIEST_DATE = date.min + timedelta(days=LEAD_PADDING_DAYS)
_LATEST_DATE = date.max - timedelta(days=TRAIL_PADDING_DAYS)

_DATEPARSER_SETTINGS = {
    "DATE_ORDER": "MDY",
    "PREFER_DAY_OF_MONTH": "first",
    "RETURN_AS_TIMEZONE_AWARE": False,
}


def normalize_key(label: str) -> str:
    """Fold a header label for alias comparison (case and whitespace)."""
    return _WHITESPACE_RE.sub("", label).lower()


_NORMALIZED_ALIASES: dict[str, tuple[str, ...]] = {
    field: tuple(normalize_key(alias) for alias in aliases)
    for field, aliases in FIELD_ALIASES.items()
}


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def parse_date(raw: str | None) -> date | None:
    """Parse a cell into a calendar date.

    Strict ISO-8601 is tried first, then dateparser's natural parsing
    (month/day/year order). Returns None when neither succeeds, and for
    placeholder dates such as 12/31/9999 at the edges of the calendar.
    """
    if not raw:
        return None
    raw = raw.strip()
    if not raw:
        return None

    parsed = _parse_date_text(raw)
    if parsed is None or not _EARLIEST_DATE <= parsed <= _LATEST_DATE:
        return None
    return parsed


def _parse_date_text(raw: str) -> date | None:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass

    parsed = dateparser.parse(raw, languages=["en"], settings=_DATEPARSER_SETTINGS)
    if parsed is None:
        return None
    return parsed.date()


def parse_list(raw: str | None) -> list[str]:
    """Split a cell on ';' or ',' into trimmed, non-empty entries."""
    if not raw:
        return []
    return [piece.strip() for piece in _LIST_SPLIT_RE.split(raw) if piece.strip()]


def parse_completed(raw: str | None) -> bool:
    """Return True for any recognized completion token."""
    if raw is None:
        return False
    return raw.strip().lower() in COMPLETED_TOKENS


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse the leading integer of a cell, falling back to *default*.

    Values below 1 also fall back, so counts are always at least 1.
    """
    if not raw:
        return default
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return default
    try:
        value = int(match.group(1))
    except ValueError:
        # longer than the interpreter's int conversion limit
        return default
    if value < 1:
        return default
    return value


# ---------------------------------------------------------------------------
# Row normalization
# ---------------------------------------------------------------------------


def _index_row(row: RawRow) -> dict[str, str | None]:
    """Map folded header labels to cell values, first occurrence wins."""
    index: dict[str, str | None] = {}
    for label, value in row.items():
        if not label:
            continue
        index.setdefault(normalize_key(label), value)
    return index


def resolve_field(index: Mapping[str, str | None], field: str) -> str | None:
    """Return the stripped cell for *field*, or None when absent or blank.

    Aliases are probed in priority order and the first column present in
    the row wins, even if its cell is empty.
    """
    for key in _NORMALIZED_ALIASES[field]:
        if key in index:
            value = index[key]
            if value is None:
                return None
            return value.strip() or None
    return None


def normalize_row(row: RawRow, task_id: str, *, today: date | None = None) -> Task:
    """Convert a single raw row into a Task, applying field defaults."""
    index = _index_row(row)

    def cell(field: str) -> str | None:
        return resolve_field(index, field)

    return Task(
        id=task_id,
        name=cell("name") or DEFAULT_TASK_NAME,
        overview=cell("overview") or "",
        sub_team=cell("sub_team") or DEFAULT_SUB_TEAM,
        pre_requisites=parse_list(cell("pre_requisites")),
        required_for=parse_list(cell("required_for")),
        start_date=parse_date(cell("start_date")) or today or date.today(),
        deadline=parse_date(cell("deadline")),
        total_days=parse_positive_int(cell("total_days"), DEFAULT_TOTAL_DAYS),
        person_responsible=cell("person_responsible") or DEFAULT_PERSON,
        completed=parse_completed(cell("completed")),
        spots_needed=parse_positive_int(cell("spots_needed"), DEFAULT_SPOTS_NEEDED),
    )


def normalize(rows: Iterable[RawRow], *, today: date | None = None) -> list[Task]:
    """Normalize raw feed rows into an ordered list of tasks.

    Ids are the 1-based position of each row in the batch. Rows with
    neither a title nor an overview are treated as spacer rows and dropped.

    Args:
        rows: Mappings from header label to raw cell text
        today: Date used when a start date is missing (defaults to today)

    Returns:
        Tasks in feed order
    """
    logger = get_logger("normalizer")
    today = today or date.today()

    tasks: list[Task] = []
    dropped = 0
    for position, row in enumerate(rows, start=1):
        task = normalize_row(row, str(position), today=today)
        if task.is_placeholder:
            dropped += 1
            continue
        tasks.append(task)

    logger.debug("normalized %d tasks, dropped %d blank rows", len(tasks), dropped)
    if dropped and not tasks:
        logger.warning("No valid tasks found in feed")
    return tasks


# ---------------------------------------------------------------------------
# Feed text
# ---------------------------------------------------------------------------


def parse_feed(text: str) -> list[dict[str, str | None]]:
    """Parse CSV feed text into header-keyed rows.

    The first non-empty line is the header row. Short rows are padded with
    None; cells beyond the header are ignored.

    Raises:
        SourceFormatError: If the text is empty, is an HTML page, or has
            malformed CSV quoting
    """
    if not text or not text.strip():
        raise SourceFormatError("Feed is empty")

    text = text.lstrip("\ufeff")
    if text.lstrip().lower().startswith(_HTML_PREFIXES):
        raise SourceFormatError(
            "Feed returned an HTML page instead of CSV (is the sheet published as CSV?)"
        )

    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        lines = [line for line in reader if line]
    except csv.Error as e:
        raise SourceFormatError(f"Malformed CSV: {e}") from e

    if not lines:
        raise SourceFormatError("Feed has no header row")

    header = [label.strip() for label in lines[0]]
    if not any(header):
        raise SourceFormatError("Feed header row is blank")

    records: list[dict[str, str | None]] = []
    for cells in lines[1:]:
        record: dict[str, str | None] = {}
        for position, label in enumerate(header):
            if not label or label in record:
                continue
            record[label] = cells[position] if position < len(cells) else None
        records.append(record)
    return records


def normalize_feed(text: str, *, today: date | None = None) -> list[Task]:
    """Parse CSV feed text and normalize it into tasks."""
    return normalize(parse_feed(text), today=today)
