"""Weekly points CSV import/export: the native format and the vendor daily-log export."""
from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Dict, Iterable, List, Sequence, Tuple

from app.api.schemas.records import WeeklyPointRecord
from app.services.numbers import parse_number_or, round_half_up
from app.services.pillars import PILLAR_IDS
from app.services.week_calendar import iso_week_key, week_label

logger = logging.getLogger(__name__)

NATIVE_COLUMNS: Tuple[str, ...] = ("week", "label") + PILLAR_IDS

VENDOR_HEADER_MARKERS: Tuple[str, ...] = ("athlete name", "log date")

# Fixed positions in the vendor daily-log export. Breathe has no column of its
# own and reads the first connect column.
VENDOR_DATE_COLUMN = 3
VENDOR_PILLAR_COLUMNS: Dict[str, Tuple[int, ...]] = {
    "move": (8, 9, 10, 11),
    "recover": (13, 14, 15, 16),
    "fuel": (18, 19, 20, 21),
    "connect": (23, 24, 25, 26, 27),
    "breathe": (23,),
    "misc": (29, 30),
}


class CsvImportError(ValueError):
    """Raised when an uploaded CSV cannot be mapped to weekly point records."""


def _non_blank_lines(text: str) -> List[str]:
    return [line for line in (text or "").strip().splitlines() if line.strip()]


def _split_row(line: str) -> List[str]:
    return [cell.strip() for cell in next(csv.reader([line]), [])]


def is_vendor_export(text: str) -> bool:
    """Sniff the header line for the vendor's column names."""
    lines = _non_blank_lines(text)
    if not lines:
        return False
    header = lines[0].lower()
    return any(marker in header for marker in VENDOR_HEADER_MARKERS)


def parse_points_csv(text: str) -> Tuple[str, List[WeeklyPointRecord]]:
    """Detect the CSV flavour and parse it; returns ``(format_name, records)``."""
    if is_vendor_export(text):
        return "vendor", parse_vendor_csv(text)
    return "native", parse_native_csv(text)


def _pillar_cell(value: str) -> int:
    return max(0, int(parse_number_or(value, 0)))


def parse_native_csv(text: str) -> List[WeeklyPointRecord]:
    """Parse the native ``week,label,move,...,misc`` format.

    The header must name every column; cells are lenient and fall back to 0.
    """
    lines = _non_blank_lines(text)
    if not lines:
        raise CsvImportError("CSV is empty.")

    header = [name.lower() for name in _split_row(lines[0])]
    for column in NATIVE_COLUMNS:
        if column not in header:
            raise CsvImportError(f"Missing required column: {column}")
    positions = {column: header.index(column) for column in NATIVE_COLUMNS}

    records: List[WeeklyPointRecord] = []
    for row_number, line in enumerate(lines[1:], start=1):
        cells = _split_row(line)

        def cell(column: str) -> str:
            index = positions[column]
            return cells[index] if index < len(cells) else ""

        week_key = cell("week")
        if not week_key:
            raise CsvImportError(f"Row {row_number} is missing a week value")

        records.append(
            WeeklyPointRecord(
                week_key=week_key,
                label=cell("label"),
                **{pillar: _pillar_cell(cell(pillar)) for pillar in PILLAR_IDS},
            )
        )

    logger.info("Parsed %d native weekly point rows", len(records))
    return records


def serialize_native_csv(records: Iterable[WeeklyPointRecord]) -> str:
    """Write records in the native format accepted by :func:`parse_native_csv`."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(NATIVE_COLUMNS)
    for record in records:
        writer.writerow(
            [record.week_key, record.label] + [getattr(record, pillar) for pillar in PILLAR_IDS]
        )
    return buffer.getvalue()


def _parse_vendor_date(raw: str) -> date:
    month, day, short_year = (int(part) for part in raw.strip().split("/"))
    return date(2000 + short_year, month, day)


def _sum_columns(cells: Sequence[str], indices: Iterable[int]) -> float:
    return sum(parse_number_or(cells[i], 0) if i < len(cells) else 0 for i in indices)


def _week_total(total: float) -> int:
    # Summing many huge cells can still overflow to inf.
    return max(0, round_half_up(parse_number_or(total, 0)))


def parse_vendor_csv(text: str) -> List[WeeklyPointRecord]:
    """Aggregate the vendor's daily-log export into ISO-week point records.

    Columns are read by position; the layout is not validated.
    """
    lines = _non_blank_lines(text)
    if len(lines) < 2:
        raise CsvImportError("No data rows found.")

    weeks: Dict[str, Dict[str, float]] = {}
    for row_number, line in enumerate(lines[1:], start=1):
        cells = _split_row(line)
        raw_date = cells[VENDOR_DATE_COLUMN] if len(cells) > VENDOR_DATE_COLUMN else ""
        try:
            logged_on = _parse_vendor_date(raw_date)
        except ValueError:
            logger.warning("Skipping vendor row %d with unreadable date %r", row_number, raw_date)
            continue

        week_key = iso_week_key(logged_on)
        totals = weeks.setdefault(week_key, {pillar: 0.0 for pillar in PILLAR_IDS})
        for pillar, indices in VENDOR_PILLAR_COLUMNS.items():
            totals[pillar] += _sum_columns(cells, indices)

    records = [
        WeeklyPointRecord(
            week_key=week_key,
            label=week_label(week_key),
            **{pillar: _week_total(weeks[week_key][pillar]) for pillar in PILLAR_IDS},
        )
        for week_key in sorted(weeks)
    ]
    logger.info("Aggregated %d vendor rows into %d weeks", len(lines) - 1, len(records))
    return records
