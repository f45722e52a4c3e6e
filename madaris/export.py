"""Spreadsheet export of school records (openpyxl, single sheet)."""

import io
from pathlib import Path

import openpyxl

from madaris.errors import ExportError, ExportWriteError
from madaris.schema import School
from madaris.utils import format_date_ar

EXPORT_FILENAME = "schools.xlsx"
SHEET_TITLE = "المدارس"
YES = "نعم"
NO = "لا"

# (header, School attribute) in column order
COLUMNS: tuple[tuple[str, str], ...] = (
    ("اسم المدرسة", "school_name"),
    ("المدينة", "city"),
    ("اسم مدير العقد", "contract_manager_name"),
    ("رقم الهاتف", "phone_number"),
    ("البريد الإلكتروني", "email"),
    ("روضة", "kindergarten_students"),
    ("ابتدائي (1-4)", "primary_1to4_students"),
    ("ابتدائي (5-6)", "primary_5to6_students"),
    ("متوسط (1-2)", "intermediate_1to2_students"),
    ("متوسط (3)", "intermediate_3_students"),
    ("ثانوي", "secondary_students"),
    ("إجمالي الطلاب", "total_students"),
    ("معمل حاسب آلي", "has_computer_lab"),
    ("خدمة الإنترنت", "has_internet"),
    ("تاريخ الإنشاء", "created_at"),
    ("تاريخ التحديث", "updated_at"),
)

HEADERS = [header for header, _ in COLUMNS]

_DATE_FIELDS = frozenset({"created_at", "updated_at"})


def _cell(school: School, attr: str):
    value = getattr(school, attr)
    if isinstance(value, bool):
        return YES if value else NO
    if attr in _DATE_FIELDS:
        return format_date_ar(value)
    return value


def to_row(school: School) -> list:
    return [_cell(school, attr) for _, attr in COLUMNS]


def encode(records: list[School]) -> bytes:
    """Encode records as an .xlsx document: one header row, then one row per record."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.sheet_view.rightToLeft = True
    ws.append(HEADERS)
    for school in records:
        ws.append(to_row(school))
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def write_export(records: list[School], directory: str | Path = ".") -> Path:
    """Write schools.xlsx into directory and return its path."""
    if not records:
        raise ExportError()
    path = Path(directory) / EXPORT_FILENAME
    data = encode(records)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise ExportWriteError(str(e)) from e
    return path
