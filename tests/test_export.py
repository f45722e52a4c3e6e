"""
Tests for the spreadsheet export — madaris/export.py
"""
import io

import openpyxl
import pytest

from madaris.errors import ExportError, ExportWriteError
from madaris.export import EXPORT_FILENAME, HEADERS, encode, to_row, write_export


def _rows(data: bytes) -> list[tuple]:
    wb = openpyxl.load_workbook(io.BytesIO(data))
    assert len(wb.worksheets) == 1
    return list(wb.active.iter_rows(values_only=True))


class TestEncode:
    def test_header_plus_one_row_per_record(self, schools):
        rows = _rows(encode(schools))
        assert len(rows) == len(schools) + 1
        assert list(rows[0]) == HEADERS

    def test_empty_list_has_only_header(self):
        rows = _rows(encode([]))
        assert len(rows) == 1
        assert list(rows[0]) == HEADERS

    def test_headers_fixed_across_calls(self, schools):
        assert _rows(encode(schools))[0] == _rows(encode(schools[:1]))[0]

    def test_rows_follow_input_order(self, schools):
        rows = _rows(encode(list(reversed(schools))))
        assert [r[0] for r in rows[1:]] == [s.school_name for s in reversed(schools)]

    def test_sheet_title(self, schools):
        wb = openpyxl.load_workbook(io.BytesIO(encode(schools)))
        assert wb.active.title == "المدارس"


class TestToRow:
    def test_localized_values(self, schools, local_tz):
        local_tz("UTC0")
        row = to_row(schools[2])
        assert row[HEADERS.index("اسم المدرسة")] == "Al Tamayuz Model School"
        assert row[HEADERS.index("معمل حاسب آلي")] == "نعم"
        assert row[HEADERS.index("خدمة الإنترنت")] == "لا"
        assert row[HEADERS.index("تاريخ الإنشاء")] == "١٥ يناير ٢٠٢٥"
        assert row[HEADERS.index("تاريخ التحديث")] == "٢٠ يناير ٢٠٢٥"
        assert row[HEADERS.index("إجمالي الطلاب")] == schools[2].total_students

    def test_counts_are_ints(self, schools):
        row = to_row(schools[0])
        assert row[HEADERS.index("روضة")] == 45
        assert row[HEADERS.index("ثانوي")] == 110


class TestWriteExport:
    def test_writes_fixed_file_name(self, schools, tmp_path):
        path = write_export(schools, tmp_path)
        assert path == tmp_path / EXPORT_FILENAME
        assert path.name == "schools.xlsx"
        assert len(_rows(path.read_bytes())) == 4

    def test_unwritable_directory(self, schools, tmp_path):
        blocker = tmp_path / "afile"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ExportWriteError):
            write_export(schools, blocker / "sub")

    def test_nothing_to_export(self, tmp_path):
        with pytest.raises(ExportError):
            write_export([], tmp_path)
        assert not (tmp_path / EXPORT_FILENAME).exists()
