# backend/mailcheck/utils/parser.py
import csv
import io
from typing import Callable, Dict, List

import xlrd
from openpyxl import load_workbook


class ParseError(Exception):
    pass


class UnsupportedFileType(ParseError):
    pass


def _first_cell(row) -> str | None:
    # cells are kept verbatim so padding still reaches the checker
    for v in row:
        if v is None:
            continue
        v = v if isinstance(v, str) else str(v)
        if v.strip():
            return v
    return None


def parse_csv(content: bytes) -> List[str]:
    # utf-8-sig drops the BOM written by spreadsheet "CSV UTF-8" exports
    text = content.decode("utf-8-sig", errors="ignore")
    reader = csv.reader(io.StringIO(text))
    emails = []
    try:
        for row in reader:
            c = _first_cell(row)
            if c:
                emails.append(c)
    except csv.Error as e:
        raise ParseError(f"invalid csv: {e}") from e
    return emails


def parse_xlsx(content: bytes) -> List[str]:
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True)
    except Exception as e:
        raise ParseError(f"invalid xlsx: {e}") from e
    sheet = workbook.active
    emails = []
    try:
        for row in sheet.iter_rows(values_only=True):
            c = _first_cell(row or ())
            if c:
                emails.append(c)
    finally:
        workbook.close()
    return emails


def parse_xls(content: bytes) -> List[str]:
    try:
        workbook = xlrd.open_workbook(file_contents=content)
    except Exception as e:
        raise ParseError(f"invalid xls: {e}") from e
    sheet = workbook.sheet_by_index(0)
    emails = []
    for i in range(sheet.nrows):
        c = _first_cell(cell.value for cell in sheet.row(i))
        if c:
            emails.append(c)
    return emails


PARSERS: Dict[str, Callable[[bytes], List[str]]] = {
    ".csv": parse_csv,
    ".txt": parse_csv,
    ".xlsx": parse_xlsx,
    ".xls": parse_xls,
}


def parse_upload(filename: str, content: bytes) -> List[str]:
    fname = (filename or "").lower()
    for ext, parser in PARSERS.items():
        if fname.endswith(ext):
            return parser(content)
    raise UnsupportedFileType(filename)
