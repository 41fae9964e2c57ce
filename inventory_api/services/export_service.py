import logging
import re
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

REPORT_COLUMNS = {
    "sales-by-item": (
        "sales_by_item",
        [
            ("item_name", "Item Name"),
            ("category_name", "Category"),
            ("total_quantity", "Quantity Sold"),
            ("total_revenue", "Total Revenue"),
            ("sale_count", "Sale Count"),
            ("average_price", "Avg Price"),
        ],
    ),
    "sales-by-date": (
        "sales_by_date",
        [
            ("period_label", "Period"),
            ("total_sales", "Quantity Sold"),
            ("total_revenue", "Total Revenue"),
            ("transaction_count", "Transactions"),
            ("average_sale_value", "Avg Sale Value"),
        ],
    ),
    "sales-by-category": (
        "sales_by_category",
        [
            ("category_name", "Category"),
            ("item_count", "Items Count"),
            ("total_quantity", "Quantity Sold"),
            ("total_revenue", "Total Revenue"),
            ("sale_count", "Sale Count"),
            ("revenue_percentage", "Revenue %"),
        ],
    ),
}

_BOLD = Font(bold=True)


def humanize_key(key: str) -> str:
    words = re.split(r"_|(?<=[a-z])(?=[A-Z])", key)
    return " ".join(word.capitalize() for word in words if word)


def _write_table(worksheet, headers, rows) -> None:
    worksheet.append(list(headers))
    for cell in worksheet[1]:
        cell.font = _BOLD
    for row in rows:
        worksheet.append(list(row))
    for index, header in enumerate(headers, start=1):
        width = max([len(str(header))] + [len(str(row[index - 1])) for row in rows])
        worksheet.column_dimensions[get_column_letter(index)].width = min(width + 2, 60)


def report_filename(report_name: str) -> str:
    return "{}_report.xlsx".format(report_name.replace("-", "_"))


def build_report_workbook(report_name: str, report: dict) -> bytes:
    """Render a report as xlsx: a ``Report`` sheet of rows and a ``Summary`` sheet."""
    if report_name not in REPORT_COLUMNS:
        raise KeyError(report_name)
    rows_key, columns = REPORT_COLUMNS[report_name]

    workbook = Workbook()
    report_sheet = workbook.active
    report_sheet.title = "Report"
    _write_table(
        report_sheet,
        [header for _, header in columns],
        [[entry.get(key) for key, _ in columns] for entry in report.get(rows_key, [])],
    )

    summary = report.get("summary") or {}
    summary_sheet = workbook.create_sheet("Summary")
    _write_table(
        summary_sheet,
        [humanize_key(key) for key in summary],
        [list(summary.values())],
    )

    buffer = BytesIO()
    workbook.save(buffer)
    logger.info(
        "Exported %s with %d rows", report_name, len(report.get(rows_key, []))
    )
    return buffer.getvalue()


__all__ = [
    "REPORT_COLUMNS",
    "XLSX_MEDIA_TYPE",
    "build_report_workbook",
    "humanize_key",
    "report_filename",
]
