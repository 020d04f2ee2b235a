import io
from datetime import datetime
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.worksheet.table import Table, TableStyleInfo

from hospital_assets.models import Asset

HEADER = [
    "ID", "Name", "Type", "Department", "Location", "Serial number",
    "Purchase date", "Status", "Assigned user", "Updated at",
]

COLUMN_WIDTHS = {
    "A": 8,
    "B": 26,
    "C": 18,
    "D": 16,
    "E": 16,
    "F": 18,
    "G": 14,
    "H": 14,
    "I": 14,
    "J": 20,
}


def build_assets_workbook(assets: Iterable[Asset]) -> bytes:
    """Render the asset register as an .xlsx file and return its bytes."""
    assets = list(assets)

    wb = Workbook()
    ws = wb.active
    ws.title = "Asset register"

    header_font = Font(bold=True)
    header_fill = PatternFill("solid", fgColor="DDDDDD")
    header_align = Alignment(horizontal="center", vertical="center")

    ws.append(HEADER)
    ws.row_dimensions[1].height = 24
    for col in range(1, len(HEADER) + 1):
        cell = ws.cell(row=1, column=col)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_align

    for a in assets:
        ws.append([
            a.id,
            a.name,
            a.type,
            a.department,
            a.location,
            a.serial_number,
            a.purchase_date,
            a.status,
            a.assigned_user_id if a.assigned_user_id is not None else "",
            a.updated_at,
        ])

    data_end_row = 1 + len(assets)
    ws.freeze_panes = "A2"

    for r in range(2, data_end_row + 1):
        ws.cell(row=r, column=7).number_format = "yyyy-mm-dd"
        ws.cell(row=r, column=10).number_format = "yyyy-mm-dd hh:mm:ss"

    for col, width in COLUMN_WIDTHS.items():
        ws.column_dimensions[col].width = width

    table = Table(displayName="AssetRegister", ref=f"A1:J{max(1, data_end_row)}")
    table.tableStyleInfo = TableStyleInfo(
        name="TableStyleMedium9",
        showFirstColumn=False,
        showLastColumn=False,
        showRowStripes=True,
        showColumnStripes=False,
    )
    ws.add_table(table)

    # export stamp sits below the table range
    ws.append([])
    ws.append(["Exported at", datetime.now().strftime("%Y-%m-%d %H:%M:%S")])

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
