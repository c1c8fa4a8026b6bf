"""
Spreadsheet export of the client financial summary table.
"""

import io
import logging
from datetime import datetime, timezone

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.financial_summary_repository import FinancialSummaryRepository

logger = logging.getLogger(__name__)

HEADERS = [
    ("Client", 32),
    ("Total Revenue", 16),
    ("Total Expenses", 16),
    ("Net Profit", 16),
    ("Profit Margin %", 16),
    ("Total Budgets", 16),
    ("Budget Utilization %", 20),
    ("Avg Monthly Revenue", 20),
    ("Payments", 11),
    ("Expenses", 11),
    ("Last Payment", 14),
    ("Last Expense", 14),
]
MONEY_FORMAT = "#,##0.00"
HEADER_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")


class FinancialExportService(BaseService):
    """Service for exporting financial summaries to Excel."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.summary_repo = FinancialSummaryRepository(session)

    async def export_summaries_to_excel(self) -> io.BytesIO:
        """Write every summary row, highest revenue first, into an xlsx workbook."""
        summaries = await self.summary_repo.list_by_revenue()
        client_names = {c.id: c.company_name for c in await self.client_repo.list_all()}

        wb = Workbook()
        ws = wb.active
        ws.title = "Client Financial Summary"

        for col_idx, (title, width) in enumerate(HEADERS, start=1):
            cell = ws.cell(row=1, column=col_idx, value=title)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = HEADER_FILL
            cell.alignment = Alignment(horizontal="center", vertical="center")
            ws.column_dimensions[get_column_letter(col_idx)].width = width
        ws.freeze_panes = "A2"

        for row_idx, summary in enumerate(summaries, start=2):
            values = [
                client_names.get(summary.client_id, str(summary.client_id)),
                float(summary.total_revenue),
                float(summary.total_expenses),
                float(summary.net_profit),
                float(summary.profit_margin),
                float(summary.total_budgets),
                float(summary.budget_utilization),
                float(summary.average_monthly_revenue),
                summary.payment_count,
                summary.expense_count,
                summary.last_payment_date,
                summary.last_expense_date,
            ]
            for col_idx, value in enumerate(values, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                if 2 <= col_idx <= 8:
                    cell.number_format = MONEY_FORMAT
                elif col_idx >= 11 and value is not None:
                    cell.number_format = "yyyy-mm-dd"

        ws.cell(
            row=len(summaries) + 3,
            column=1,
            value=f"Generated {datetime.now(timezone.utc):%Y-%m-%d %H:%M} UTC",
        ).font = Font(italic=True, color="808080")

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)

        logger.info("Financial summary exported", extra={"rows": len(summaries)})
        return output
