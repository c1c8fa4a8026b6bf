"""
Financial analytics endpoint tests: profitability, overview, monthly trends and export.
"""

from decimal import Decimal
from io import BytesIO
from uuid import uuid4

import pytest
from openpyxl import load_workbook

BASE = "/api/v1/financial/analytics"


@pytest.mark.asyncio
async def test_client_profitability_is_date_bounded(test_client, create_client, create_payment, create_expense):
    client = await create_client()
    await create_payment(client["id"], amount="300.00", payment_date="2024-01-10")
    await create_payment(client["id"], amount="100.00", payment_date="2024-02-10")
    await create_payment(client["id"], amount="999.00", payment_date="2024-01-20", status="failed")
    await create_payment(client["id"], amount="500.00", payment_date="2024-04-01")
    await create_expense(client["id"], amount="80.00", expense_date="2024-01-15")
    await create_expense(client["id"], amount="20.00", expense_date="2024-02-15", status="pending")

    response = await test_client.get(
        f"{BASE}/client-profitability/{client['id']}",
        params={"start_date": "2024-01-01", "end_date": "2024-02-29"},
    )

    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["total_revenue"]) == Decimal("400.00")
    assert Decimal(data["total_expenses"]) == Decimal("80.00")
    assert Decimal(data["net_profit"]) == Decimal("320.00")
    assert Decimal(data["profit_margin"]) == Decimal("80.00")
    assert data["total_payments"] == 2
    assert data["total_expenses_count"] == 1
    assert Decimal(data["average_payment_amount"]) == Decimal("200.00")
    assert data["last_payment_date"] == "2024-02-10"


@pytest.mark.asyncio
async def test_client_profitability_without_activity(test_client, create_client):
    client = await create_client()

    data = (
        await test_client.get(
            f"{BASE}/client-profitability/{client['id']}",
            params={"start_date": "2024-01-01", "end_date": "2024-12-31"},
        )
    ).json()

    assert Decimal(data["total_revenue"]) == Decimal("0")
    assert Decimal(data["profit_margin"]) == Decimal("0")
    assert Decimal(data["average_payment_amount"]) == Decimal("0")
    assert data["last_payment_date"] is None


@pytest.mark.asyncio
async def test_client_profitability_rejects_inverted_range(test_client, create_client):
    client = await create_client()

    response = await test_client.get(
        f"{BASE}/client-profitability/{client['id']}",
        params={"start_date": "2024-03-01", "end_date": "2024-01-01"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_client_profitability_unknown_client(test_client):
    response = await test_client.get(
        f"{BASE}/client-profitability/{uuid4()}",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31"},
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Client not found"


@pytest.mark.asyncio
async def test_overview(test_client, create_client, create_payment, create_expense, create_budget):
    first = await create_client(company_name="First", stage="closed")
    second = await create_client(company_name="Second", stage="meeting")
    await create_client(company_name="Gone", stage="lost")
    await create_payment(first["id"], amount="600.00")
    await create_payment(second["id"], amount="400.00")
    await create_expense(first["id"], amount="250.00")
    await create_budget(second["id"])

    data = (await test_client.get(f"{BASE}/overview")).json()

    assert Decimal(data["total_revenue"]) == Decimal("1000.00")
    assert Decimal(data["total_expenses"]) == Decimal("250.00")
    assert Decimal(data["net_profit"]) == Decimal("750.00")
    assert Decimal(data["profit_margin"]) == Decimal("75.00")
    assert data["active_budgets"] == 1
    assert data["active_clients"] == 2


@pytest.mark.asyncio
async def test_overview_rejects_inverted_range(test_client):
    response = await test_client.get(
        f"{BASE}/overview",
        params={"start_date": "2024-03-01", "end_date": "2024-01-01"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_monthly_trends(test_client, create_client, create_payment, create_expense):
    client = await create_client()
    await create_payment(client["id"], amount="100.00", payment_date="2024-01-05")
    await create_payment(client["id"], amount="50.00", payment_date="2024-01-25")
    await create_payment(client["id"], amount="70.00", payment_date="2023-12-31")
    await create_expense(client["id"], amount="30.00", expense_date="2024-03-03")

    data = (await test_client.get(f"{BASE}/monthly-trends", params={"year": 2024})).json()

    assert data["year"] == 2024
    assert len(data["months"]) == 12
    january, march = data["months"][0], data["months"][2]
    assert january["month_name"] == "January"
    assert Decimal(january["revenue"]) == Decimal("150.00")
    assert Decimal(march["expenses"]) == Decimal("30.00")
    assert Decimal(march["profit"]) == Decimal("-30.00")
    assert all(Decimal(m["revenue"]) == 0 for m in data["months"][1:])


@pytest.mark.asyncio
async def test_export_summaries(test_client, create_client, create_payment):
    client = await create_client(company_name="Export Ltd")
    await create_payment(client["id"], amount="123.45")

    response = await test_client.get(f"{BASE}/client-summary/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "attachment" in response.headers["content-disposition"]

    ws = load_workbook(BytesIO(response.content)).active
    assert ws.title == "Client Financial Summary"
    assert ws.cell(row=1, column=1).value == "Client"
    assert ws.cell(row=2, column=1).value == "Export Ltd"
    assert ws.cell(row=2, column=2).value == pytest.approx(123.45)


@pytest.mark.asyncio
async def test_summaries_listed_by_revenue(test_client, create_client, create_payment):
    small = await create_client(company_name="Small")
    large = await create_client(company_name="Large")
    await create_payment(small["id"], amount="10.00")
    await create_payment(large["id"], amount="1000.00")

    data = (await test_client.get(f"{BASE}/client-summary")).json()

    assert data["total"] == 2
    assert [item["client_id"] for item in data["items"]] == [large["id"], small["id"]]


@pytest.mark.asyncio
async def test_budget_performance_report(test_client, create_client, create_budget):
    client = await create_client(company_name="Globex")
    budget = await create_budget(client["id"], amount="1000.00")
    await test_client.put(f"/api/v1/budgets/{budget['id']}", json={"spent_amount": "250.00"})
    await create_budget(client["id"], amount="400.00", name="Q3", start_date="2024-07-01", end_date="2024-09-30")

    data = (
        await test_client.get(f"{BASE}/budget-performance", params={"start_date": "2024-02-01", "end_date": "2024-02-29"})
    ).json()

    assert data["total_budgets"] == 1
    entry = data["budgets"][0]
    assert entry["client_name"] == "Globex"
    assert Decimal(entry["remaining"]) == Decimal("750.00")
    assert Decimal(entry["utilization_rate"]) == Decimal("25.00")
    assert Decimal(entry["variance_percentage"]) == Decimal("75.00")

    data = (await test_client.get(f"{BASE}/budget-performance")).json()
    assert data["total_budgets"] == 2
    assert Decimal(data["total_allocated"]) == Decimal("1400.00")
    assert Decimal(data["total_spent"]) == Decimal("250.00")
    assert Decimal(data["average_utilization"]) == Decimal("12.50")


@pytest.mark.asyncio
async def test_payment_tracking_report(test_client, create_client, create_payment):
    client = await create_client()
    await create_payment(client["id"], amount="100.00", payment_date="2024-03-01")
    await create_payment(client["id"], amount="50.00", payment_date="2024-03-05", status="pending")
    await create_payment(client["id"], amount="25.00", payment_date="2024-03-09", status="failed")
    await create_payment(client["id"], amount="70.00", payment_date="2024-03-10")
    await create_payment(client["id"], amount="900.00", payment_date="2024-05-01")

    data = (
        await test_client.get(f"{BASE}/payment-tracking", params={"start_date": "2024-03-01", "end_date": "2024-03-31"})
    ).json()

    assert data["total_payments"] == 4
    assert data["status_counts"] == {"pending": 1, "completed": 2, "failed": 1, "refunded": 0}
    assert Decimal(data["total_amount"]) == Decimal("245.00")
    assert Decimal(data["completed_amount"]) == Decimal("170.00")
    assert Decimal(data["completion_rate"]) == Decimal("50.00")
    assert [p["payment_date"] for p in data["payments"]][0] == "2024-03-10"


@pytest.mark.asyncio
async def test_payment_tracking_when_empty(test_client):
    data = (await test_client.get(f"{BASE}/payment-tracking")).json()

    assert data["total_payments"] == 0
    assert Decimal(data["completion_rate"]) == Decimal("0")


@pytest.mark.asyncio
async def test_vendor_analysis_report(test_client, create_client, create_expense):
    client = await create_client()
    cloud = (await test_client.post("/api/v1/vendors", json={"name": "cloud Inc"})).json()
    print_co = (await test_client.post("/api/v1/vendors", json={"name": "Acme Print", "status": "inactive"})).json()
    await create_expense(client["id"], amount="40.00", vendor_id=cloud["id"])
    await create_expense(client["id"], amount="60.00", vendor_id=cloud["id"])
    await create_expense(client["id"], amount="500.00", vendor_id=cloud["id"], status="pending")
    await create_expense(client["id"], amount="15.00")

    data = (await test_client.get(f"{BASE}/vendor-analysis")).json()

    assert data["total_vendors"] == 2
    assert data["active_vendors"] == 1
    assert data["inactive_vendors"] == 1
    assert [v["name"] for v in data["vendors"]] == ["Acme Print", "cloud Inc"]
    by_id = {v["vendor_id"]: v for v in data["vendors"]}
    assert Decimal(by_id[cloud["id"]]["total_spending"]) == Decimal("100.00")
    assert by_id[cloud["id"]]["expense_count"] == 2
    assert by_id[print_co["id"]]["expense_count"] == 0
    assert Decimal(data["total_spending"]) == Decimal("100.00")
    assert Decimal(data["average_spending"]) == Decimal("50.00")


@pytest.mark.asyncio
async def test_reports_reject_inverted_range(test_client):
    for report in ("budget-performance", "payment-tracking", "vendor-analysis"):
        response = await test_client.get(
            f"{BASE}/{report}",
            params={"start_date": "2024-03-01", "end_date": "2024-01-01"},
        )
        assert response.status_code == 400, report
