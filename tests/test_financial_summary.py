"""
Client financial summary tests.
Covers the pure derivation and its refresh after payment, expense and budget writes.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from app.models.budget import Budget
from app.models.expense import Expense, ExpenseStatus
from app.models.payment import Payment, PaymentStatus
from app.services.financial_summary_service import (
    FinancialSummaryService,
    compute_financial_summary,
)


def _payment(amount, day, status=PaymentStatus.COMPLETED):
    return Payment(amount=Decimal(amount), payment_date=day, status=status)


def _expense(amount, day, status=ExpenseStatus.APPROVED):
    return Expense(amount=Decimal(amount), expense_date=day, status=status)


def _budget(amount):
    return Budget(amount=Decimal(amount))


def test_empty_client_is_all_zero():
    values = compute_financial_summary([], [], [])

    assert values["total_revenue"] == Decimal("0")
    assert values["net_profit"] == Decimal("0")
    assert values["profit_margin"] == Decimal("0")
    assert values["budget_utilization"] == Decimal("0")
    assert values["average_monthly_revenue"] == Decimal("0")
    assert values["last_payment_date"] is None
    assert values["payment_count"] == 0


def test_only_completed_payments_and_approved_expenses_count():
    values = compute_financial_summary(
        [
            _payment("100.00", date(2024, 1, 10)),
            _payment("50.00", date(2024, 2, 10), PaymentStatus.PENDING),
            _payment("25.00", date(2024, 3, 10), PaymentStatus.REFUNDED),
        ],
        [
            _expense("30.00", date(2024, 1, 12)),
            _expense("99.00", date(2024, 1, 13), ExpenseStatus.REJECTED),
        ],
        [],
    )

    assert values["total_revenue"] == Decimal("100.00")
    assert values["total_payments"] == Decimal("100.00")
    assert values["total_expenses"] == Decimal("30.00")
    assert values["net_profit"] == Decimal("70.00")
    assert values["profit_margin"] == Decimal("70.00")
    assert values["payment_count"] == 1
    assert values["expense_count"] == 1
    assert values["last_payment_date"] == date(2024, 1, 10)
    assert values["last_expense_date"] == date(2024, 1, 12)


def test_budgets_do_not_multiply_revenue():
    values = compute_financial_summary(
        [_payment("100.00", date(2024, 1, 10))],
        [_expense("250.00", date(2024, 1, 11))],
        [_budget("500.00"), _budget("500.00"), _budget("250.00")],
    )

    assert values["total_revenue"] == Decimal("100.00")
    assert values["total_budgets"] == Decimal("1250.00")
    assert values["budget_utilization"] == Decimal("20.00")


def test_losses_give_negative_margin():
    values = compute_financial_summary(
        [_payment("100.00", date(2024, 1, 10))],
        [_expense("150.00", date(2024, 1, 11))],
        [],
    )

    assert values["net_profit"] == Decimal("-50.00")
    assert values["profit_margin"] == Decimal("-50.00")


def test_average_monthly_revenue_spans_calendar_months():
    values = compute_financial_summary(
        [
            _payment("100.00", date(2024, 1, 31)),
            _payment("200.00", date(2024, 3, 1)),
        ],
        [],
        [],
    )

    # January through March inclusive
    assert values["average_monthly_revenue"] == Decimal("100.00")


def test_single_payment_average_equals_revenue():
    values = compute_financial_summary([_payment("80.00", date(2024, 5, 5))], [], [])

    assert values["average_monthly_revenue"] == Decimal("80.00")


def test_undated_payment_counts_as_revenue_without_widening_the_span():
    values = compute_financial_summary(
        [_payment("60.00", date(2024, 1, 10)), _payment("60.00", date(2024, 2, 10)), _payment("30.00", None)],
        [],
        [],
    )

    assert values["total_revenue"] == Decimal("150.00")
    assert values["average_monthly_revenue"] == Decimal("75.00")
    assert values["last_payment_date"] == date(2024, 2, 10)


def test_only_undated_payments_average_over_one_month():
    values = compute_financial_summary([_payment("45.00", None)], [], [])

    assert values["total_revenue"] == Decimal("45.00")
    assert values["average_monthly_revenue"] == Decimal("45.00")
    assert values["last_payment_date"] is None


@pytest.mark.asyncio
async def test_summary_created_on_first_payment(test_client, create_client, create_payment):
    client = await create_client()
    await create_payment(client["id"], amount="100.00")

    response = await test_client.get(f"/api/v1/financial/analytics/client-summary/{client['id']}")
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["total_revenue"]) == Decimal("100.00")
    assert data["payment_count"] == 1
    assert data["last_payment_date"] == "2024-01-15"


@pytest.mark.asyncio
async def test_client_without_writes_has_no_summary(test_client, create_client):
    client = await create_client()

    response = await test_client.get(f"/api/v1/financial/analytics/client-summary/{client['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_summary_follows_payment_updates_and_deletes(test_client, create_client, create_payment):
    client = await create_client()
    payment = await create_payment(client["id"], amount="100.00", status="pending")
    url = f"/api/v1/financial/analytics/client-summary/{client['id']}"

    assert Decimal((await test_client.get(url)).json()["total_revenue"]) == Decimal("0")

    response = await test_client.put(f"/api/v1/payments/{payment['id']}", json={"status": "completed"})
    assert response.status_code == 200
    assert Decimal((await test_client.get(url)).json()["total_revenue"]) == Decimal("100.00")

    response = await test_client.delete(f"/api/v1/payments/{payment['id']}")
    assert response.status_code == 204
    data = (await test_client.get(url)).json()
    assert Decimal(data["total_revenue"]) == Decimal("0")
    assert data["payment_count"] == 0
    assert data["last_payment_date"] is None


@pytest.mark.asyncio
async def test_moving_a_payment_refreshes_both_clients(test_client, create_client, create_payment):
    first = await create_client(company_name="First")
    second = await create_client(company_name="Second")
    payment = await create_payment(first["id"], amount="75.00")

    response = await test_client.put(f"/api/v1/payments/{payment['id']}", json={"client_id": second["id"]})
    assert response.status_code == 200

    first_summary = (await test_client.get(f"/api/v1/financial/analytics/client-summary/{first['id']}")).json()
    second_summary = (await test_client.get(f"/api/v1/financial/analytics/client-summary/{second['id']}")).json()
    assert Decimal(first_summary["total_revenue"]) == Decimal("0")
    assert Decimal(second_summary["total_revenue"]) == Decimal("75.00")


@pytest.mark.asyncio
async def test_expense_and_budget_writes_refresh_summary(
    test_client, create_client, create_payment, create_expense, create_budget
):
    client = await create_client()
    await create_payment(client["id"], amount="200.00")
    await create_budget(client["id"], amount="400.00")
    await create_expense(client["id"], amount="100.00")

    data = (await test_client.get(f"/api/v1/financial/analytics/client-summary/{client['id']}")).json()
    assert Decimal(data["total_expenses"]) == Decimal("100.00")
    assert Decimal(data["net_profit"]) == Decimal("100.00")
    assert Decimal(data["profit_margin"]) == Decimal("50.00")
    assert Decimal(data["total_budgets"]) == Decimal("400.00")
    assert Decimal(data["budget_utilization"]) == Decimal("25.00")


@pytest.mark.asyncio
async def test_recompute_is_idempotent(test_client, test_db_session, create_client, create_payment):
    client = await create_client()
    await create_payment(client["id"], amount="100.00")
    service = FinancialSummaryService(test_db_session)

    first = await service.recompute(UUID(client["id"]))
    second = await service.recompute(UUID(client["id"]))

    assert first.id == second.id
    assert first.updated_at == second.updated_at
    assert second.total_revenue == Decimal("100.00")


@pytest.mark.asyncio
async def test_recompute_of_missing_client_returns_none(test_db_session):
    service = FinancialSummaryService(test_db_session)

    assert await service.recompute(uuid4()) is None


@pytest.mark.asyncio
async def test_failed_recompute_keeps_primary_write(test_client, create_client, monkeypatch):
    client = await create_client()

    async def boom(self, client_id):
        raise RuntimeError("summary store unavailable")

    monkeypatch.setattr(FinancialSummaryService, "recompute", boom)

    response = await test_client.post(
        "/api/v1/payments",
        json={"client_id": client["id"], "amount": "10.00", "payment_date": "2024-02-01", "status": "completed"},
    )
    assert response.status_code == 201

    listing = await test_client.get("/api/v1/payments", params={"client_id": client["id"]})
    assert listing.json()["total"] == 1


@pytest.mark.asyncio
async def test_refresh_endpoint_recomputes_every_client(test_client, create_client):
    await create_client(company_name="One")
    await create_client(company_name="Two")

    response = await test_client.post("/api/v1/financial/analytics/client-summary/refresh")
    assert response.status_code == 200
    assert response.json() == {"refreshed": 2, "failed": 0}

    listing = (await test_client.get("/api/v1/financial/analytics/client-summary")).json()
    assert listing["total"] == 2


@pytest.mark.asyncio
async def test_refresh_endpoint_for_unknown_client(test_client):
    response = await test_client.post(
        "/api/v1/financial/analytics/client-summary/refresh",
        params={"client_id": str(uuid4())},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_deleting_client_removes_summary(test_client, create_client, create_payment):
    client = await create_client()
    await create_payment(client["id"])

    response = await test_client.delete(f"/api/v1/clients/{client['id']}")
    assert response.status_code == 204

    listing = (await test_client.get("/api/v1/financial/analytics/client-summary")).json()
    assert listing["total"] == 0
    payments = (await test_client.get("/api/v1/payments")).json()
    assert payments["total"] == 0


def test_rejected_expenses_do_not_reduce_profit():
    values = compute_financial_summary(
        [_payment("100.00", date(2024, 1, 1)), _payment("200.00", date(2024, 1, 2))],
        [_expense("50.00", date(2024, 1, 3), ExpenseStatus.REJECTED)],
        [],
    )

    assert values["total_revenue"] == Decimal("300.00")
    assert values["total_expenses"] == Decimal("0")
    assert values["net_profit"] == Decimal("300.00")
    assert values["net_profit"] == values["total_revenue"] - values["total_expenses"]


def test_expenses_without_budgets_have_zero_utilization():
    values = compute_financial_summary([], [_expense("100.00", date(2024, 1, 3))], [])

    assert values["budget_utilization"] == Decimal("0")
    assert values["profit_margin"] == Decimal("0")
