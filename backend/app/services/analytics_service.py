"""
Analytics dashboard aggregation.

``build_dashboard`` turns raw client, task and event collections (in their API
shape) into the dashboard view-model. It is a pure function of its inputs: no
I/O, and ``now`` can be pinned for reproducible results. Malformed inputs
degrade to zeros instead of raising.
"""

import calendar
import enum
import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.task_repository import TaskRepository
from app.db.repositories.calendar_event_repository import CalendarEventRepository
from app.schemas.analytics import AnalyticsDashboardResponse
from app.schemas.calendar_event import CalendarEventResponse
from app.schemas.client import ClientResponse
from app.schemas.task import TaskResponse

logger = logging.getLogger(__name__)

WON_STAGES = frozenset({"closed", "closed-won"})
LOST_STAGES = frozenset({"lost", "closed-lost"})
DEFAULT_STAGE = "prospect"
REVENUE_SERIES_MONTHS = 6
TOP_CLIENTS_LIMIT = 5
UPCOMING_EVENT_WINDOW = timedelta(days=7)


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, Mapping)]
    return []


def _number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(Decimal(str(value)))
    except (InvalidOperation, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse a datetime/date/ISO string; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _first_datetime(record: Mapping, *keys: str) -> Optional[datetime]:
    for key in keys:
        parsed = _parse_datetime(record.get(key))
        if parsed is not None:
            return parsed
    return None


def _stage(client: Mapping) -> str:
    stage = client.get("stage")
    if isinstance(stage, enum.Enum):
        stage = stage.value
    return str(stage) if stage else DEFAULT_STAGE


def _stage_label(stage: str) -> str:
    # "closed-won" -> "Closed Won"
    return re.sub(r"\b\w", lambda match: match.group().upper(), stage.replace("-", " ", 1))


def _month_start(year: int, month: int) -> datetime:
    return datetime(year, month, 1, tzinfo=timezone.utc)


def _shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _trend(value: float, up_above: float, down_below: float) -> str:
    if value > up_above:
        return "up"
    if value < down_below:
        return "down"
    return "stable"


def _is_completed(task: Mapping) -> bool:
    status = task.get("status")
    if isinstance(status, enum.Enum):
        status = status.value
    return bool(task.get("completed")) or status == "completed"


def _sum_values(clients: Iterable[Mapping]) -> float:
    return sum(_number(client.get("deal_value")) for client in clients)


def build_dashboard(
    clients: Any,
    tasks: Any,
    events: Any,
    days: int = 30,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Aggregate raw collections into dashboard metrics.

    Args:
        clients: Client records (``stage``, ``deal_value``, ``company_name``,
            ``assigned_to``, ``created_at``, ``updated_at``)
        tasks: Task records (``completed``/``status``, ``due_date``)
        events: Event records (``start_time``)
        days: Lookback window in days for the in-window client count
        now: Evaluation instant, defaults to the current UTC time

    Returns:
        Mapping shaped like AnalyticsDashboardResponse
    """
    clients = _as_list(clients)
    tasks = _as_list(tasks)
    events = _as_list(events)
    now = _parse_datetime(now) or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=max(days, 0))

    def closed_at(client: Mapping) -> datetime:
        return _first_datetime(client, "updated_at", "created_at") or now

    recent_clients = [
        c for c in clients
        if (_first_datetime(c, "created_at", "date_created") or now) >= cutoff
    ]

    # Headline metrics
    won_deals = [c for c in clients if _stage(c) in WON_STAGES]
    active = [c for c in clients if _stage(c) not in WON_STAGES | LOST_STAGES]
    total_revenue = _sum_values(won_deals)
    total_clients = len(clients)
    active_deals = len(active)
    conversion_rate = len(won_deals) / total_clients * 100 if total_clients else 0.0
    avg_deal_value = total_revenue / len(won_deals) if won_deals else 0.0

    # Month over month growth of won revenue
    current_start = _month_start(now.year, now.month)
    previous_start = _month_start(*_shift_month(now.year, now.month, -1))
    current_month_revenue = _sum_values(c for c in won_deals if closed_at(c) >= current_start)
    previous_month_revenue = _sum_values(
        c for c in won_deals if previous_start <= closed_at(c) < current_start
    )
    if previous_month_revenue > 0:
        monthly_growth = (current_month_revenue - previous_month_revenue) / previous_month_revenue * 100
    else:
        monthly_growth = 100.0 if current_month_revenue > 0 else 0.0

    # Stage distribution, in first-seen order
    stage_groups: Dict[str, Dict[str, float]] = {}
    for client in clients:
        group = stage_groups.setdefault(_stage(client), {"count": 0, "value": 0.0})
        group["count"] += 1
        group["value"] += _number(client.get("deal_value"))
    clients_by_stage = [
        {"stage": _stage_label(stage), "count": int(group["count"]), "value": group["value"]}
        for stage, group in stage_groups.items()
    ]

    # Won revenue for the last six calendar months, oldest first
    revenue_by_month = []
    for offset in range(-(REVENUE_SERIES_MONTHS - 1), 1):
        year, month = _shift_month(now.year, now.month, offset)
        month_start = _month_start(year, month)
        month_end = _month_start(*_shift_month(year, month, 1))
        month_deals = [c for c in won_deals if month_start <= closed_at(c) < month_end]
        revenue_by_month.append({
            "month": calendar.month_abbr[month],
            "revenue": _sum_values(month_deals),
            "deals": len(month_deals),
        })

    # Top clients by total deal value
    client_totals: Dict[str, Dict[str, float]] = {}
    for client in clients:
        entry = client_totals.setdefault(client.get("company_name") or "Unknown", {"value": 0.0, "deals": 0})
        entry["value"] += _number(client.get("deal_value"))
        entry["deals"] += 1
    top_clients = sorted(
        ({"name": name, "value": entry["value"], "deals": int(entry["deals"])} for name, entry in client_totals.items()),
        key=lambda item: item["value"],
        reverse=True,
    )[:TOP_CLIENTS_LIMIT]

    # Activity
    completed_tasks = sum(1 for t in tasks if _is_completed(t))
    overdue_tasks = 0
    for task in tasks:
        due = _parse_datetime(task.get("due_date"))
        if not _is_completed(task) and due is not None and due < now:
            overdue_tasks += 1
    upcoming_events = 0
    for event in events:
        starts = _first_datetime(event, "start_time", "date")
        if starts is not None and now <= starts <= now + UPCOMING_EVENT_WINDOW:
            upcoming_events += 1

    # Performance
    cycle_times = []
    for client in won_deals:
        created = _parse_datetime(client.get("created_at"))
        updated = _parse_datetime(client.get("updated_at"))
        if created is not None and updated is not None:
            cycle_times.append(abs((updated - created).total_seconds()) / 86400)
    avg_deal_cycle_time = sum(cycle_times) / len(cycle_times) if cycle_times else 0.0
    sales_velocity = avg_deal_value * conversion_rate * (30 / max(avg_deal_cycle_time, 1))

    # Forecasting
    pipeline_value = _sum_values(active)
    projected_revenue = pipeline_value * (conversion_rate / 100)
    expected_closing_deals = _round_half_up(active_deals * (conversion_rate / 100))

    # Team performance, keyed by owner
    owners: Dict[str, Dict[str, float]] = {}
    for client in clients:
        owner = client.get("assigned_to") or client.get("owner") or "Unassigned"
        stats = owners.setdefault(str(owner), {"deals": 0, "revenue": 0.0})
        if _stage(client) in WON_STAGES:
            stats["deals"] += 1
            stats["revenue"] += _number(client.get("deal_value"))
    top_performer = max(owners.items(), key=lambda item: item[1]["revenue"])[0] if owners else "No data"
    avg_deals_per_user = len(won_deals) / (len(owners) or 1)
    team_productivity = completed_tasks / len(tasks) * 100 if completed_tasks else 0.0

    if total_clients > len(recent_clients):
        client_growth_trend = "up"
    elif total_clients < len(recent_clients):
        client_growth_trend = "down"
    else:
        client_growth_trend = "stable"

    # Insights
    if clients_by_stage:
        best_stage = max(clients_by_stage, key=lambda item: item["value"])["stage"]
        worst_stage = min(clients_by_stage, key=lambda item: item["value"])["stage"]
    else:
        best_stage = worst_stage = "N/A"
    peak_month = max(revenue_by_month, key=lambda item: item["revenue"])["month"]

    actions = []
    if conversion_rate < 10:
        actions.append("Focus on improving lead qualification and follow-up processes")
    if avg_deal_cycle_time > 60:
        actions.append("Streamline sales process to reduce deal cycle time")
    if overdue_tasks > 5:
        actions.append("Prioritize task management and deadline adherence")
    if monthly_growth < 0:
        actions.append("Analyze market trends and adjust sales strategy")
    if team_productivity < 50:
        actions.append("Provide additional training and support to team members")
    if not actions:
        actions.append("Continue current successful strategies and monitor performance")

    return {
        "days": days,
        "total_revenue": total_revenue,
        "total_clients": total_clients,
        "active_deals": active_deals,
        "conversion_rate": conversion_rate,
        "avg_deal_value": avg_deal_value,
        "monthly_growth": monthly_growth,
        "clients_by_stage": clients_by_stage,
        "revenue_by_month": revenue_by_month,
        "top_clients": top_clients,
        "activity_metrics": {
            "total_tasks": len(tasks),
            "completed_tasks": completed_tasks,
            "overdue_tasks": overdue_tasks,
            "upcoming_events": upcoming_events,
        },
        "performance_metrics": {
            "avg_deal_cycle_time": avg_deal_cycle_time,
            "lead_response_time": 0.0,
            "customer_retention_rate": 0.0,
            "sales_velocity": sales_velocity,
        },
        "forecasting": {
            "projected_revenue": projected_revenue,
            "pipeline_value": pipeline_value,
            "expected_closing_deals": expected_closing_deals,
            "forecast_accuracy": 0.0,
        },
        "team_performance": {
            "top_performer": top_performer,
            "avg_deals_per_user": avg_deals_per_user,
            "team_productivity": team_productivity,
        },
        "trends": {
            "revenue_growth_trend": _trend(monthly_growth, 5, -5),
            "client_growth_trend": client_growth_trend,
            "conversion_trend": _trend(conversion_rate, 15, 5),
            "activity_trend": _trend(team_productivity, 70, 40),
        },
        "insights": {
            "best_performing_stage": best_stage,
            "worst_performing_stage": worst_stage,
            "peak_revenue_month": peak_month,
            "recommended_actions": actions,
        },
    }


class AnalyticsService(BaseService):
    """Loads the raw collections and builds the dashboard view-model."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.task_repo = TaskRepository(session)
        self.event_repo = CalendarEventRepository(session)

    async def get_dashboard(self, days: int, now: Optional[datetime] = None) -> AnalyticsDashboardResponse:
        """Build the dashboard over every client, task and event."""
        clients = [
            ClientResponse.model_validate(c).model_dump(mode="json")
            for c in await self.client_repo.list_all()
        ]
        tasks = [
            TaskResponse.model_validate(t).model_dump(mode="json")
            for t in await self.task_repo.list_all()
        ]
        events = [
            CalendarEventResponse.model_validate(e).model_dump(mode="json")
            for e in await self.event_repo.list_all()
        ]

        logger.info(
            "Building analytics dashboard",
            extra={"days": days, "clients": len(clients), "tasks": len(tasks), "events": len(events)},
        )
        return AnalyticsDashboardResponse(**build_dashboard(clients, tasks, events, days=days, now=now))
