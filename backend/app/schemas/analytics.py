"""
Analytics dashboard view-model schemas.
"""

from pydantic import BaseModel
from typing import List, Literal

Trend = Literal["up", "down", "stable"]


class StageBreakdown(BaseModel):
    stage: str
    count: int
    value: float


class MonthlyRevenue(BaseModel):
    month: str
    revenue: float
    deals: int


class TopClient(BaseModel):
    name: str
    value: float
    deals: int


class ActivityMetrics(BaseModel):
    total_tasks: int
    completed_tasks: int
    overdue_tasks: int
    upcoming_events: int


class PerformanceMetrics(BaseModel):
    avg_deal_cycle_time: float
    lead_response_time: float
    customer_retention_rate: float
    sales_velocity: float


class Forecasting(BaseModel):
    projected_revenue: float
    pipeline_value: float
    expected_closing_deals: int
    forecast_accuracy: float


class TeamPerformance(BaseModel):
    top_performer: str
    avg_deals_per_user: float
    team_productivity: float


class Trends(BaseModel):
    revenue_growth_trend: Trend
    client_growth_trend: Trend
    conversion_trend: Trend
    activity_trend: Trend


class Insights(BaseModel):
    best_performing_stage: str
    worst_performing_stage: str
    peak_revenue_month: str
    recommended_actions: List[str]


class AnalyticsDashboardResponse(BaseModel):
    """Dashboard metrics derived from clients, tasks and events."""
    days: int
    total_revenue: float
    total_clients: int
    active_deals: int
    conversion_rate: float
    avg_deal_value: float
    monthly_growth: float
    clients_by_stage: List[StageBreakdown]
    revenue_by_month: List[MonthlyRevenue]
    top_clients: List[TopClient]
    activity_metrics: ActivityMetrics
    performance_metrics: PerformanceMetrics
    forecasting: Forecasting
    team_performance: TeamPerformance
    trends: Trends
    insights: Insights
