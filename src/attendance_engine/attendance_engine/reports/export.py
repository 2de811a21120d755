"""Tabular export of analytics output (pandas DataFrames / Excel workbooks)."""
from __future__ import annotations

import io
from typing import Iterable, Mapping

import pandas as pd

from ..analytics.daily import DailyBucket, DailyKey
from ..analytics.departments import DepartmentStat
from ..analytics.patterns import HourlyPattern
from ..analytics.service import AnalyticsReport
from ..analytics.trends import TrendPoint

DAILY_COLUMNS = ["employee_id", "date", "sign_in", "sign_out", "duration_minutes", "status", "notes"]


def daily_frame(buckets: Mapping[DailyKey, DailyBucket]) -> pd.DataFrame:
    data = []
    for _, b in sorted(buckets.items(), key=lambda kv: (kv[0][1], kv[0][0])):
        data.append(
            {
                "employee_id": b.employee_id,
                "date": b.work_date.strftime("%Y-%m-%d"),
                "sign_in": b.sign_in.strftime("%H:%M") if b.sign_in else "",
                "sign_out": b.sign_out.strftime("%H:%M") if b.sign_out else "",
                "duration_minutes": b.duration_minutes,
                "status": b.status.value,
                "notes": "; ".join(b.notes),
            }
        )
    return pd.DataFrame(data, columns=DAILY_COLUMNS)


def hourly_frame(patterns: Iterable[HourlyPattern]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "hour": p.label,
                "on_time": p.on_time,
                "late": p.late,
                "average_arrival_time": p.average_arrival_time,
            }
            for p in patterns
        ],
        columns=["hour", "on_time", "late", "average_arrival_time"],
    )


def departments_frame(stats: Iterable[DepartmentStat]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "department": s.department,
                "total_days": s.total_days,
                "late_days": s.late_days,
                "attendance_rate": round(s.attendance_rate, 2),
                "late_arrival_rate": round(s.late_arrival_rate, 2),
                "average_arrival_time": s.average_arrival_time,
            }
            for s in stats
        ],
        columns=["department", "total_days", "late_days", "attendance_rate", "late_arrival_rate", "average_arrival_time"],
    )


def trend_frame(points: Iterable[TrendPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "period": p.period,
                "attendance_rate": round(p.attendance_rate, 2),
                "punctuality_rate": round(p.punctuality_rate, 2),
                "late_arrival_rate": round(p.late_arrival_rate, 2),
            }
            for p in points
        ],
        columns=["period", "attendance_rate", "punctuality_rate", "late_arrival_rate"],
    )


def export_excel(report: AnalyticsReport) -> bytes:
    """Workbook with one sheet per aggregation, built in memory."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        daily_frame(report.daily).to_excel(writer, index=False, sheet_name="Daily")
        hourly_frame(report.hourly).to_excel(writer, index=False, sheet_name="Hourly")
        departments_frame(report.departments).to_excel(writer, index=False, sheet_name="Departments")
        trend_frame(report.trend).to_excel(writer, index=False, sheet_name="Trend")
    return output.getvalue()
