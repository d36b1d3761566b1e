from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional

from meditrack.core.config import settings
from meditrack.models.base import utc_today
from meditrack.models.dashboard import NO_CATEGORY, DashboardStats, DayActivity
from meditrack.models.goal import PENDING, ProfessionalGoal
from meditrack.models.patient import PatientConsultation

# es-ES short weekday names, Monday first
WEEKDAY_LABELS = ("lun", "mar", "mié", "jue", "vie", "sáb", "dom")


def most_common_category(categories: Iterable[Optional[str]]) -> str:
    # Counter keeps first-seen order for equal counts
    counts = Counter(c for c in categories if c)
    if not counts:
        return NO_CATEGORY
    return counts.most_common(1)[0][0]


def weekly_activity(consultation_dates: Iterable[str], today: Optional[date] = None, days: Optional[int] = None) -> List[DayActivity]:
    """
    Consultation counts for the trailing window ending today, oldest first.

    Dates are matched as exact ``YYYY-MM-DD`` strings.
    """
    today = today or utc_today()
    days = days or settings.DASHBOARD_WINDOW_DAYS

    counts = Counter(consultation_dates)
    buckets = []
    for offset in range(days - 1, -1, -1):
        d = today - timedelta(days=offset)
        key = d.isoformat()
        buckets.append(DayActivity(date=key, label=WEEKDAY_LABELS[d.weekday()], count=counts.get(key, 0)))
    return buckets


def compute_stats(
    patients: List[PatientConsultation],
    goals: List[ProfessionalGoal],
    today: Optional[date] = None,
) -> DashboardStats:
    return DashboardStats(
        total_patients=len(patients),
        total_minutes=sum(p.duration_minutes for p in patients),
        most_common_category=most_common_category(p.category for p in patients),
        active_goals=sum(1 for g in goals if g.status == PENDING),
        weekly_activity=weekly_activity((p.consultation_date for p in patients), today=today),
    )
