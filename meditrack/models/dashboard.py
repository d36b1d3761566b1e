from typing import List

from meditrack.models.base import JournalModel

NO_CATEGORY = "N/A"


class DayActivity(JournalModel):
    date: str
    label: str
    count: int = 0


class DashboardStats(JournalModel):
    total_patients: int = 0
    total_minutes: int = 0
    most_common_category: str = NO_CATEGORY
    active_goals: int = 0
    weekly_activity: List[DayActivity] = []
    greeting: str = ""
