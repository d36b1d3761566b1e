import unittest
from datetime import date, timedelta

from meditrack.models.goal import ProfessionalGoal
from meditrack.models.patient import PatientConsultation
from meditrack.services.dashboard_stats import compute_stats, most_common_category, weekly_activity

TODAY = date(2026, 10, 19)  # a Monday


def _patient(pid, category="General", minutes=20, day=TODAY):
    return PatientConsultation(
        id=pid,
        owner_id="doc-1",
        anonymous_id=f"PAC-{pid}",
        reason="Control",
        category=category,
        duration_minutes=minutes,
        consultation_date=day.isoformat(),
    )


class TestMostCommonCategory(unittest.TestCase):
    def test_majority_wins(self):
        self.assertEqual(most_common_category(["A", "A", "B"]), "A")

    def test_tie_goes_to_first_encountered(self):
        self.assertEqual(most_common_category(["B", "A", "A", "B"]), "B")

    def test_empty_state(self):
        self.assertEqual(most_common_category([]), "N/A")
        self.assertEqual(most_common_category(["", None]), "N/A")


class TestWeeklyActivity(unittest.TestCase):
    def test_trailing_week_buckets(self):
        yesterday = (TODAY - timedelta(days=1)).isoformat()
        buckets = weekly_activity([TODAY.isoformat(), TODAY.isoformat(), yesterday], today=TODAY)

        self.assertEqual(len(buckets), 7)
        self.assertEqual([b.count for b in buckets], [0, 0, 0, 0, 0, 1, 2])
        self.assertEqual(buckets[-1].date, "2026-10-19")
        self.assertEqual(buckets[0].date, "2026-10-13")
        self.assertEqual(buckets[-1].label, "lun")
        self.assertEqual(buckets[-2].label, "dom")

    def test_dates_outside_window_are_ignored(self):
        old = (TODAY - timedelta(days=7)).isoformat()
        buckets = weekly_activity([old, "2026-10-19T09:00"], today=TODAY)
        self.assertEqual(sum(b.count for b in buckets), 0)


class TestComputeStats(unittest.TestCase):
    def test_aggregates(self):
        patients = [
            _patient("1", "Crónico", 30),
            _patient("2", "Crónico", 15, TODAY - timedelta(days=2)),
            _patient("3", "General", 20),
        ]
        goals = [
            ProfessionalGoal(id="g1", owner_id="doc-1", goal="ACLS", status="pending"),
            ProfessionalGoal(id="g2", owner_id="doc-1", goal="Congreso", status="completed"),
            ProfessionalGoal(id="g3", owner_id="doc-1", goal="Paper", status="pending"),
        ]

        stats = compute_stats(patients, goals, today=TODAY)

        self.assertEqual(stats.total_patients, 3)
        self.assertEqual(stats.total_minutes, 65)
        self.assertEqual(stats.most_common_category, "Crónico")
        self.assertEqual(stats.active_goals, 2)
        self.assertEqual([b.count for b in stats.weekly_activity], [0, 0, 0, 0, 1, 0, 2])

    def test_empty_journal(self):
        stats = compute_stats([], [], today=TODAY)
        self.assertEqual(stats.total_patients, 0)
        self.assertEqual(stats.total_minutes, 0)
        self.assertEqual(stats.most_common_category, "N/A")
        self.assertEqual(stats.active_goals, 0)
        self.assertEqual(stats.to_document()["mostCommonCategory"], "N/A")


if __name__ == "__main__":
    unittest.main()
