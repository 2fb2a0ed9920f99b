import unittest
from datetime import datetime, timedelta

from recette.infra.Health_Provider import StubHealthDataProvider, fetch_today_step_count
from recette.logic.reporting.calories import compute_calorie_summary
from recette.utilities.config import DAILY_CALORIE_GOAL


class TestStepCount(unittest.TestCase):

    def setUp(self):
        self.now = datetime(2025, 8, 10, 18, 30)
        self.provider = StubHealthDataProvider([
            (self.now - timedelta(days=1), 9000),  # yesterday
            (self.now.replace(hour=7), 3000),
            (self.now.replace(hour=12), 4500),
            (self.now + timedelta(hours=1), 800),  # not yet
        ])

    def test_counts_today_until_now(self):
        self.assertEqual(fetch_today_step_count(self.provider, now=self.now), 7500)
        self.assertTrue(self.provider.authorization_requested)

    def test_unavailable_device(self):
        self.provider.available = False
        self.assertEqual(fetch_today_step_count(self.provider, now=self.now), 0)
        self.assertFalse(self.provider.authorization_requested)

    def test_authorization_denied(self):
        self.provider.authorized = False
        self.assertEqual(fetch_today_step_count(self.provider, now=self.now), 0)

    def test_direct_query_without_authorization_raises(self):
        self.provider.authorized = False
        with self.assertRaises(PermissionError):
            self.provider.cumulative_step_count(self.now.replace(hour=0), self.now)

    def test_add_sample(self):
        provider = StubHealthDataProvider()
        provider.add_sample(self.now.replace(hour=9), 1200)
        self.assertEqual(fetch_today_step_count(provider, now=self.now), 1200)


class TestCalorieSummary(unittest.TestCase):

    def test_defaults(self):
        summary = compute_calorie_summary()
        self.assertEqual(summary, {'goal': DAILY_CALORIE_GOAL, 'food': 0, 'exercise': 0,
                                   'remaining': DAILY_CALORIE_GOAL, 'steps': 0})

    def test_remaining(self):
        summary = compute_calorie_summary(food=1500, exercise=300, steps=8000, goal=2000)
        self.assertEqual(summary['remaining'], 800)
        self.assertEqual(summary['steps'], 8000)

    def test_over_goal_goes_negative(self):
        self.assertEqual(compute_calorie_summary(food=2600, goal=2000)['remaining'], -600)

    def test_negative_inputs_are_clamped(self):
        summary = compute_calorie_summary(food=-10, exercise=-5, steps=-1, goal=1800)
        self.assertEqual(summary['remaining'], 1800)
        self.assertEqual(summary['steps'], 0)


if __name__ == '__main__':
    unittest.main()
