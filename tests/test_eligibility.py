import unittest

from playdraw.draw import (
    REQUIRED_PLAYTIME_IN_SECONDS,
    PlaytimeCounter,
    ProgressionResult,
    evaluate_progression,
)


class EvaluateProgressionTests(unittest.TestCase):
    def test_requirement_is_two_hours(self) -> None:
        self.assertEqual(REQUIRED_PLAYTIME_IN_SECONDS, 7200)

    def test_half_way(self) -> None:
        self.assertEqual(
            evaluate_progression(PlaytimeCounter(3600)),
            ProgressionResult(can_draw=False, progress=50),
        )

    def test_one_second_short(self) -> None:
        self.assertEqual(
            evaluate_progression(PlaytimeCounter(7199)),
            ProgressionResult(can_draw=False, progress=99),
        )

    def test_exactly_met(self) -> None:
        self.assertEqual(
            evaluate_progression(PlaytimeCounter(7200)),
            ProgressionResult(can_draw=True, progress=100),
        )

    def test_progress_capped_above_requirement(self) -> None:
        self.assertEqual(
            evaluate_progression(PlaytimeCounter(50_000)),
            ProgressionResult(can_draw=True, progress=100),
        )

    def test_negative_counter_reads_as_zero(self) -> None:
        self.assertEqual(
            evaluate_progression(PlaytimeCounter(-30)),
            ProgressionResult(can_draw=False, progress=0),
        )

    def test_progress_is_monotonic_and_bounded(self) -> None:
        previous = -1
        for seconds in range(0, 10_000, 37):
            progress = evaluate_progression(PlaytimeCounter(seconds)).progress
            self.assertGreaterEqual(progress, previous)
            self.assertGreaterEqual(progress, 0)
            self.assertLessEqual(progress, 100)
            previous = progress

    def test_invalid_requirement(self) -> None:
        with self.assertRaises(ValueError):
            evaluate_progression(PlaytimeCounter(10), required_seconds=0)


if __name__ == "__main__":
    unittest.main()
