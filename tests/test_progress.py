import unittest

from verse_drill import grade_attempt
from verse_drill.progress import (
    PERFECT_ATTEMPTS_REQUIRED,
    Attempt,
    ModeCompletion,
    PassageProgress,
    best_accuracy,
    is_memorized,
    latest_completed_at,
    memorized_passages,
    mode_completion_status,
    passage_completion,
    rebuild_mode_completions,
    update_mode_completion,
)

PSALM = "El Señor es mi pastor; nada me faltará."


def make_attempt(ts, mode="type", accuracy=100):
    return Attempt(ts=ts, mode=mode, input_length=10, accuracy=accuracy)


class TestAttemptRecord(unittest.TestCase):
    def test_from_grade(self):
        result = grade_attempt(PSALM, "El Señor es mi pastor")
        attempt = Attempt.from_grade(result, "speech", "El Señor es mi pastor", ts=1000,
                                     transcription="el señor es mi pastor")
        record = attempt.to_dict()
        self.assertEqual(record["ts"], 1000)
        self.assertEqual(record["mode"], "speech")
        self.assertEqual(record["inputLength"], len("El Señor es mi pastor"))
        self.assertEqual(record["accuracy"], result.accuracy)
        self.assertEqual(record["missedWords"], ["nada", "me", "faltará"])
        self.assertEqual(record["transcription"], "el señor es mi pastor")
        self.assertEqual(len(record["diff"]), len(result.diff))

    def test_timestamp_defaults_to_now(self):
        attempt = Attempt.from_grade(grade_attempt(PSALM, PSALM), "type", PSALM)
        self.assertGreater(attempt.ts, 0)

    def test_unknown_mode_rejected(self):
        with self.assertRaises(ValueError):
            make_attempt(1, mode="karaoke")


class TestModeCompletion(unittest.TestCase):
    def test_non_perfect_attempt_leaves_completion_unchanged(self):
        current = ModeCompletion(perfect_count=1)
        self.assertIs(update_mode_completion(current, make_attempt(5, accuracy=99)), current)

    def test_completed_at_set_when_threshold_reached(self):
        completion = None
        for ts in range(1, PERFECT_ATTEMPTS_REQUIRED + 2):
            completion = update_mode_completion(completion, make_attempt(ts))
        self.assertEqual(completion.perfect_count, PERFECT_ATTEMPTS_REQUIRED + 1)
        self.assertEqual(completion.completed_at, PERFECT_ATTEMPTS_REQUIRED)

    def test_rebuild_sorts_by_timestamp(self):
        attempts = [make_attempt(30), make_attempt(10), make_attempt(20, accuracy=80),
                    make_attempt(40), make_attempt(5, mode="speech")]
        completions = rebuild_mode_completions(attempts)
        self.assertEqual(completions["type"].perfect_count, 3)
        self.assertEqual(completions["type"].completed_at, 40)
        self.assertEqual(completions["speech"].perfect_count, 1)
        self.assertIsNone(completions["speech"].completed_at)
        self.assertEqual(completions["stealth"], ModeCompletion())

    def test_mode_status_progress_capped(self):
        status = mode_completion_status("type", ModeCompletion(perfect_count=5, completed_at=9))
        self.assertTrue(status.is_completed)
        self.assertEqual(status.progress, 100.0)
        self.assertEqual(mode_completion_status("speech", None).progress, 0.0)

    def test_passage_completion(self):
        completions = {
            "type": ModeCompletion(perfect_count=3, completed_at=1),
            "speech": ModeCompletion(perfect_count=1),
        }
        summary = passage_completion(completions)
        self.assertEqual(summary.completed_modes, ["type"])
        self.assertEqual(summary.completion_percent, 25.0)
        self.assertEqual(summary.total_perfect_attempts, 4)
        self.assertEqual(len(summary.mode_statuses), 4)
        self.assertFalse(is_memorized(completions))

    def test_is_memorized(self):
        done = {mode: ModeCompletion(perfect_count=3, completed_at=1)
                for mode in ("type", "speech", "stealth", "sequence")}
        self.assertTrue(is_memorized(done))
        self.assertFalse(is_memorized({}))

    def test_best_accuracy(self):
        self.assertEqual(best_accuracy([]), 0)
        self.assertEqual(best_accuracy([make_attempt(1, accuracy=40), make_attempt(2, accuracy=90)]), 90)


def completed_modes(completed_at):
    return {mode: ModeCompletion(perfect_count=3, completed_at=completed_at)
            for mode in ("type", "speech", "stealth", "sequence")}


class TestMemorizedPassages(unittest.TestCase):
    def test_latest_completed_at(self):
        completions = {
            "type": ModeCompletion(perfect_count=3, completed_at=50),
            "speech": ModeCompletion(perfect_count=3, completed_at=80),
            "stealth": ModeCompletion(perfect_count=1),
        }
        self.assertEqual(latest_completed_at(completions), 80)
        self.assertIsNone(latest_completed_at({"type": ModeCompletion(perfect_count=2)}))
        self.assertIsNone(latest_completed_at(None))

    def test_only_fully_memorized_built_in_passages(self):
        passages = {
            "ps-23-1": PassageProgress("Salmos 23:1", mode_completions=completed_modes(10)),
            "gn-1-1": PassageProgress("Génesis 1:1", mode_completions={"type": ModeCompletion(3, 5)}),
            "custom-1": PassageProgress("Mi versículo", source="custom", mode_completions=completed_modes(99)),
        }
        result = memorized_passages(passages)
        self.assertEqual([m.passage_id for m in result], ["ps-23-1"])
        self.assertEqual(result[0].summary.completion_percent, 100.0)
        self.assertEqual(result[0].progress.reference, "Salmos 23:1")

    def test_most_recently_completed_first(self):
        passages = {
            "jn-3-16": PassageProgress("Juan 3:16", mode_completions=completed_modes(100)),
            "ps-23-1": PassageProgress("Salmos 23:1", mode_completions=completed_modes(300)),
            "gn-1-1": PassageProgress("Génesis 1:1", mode_completions=completed_modes(200)),
        }
        self.assertEqual(
            [m.passage_id for m in memorized_passages(passages)],
            ["ps-23-1", "gn-1-1", "jn-3-16"],
        )

    def test_empty(self):
        self.assertEqual(memorized_passages({}), [])


if __name__ == "__main__":
    unittest.main()
