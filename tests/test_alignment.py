import unittest

from verse_drill.alignment.aligner import align_texts, diff_tokens
from verse_drill.alignment.edit_distance import align_sequences, lcs_length
from verse_drill.alignment.tokenizer import tokenize_passage


class TestAlignSequences(unittest.TestCase):
    def test_identical(self):
        ops = align_sequences(["a", "b", "c"], ["a", "b", "c"])
        self.assertEqual(ops, [("match", 0, 0), ("match", 1, 1), ("match", 2, 2)])

    def test_empty_reference(self):
        self.assertEqual(align_sequences([], ["a", "b"]), [("insert", None, 0), ("insert", None, 1)])

    def test_empty_attempt(self):
        self.assertEqual(align_sequences(["a", "b"], []), [("delete", 0, None), ("delete", 1, None)])

    def test_both_empty(self):
        self.assertEqual(align_sequences([], []), [])

    def test_delete_reported_before_insert(self):
        # substitution becomes delete + insert, missed word first
        ops = align_sequences(["a", "b", "c"], ["a", "x", "c"])
        self.assertEqual(ops, [("match", 0, 0), ("delete", 1, None), ("insert", None, 1), ("match", 2, 2)])

    def test_repeated_word_matches_earliest_position(self):
        ops = align_sequences(["y", "luz", "y"], ["y"])
        self.assertEqual(ops, [("match", 0, 0), ("delete", 1, None), ("delete", 2, None)])

    def test_alignment_covers_each_index_once(self):
        ref = "el señor es mi pastor nada me faltara".split()
        hyp = "mi pastor es el señor nada faltara me".split()
        ops = align_sequences(ref, hyp)
        self.assertEqual(sorted(ri for _, ri, _ in ops if ri is not None), list(range(len(ref))))
        self.assertEqual(sorted(hj for _, _, hj in ops if hj is not None), list(range(len(hyp))))
        self.assertEqual(sum(1 for op, _, _ in ops if op == "match"), lcs_length(ref, hyp))


class TestDiffTokens(unittest.TestCase):
    def test_exact_and_normalized_matches(self):
        diff = align_texts("Nada me faltará.", "nada me faltará")
        self.assertEqual([op.kind for op in diff], ["match", "match", "match"])
        self.assertEqual([op.exact for op in diff], [False, True, True])

    def test_ops_carry_tokens_and_verses(self):
        reference = tokenize_passage("<sup>3</sup>&nbsp;Y dijo Dios: Sea la luz")
        attempt = tokenize_passage("Y dijo Dios sea luz")
        diff = diff_tokens(reference, attempt)
        missed = [op for op in diff if op.kind == "delete"]
        self.assertEqual(len(missed), 1)
        self.assertEqual(missed[0].reference.text, "la")
        self.assertEqual(missed[0].token.verse, 3)
        self.assertIsNone(missed[0].attempt)

    def test_non_comparable_tokens_excluded(self):
        diff = align_texts("luz — luz", "luz luz")
        self.assertEqual([op.kind for op in diff], ["match", "match"])

    def test_to_dict_is_plain_data(self):
        diff = align_texts("<sup>1</sup> Amén", "amén así")
        self.assertEqual(diff[0].to_dict(), {"op": "match", "token": "Amén", "verse": 1, "exact": False})
        self.assertEqual(diff[1].to_dict(), {"op": "insert", "token": "así", "verse": None, "exact": False})


if __name__ == "__main__":
    unittest.main()
