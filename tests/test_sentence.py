import unittest

from depconll.codec import decode_input_token, decode_output_token
from depconll.core.data_structures import NO_HEAD, ROOT_TAG, InputToken, OutputToken
from depconll.core.dependency import DependencyTree
from depconll.core.errors import IndexMismatch
from depconll.sentence import InputSentence, OutputSentence


def make_input_sentence():
    sent = InputSentence()
    for line in ("1\tThe\tthe\tDT\tDT\t_", "2\tdog\tdog\tNN\tNN\t_", "3\tbarks\tbark\tVB\tVBZ\t_"):
        sent.append(decode_input_token(line))
    return sent


class TestRootInvariant(unittest.TestCase):
    def test_fresh_input_sentence(self):
        sent = InputSentence()
        self.assertEqual(len(sent), 1)
        self.assertEqual(sent[0], InputToken.root())
        self.assertEqual(sent[0].ctag, ROOT_TAG)
        self.assertTrue(sent.is_empty())

    def test_fresh_output_sentence(self):
        sent = OutputSentence()
        root = sent[0]
        self.assertEqual(root.id, 0)
        self.assertEqual(root.word, "")
        self.assertEqual(root.tag, ROOT_TAG)
        self.assertEqual(root.head, NO_HEAD)
        self.assertEqual(root.phead, NO_HEAD)

    def test_reset_keeps_only_root(self):
        sent = make_input_sentence()
        self.assertEqual(len(sent), 4)

        sent.reset()
        self.assertEqual(len(sent), 1)
        self.assertEqual(sent[0], InputToken.root())

    def test_append_checks_type(self):
        sent = InputSentence()
        with self.assertRaises(TypeError):
            sent.append(OutputToken.root())

    def test_tokens_exclude_root(self):
        sent = make_input_sentence()
        self.assertEqual([t.word for t in sent.tokens()], ["The", "dog", "barks"])
        self.assertEqual(len(list(sent)), 4)

    def test_word_tag_pairs(self):
        pairs = make_input_sentence().to_word_tag_pairs()
        self.assertEqual(pairs[0], ("", ROOT_TAG))
        self.assertEqual(pairs[2], ("dog", "NN"))


class TestOutputConstruction(unittest.TestCase):
    def setUp(self):
        self.inp = make_input_sentence()

    def test_from_input_copies_prefix(self):
        out = OutputSentence().from_input(self.inp)

        self.assertEqual(len(out), len(self.inp))
        for i in range(len(out)):
            self.assertEqual(out[i].base, self.inp[i])
            self.assertEqual(out[i].head, NO_HEAD)
            self.assertEqual(out[i].label, "")
            self.assertEqual(out[i].phead, NO_HEAD)

    def test_from_input_does_not_share_records(self):
        out = OutputSentence().from_input(self.inp)
        out[1].base.word = "cat"
        self.assertEqual(self.inp[1].word, "The")

    def test_from_input_matches_length_for_root_only(self):
        out = OutputSentence().from_input(InputSentence())
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0], OutputToken.root())

    def test_from_input_replaces_previous_content(self):
        out = OutputSentence()
        out.append(decode_output_token("1\tx\tx\tX\tX\t_\t0\tROOT\t_\t_"))
        out.append(decode_output_token("2\ty\ty\tY\tY\t_\t1\tDEP\t_\t_"))
        out.append(decode_output_token("3\tz\tz\tZ\tZ\t_\t1\tDEP\t_\t_"))
        out.append(decode_output_token("4\tw\tw\tW\tW\t_\t1\tDEP\t_\t_"))

        out.from_input(self.inp)
        self.assertEqual(len(out), 4)
        self.assertEqual(out[1].word, "The")
        self.assertEqual(out[1].head, NO_HEAD)

    def test_copy_heads_and_conversion_fidelity(self):
        tree = DependencyTree.from_triples([
            ("", ROOT_TAG, NO_HEAD),
            ("The", "DT", 2),
            ("dog", "NN", 3),
            ("barks", "VBZ", 0),
        ])
        out = OutputSentence().from_input(self.inp)
        out.copy_dependency_heads(tree)

        self.assertEqual(out[1].head, 2)
        self.assertEqual(out[3].head, 0)
        self.assertEqual(out.to_dependency_tree().triples(), tree.triples())

    def test_copy_heads_length_mismatch(self):
        tree = DependencyTree.from_triples([("", ROOT_TAG, NO_HEAD), ("The", "DT", 2)])
        out = OutputSentence().from_input(self.inp)

        with self.assertRaises(IndexMismatch) as ctx:
            out.copy_dependency_heads(tree)

        self.assertEqual(ctx.exception.expected, 4)
        self.assertEqual(ctx.exception.actual, 2)
        self.assertIn("4", str(ctx.exception))
        self.assertIn("2", str(ctx.exception))

    def test_to_dependency_tree_includes_root(self):
        out = OutputSentence()
        out.append(decode_output_token("1\tHi\thi\tUH\tUH\t_\t0\tROOT\t_\t_"))
        tree = out.to_dependency_tree()

        self.assertEqual(len(tree), 2)
        self.assertEqual(tree[0].tag, ROOT_TAG)
        self.assertEqual(tree[1].head, 0)

    def test_equality(self):
        a = OutputSentence().from_input(self.inp)
        b = OutputSentence().from_input(make_input_sentence())
        self.assertEqual(a, b)
        b[2].label = "NMOD"
        self.assertNotEqual(a, b)


if __name__ == '__main__':
    unittest.main()
