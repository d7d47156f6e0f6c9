import io
import unittest

from conllu import parse

from depconll.core.data_structures import NO_HEAD
from depconll.interop import CONLLX_FIELDS, from_token_list, to_token_list
from depconll.reader import parse_output_sentence, write_sentence

CONLLX = (
    "1\tМама\tмама\tNOUN\tNN\tCase=Nom\t2\tnsubj\t_\t_\n"
    "2\tмыла\tмыть\tVERB\tVB\t_\t0\troot\t0\troot\n"
    "3\tраму\tрама\tNOUN\tNN\tCase=Acc\t2\tobj\t_\t_\n"
    "\n"
)


class TestConlluBridge(unittest.TestCase):
    def test_from_token_list(self):
        token_list = parse(CONLLX, fields=CONLLX_FIELDS)[0]
        sent = from_token_list(token_list)

        self.assertEqual(len(sent), 4)
        self.assertEqual(sent[1].word, "Мама")
        self.assertEqual(sent[1].ctag, "NOUN")
        self.assertEqual(sent[1].feats, "Case=Nom")
        self.assertEqual(sent[1].head, 2)
        self.assertEqual(sent[1].phead, NO_HEAD)
        self.assertEqual(sent[2].feats, "_")
        self.assertEqual(sent[2].phead, 0)

    def test_matches_own_reader(self):
        token_list = parse(CONLLX, fields=CONLLX_FIELDS)[0]
        ours = parse_output_sentence(io.StringIO(CONLLX))
        self.assertEqual(from_token_list(token_list), ours)

    def test_to_token_list_serializes_same_text(self):
        sent = parse_output_sentence(io.StringIO(CONLLX))
        buffer = io.StringIO()
        write_sentence(buffer, sent)

        self.assertEqual(to_token_list(sent).serialize(), buffer.getvalue())

    def test_conllu_skips_multiword_tokens(self):
        text = (
            "1-2\tdel\t_\t_\t_\t_\t_\t_\t_\t_\n"
            "1\tde\tde\tADP\tADP\t_\t2\tcase\t_\t_\n"
            "2\tel\tel\tDET\tDET\t_\t0\troot\t_\t_\n"
            "\n"
        )
        sent = from_token_list(parse(text)[0])
        self.assertEqual(len(sent), 3)
        self.assertEqual(sent[1].word, "de")


if __name__ == '__main__':
    unittest.main()
