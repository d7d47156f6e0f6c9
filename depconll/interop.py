# depconll/interop.py
"""
Мост между OutputSentence и conllu.TokenList.

Колонки CoNLL-X (10 шт.) отображаются на поля conllu по позиции:
FORM/LEMMA/UPOS/XPOS/FEATS/HEAD/DEPREL и две дополнительные phead/pdeprel.
Для чтения файлов через conllu используйте fields=CONLLX_FIELDS.
"""
import logging
from typing import Any

from conllu.models import Token, TokenList

from depconll.core.data_structures import NO_HEAD, InputToken, OutputToken
from depconll.sentence import OutputSentence

logger = logging.getLogger(__name__)

CONLLX_FIELDS = ("id", "form", "lemma", "upos", "xpos", "feats", "head", "deprel", "phead", "pdeprel")


def _text(value: Any) -> str:
    """None (в conllu это "_") обратно в строку."""
    if value is None:
        return "_"
    if isinstance(value, dict):
        if not value:
            return "_"
        return "|".join(k if v is None else f"{k}={v}" for k, v in value.items())
    return str(value)


def _head(value: Any) -> int:
    if value is None or value == "_":
        return NO_HEAD
    return int(value)


def to_token_list(sentence: OutputSentence, metadata: dict = None) -> TokenList:
    tokens = []
    for t in sentence.tokens():
        tokens.append(Token({
            "id": t.id,
            "form": t.word,
            "lemma": t.lemma,
            "upos": t.ctag,
            "xpos": t.tag,
            "feats": t.feats,
            "head": t.head,
            "deprel": t.label,
            "phead": None if t.phead == NO_HEAD else t.phead,
            "pdeprel": t.plabel,
        }))
    return TokenList(tokens, metadata=metadata)


def from_token_list(token_list: TokenList) -> OutputSentence:
    """
    Строит OutputSentence из TokenList.
    Мульти-словные токены (1-2) и пустые узлы (1.1) пропускаются.
    """
    sentence = OutputSentence()
    skipped = 0
    for token in token_list:
        # В conllu ID диапазонов и пустых узлов - кортежи
        if not isinstance(token["id"], int):
            skipped += 1
            continue
        base = InputToken(
            id=token["id"],
            word=_text(token.get("form")),
            lemma=_text(token.get("lemma")),
            ctag=_text(token.get("upos")),
            tag=_text(token.get("xpos")),
            feats=_text(token.get("feats")),
        )
        sentence.append(OutputToken(
            base=base,
            head=_head(token.get("head")),
            label=_text(token.get("deprel")),
            phead=_head(token.get("phead")),
            plabel=_text(token.get("pdeprel")),
        ))
    if skipped:
        logger.debug(f"Skipped {skipped} multiword/empty nodes")
    return sentence
