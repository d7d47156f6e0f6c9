# depconll/codec.py
"""
Кодек одной строки CoNLL <-> одна запись токена.

Входная схема (6 колонок):   ID WORD LEMMA CPOSTAG POSTAG FEATS
Выходная схема (10 колонок): + HEAD DEPREL PHEAD PDEPREL

HEAD всегда пишется числом, PHEAD - числом или "_" для NO_HEAD.
Эта асимметрия - соглашение самого формата, ее не нормализуем.
"""
import re
from typing import List

from depconll.core.data_structures import NO_HEAD, InputToken, OutputToken
from depconll.core.errors import InvalidInteger, MissingField

SEPARATOR = "\t"
NO_HEAD_MARK = "_"

INPUT_COLUMNS = ("id", "word", "lemma", "ctag", "tag", "feats")
OUTPUT_COLUMNS = INPUT_COLUMNS + ("head", "label", "phead", "plabel")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _split(line: str, columns: tuple) -> List[str]:
    fields = line.split(SEPARATOR)
    # Лишние колонки справа игнорируются (например, 10-колоночный gold как вход)
    for idx, name in enumerate(columns):
        if idx >= len(fields) or not fields[idx]:
            raise MissingField(line, name, idx + 1, "field not found")
    return fields


def _to_int(value: str, line: str, name: str, column: int) -> int:
    if not _INT_RE.fullmatch(value):
        raise InvalidInteger(line, name, column, f"expected integer, got {value!r}")
    return int(value)


def _decode_prefix(fields: List[str], line: str) -> InputToken:
    return InputToken(
        id=_to_int(fields[0], line, "id", 1),
        word=fields[1],
        lemma=fields[2],
        ctag=fields[3],
        tag=fields[4],
        feats=fields[5],
    )


def decode_input_token(line: str) -> InputToken:
    fields = _split(line, INPUT_COLUMNS)
    return _decode_prefix(fields, line)


def decode_output_token(line: str) -> OutputToken:
    fields = _split(line, OUTPUT_COLUMNS)
    base = _decode_prefix(fields, line)

    phead_raw = fields[8]
    if phead_raw == NO_HEAD_MARK:
        phead = NO_HEAD
    else:
        phead = _to_int(phead_raw, line, "phead", 9)

    return OutputToken(
        base=base,
        head=_to_int(fields[6], line, "head", 7),
        label=fields[7],
        phead=phead,
        plabel=fields[9],
    )


def encode_input_token(token: InputToken) -> str:
    return SEPARATOR.join([
        str(token.id), token.word, token.lemma, token.ctag, token.tag, token.feats
    ])


def encode_output_token(token: OutputToken) -> str:
    phead = NO_HEAD_MARK if token.phead == NO_HEAD else str(token.phead)
    return SEPARATOR.join([
        encode_input_token(token.base),
        str(token.head),
        token.label,
        phead,
        token.plabel,
    ])


def encode_token(token) -> str:
    """Выбор кодировщика по типу записи."""
    if isinstance(token, OutputToken):
        return encode_output_token(token)
    if isinstance(token, InputToken):
        return encode_input_token(token)
    raise TypeError(f"Unsupported token type: {type(token).__name__}")
