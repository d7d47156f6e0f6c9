"""depconll – чтение и запись деревьев зависимостей в табличном формате CoNLL."""

__version__ = "0.1.0"

from .core import (
    NO_HEAD,
    DependencyTree,
    DependencyTreeNode,
    FormatError,
    IndexMismatch,
    InputToken,
    InvalidInteger,
    MissingField,
    OutputToken,
)
from .codec import decode_input_token, decode_output_token, encode_input_token, encode_output_token
from .sentence import InputSentence, OutputSentence
from .reader import (
    iter_input_sentences,
    iter_output_sentences,
    parse_input_sentence,
    parse_output_sentence,
    read_sentences,
    write_sentence,
    write_sentences,
)

__all__ = [
    "NO_HEAD",
    "InputToken",
    "OutputToken",
    "InputSentence",
    "OutputSentence",
    "DependencyTree",
    "DependencyTreeNode",
    "FormatError",
    "MissingField",
    "InvalidInteger",
    "IndexMismatch",
    "decode_input_token",
    "decode_output_token",
    "encode_input_token",
    "encode_output_token",
    "parse_input_sentence",
    "parse_output_sentence",
    "iter_input_sentences",
    "iter_output_sentences",
    "read_sentences",
    "write_sentence",
    "write_sentences",
]
