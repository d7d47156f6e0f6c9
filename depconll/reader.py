# depconll/reader.py
"""
Чтение и запись предложений CoNLL построчно.

Предложение - подряд идущие непустые строки, одна запись на строку.
Конец предложения: первая пустая строка или конец потока.
"""
import logging
from pathlib import Path
from typing import Callable, Generator, Iterable, Optional, TextIO, Union

from depconll.codec import decode_input_token, decode_output_token, encode_token
from depconll.config import SCHEMAS
from depconll.core.interfaces import BaseSentence
from depconll.sentence import InputSentence, OutputSentence

logger = logging.getLogger(__name__)


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _is_blank_input(line: str) -> bool:
    # Входной формат: строка из одних пробелов тоже завершает предложение
    return not line.lstrip()


def _is_blank_output(line: str) -> bool:
    return not line


def _decode_input_line(line: str):
    # Входной формат: ведущие пробелы перед ID допустимы
    return decode_input_token(line.lstrip())


def _fill(reader: TextIO, sentence: BaseSentence, decode: Callable, is_blank: Callable) -> bool:
    """
    Заполняет sentence строками до пустой строки.
    Возвращает True, если остановились на пустой строке, и False на конце потока.
    """
    sentence.reset()
    while True:
        raw = reader.readline()
        if not raw:
            return False
        line = _strip_eol(raw)
        if is_blank(line):
            return True
        sentence.append(decode(line))


def parse_input_sentence(reader: TextIO, sentence: Optional[InputSentence] = None) -> InputSentence:
    """
    Читает одно предложение во входной схеме.
    Контейнер можно передать повторно, он сбрасывается до корня.
    Если поток исчерпан, возвращается предложение из одного корня (не ошибка).
    """
    if sentence is None:
        sentence = InputSentence()
    _fill(reader, sentence, _decode_input_line, _is_blank_input)
    return sentence


def parse_output_sentence(reader: TextIO, sentence: Optional[OutputSentence] = None) -> OutputSentence:
    """То же для выходной схемы (10 колонок)."""
    if sentence is None:
        sentence = OutputSentence()
    _fill(reader, sentence, decode_output_token, _is_blank_output)
    return sentence


def write_sentence(writer: TextIO, sentence: BaseSentence):
    """Пишет токены 1..N по строке и одну пустую строку-разделитель. Корень не пишется."""
    for token in sentence.tokens():
        writer.write(encode_token(token))
        writer.write("\n")
    writer.write("\n")


def _iter(reader: TextIO, factory: Callable, decode: Callable, is_blank: Callable):
    while True:
        sentence = factory()
        hit_blank = _fill(reader, sentence, decode, is_blank)
        if not sentence.is_empty():
            yield sentence
        if not hit_blank:
            break


def iter_input_sentences(reader: TextIO) -> Generator[InputSentence, None, None]:
    """
    Потоковый генератор предложений (аналог parse_incr).
    Каждое предложение - новый контейнер; серии пустых строк пропускаются.
    """
    return _iter(reader, InputSentence, _decode_input_line, _is_blank_input)


def iter_output_sentences(reader: TextIO) -> Generator[OutputSentence, None, None]:
    return _iter(reader, OutputSentence, decode_output_token, _is_blank_output)


def iter_sentences(reader: TextIO, schema: str = "output"):
    if schema == "input":
        return iter_input_sentences(reader)
    if schema == "output":
        return iter_output_sentences(reader)
    raise ValueError(f"Unknown schema: {schema!r}, expected one of {SCHEMAS}")


def read_sentences(path: Union[str, Path], schema: str = "output", encoding: str = "utf-8") -> list:
    """Читает весь файл в список предложений."""
    path = Path(path)
    with open(path, "r", encoding=encoding) as f:
        sentences = list(iter_sentences(f, schema))
    logger.info(f"Read {len(sentences)} sentences from {path.name}")
    return sentences


def write_sentences(path: Union[str, Path], sentences: Iterable[BaseSentence], encoding: str = "utf-8") -> int:
    path = Path(path)
    count = 0
    # newline="" - чтобы на Windows не появлялся \r\n
    with open(path, "w", encoding=encoding, newline="") as out:
        for sent in sentences:
            write_sentence(out, sent)
            count += 1
    logger.info(f"Saved {count} sentences to {path.name}")
    return count
