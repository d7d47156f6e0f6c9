#!/usr/bin/env python3
"""
CLI depconll: проверка, статистика и перезапись файлов CoNLL.

    python -m depconll validate data/train.conll
    python -m depconll stats data/train.conll
    python -m depconll roundtrip data/train.conll
    python -m depconll convert raw.conll parsed.conll
"""
import argparse
import io
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from depconll.config import load_config
from depconll.core.errors import FormatError
from depconll.ingestion.validators import DataValidator
from depconll.profiler import TreeProfiler
from depconll.reader import iter_sentences, write_sentence, write_sentences
from depconll.sentence import OutputSentence

console = Console()
logger = logging.getLogger("depconll")


def cmd_validate(args, config) -> int:
    strict = config["validation_level"] == "strict"
    table = Table(title="Validation")
    table.add_column("File")
    table.add_column("Sentences", justify="right")
    table.add_column("Valid", justify="right")
    table.add_column("Invalid", justify="right")

    failed = False
    for path in tqdm(args.files, desc="validate"):
        with open(path, "r", encoding=config["encoding"]) as f:
            sentences = list(iter_sentences(f, config["schema"]))
        stats = DataValidator.validate_batch(sentences, strict=strict)
        table.add_row(Path(path).name, str(stats["total"]), str(stats["valid"]), str(stats["invalid"]))
        for err in stats["errors"][:args.max_errors]:
            logger.warning(f"{Path(path).name} sentence #{err['id']}: {'; '.join(err['issues'])}")
        failed = failed or stats["invalid"] > 0

    console.print(table)
    return 1 if failed else 0


def cmd_stats(args, config) -> int:
    # Статистика по деревьям требует HEAD, т.е. 10 колонок
    if config["schema"] != "output":
        console.print(f"❌ [red]stats needs the output schema (10 columns), got {config['schema']!r}[/red]")
        return 2

    profiler = TreeProfiler()
    table = Table(title="Tree statistics")
    for col in ("File", "Sentences", "Tokens", "Avg length", "Max depth", "Non-projective"):
        table.add_column(col, justify="left" if col == "File" else "right")

    for path in tqdm(args.files, desc="stats"):
        count = tokens = max_depth = non_proj = 0
        with open(path, "r", encoding=config["encoding"]) as f:
            for sentence in iter_sentences(f, config["schema"]):
                profile = profiler.profile(sentence.to_dependency_tree())
                count += 1
                tokens += profile["tokens"]
                max_depth = max(max_depth, profile["tree_depth"])
                non_proj += int(profile["non_projectivity"])
        avg = round(tokens / count, 2) if count else 0
        table.add_row(Path(path).name, str(count), str(tokens), str(avg), str(max_depth), str(non_proj))

    console.print(table)
    return 0


def cmd_roundtrip(args, config) -> int:
    """Перечитывает файл и сравнивает сериализацию с исходником побайтно."""
    path = Path(args.file)
    original = path.read_text(encoding=config["encoding"])
    buffer = io.StringIO()
    count = 0
    for sentence in iter_sentences(io.StringIO(original), config["schema"]):
        write_sentence(buffer, sentence)
        count += 1

    if buffer.getvalue() == original:
        console.print(f"✅ [green]{path.name}: {count} sentences, identical[/green]")
        return 0
    console.print(f"⚠️  [yellow]{path.name}: {count} sentences, serialization differs from source[/yellow]")
    return 1


def cmd_convert(args, config) -> int:
    """Входная схема (6 колонок) -> выходная (10 колонок) без вершин."""
    def converted():
        with open(args.source, "r", encoding=config["encoding"]) as f:
            for sentence in iter_sentences(f, "input"):
                out = OutputSentence().from_input(sentence)
                # Пустые метки не читаются обратно, пишем "_"
                for token in out.tokens():
                    token.label = token.plabel = "_"
                yield out

    count = write_sentences(args.target, converted(), encoding=config["encoding"])
    console.print(f"✅ Converted {count} sentences -> {args.target}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depconll", description="CoNLL dependency format tools")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--schema", choices=["input", "output"], default=None,
                        help="Override column schema from config")
    parser.add_argument("--lenient", action="store_true", help="Lenient validation")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Check sentence integrity")
    p_validate.add_argument("files", nargs="+")
    p_validate.add_argument("--max-errors", type=int, default=10)
    p_validate.set_defaults(func=cmd_validate)

    p_stats = sub.add_parser("stats", help="Tree statistics for 10-column files")
    p_stats.add_argument("files", nargs="+")
    p_stats.set_defaults(func=cmd_stats)

    p_round = sub.add_parser("roundtrip", help="Re-serialize a file and compare with the source")
    p_round.add_argument("file")
    p_round.set_defaults(func=cmd_roundtrip)

    p_convert = sub.add_parser("convert", help="Convert 6-column input to 10-column output")
    p_convert.add_argument("source")
    p_convert.add_argument("target")
    p_convert.set_defaults(func=cmd_convert)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    if args.schema:
        config["schema"] = args.schema
    if args.lenient:
        config["validation_level"] = "lenient"

    # Настройка логирования
    logging.basicConfig(
        level=getattr(logging, str(config["log_level"]).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return args.func(args, config)
    except FormatError as e:
        console.print(f"❌ [red]{e}[/red]")
        return 2
    except FileNotFoundError as e:
        console.print(f"❌ [red]File not found: {e.filename}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
