import argparse
import json
import logging
import sys
from typing import List, Optional

from string_search.analysis.sentiment import analyze_sentiment
from string_search.config.config import Config, ConfigError
from string_search.request.handler import RequestError, SearchRequestHandler
from string_search.search.base import UnknownAlgorithmError, read_text
from string_search.search.dispatcher import Algorithm, search_with_stats
from string_search.search.position import to_row_cols

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='string-search',
        description='Find every occurrence of a pattern in a file'
    )
    parser.add_argument('pattern', nargs='?', help='Pattern to search for (omit with --json or --sentiment)')
    parser.add_argument('file', nargs='?', default='-', help="File to search, '-' for stdin")
    parser.add_argument(
        '--algorithm', '-a',
        help=f"Search algorithm ({', '.join(a.value for a in Algorithm)}); defaults to the configured one"
    )
    parser.add_argument('--config', '-c', help='Path to configuration file')
    parser.add_argument('--bytes', action='store_true', help='Compare raw bytes instead of decoded text')
    parser.add_argument('--indices', action='store_true', help='Print zero-based offsets instead of row:col')
    parser.add_argument('--stats', action='store_true', help='Print search statistics to stderr')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--json', action='store_true',
                      help='Treat the input as a JSON search request and print a JSON response')
    mode.add_argument('--sentiment', action='store_true',
                      help='Score the input with the sentiment keyword lists instead of searching')
    return parser


def _read_input(path: str, binary: bool):
    if path == '-':
        return sys.stdin.buffer.read() if binary else sys.stdin.read()
    return read_text(path, binary=binary)


def _input_path(parser: argparse.ArgumentParser, args: argparse.Namespace, flag: str) -> str:
    # Modes without a pattern take the input file as their only positional
    if args.pattern is None:
        return args.file
    if args.file != '-':
        parser.error(f'{flag} takes a single input file, got {args.pattern!r} and {args.file!r}')
    return args.pattern


def _run_json(config: Config, path: str) -> int:
    payload = _read_input(path, binary=True)
    try:
        response = SearchRequestHandler(config).handle(payload)
    except RequestError as e:
        print(json.dumps({"error": str(e)}))
        return EXIT_ERROR
    print(json.dumps(response))
    return EXIT_FOUND if response["count"] else EXIT_NOT_FOUND


def _run_sentiment(config: Config, path: str, algorithm: str) -> int:
    report = analyze_sentiment(_read_input(path, binary=False), algorithm, strict=config.strict_algorithm)
    print(f"overall: {report.overall.value}")
    for group in ("positive", "negative", "neutral"):
        hits = getattr(report, group)
        keywords = ", ".join(f"{hit.keyword}({hit.count})" for hit in hits)
        print(f"{group}: {getattr(report, group + '_score')}" + (f" [{keywords}]" if keywords else ""))
    print(f"words: {report.word_count}")
    print(f"algorithm: {report.algorithm}")
    found = report.positive_score + report.negative_score + report.neutral_score
    return EXIT_FOUND if found else EXIT_NOT_FOUND


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``string-search`` command.

    Returns:
        int: 0 when the pattern (or any sentiment keyword) was found, 1 when
        it was not, 2 on errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    algorithm = args.algorithm or config.search_algorithm

    try:
        if args.json:
            return _run_json(config, _input_path(parser, args, '--json'))
        if args.sentiment:
            return _run_sentiment(config, _input_path(parser, args, '--sentiment'), algorithm)

        if args.pattern is None:
            parser.error('a pattern is required unless --json or --sentiment is given')

        text = _read_input(args.file, binary=args.bytes)
        pattern = args.pattern.encode('utf-8') if args.bytes else args.pattern
        matches, stats = search_with_stats(text, pattern, algorithm, strict=config.strict_algorithm)
    except (UnknownAlgorithmError, FileNotFoundError, RuntimeError) as e:
        if config.debug:
            logger.exception("Command failed")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if config.debug:
        logger.info("Search statistics: %s", stats.as_dict())
    else:
        logger.debug("Found %d match(es) in %.2fms", len(matches), stats.search_time * 1000)

    if args.indices:
        for index in matches:
            print(index)
    else:
        for row, col in to_row_cols(text, matches):
            print(f"{row}:{col}")

    if args.stats:
        for key, value in stats.as_dict().items():
            print(f"{key}: {value}", file=sys.stderr)

    return EXIT_FOUND if matches else EXIT_NOT_FOUND


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
