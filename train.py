#!/usr/bin/env python3
"""
Language N-gram Model Training Script

Build the n-gram models (orders 1-5) of one or more languages from text
corpora with beautiful terminal output.

Usage:
    python train.py --language en --corpus english.txt --output models
    python train.py --language en --brown --categories news fiction
    python train.py --language de --corpus german.txt --language fr --corpus french.txt
    python train.py --show-test-model "Which language is this?"
"""

import argparse
import logging
import sys

from rich.logging import RichHandler

from langngram import Language, MAX_ORDER
from langngram.corpus import get_brown_categories, load_brown_lines, read_corpus_lines
from langngram.training import console, show_test_models, train_models_cli


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build character n-gram models for language identification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --language en --corpus english.txt --output models
  %(prog)s --language en --brown --categories news fiction
  %(prog)s -l de -c german.txt -l fr -c french.txt --workers 2
  %(prog)s --show-test-model "Which language is this?"

Each --language is paired with the --corpus given in the same position.
Models are written to <output>/<iso code>/<order>-grams.json.
        """
    )

    parser.add_argument(
        '-l', '--language',
        action='append',
        default=[],
        help='ISO 639-1 code of a language to train (repeatable)'
    )

    parser.add_argument(
        '-c', '--corpus',
        action='append',
        default=[],
        help='UTF-8 text corpus for the language in the same position (repeatable)'
    )

    parser.add_argument(
        '--brown',
        action='store_true',
        help='Use the NLTK Brown corpus for a single English language'
    )

    parser.add_argument(
        '--categories',
        type=str,
        nargs='+',
        default=None,
        help='Brown corpus categories to use (default: all)'
    )

    parser.add_argument(
        '-m', '--max-order',
        type=int,
        default=MAX_ORDER,
        choices=range(1, MAX_ORDER + 1),
        help=f'Highest n-gram order to build (default: {MAX_ORDER})'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Directory to save the trained models'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Worker processes when training several languages (default: one per CPU)'
    )

    parser.add_argument(
        '--show-test-model',
        type=str,
        default=None,
        metavar='TEXT',
        help='Print the n-gram chains extracted from TEXT'
    )

    parser.add_argument(
        '--list-categories',
        action='store_true',
        help='List available Brown corpus categories and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )

    if args.list_categories:
        console.print("Available Brown corpus categories:")
        for cat in get_brown_categories():
            console.print(f"  - {cat}")
        return 0

    try:
        languages = [Language.from_iso_code(code) for code in args.language]
    except ValueError as e:
        parser.error(str(e))

    if args.brown:
        if languages not in ([], [Language.ENGLISH]) or args.corpus:
            parser.error("--brown trains English only and cannot be combined with --corpus")
        corpora = {Language.ENGLISH: load_brown_lines(args.categories)}
    elif languages or args.corpus:
        if len(languages) != len(args.corpus):
            parser.error("Every --language needs exactly one --corpus")
        if len(set(languages)) != len(languages):
            parser.error("A language may only be given once")
        corpora = {}
        for language, path in zip(languages, args.corpus):
            try:
                corpora[language] = read_corpus_lines(path)
            except (OSError, UnicodeDecodeError) as e:
                logging.getLogger(__name__).error("Cannot read corpus %s: %s", path, e)
                return 1
    else:
        corpora = {}

    if not corpora and args.show_test_model is None:
        parser.error("Nothing to do: give --language/--corpus, --brown or --show-test-model")

    if corpora:
        train_models_cli(
            corpora,
            max_order=args.max_order,
            workers=args.workers,
            output_dir=args.output
        )

    if args.show_test_model is not None:
        language = languages[0] if len(languages) == 1 else None
        show_test_models(args.show_test_model, args.max_order, language)

    return 0


if __name__ == '__main__':
    sys.exit(main())
