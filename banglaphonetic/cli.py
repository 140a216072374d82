"""
banglaphonetic CLI.
"""

import argparse

from rich import print_json

from banglaphonetic.engine import PhoneticEngine
from banglaphonetic.lexicon import default_lexicon


def add_translit_subparser(subparsers):
    parser = subparsers.add_parser(
        "translit",
        help="Transliterate romanized text to Bangla."
    )
    parser.add_argument("text", nargs="+", help="Romanized text.")
    parser.set_defaults(func=run_translit)


def run_translit(args):
    print(PhoneticEngine.transliterate(" ".join(args.text)))


def add_trace_subparser(subparsers):
    parser = subparsers.add_parser(
        "trace",
        help="Show the edit produced by each keystroke."
    )
    parser.add_argument("text", help="Keystrokes, fed to a single session.")
    parser.set_defaults(func=run_trace)


def run_trace(args):
    engine = PhoneticEngine()
    steps = []
    for char in args.text:
        edit = engine.process(char)
        steps.append({"key": char, "delete": edit.delete_count, "insert": edit.insert_text})
    print_json(data=steps, ensure_ascii=False)


def add_lexicon_subparser(subparsers):
    parser = subparsers.add_parser(
        "lexicon",
        help="Print the lexicon."
    )
    parser.set_defaults(func=run_lexicon)


def run_lexicon(args):
    print_json(data=dict(default_lexicon().items()), ensure_ascii=False)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="banglaphonetic", description="Bangla phonetic transliteration")
    subparsers = parser.add_subparsers(dest="command")

    add_translit_subparser(subparsers)
    add_trace_subparser(subparsers)
    add_lexicon_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
