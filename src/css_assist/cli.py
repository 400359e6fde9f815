# src/css_assist/cli.py
import argparse
import json
import logging
import sys

from .general.utils import ConfigTypeError


def _read_source(path):
    if path in (None, "-"):
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _cmd_hsl(args):
    from .color import hex_to_hsl

    for token in args.hex:
        print(hex_to_hsl(token[1:] if token.startswith("#") else token))


def _cmd_compact(args):
    from .compact import compact_css

    sys.stdout.write(compact_css(_read_source(args.file)))


def _cmd_classify(args):
    from .highlight import highlight

    rows = [
        {
            "start": h.start,
            "end": h.end,
            "text": h.text,
            "category": h.category.value if h.category else "color-literal",
            "background": h.background,
        }
        for h in highlight(_read_source(args.file))
    ]
    print(json.dumps(rows, indent=2, ensure_ascii=False))


def _cmd_complete(args):
    from .lexicon import complete

    for keyword in complete(args.text, len(args.text), limit=args.limit):
        print(keyword)


def _cmd_random_color(args):
    from .color import random_hsl

    print(random_hsl())


def build_parser():
    parser = argparse.ArgumentParser(
        prog="css-assist",
        description="CSS helpers: hex→HSL, whitespace compaction, keyword classification, completion.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("hsl", help="Convert 6-digit hex colors (e.g. ffefd5 or #ffefd5) to hsl()")
    p.add_argument("hex", nargs="+")
    p.set_defaults(func=_cmd_hsl)

    p = sub.add_parser("compact", help="Compact CSS whitespace (stdin when FILE is omitted)")
    p.add_argument("file", nargs="?")
    p.set_defaults(func=_cmd_compact)

    p = sub.add_parser("classify", help="Print classified spans and color swatches as JSON")
    p.add_argument("file", nargs="?")
    p.set_defaults(func=_cmd_classify)

    p = sub.add_parser("complete", help="Rank keywords completing the last word of TEXT")
    p.add_argument("text")
    p.add_argument("--limit", type=int, default=10, help="Max candidates to print")
    p.set_defaults(func=_cmd_complete)

    p = sub.add_parser("random-color", help="Print a random hsl() color")
    p.set_defaults(func=_cmd_random_color)

    return parser


def main(argv=None):
    """CLI entry point: dispatch a sub-command, map errors to exit status 1."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        args.func(args)
    except (ValueError, OSError, ConfigTypeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
