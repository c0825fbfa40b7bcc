import argparse
import sys

from htmlrestrict.config import RestrictConfig, get_logger
from htmlrestrict.errors import RestrictError
from htmlrestrict.restrict import HTMLRestrict
from htmlrestrict.rules import RuleSet


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="htmlrestrict",
        description="Strip every HTML tag and attribute not allowed by the rules",
    )
    parser.add_argument("input", nargs="?", help="markup file to filter, stdin by default")
    parser.add_argument(
        "--rules",
        default=RestrictConfig.RULES_FILE,
        help='JSON file mapping tags to allowed attributes, e.g. {"b": [], "img": ["src", "/"]}',
    )
    parser.add_argument("--debug", action="store_true", default=RestrictConfig.DEBUG)
    return parser.parse_args(argv)


def read_input(path):
    if path is None:
        return sys.stdin.read()
    with open(path, encoding=RestrictConfig.ENCODING) as f:
        return f.read()


def main(argv=None):
    logger = get_logger()
    args = parse_args(argv)

    try:
        rules = RuleSet.from_json(args.rules) if args.rules else RuleSet()
        content = read_input(args.input)
    except (OSError, ValueError, RestrictError) as exc:
        logger.error(f"Could not load input: {exc}")
        return 1

    logger.debug(f"Filtering {len(content)} characters with {rules}")
    restrictor = HTMLRestrict(rules, debug=args.debug)
    sys.stdout.write(restrictor.process(content))
    return 0


if __name__ == "__main__":
    sys.exit(main())
