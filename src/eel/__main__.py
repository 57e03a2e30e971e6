"""Entry point for eel."""

import sys

from eel.cli import build_parser, config_from_args, configure_logging
from eel.errors import ConfigurationError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose and args.log_file is None:
        parser.error("--verbose needs --log-file")
    configure_logging(args.log_file, args.verbose)
    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    from eel.ui import EditorApp

    EditorApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
