"""Main entry point for wordsum CLI."""

import sys

from .checksum import pad
from .cli import create_parser, validate_args
from .config import Config, load_config, merge_config_with_args
from .errors import ChecksumError, UsageError
from .utils import read_input, render_report


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()

    try:
        args = parser.parse_args(argv)
        validate_args(args)
    except UsageError as e:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ChecksumError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Load config if provided
    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = Config()

    # Merge CLI args over config
    config = merge_config_with_args(config, args)

    if config.verbose:
        print(
            f"Config: max_chars={config.max_chars}, line_length={config.line_length}, "
            f"quiet={config.quiet}",
            file=sys.stderr,
        )

    try:
        data = read_input(args.filename, config.max_chars)
    except ChecksumError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.verbose:
        print(f"Read {len(data)} bytes from {args.filename}", file=sys.stderr)
        if config.max_chars and len(data) == config.max_chars:
            print(f"Read the maximum of {config.max_chars} characters", file=sys.stderr)
        padding = len(pad(data, args.width)) - len(data)
        print(f"Added {padding} padding byte(s) for {int(args.width)}-bit words", file=sys.stderr)

    report = render_report(
        data,
        args.width,
        line_length=config.line_length,
        echo_text=not config.quiet,
    )

    out = getattr(sys.stdout, "buffer", None)
    if out is None:
        sys.stdout.write(report.decode("latin-1"))
        sys.stdout.flush()
    else:
        sys.stdout.flush()
        out.write(report)
        out.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
