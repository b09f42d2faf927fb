"""Example CLI entry point for lvlog.

Sets the global level from --loglevel, then writes the same handful of
messages through each selected backend so their output can be compared:

  lvlog                              # every backend, level debug
  lvlog --loglevel warn --backend json
  lvlog --flags date,time,shortfile --backend console
  lvlog --logger db:trace --logger audit::file:audit.log

Level precedence: --loglevel flag > $LVLOG_LEVEL > "debug".
An unknown level name is a usage error (exit status 2); it never falls
back silently to a default.
"""

import argparse
import os
import sys

from lvlog._version import VERSION
from lvlog.backends import new_logger
from lvlog.config import Flags, parse_logger_spec
from lvlog.errors import LvlogError
from lvlog.levels import Level, format_level_list, level_from_string
from lvlog.state import set_global_level

LEVEL_ENV_VAR = "LVLOG_LEVEL"
DEFAULT_LEVEL_NAME = "debug"

# Demo name -> (backend, extra options)
DEMO_BACKENDS = {
    "console": ("console", {}),
    "color": ("color", {}),
    "json": ("structured", {}),
    "pretty": ("structured", {"pretty": True}),
}


def _level_arg(value):
    """argparse type: level name -> Level, rejecting unknown names."""
    level = level_from_string(value)
    if level is Level.NONE:
        raise argparse.ArgumentTypeError(
            f"unknown log level {value!r} (run with --list-levels)")
    return level


def _flags_arg(value):
    """argparse type: 'date,time,shortfile' -> Flags."""
    flags = Flags.NONE
    for name in filter(None, (part.strip() for part in value.split(","))):
        try:
            flags |= Flags[name.upper()]
        except KeyError:
            raise argparse.ArgumentTypeError(f"unknown flag {name!r}")
    return flags


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="lvlog",
        description="lvlog — leveled logging facade demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"lvlog {VERSION}",
    )
    parser.add_argument(
        "--loglevel", type=_level_arg,
        default=os.environ.get(LEVEL_ENV_VAR) or DEFAULT_LEVEL_NAME,
        help=f"Global log level (default: ${LEVEL_ENV_VAR} or {DEFAULT_LEVEL_NAME})")
    parser.add_argument(
        "--backend", choices=["all"] + list(DEMO_BACKENDS), default="all",
        help="Backend to demonstrate (default: all)")
    parser.add_argument(
        "--namespace", default="lvlog.example",
        help="Namespace for the demo loggers")
    parser.add_argument(
        "--output", metavar="PATH", default=None,
        help="Append output to PATH instead of the console")
    parser.add_argument(
        "--flags", type=_flags_arg, default=Flags.STD, metavar="NAMES",
        help="Console prefix flags, comma-separated "
             "(date,time,microseconds,longfile,shortfile,utc)")
    parser.add_argument(
        "--logger", action="append", default=[], metavar="SPEC",
        help="Extra console logger NAMESPACE:LEVEL:DEST:LOCATION (repeatable)")
    parser.add_argument(
        "--list-levels", action="store_true", default=False,
        help="List level names and exit")
    return parser


def log_values(log):
    """Write one message per interesting call shape."""
    log.info("Starting application....")
    log.warn("Do not do that!")
    log.debug("Sent %d value to server %s", 1, "example.com")
    log.error("Error: %s", RuntimeError("Bang"))
    log.trace("Shutting down", backend=type(log).__name__)


def build_loggers(args):
    """Construct the loggers selected on the command line."""
    names = list(DEMO_BACKENDS) if args.backend == "all" else [args.backend]
    loggers = []
    try:
        for name in names:
            backend, options = DEMO_BACKENDS[name]
            if backend != "structured":
                options = dict(options, flags=args.flags)
            loggers.append(new_logger(backend, namespace=args.namespace,
                                      output_file=args.output, **options))
        for spec in args.logger:
            config = parse_logger_spec(spec)
            loggers.append(new_logger(
                "console", namespace=config.namespace, level=config.level,
                output_file=config.output_file, stream=config.stream,
                flags=args.flags))
    except LvlogError:
        for log in loggers:
            log.close()
        raise
    return loggers


def main(argv=None):
    """Main entry point for the lvlog demo.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_levels:
        print(format_level_list())
        return 0

    set_global_level(args.loglevel)

    try:
        loggers = build_loggers(args)
    except LvlogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        for log in loggers:
            log_values(log)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    finally:
        for log in loggers:
            log.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
