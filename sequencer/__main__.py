#!/usr/bin/env python3
"""
Job Sequencer entry point.

With no arguments, runs the built-in scenarios and prints a confirmation
line. With --serve, starts the HTTP server.
"""
import argparse

from .selftest import run_self_tests
from .server import run_server


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sequencer",
        description="Greedy job sequencing with deadlines"
    )
    parser.add_argument("--serve", action="store_true", help="run the HTTP server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8001)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    if args.serve:
        run_server(host=args.host, port=args.port, debug=args.debug)
    else:
        run_self_tests()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
