# main.py

from terminal import GraphTerminal
from event_log import GraphEventLog
from persistence import load_from_json
from errors import GraphError
import argparse
import logging
import sys


def create_parser():
    parser = argparse.ArgumentParser(description="Graph Simulator")
    parser.add_argument("--directory", default=".",
                        help="where graphs are saved to and loaded from")
    parser.add_argument("--load", metavar="FILE",
                        help="start from a previously saved graph")
    parser.add_argument("--verbose", action="store_true",
                        help="log debug output and every graph edit")
    return parser


def main(argv=None):
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    graph = None
    if args.load:
        try:
            graph = load_from_json(args.load)
        except GraphError as e:
            print(e, file=sys.stderr)
            return 1

    event_log = GraphEventLog() if args.verbose else None
    GraphTerminal(graph, directory=args.directory, event_log=event_log).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
