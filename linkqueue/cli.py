"""Command-line front end for inspecting a queue of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from linkqueue.queue import LinkedQueue
from linkqueue.stats import window_max


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkqueue", description="Load integers into a queue and inspect it."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    drain = commands.add_parser(
        "drain", help="pop the front, report the size, then empty the queue"
    )
    drain.add_argument("values", nargs="*", type=int)

    show = commands.add_parser("show", help="report the top and bottom, then list all")
    show.add_argument("values", nargs="*", type=int)

    window = commands.add_parser("window", help="maximum of each sliding window")
    window.add_argument("k", type=int)
    window.add_argument("values", nargs="*", type=int)
    return parser


def _print_elements(queue: LinkedQueue) -> None:
    print("Elements in the queue:")
    while not queue.is_empty():
        print(queue.pop())


def _drain(queue: LinkedQueue) -> int:
    if queue.is_empty():
        print("Queue is empty", file=sys.stderr)
        return 1
    print(f"Popped element: {queue.pop()}")
    print(f"Current size of queue: {len(queue)}")
    if queue.is_empty():
        print("Queue is empty")
    else:
        print(f"Front element: {queue.front()}")
    _print_elements(queue)
    return 0


def _show(queue: LinkedQueue) -> int:
    if queue.is_empty():
        print("Queue is empty: ")
    else:
        print(f"top element: {queue.front()}")
        print(f"Bottom element of the queue: {queue.back()}")
    _print_elements(queue)
    return 0


def _window(queue: LinkedQueue, k: int) -> int:
    try:
        maxima = window_max(queue, k)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    for value in maxima:
        print(f"Max in window of size {k}: {value}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    queue = LinkedQueue(args.values)
    if args.command == "drain":
        return _drain(queue)
    if args.command == "show":
        return _show(queue)
    return _window(queue, args.k)


if __name__ == "__main__":
    sys.exit(main())