import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from fridgestore.config import LOG_LEVELS, StoreSettings
from fridgestore.domain import Beverage, DispensingError, Refrigerator, Store, Water
from fridgestore.logging import ROOT_LOGGER_NAME, format_event, get_logger, get_ring_buffer


class Playground:
    """Walks a store through refill and get, reporting the dispenser count after each step."""

    def __init__(self, store: Store, out=None, template: Optional[Beverage] = None) -> None:
        self.store = store
        self.template = template or Water()
        self.out = out or sys.stdout

    def report(self, label: str) -> None:
        print(f"{label}: {len(self.store.dispenser.drinks)}/{self.store.dispenser.capacity}", file=self.out)

    def run(self, take: List[str]) -> int:
        self.report("start")
        try:
            self.store.refill(self.template)
        except DispensingError as exc:
            print(f"refill failed: {exc}", file=self.out)
            return 1
        self.report("after refill")

        for name in take:
            drink = self.store.get(name)
            status = "got" if drink is not None else "no"
            print(f"{status} {name}", file=self.out)
            self.report(f"after get {name}")

        print(self.store.snapshot().model_dump_json(), file=self.out)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Refill a beverage store and take drinks out of it.")
    parser.add_argument("--capacity", type=int, default=None, help="Refrigerator capacity (default: FRIDGE_CAPACITY or 10).")
    parser.add_argument(
        "--take",
        action="append",
        default=None,
        help="Beverage name to take after refilling. May be given more than once (default: Water).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for the fridgestore logger. Logged events are printed to stderr after the run.",
    )
    args = parser.parse_args(argv)

    if args.capacity is not None and args.capacity < 0:
        parser.error("--capacity must be non-negative")

    overrides = {}
    if args.capacity is not None:
        overrides["FRIDGE_CAPACITY"] = args.capacity
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    try:
        settings = StoreSettings(**overrides)
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc}")

    logger = get_logger(settings=settings)
    ring = get_ring_buffer()
    if args.log_level:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(settings.log_level)
        ring.clear()
    logger.debug("playground_start", extra={"details": {"capacity": settings.default_capacity}})

    store = Store(Refrigerator(capacity=settings.default_capacity))
    template = Water(settings.default_beverage_name)
    result = Playground(store, template=template).run(args.take or [template.name])

    if args.log_level:
        for event in ring.get_events():
            print(format_event(event), file=sys.stderr)
    return result


if __name__ == "__main__":
    sys.exit(main())
