"""Coffee brewing simulation with typed quantities and a simple tracer."""

from __future__ import annotations

import argparse
import contextlib
import sys
import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ContextManager, TextIO

WATER_PER_CUP = 180
BEANS_PER_CUP = 20

BOIL_BATCH = 600
GRIND_BATCH = 20
BREW_BATCH = 4

BOIL_SECONDS = 0.4
GRIND_SECONDS = 0.2
BREW_SECONDS = 1.0

DEFAULT_CUPS = 20


class _Quantity(int):
    """An integer amount that keeps its kind through arithmetic."""

    _format = "{}"

    def __str__(self) -> str:
        return self._format.format(int(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def _other(self, other: object) -> int | None:
        if isinstance(other, _Quantity) and type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        if isinstance(other, int):
            return int(other)
        return None

    def __add__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(int(self) + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(int(self) - value)

    def __rsub__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(value - int(self))

    def __mul__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(int(self) * value)

    __rmul__ = __mul__


class Water(_Quantity):
    """Cold water in millilitres."""

    _format = "{}[ml] water"


class HotWater(_Quantity):
    """Boiled water in millilitres."""

    _format = "{}[ml] hot water"


class Bean(_Quantity):
    """Whole coffee beans in grams."""

    _format = "{}[g] beans"


class GroundBean(_Quantity):
    """Ground coffee in grams."""

    _format = "{}[g] ground beans"


class Coffee(_Quantity):
    """A number of cups of coffee."""

    _format = "{} cup(s) coffee"

    def water(self) -> Water:
        """Water needed for this many cups."""
        return Water(WATER_PER_CUP * int(self))

    def hot_water(self) -> HotWater:
        """Hot water needed for this many cups."""
        return HotWater(WATER_PER_CUP * int(self))

    def beans(self) -> Bean:
        """Beans needed for this many cups."""
        return Bean(BEANS_PER_CUP * int(self))

    def ground_beans(self) -> GroundBean:
        """Ground beans needed for this many cups."""
        return GroundBean(BEANS_PER_CUP * int(self))


@dataclass(frozen=True)
class TraceEvent:
    """A region or log entry recorded by a :class:`Tracer`."""

    kind: str
    name: str
    start: float
    end: float
    message: str = ""
    thread: str = ""


@dataclass
class Tracer:
    """Records timed regions and log messages of one task."""

    task: str = "make coffee"
    events: list[TraceEvent] = field(default_factory=list)
    _origin: float = field(
        default_factory=time.perf_counter, init=False, repr=False, compare=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def _now(self) -> float:
        return time.perf_counter() - self._origin

    def _record(self, event: TraceEvent) -> None:
        with self._lock:
            self.events.append(event)

    @contextlib.contextmanager
    def region(self, name: str) -> Iterator[None]:
        """Time the enclosed block as a region called ``name``."""
        start = self._now()
        try:
            yield
        finally:
            self._record(
                TraceEvent(
                    "region",
                    name,
                    start,
                    self._now(),
                    thread=threading.current_thread().name,
                )
            )

    def log(self, category: str, message: str) -> None:
        """Record a log message under ``category``."""
        now = self._now()
        self._record(
            TraceEvent(
                "log",
                category,
                now,
                now,
                message=message,
                thread=threading.current_thread().name,
            )
        )

    def dump(self, out: TextIO) -> None:
        """Write all recorded events, in order of start time, to ``out``."""
        with self._lock:
            events = sorted(self.events, key=lambda e: e.start)
        out.write(f"task\t{self.task}\n")
        for event in events:
            if event.kind == "region":
                out.write(
                    f"region\t{event.name}\t{event.start:.6f}\t"
                    f"{event.end:.6f}\t{event.thread}\n"
                )
            else:
                out.write(
                    f"log\t{event.name}\t{event.start:.6f}\t{event.message}\n"
                )


def _span(tracer: Tracer | None, name: str) -> ContextManager[None]:
    return tracer.region(name) if tracer is not None else contextlib.nullcontext()


def boil(water: int, *, tracer: Tracer | None = None, scale: float = 1.0) -> HotWater:
    """Boil ``water``; takes 0.4 s times ``scale``."""
    with _span(tracer, "boil"):
        time.sleep(BOIL_SECONDS * scale)
        return HotWater(int(water))


def grind(beans: int, *, tracer: Tracer | None = None, scale: float = 1.0) -> GroundBean:
    """Grind ``beans``; takes 0.2 s times ``scale``."""
    with _span(tracer, "grind"):
        time.sleep(GRIND_SECONDS * scale)
        return GroundBean(int(beans))


def brew(
    hot_water: int,
    ground_beans: int,
    *,
    tracer: Tracer | None = None,
    scale: float = 1.0,
) -> Coffee:
    """Brew as many cups as the scarcer ingredient allows; takes 1 s times ``scale``."""
    with _span(tracer, "brew"):
        time.sleep(BREW_SECONDS * scale)
        one_cup = Coffee(1)
        by_water = int(hot_water) // int(one_cup.hot_water())
        by_beans = int(ground_beans) // int(one_cup.ground_beans())
        return Coffee(min(by_water, by_beans))


def make_coffee(
    amount: int = DEFAULT_CUPS,
    *,
    tracer: Tracer | None = None,
    scale: float = 1.0,
    out: TextIO | None = None,
) -> Coffee:
    """Boil, grind and brew one step after another, printing each stage."""
    out = sys.stdout if out is None else out
    wanted = Coffee(amount)
    with _span(tracer, tracer.task if tracer is not None else ""):
        water = wanted.water()
        beans = wanted.beans()
        print(water, file=out)
        print(beans, file=out)

        hot_water = HotWater(0)
        while water > 0:
            water -= BOIL_BATCH
            hot_water += boil(Water(BOIL_BATCH), tracer=tracer, scale=scale)
        print(hot_water, file=out)

        ground_beans = GroundBean(0)
        while beans > 0:
            beans -= GRIND_BATCH
            ground_beans += grind(Bean(GRIND_BATCH), tracer=tracer, scale=scale)
        print(ground_beans, file=out)

        coffee = Coffee(0)
        batch = Coffee(BREW_BATCH)
        while hot_water >= batch.hot_water() and ground_beans >= batch.ground_beans():
            hot_water -= batch.hot_water()
            ground_beans -= batch.ground_beans()
            coffee += brew(
                batch.hot_water(), batch.ground_beans(), tracer=tracer, scale=scale
            )
        print(coffee, file=out)
    return coffee


def main(argv: list[str] | None = None) -> int:
    """Make coffee step by step, optionally writing a trace file."""
    parser = argparse.ArgumentParser(description="Make coffee one step at a time.")
    parser.add_argument("--cups", type=int, default=DEFAULT_CUPS)
    parser.add_argument("--scale", type=float, default=1.0)
    parser.add_argument("--trace", metavar="PATH", default=None)
    args = parser.parse_args(argv)

    tracer = Tracer() if args.trace else None
    make_coffee(args.cups, tracer=tracer, scale=args.scale)
    if tracer is not None:
        with open(args.trace, "w", encoding="utf-8") as trace_file:
            tracer.dump(trace_file)
    return 0