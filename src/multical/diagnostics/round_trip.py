from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import multical
from multical.core.types import CalendarDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def parse_calendars(s: Optional[str]) -> List[str]:
    # None -> every calendar the current engine can serve
    if s is None:
        coverage = multical.get_engine().providers.coverage()
        return [c.value for c in coverage if c is not multical.CalendarSystem.GREGORIAN]
    return [multical.normalize(x).value for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    engine = multical.get_engine()
    failures = 0

    for _ in range(N):
        d0 = random_date(rng, start, end)
        g0 = CalendarDate(d0.year, d0.month, d0.day)

        c = engine.convert("gregorian", *g0, calendar)
        back = engine.convert(calendar, *c, "gregorian")
        if back != g0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("gregorian:", g0)
            print(f"{calendar}:", c)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> calendar -> gregorian.")
    p.add_argument("--calendars", type=str, default=None,
                   help="Comma-separated calendar keys (default: every calendar with a provider).")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
