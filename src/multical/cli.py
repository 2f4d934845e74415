from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import List, Optional

from .core.errors import MulticalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str):
    from multical.text import parse_date
    return parse_date(s)


def _render(value, sep: str) -> str:
    # An empty separator yields a CalendarDate rather than a string.
    return value if isinstance(value, str) else value.format(sep)


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: List[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical day", description="Gregorian date in every available calendar")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--sep", default="-")
    p.add_argument("--digits", choices=("en", "fa", "ar"), default="en")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    coverage = multical.get_engine().providers.coverage()
    for name in multical.list_calendars():
        system = multical.normalize(name)
        if system not in coverage:
            print(f"{name:<10} (unavailable)")
            continue
        out = _render(multical.convert("gregorian", y, m, d, system, args.sep), args.sep)
        print(f"{name:<10} {multical.translate(out, args.digits)}")
    return 0


def cmd_convert(argv: List[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical convert", description="Convert a date between two calendars")
    p.add_argument("source", help="Source calendar key (e.g. jalali, islamic, ethiopic)")
    p.add_argument("date", help="Y-M-D in the source calendar (Latin, Persian or Arabic-Indic digits)")
    p.add_argument("target", help="Target calendar key")
    p.add_argument("--sep", default="-")
    p.add_argument("--digits", choices=("en", "fa", "ar"), default="en")
    p.add_argument(
        "--leap",
        choices=("auto", "yes", "no"),
        default="auto",
        help="Chinese source only: whether the month is a leap month (default: auto).",
    )
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    source = multical.normalize(args.source)
    target = multical.normalize(args.target)

    if source is multical.CalendarSystem.CHINESE and args.leap != "auto":
        engine = multical.get_engine()
        instant = engine.to_instant(source, y, m, d, is_leap_month=(args.leap == "yes"))
        out = engine.from_instant(target, instant).date.format(args.sep)
    else:
        out = _render(multical.convert(source, y, m, d, target, args.sep), args.sep)
    print(multical.translate(out, args.digits))
    return 0


def cmd_jalali(argv: List[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical jalali", description="Closed-form Gregorian <-> Jalali")
    p.add_argument("date", help="Y-M-D (Gregorian, or Jalali with --reverse)")
    p.add_argument("--reverse", action="store_true", help="Jalali -> Gregorian")
    p.add_argument("--sep", default="/")
    p.add_argument("--digits", choices=("en", "fa", "ar"), default="en")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    fn = multical.jalali_to_gregorian if args.reverse else multical.gregorian_to_jalali
    print(multical.translate(_render(fn(y, m, d, args.sep), args.sep), args.digits))
    return 0


def cmd_digits(argv: List[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical digits", description="Transliterate digits in a string")
    p.add_argument("text")
    p.add_argument("--to", choices=("en", "fa", "ar"), default="en")
    p.add_argument("--decimal-mark", default="٫")
    args = p.parse_args(argv)

    try:
        print(multical.translate(args.text, args.to, args.decimal_mark))
    except ValueError as e:
        p.error(str(e))
    return 0


def cmd_calendars(argv: List[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical calendars", description="List calendars and who serves them")
    p.parse_args(argv)

    for name in multical.list_calendars():
        info = multical.calendar_info(name)
        aliases = ",".join(info["aliases"]) or "-"
        provider = info["provider"] or "unavailable"
        needs = "yes" if info["requires_icu"] else "no"
        print(f"{name:<10} provider={provider:<11} icu={info['icu_name']:<14} needs-icu={needs:<3} aliases={aliases}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `multical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="multical", description="Multi-calendar date conversion CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian date in every available calendar")
    sub.add_parser("convert", help="Convert a date between two calendars")
    sub.add_parser("jalali", help="Closed-form Gregorian <-> Jalali")
    sub.add_parser("digits", help="Transliterate digits (en/fa/ar)")
    sub.add_parser("calendars", help="List calendars, aliases and providers")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "day": cmd_day,
        "convert": cmd_convert,
        "jalali": cmd_jalali,
        "digits": cmd_digits,
        "calendars": cmd_calendars,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "multical.diagnostics.round_trip",
                "leap-months": "multical.diagnostics.leap_months",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except MulticalError as e:
        print(f"multical: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
