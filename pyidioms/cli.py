"""pyidioms CLI."""
from __future__ import annotations

import argparse
from typing import List, Tuple, Union

from .config import load_settings
from .core.balance import BalanceHolder, create_holder, holder_kinds
from .core.container import Container
from .core.errors import InvalidArgument, SerializationError, UnknownKind
from .serialization import dumps, holder_to_json
from .telemetry.metrics import Timer


Number = Union[int, float]


def _parse_number(s: str) -> Number:
    try:
        return int(s)
    except ValueError:
        return float(s)


def _parse_op(tok: str) -> Tuple[str, Number | None]:
    """Parse ``write:<n>``, ``reset`` or ``read``."""
    name, sep, arg = tok.partition(":")
    if name in ("reset", "read") and not sep:
        return name, None
    if name == "write" and sep:
        return name, _parse_number(arg)
    raise ValueError(f"bad op {tok!r}; expected write:<number>, reset or read")


def _cmd_demo(args: argparse.Namespace) -> int:
    steps: List[dict] = []
    with Timer("demo") as t:
        h = BalanceHolder(100)
        steps.append({"op": "init", "arg": 100, "value": h.read()})
        h.write(50)
        steps.append({"op": "write", "arg": 50, "value": h.read()})
        try:
            h.write(-10)
        except InvalidArgument as e:
            steps.append({"op": "write", "arg": -10, "error": str(e), "value": h.read()})
        h.reset()
        steps.append({"op": "reset", "value": h.read()})
        box = Container(h)
    report = {
        "steps": steps,
        "container_identity": box.get() is h,
        "timer": t.to_record(),
    }
    print(dumps(report, indent=load_settings().json_indent))
    return 0


def _cmd_balance(args: argparse.Namespace) -> int:
    try:
        ops = [_parse_op(tok) for tok in args.ops]
        kwargs = {"owner": args.owner} if args.owner is not None else {}
        holder = create_holder(args.kind, value=_parse_number(args.initial), **kwargs)
    except (ValueError, TypeError, UnknownKind) as e:
        print(f"error: {e}")
        return 2
    rejected = 0
    for name, arg in ops:
        if name == "write":
            try:
                holder.write(arg)
            except InvalidArgument as e:
                rejected += 1
                print(f"rejected write:{arg}: {e}")
        elif name == "reset":
            holder.reset()
        else:
            print(holder.read())
    try:
        print(holder_to_json(holder))
    except SerializationError as e:
        print(f"error: {e}")
        return 2
    return 1 if rejected else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyidioms")
    sub = p.add_subparsers(dest="cmd", required=True)

    # demo
    sp = sub.add_parser("demo", help="Run the balance/timer/container walkthrough and print a JSON report")
    sp.set_defaults(func=_cmd_demo)

    # balance
    sp = sub.add_parser("balance", help="Apply write/reset/read operations to a balance holder")
    sp.add_argument("--initial", default="0", help="Initial value (validated unless PYIDIOMS_VALIDATE_INITIAL=0)")
    sp.add_argument("--kind", default="balance", choices=holder_kinds(), help="Holder variant")
    sp.add_argument("--owner", default=None, help="Owner name (bank_account only)")
    sp.add_argument("ops", nargs="*", help="write:<number> | reset | read")
    sp.set_defaults(func=_cmd_balance)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
