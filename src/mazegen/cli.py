# src/mazegen/cli.py
# mazegen <rows> <cols> [<num_rooms> <room_min_w> <room_min_h> <room_max_w> <room_max_h>]

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import MazeConfig, RoomSpec
from .errors import MazeError
from .mapgen.generator import generate_maze
from .render.text import render_text

log = logging.getLogger(__name__)

USAGE = (
    "usage: mazegen <rows> <cols> <num_rooms> <room_min_w> <room_min_h> <room_max_w> <room_max_h>\n"
    "       mazegen <rows> <cols>"
)


def _env_seed() -> Optional[int]:
    raw = os.environ.get("MAZEGEN_SEED")
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        log.warning("ignoring non-integer MAZEGEN_SEED=%r", raw)
        return None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mazegen", description="Generate a maze and print it as text.")
    p.add_argument("dims", nargs="*", type=int, metavar="N",
                   help="rows cols, optionally followed by num_rooms min_w min_h max_w max_h")
    p.add_argument("--seed", type=int, default=None, help="seed for a reproducible maze (default: $MAZEGEN_SEED)")
    p.add_argument("--prune", type=int, default=0, metavar="PASSES", help="dead-end removal passes")
    p.add_argument("--no-doors", action="store_true", help="leave rooms sealed")
    p.add_argument("--log-level", default=os.environ.get("MAZEGEN_LOG_LEVEL", "WARNING"),
                   help="logging level (default: $MAZEGEN_LOG_LEVEL or WARNING)")
    return p


def config_from_args(args: argparse.Namespace) -> MazeConfig:
    rows, cols = args.dims[0], args.dims[1]
    rooms = None
    if len(args.dims) == 7:
        count, min_w, min_h, max_w, max_h = args.dims[2:]
        rooms = RoomSpec(count, min_w, min_h, max_w, max_h)
    seed = args.seed if args.seed is not None else _env_seed()
    return MazeConfig(
        rows=rows,
        cols=cols,
        rooms=rooms,
        connect_rooms=not args.no_doors,
        dead_end_passes=args.prune,
        seed=seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if len(args.dims) not in (2, 7):
        print(USAGE)
        return 1

    try:
        config = config_from_args(args)
        grid = generate_maze(config)
    except (ValueError, MazeError) as e:
        log.debug("generation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(render_text(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
