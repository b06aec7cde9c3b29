import argparse
import logging
from typing import Optional, Sequence

from parasketch import DegenerateDirectionError, SketchError
from parasketch.demo import build_demo_sketch, run as run_demo

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _format_pos(pos) -> str:
    return f"({pos[0]:.4f}, {pos[1]:.4f})"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Drag entities of the demo constrained sketch")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--vertex",
        nargs=3,
        metavar=("HANDLE", "X", "Y"),
        help="Drag vertex HANDLE towards (X, Y)",
    )
    group.add_argument(
        "--edge",
        nargs=3,
        metavar=("HANDLE", "DX", "DY"),
        help="Drag edge HANDLE by (DX, DY)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.vertex is None and args.edge is None:
        run_demo()
        return

    sketch = build_demo_sketch()
    try:
        if args.vertex is not None:
            handle, x, y = int(args.vertex[0]), float(args.vertex[1]), float(args.vertex[2])
            fixed = sketch.get_vertex(handle).position
            response = sketch.drag_vertex(handle, fixed, (x, y))
            print(f"state: {response.state.value}")
            if response.locus is not None:
                print(f"locus: {response.locus.kind}")
            if response.new_pos is not None:
                print(f"vertex {handle}: {_format_pos(response.new_pos)}")
        else:
            handle, dx, dy = int(args.edge[0]), float(args.edge[1]), float(args.edge[2])
            edge = sketch.get_edge(handle)
            grab = sketch.get_vertex(edge.start).position
            response = sketch.drag_edge(handle, grab, (grab[0] + dx, grab[1] + dy))
            print(f"state: {response.state.value}")
            if response.new_pos is not None:
                print(f"vertex {edge.start}: {_format_pos(response.new_pos[0])}")
                print(f"vertex {edge.end}: {_format_pos(response.new_pos[1])}")
    except DegenerateDirectionError as exc:
        logger.error("Drag failed on a collapsed edge: %s", exc)
        raise SystemExit(2)
    except SketchError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
