import argparse
import logging
import sys

from pygriddist import (
    format_solution,
    load_batch,
    save_solutions,
    solve_batch,
)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        "pygriddist", description="Distance of every grid cell to the nearest target cell."
    )
    ap.add_argument("input", help="batch file: count, then 'rows cols' + digit rows per problem")
    ap.add_argument("--target", type=int, default=1, help="cell value marking a source")
    ap.add_argument("--output", type=str, default=None, help="write solutions here instead of stdout")
    ap.add_argument("--workers", type=int, default=1, help="processes to spread problems over")
    ap.add_argument("--strict", action="store_true", help="fail when a grid has no target cell")
    ap.add_argument("--show", action="store_true", help="open a heatmap of the first solution")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        problems = load_batch(args.input, target=args.target)
        solutions = solve_batch(problems, workers=args.workers, strict=args.strict)
        if args.output:
            save_solutions(solutions, args.output)
        else:
            for solution in solutions:
                print(format_solution(solution))
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.show and solutions:
        from pygriddist.visualizer import run_visualizer

        run_visualizer(problems[0], solutions[0])

    return 0


if __name__ == "__main__":
    sys.exit(main())
