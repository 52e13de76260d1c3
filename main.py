import argparse
import os
import sys

from models.errors import InvalidInstance
from models.line import Axis
from separators.greedy_separator import SeparatorState
from separators.problem_instance import ProblemInstance
from utils.instance_io import find_instance_files, read_instance_file
from utils.geometry import unseparated_pairs
from visualization.save_outputs import save_all_outputs

from config import get_active_params


def process_instance(path: str, instance_id: str, output_dir: str,
                     render: bool = True, verbose: bool = False):
    """
    Runs the complete pipeline for one instance file:
      1. Read and validate the point set
      2. Build sorted views, connectivity graph and candidate lines
      3. Greedy commit loop over both axes
      4. Cross-check the committed lines against the coordinates
      5. Save outputs (solution file, optional rendering)

    Raises InvalidInstance if the file cannot be used; nothing is written
    in that case.
    """

    print(f"\n=== Processing instance {instance_id} ===")

    # ------------------------------
    # STEP 1 — READ & VALIDATE
    # ------------------------------
    try:
        declared, pairs = read_instance_file(path)
    except InvalidInstance as e:
        raise e.with_instance(instance_id) from None

    # ------------------------------
    # STEP 2 — BUILD INSTANCE STATE
    # ------------------------------
    instance = ProblemInstance.from_points(pairs, declared, name=instance_id)
    registry = instance.registry

    for axis in Axis:
        if registry.has_duplicate_coordinates(axis):
            print(f"[WARN] Instance {instance_id} has duplicate {axis.name} coordinates.")

    if verbose:
        for axis in Axis:
            print(registry.describe_axis(axis))
        print(instance.graph.describe())

    # ------------------------------
    # STEP 3 — GREEDY SEPARATION
    # ------------------------------
    result = instance.solve()

    if verbose:
        print(instance.graph.describe())

    # ------------------------------
    # STEP 4 — CROSS-CHECK
    # ------------------------------
    if result.state is SeparatorState.EXHAUSTED:
        groups = instance.unseparated_groups()
        print(f"[WARN] Candidates exhausted with {result.remaining} connections left; "
              f"unseparated groups: {groups}")

    leftover = unseparated_pairs(registry.points, result.lines)
    if len(leftover) * 2 != result.remaining:
        print(f"[WARN] {len(leftover)} pairs unseparated by the lines, "
              f"but the graph reports {result.remaining} connections.")

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        instance_id=instance_id,
        registry=registry,
        lines=result.lines,
        render=render,
    )

    print(f"[OK] Solved instance {instance_id}: {len(result.lines)} lines "
          f"({result.tested} tested, {result.discarded} discarded)")
    return instance


def build_parser():
    params = get_active_params()

    parser = argparse.ArgumentParser(
        description="Separate points with axis-parallel lines (greedy set cover)."
    )
    parser.add_argument(
        "instances",
        nargs="*",
        type=int,
        help="instance numbers to solve (default: every instance file found)",
    )
    parser.add_argument("--input", default=params["INPUT_FOLDER"])
    parser.add_argument("--output", default=params["OUTPUT_FOLDER"])
    parser.add_argument("--no-render", dest="render", action="store_false",
                        default=params["RENDER_OUTPUTS"])
    parser.add_argument("--keep-going", dest="stop_on_invalid", action="store_false",
                        default=params["STOP_ON_INVALID"],
                        help="report invalid instances and continue")
    parser.add_argument("--verbose", action="store_true", default=params["VERBOSE"])
    return parser


def main(argv=None):
    """
    Main entry point:
      - Finds the instance files
      - Processes each one independently
      - Saves output files
    """
    params = get_active_params()
    args = build_parser().parse_args(argv)

    max_instances = params["MAX_INSTANCES"]
    out_of_range = [n for n in args.instances if not 1 <= n <= max_instances]
    if out_of_range:
        print(f"[ERROR] Instance numbers must be between 1 and {max_instances}: {out_of_range}")
        return 1

    if args.instances:
        targets = [
            (f"{n:02d}", os.path.join(args.input, f"{params['INSTANCE_PREFIX']}{n:02d}"))
            for n in args.instances
        ]
    else:
        targets = find_instance_files(args.input, params["INSTANCE_PATTERN"], max_instances)

    if not targets:
        print(f"[ERROR] No instance files matched {params['INSTANCE_PATTERN']} in {args.input}")
        return 1

    failed = 0
    for instance_id, path in targets:
        try:
            process_instance(path, instance_id, args.output,
                             render=args.render, verbose=args.verbose)
        except InvalidInstance as e:
            failed += 1
            print(f"[ERROR] {e}")
            if args.stop_on_invalid:
                print("[ERROR] Quitting")
                return 1

    print(f"\n=== All instances processed ({len(targets) - failed} solved, {failed} failed) ===")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
