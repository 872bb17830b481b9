"""
CLI entry point. Run as: python -m saturn problem.p
                     or: python -m saturn --problem socrates
"""

import argparse
import sys

from .core.heuristics import EVALUATIONS, DEFAULT_EVALUATION
from .core.state import ProofState, SearchParams, REFUTED
from .core.engine import compare_strategies
from .fileformats.tptp import TPTPSyntaxError, parse_file
from .problems import PROBLEMS, get_problem
from .visualization import proof_to_string, print_state, export_dot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saturn",
        description="Given-clause resolution prover for first-order CNF (TPTP)",
    )
    parser.add_argument("problem_file", nargs="?", help="TPTP problem file")
    parser.add_argument("--problem", choices=list(PROBLEMS), default=None,
                        help="Run a built-in sample problem instead of a file")
    parser.add_argument("-t", "--delete-tautologies", action="store_true",
                        help="Discard tautological given clauses")
    parser.add_argument("-f", "--forward-subsumption", action="store_true",
                        help="Discard given clauses subsumed by processed clauses")
    parser.add_argument("-b", "--backward-subsumption", action="store_true",
                        help="Remove processed clauses subsumed by the given clause")
    parser.add_argument("--occurs-check", action="store_true",
                        help="Use unification with occurs check")
    parser.add_argument("-H", "--heuristic", choices=list(EVALUATIONS),
                        default=DEFAULT_EVALUATION, help="Given-clause selection")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Wall-clock limit in seconds")
    parser.add_argument("--include", type=str, default=None,
                        help="Directory for TPTP include() files")
    parser.add_argument("--compare", action="store_true",
                        help="Run every heuristic and print one row each")
    parser.add_argument("--dot",   type=str, default=None, help="Export the proof as a DOT graph")
    parser.add_argument("--save",  type=str, default=None, help="Save a JSON report")
    parser.add_argument("--list-problems", action="store_true",
                        help="List the built-in problems and exit")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="Print every given clause and the final clause sets")
    verbosity.add_argument("--quiet", action="store_true", help="Only print the SZS status")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_problems:
        for name, problem in PROBLEMS.items():
            print(f"{name:<12} {problem['expected']:<14} {problem['description']}")
        return 0

    if args.problem_file is None and args.problem is None:
        parser.error("give a problem file or --problem NAME")

    # --- Load the problem before any search starts ---
    try:
        if args.problem_file is not None:
            problem = parse_file(args.problem_file, include_path=args.include)
        else:
            problem = get_problem(args.problem)
    except (TPTPSyntaxError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Built-in problems may switch on what they need to terminate
    preset = {} if args.problem_file is not None else PROBLEMS[args.problem].get("params", {})
    params = SearchParams(
        delete_tautologies=args.delete_tautologies or preset.get("delete_tautologies", False),
        forward_subsumption=args.forward_subsumption or preset.get("forward_subsumption", False),
        backward_subsumption=args.backward_subsumption or preset.get("backward_subsumption", False),
        occurs_check=args.occurs_check or preset.get("occurs_check", False),
    )

    if args.compare:
        rows = compare_strategies(problem, params=params, timeout=args.timeout)
        print(f"{'heuristic':<14} {'status':<14} {'processed':>9} {'seconds':>9}")
        for row in rows:
            print(f"{row['evaluation']:<14} {row['szs_status']:<14} "
                  f"{row['processed']:>9} {row['elapsed']:>9.3f}")
        return 0

    state = ProofState(problem, args.heuristic, params=params, verbose=args.verbose)
    try:
        state.saturate(args.timeout)
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if args.verbose:
        print_state(state)
    if not args.quiet:
        print(state.generate_statistics())
    print(f"# SZS status {state.szs_status}")

    if state.status == REFUTED:
        tree = state.generate_proof_tree()
        if not args.quiet:
            print("# SZS output start CNFRefutation")
            print(proof_to_string(tree))
            print("# SZS output end CNFRefutation")
        if args.dot:
            export_dot(tree, args.dot)

    if args.save:
        state.save(args.save)
        print(f"Report saved to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
