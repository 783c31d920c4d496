import argparse
import json
import logging
import os
import sys
import time

# Ensure project root is in path so we can import 'kruskal_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.core.config import MazeConfig, ConfigurationError, DEFAULT_RECURSION_THRESHOLD


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def add_maze_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--rows", type=int, default=20, help="Maze Rows")
    parser.add_argument("--cols", type=int, default=20, help="Maze Columns")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--uniform", action="store_true",
                        help="Pick cells uniformly at random instead of shuffled passes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kruskal Maze: union-find maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    add_maze_arguments(gen_parser)
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor / junction counts")
    gen_parser.add_argument("--json", action="store_true", help="Print per-cell open-side masks as JSON")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate a maze and solve it")
    add_maze_arguments(solve_parser)
    solve_parser.add_argument("--algo", type=str, default="bfs", choices=["dfs", "bfs"], help="Solver algorithm")
    solve_parser.add_argument("--threshold", type=int, default=DEFAULT_RECURSION_THRESHOLD,
                              help="Largest maze (in cells) solved with recursive DFS")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and both solvers")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size (N x N)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def make_config(args, parser: argparse.ArgumentParser, **overrides) -> MazeConfig:
    params = dict(
        rows=getattr(args, "rows", None),
        cols=getattr(args, "cols", None),
        seed=args.seed,
        shuffle_cells=not getattr(args, "uniform", False),
    )
    params.update(overrides)
    try:
        return MazeConfig(**params)
    except ConfigurationError as e:
        parser.error(str(e))


def cmd_generate(args, parser, logger):
    from kruskal_maze.maze import Maze

    config = make_config(args, parser)
    logger.info(f"Generating {config.rows}x{config.cols} maze (seed={config.seed})...")

    t0 = time.time()
    maze = Maze(config)
    maze.generate()
    logger.info(f"Generation complete in {time.time() - t0:.4f}s ({maze.edge_count()} passages)")

    if args.stats:
        from kruskal_maze.core.complexity import MazeStats
        logger.info(f"Stats: {MazeStats.calculate_stats(maze.graph)}")

    if args.json:
        doc = {
            "rows": maze.rows,
            "cols": maze.cols,
            "seed": config.seed,
            "cells": maze.door_grid().tolist(),
        }
        print(json.dumps(doc))

    return maze


def cmd_solve(args, parser, logger):
    from kruskal_maze.maze import Maze, SolveMode

    config = make_config(args, parser, recursion_threshold=args.threshold)
    maze = Maze(config)
    maze.generate()

    logger.info(f"Solving with {args.algo.upper()} from {maze.grid.entrance} to {maze.grid.exit}...")
    t0 = time.time()
    path = maze.solve(SolveMode(args.algo))
    logger.info(f"Solved in {time.time() - t0:.4f}s")

    print(f"Path Length: {len(path)}")
    print(" ".join(str(cell) for cell in path))
    return path


def cmd_benchmark(args, parser, logger):
    from kruskal_maze.maze import Maze, SolveMode

    config = make_config(argparse.Namespace(rows=args.size, cols=args.size, seed=args.seed), parser)
    logger.info(f"Running benchmark (Size: {args.size}x{args.size})...")

    t0 = time.time()
    maze = Maze(config)
    maze.generate()
    gen_time = time.time() - t0

    print(f"\n{'STAGE':<20} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 60)
    print(f"{'Generation':<20} | {gen_time:<10.4f} | {'-':<10} | {'-':<10}")

    for mode in SolveMode:
        solver = maze.make_solver(mode)
        t_start = time.time()
        solver.solve(maze.grid.entrance, maze.grid.exit)
        duration = time.time() - t_start
        print(f"{mode.name:<20} | {duration:<10.4f} | {len(solver.path):<10} | {solver.visited_count:<10}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("kruskal_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        cmd_generate(args, parser, logger)
    elif args.command == "solve":
        cmd_solve(args, parser, logger)
    elif args.command == "benchmark":
        cmd_benchmark(args, parser, logger)


if __name__ == "__main__":
    main()
