import sys
import os
import time
import argparse

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.core.config import DEFAULT_RECURSION_THRESHOLD
from kruskal_maze.core.grid import GridShape
from kruskal_maze.core.complexity import MazeStats
from kruskal_maze.algo.kruskal import RandomizedKruskal
from kruskal_maze.algo.solvers import BFS, RecursiveDFS, IterativeDFS

# ==========================================
# GLOBAL CONFIGURATION
# Add or remove solver names here to include/exclude them from the race.
# ==========================================
ENABLED_SOLVERS = [
    "bfs",
    "dfs_iterative",
    "dfs_recursive",  # Skipped automatically above the recursion-safe size
]


def get_solver(name, graph):
    if name == "bfs": return BFS(graph)
    if name == "dfs_iterative": return IterativeDFS(graph)
    if name == "dfs_recursive": return RecursiveDFS(graph)
    return None


def run_benchmark():
    parser = argparse.ArgumentParser(description="Solver Benchmark")
    parser.add_argument("--rows", type=int, default=300, help="Maze Rows")
    parser.add_argument("--cols", type=int, default=300, help="Maze Columns")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--uniform", action="store_true", help="Pick cells uniformly at random instead of shuffled passes")
    args = parser.parse_args()

    print(f"=== MAZE SOLVER BENCHMARK ===")
    print(f"Size: {args.rows}x{args.cols} | Seed: {args.seed}")
    print(f"Solvers: {', '.join(ENABLED_SOLVERS)}")
    print("-" * 50)

    # 1. Generate Maze
    print("Generating Maze (Randomized Kruskal)...")
    t0 = time.time()
    grid = GridShape(args.rows, args.cols)
    gen = RandomizedKruskal(grid, seed=args.seed, shuffle_cells=not args.uniform)
    graph = gen.run_all()
    gen_time = time.time() - t0
    print(f"Generation Complete in {gen_time:.4f}s. Misses: {gen.miss_count}")
    print(f"Stats: {MazeStats.calculate_stats(graph)}")
    print("-" * 50)

    # 2. Race Loop
    results = []
    for name in ENABLED_SOLVERS:
        if name == "dfs_recursive" and grid.size > DEFAULT_RECURSION_THRESHOLD:
            print(f"Skipping {name.upper()} ({grid.size} cells > {DEFAULT_RECURSION_THRESHOLD})")
            continue

        print(f"Running {name.upper()}...", end="", flush=True)
        solver = get_solver(name, graph)

        t_start = time.time()
        solver.solve(grid.entrance, grid.exit)
        duration = time.time() - t_start

        print(f" Done ({duration:.4f}s) | Path: {len(solver.path)}")
        results.append({
            "name": name,
            "time": duration,
            "path": len(solver.path),
            "visited": solver.visited_count,
        })

    # 3. Leaderboard
    print("=" * 60)
    print(f"{'RANK':<5} | {'ALGORITHM':<20} | {'TIME (s)':<10} | {'PATH':<8} | {'VISITED':<8}")
    print("-" * 60)

    results.sort(key=lambda x: x['time'])

    for i, res in enumerate(results):
        print(f"{i+1:<5} | {res['name'].upper():<20} | {res['time']:<10.4f} | {res['path']:<8} | {res['visited']:<8}")
    print("=" * 60)


if __name__ == "__main__":
    run_benchmark()
