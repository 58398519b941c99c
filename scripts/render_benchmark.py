import sys
import os
import time
import timeit

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import MazeState
from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.viz.renderer import Renderer, pixel_color

def benchmark_generation(seed: int = 42):
    print("\n--- Generation ---")
    state = MazeState()
    algo = RecursiveBacktracker(state, seed=seed)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Steps: {algo.step_count} ({algo.carve_count} carves, {algo.backtrack_count} backtracks)")
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {algo.step_count / gen_time:,.0f} steps/sec")
    return state

def benchmark_render(state: MazeState, runs: int = 50):
    print("\n--- Render ---")
    renderer = Renderer(state)
    frame = renderer.new_frame()

    per_frame = timeit.timeit(lambda: renderer.render(frame), number=runs) / runs
    print(f"Vectorized: {per_frame * 1000:.2f} ms/frame ({1 / per_frame:,.0f} fps)")

    # Scalar rule over one frame, for comparison
    start = time.time()
    for y in range(renderer.height):
        for x in range(renderer.width):
            pixel_color(state, x, y)
    scalar = time.time() - start
    print(f"Per-pixel:  {scalar * 1000:.2f} ms/frame")

if __name__ == "__main__":
    benchmark_render(benchmark_generation())
