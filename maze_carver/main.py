import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.config import COLS, ROWS, DEFAULT_FPS, setup_logging

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: watch a recursive backtracker carve a maze")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed (default: unseeded)")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Generation steps per second")
    parser.add_argument("--headless", action="store_true", help="Generate without a window")
    parser.add_argument("--snapshot", type=str, help="Save the final frame to an image file (e.g. maze.png)")
    parser.add_argument("--record", action="store_true", help="Record the window session to video")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.headless and args.record:
        parser.error("--record needs a window, it cannot be combined with --headless")

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.fps < 1:
        logger.error(f"--fps must be positive, got {args.fps}")
        return 2

    from maze_carver.core.grid import MazeState
    from maze_carver.algo.dfs import RecursiveBacktracker

    state = MazeState()
    generator = RecursiveBacktracker(state, seed=args.seed)
    logger.info(f"Generating {COLS}x{ROWS} maze (seed={args.seed})...")

    if args.headless:
        from maze_carver.viz.renderer import Renderer
        generator.run_all()
        renderer = Renderer(state)
        frame = renderer.new_frame()
        renderer.render(frame)
        logger.info(f"Done. {state.visited_count} cells, {state.removed_count} walls removed.")
    else:
        from maze_carver.viz.window import MazeWindow
        window = MazeWindow(state, generator, fps=args.fps, record=args.record)
        if args.record:
            logger.info(f"Recording video to {window.recorder.output_file}")
        ok = window.run()
        if not ok:
            return 1
        frame = window.frame
        if not state.is_complete:
            logger.info(f"Closed early: {state.visited_count}/{COLS * ROWS} cells visited.")

    if args.snapshot:
        from maze_carver.viz.recorder import save_snapshot
        if not save_snapshot(frame, args.snapshot):
            return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
