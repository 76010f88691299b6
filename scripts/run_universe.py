"""
Run the 64x64 universe for a number of generations and report population
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from src.life.universe import Universe, simulate
from src.evaluation.metrics import summarize_trajectory


def build_universe(empty=False, gliders=(), toggles=()):
    """
    Create the starting universe and apply requested edits.

    Args:
        empty: Start from an all-dead grid instead of the seed pattern
        gliders: (row, column) centers to stamp gliders at
        toggles: (row, column) cells to flip

    Returns:
        Universe ready to tick
    """
    universe = Universe.empty() if empty else Universe.new()
    for row, column in gliders:
        universe.add_glider(row, column)
    for row, column in toggles:
        universe.toggle_cell(row, column)
    return universe


def main():
    """Main simulation function."""
    import argparse

    parser = argparse.ArgumentParser(description='Run the toroidal Game of Life universe')
    parser.add_argument('--steps', type=int, default=100,
                        help='Number of generations to simulate')
    parser.add_argument('--glider', type=int, nargs=2, action='append', default=[],
                        metavar=('ROW', 'COL'), help='Stamp a glider centered at ROW COL')
    parser.add_argument('--toggle', type=int, nargs=2, action='append', default=[],
                        metavar=('ROW', 'COL'), help='Flip the cell at ROW COL')
    parser.add_argument('--empty', action='store_true',
                        help='Start from an all-dead grid')
    args = parser.parse_args()

    try:
        universe = build_universe(args.empty, args.glider, args.toggle)
    except IndexError as e:
        print(f"Error: {e}")
        return

    print("=" * 60)
    print("GAME OF LIFE")
    print("=" * 60)
    print(f"Grid: {universe.height()}x{universe.width()}")
    print(f"Start: {'empty' if args.empty else 'seed pattern'}")
    print(f"Gliders: {len(args.glider)}, Toggles: {len(args.toggle)}")
    print(f"Initial population: {universe.population()}")

    trajectory = simulate(universe, args.steps, verbose=True)
    summary = summarize_trajectory(trajectory)

    print(f"\n{'=' * 60}")
    print("RESULTS")
    print('=' * 60)
    print(f"Generations: {summary['num_steps']}")
    print(f"Final population: {summary['final_population']}")
    print(f"Peak population: {max(summary['populations'])}")
    if summary['changes']:
        print(f"Cells changed in last step: {summary['changes'][-1]}")

    if summary['period'] == 1:
        print("Final state is stable")
    elif summary['period'] > 1:
        print(f"Final state oscillates with period {summary['period']}")
    else:
        print("No repetition found")

    print("\nPopulation by generation:")
    for t, pop in enumerate(summary['populations']):
        print(f"  t={t:4d}: {pop}")


if __name__ == "__main__":
    main()
