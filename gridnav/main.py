"""
Main entry point for GridWorld Value Learning.
==============================================

Commands:
    train   - Train a value table and print it (default)
    config  - Print the default configuration

Usage:
    python -m gridnav                          # Train with defaults
    python -m gridnav train --grid-size 3      # Smaller grid
    python -m gridnav train --seed 0 --show-policy --evaluate
    python -m gridnav config                   # Show defaults
    python -m gridnav --help                   # Show help

"""

from __future__ import annotations

import argparse
import sys

from .config import ConfigError, TrainingConfig, VALUE_TABLE_KINDS
from .environment.grid import GridModel
from .environment.rendering import format_policy, format_value_table


def print_header(config: TrainingConfig) -> None:
    print("=" * 60)
    print("  VALUE LEARNING — GridWorld Navigation")
    print("=" * 60)
    print(f"  Grid:              {config.grid_size}×{config.grid_size} (goal = state {config.terminal_state})")
    print(f"  Value table:       {config.value_table}")
    print(f"  Episodes:          {config.episodes}")
    print(f"  Learning rate:     {config.alpha}")
    print(f"  Discount factor:   {config.gamma}")
    print(f"  Epsilon:           {config.epsilon} (×{config.decay_factor} per episode)")
    print(f"  Max steps/episode: {config.max_steps_per_episode or 'unbounded'}")
    print(f"  Seed:              {config.seed}")
    print("=" * 60 + "\n")


def train_command(args: argparse.Namespace) -> int:
    """Run training and print the learned table."""
    from .training.core import train
    from .training.eval import evaluate

    config = TrainingConfig().with_overrides(
        grid_size=args.grid_size,
        episodes=args.episodes,
        alpha=args.alpha,
        gamma=args.gamma,
        epsilon=args.epsilon,
        decay_factor=args.decay,
        max_steps_per_episode=args.max_steps,
        value_table=args.table,
        seed=args.seed,
        log_interval=args.log_interval,
    )

    if args.verbose:
        print_header(config)

    result = train(config)

    if args.verbose:
        print("\n" + "=" * 60)
        print("  TRAINING COMPLETE")
        print("=" * 60)
        print(f"  Episodes:     {result.n_episodes}")
        print(f"  Total steps:  {result.total_steps:,}")
        print(f"  Final ε:      {result.epsilon:.4f}")
        print(f"  Time:         {result.elapsed:.1f}s\n")

    print(format_value_table(result.table.as_grid()))

    if args.show_policy:
        print("\nGreedy policy:")
        print(format_policy(result.table.greedy_policy(), config.grid_size))

    if args.evaluate:
        ev = evaluate(result.table, GridModel(config.grid_size))
        print(
            f"\nGreedy eval: Success={ev['success_rate']*100:.1f}% │ "
            f"AvgSteps={ev['avg_steps']:.1f} │ "
            f"Range=[{ev['min_steps']}, {ev['max_steps']}]"
        )

    if args.plot:
        from .utils import plot_training_stats

        plot_training_stats(
            result.table.as_grid(),
            [ep.steps for ep in result.episodes],
            save_path=args.plot,
        )

    return 0


def config_command(args: argparse.Namespace) -> int:
    """Print the default configuration."""
    for key, value in TrainingConfig().to_dict().items():
        print(f"{key:<22} {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridnav",
        description="GridWorld Value Learning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m gridnav                         # Train with defaults
  python -m gridnav train --episodes 50     # Fewer episodes
  python -m gridnav train --max-steps 1000  # Cap episode length
  python -m gridnav config                  # Show defaults
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Train command (default)
    train_parser = subparsers.add_parser("train", help="Train and print the value table")
    train_parser.add_argument("--grid-size", type=int, default=None, help="Grid side length (default: 5)")
    train_parser.add_argument("--episodes", type=int, default=None, help="Number of training episodes (default: 100)")
    train_parser.add_argument("--alpha", type=float, default=None, help="Learning rate (default: 0.5)")
    train_parser.add_argument("--gamma", type=float, default=None, help="Discount factor (default: 0.9)")
    train_parser.add_argument("--epsilon", type=float, default=None, help="Initial exploration rate (default: 0.1)")
    train_parser.add_argument("--decay", type=float, default=None, help="Epsilon decay per episode (default: 0.99)")
    train_parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Step cap per episode (default: none, episodes run until the goal)",
    )
    train_parser.add_argument(
        "--table",
        choices=VALUE_TABLE_KINDS,
        default=None,
        help="Value table kind (default: state)",
    )
    train_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    train_parser.add_argument("--log-interval", type=int, default=None, help="Print stats every N episodes")
    train_parser.add_argument("--show-policy", action="store_true", help="Print the greedy policy as arrows")
    train_parser.add_argument("--evaluate", action="store_true", help="Run a greedy evaluation after training")
    train_parser.add_argument("--plot", type=str, default=None, help="Save training plots to this path")
    train_parser.add_argument("-v", "--verbose", action="store_true", help="Print run header and summary")
    train_parser.set_defaults(func=train_command)

    # Config command
    config_parser = subparsers.add_parser("config", help="Show the default configuration")
    config_parser.set_defaults(func=config_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Default to train if no command specified
    if not argv or (argv[0].startswith("-") and argv[0] not in ("-h", "--help")):
        argv = ["train", *argv]

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except ConfigError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
