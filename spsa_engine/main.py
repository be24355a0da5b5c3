"""
CLI entry point for SPSA Engine.
Provides command: optimize
"""
import argparse
import json
import sys
import logging

from spsa_engine.config import settings
from spsa_engine.core.constraints import BoundedConstraints
from spsa_engine.losses import LOSS_FUNCTIONS
from spsa_engine.optimize.optimizer import Optimizer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(settings.log_file),
            logging.StreamHandler(sys.stdout)
        ]
    )


def load_json_file(filepath: str):
    """Load JSON configuration file."""
    try:
        with open(filepath, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"File not found: {filepath}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {filepath}: {e}")
        sys.exit(1)


def parse_vector(text: str) -> list:
    """Parse a comma-separated list of floats."""
    try:
        return [float(x) for x in text.split(',') if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid vector: {text!r}")


def cmd_optimize(args):
    """Run optimization command."""
    logger.info("Starting optimization...")

    loss = LOSS_FUNCTIONS[args.loss]

    # Bounds file is a JSON list of [lower, upper] pairs
    constraint = BoundedConstraints(load_json_file(args.bounds)) if args.bounds else None

    optimizer = Optimizer(
        loss=loss,
        theta0=args.theta0,
        a=args.a,
        c=args.c,
        constraint=constraint
    )

    result = optimizer.optimize(n_rounds=args.rounds, random_seed=args.seed)

    logger.info(f"Rounds: {result.rounds}")
    logger.info(f"Final theta: {result.theta}")
    logger.info(f"Final {args.loss}: {result.final_loss:.6g}")

    return result


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='SPSA Engine - Simultaneous Perturbation Stochastic Approximation',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Optimize command
    optimize_parser = subparsers.add_parser('optimize', help='Run SPSA on a bundled loss function')
    optimize_parser.add_argument('--loss', default='absolute_sum', choices=sorted(LOSS_FUNCTIONS), help='Loss function')
    optimize_parser.add_argument('--theta0', type=parse_vector, required=True, help='Initial parameters (e.g., 1,1,1)')
    optimize_parser.add_argument('--rounds', type=int, default=1000, help='Number of rounds')
    optimize_parser.add_argument('--a', type=float, default=1.0, help='Step-size scale a')
    optimize_parser.add_argument('--c', type=float, default=0.1, help='Perturbation scale c')
    optimize_parser.add_argument('--bounds', help='Path to JSON list of [lower, upper] pairs')
    optimize_parser.add_argument('--seed', type=int, help='Random seed for the perturbation generator')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Setup logging
    setup_logging(args.verbose)

    # Execute command
    try:
        if args.command == 'optimize':
            return cmd_optimize(args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user.")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Error executing {args.command}: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
