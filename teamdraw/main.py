import argparse
import logging
import random
import sys
import time

from .config import default_config, find_default_config, load_config
from .errors import BalanceNotAchievedError, InvalidConfigurationError
from .formatter import print_results
from .teams import assemble_until_balanced


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="teamdraw",
        description="Draw balanced teams from a list of rated players.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to a JSON configuration file (default: team-config.json if present).",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many unbalanced draws (overrides the config file).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable draw.")
    parser.add_argument("--verbose", action="store_true", help="Show extra balance remarks.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while drawing.")
    parser.add_argument("--log-file", default=None, help="Write a debug log to this file.")
    return parser.parse_args(argv)


def setup_logging(log_file=None):
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def resolve_config(config_path):
    """
    Load the configuration the CLI should use

    Args:
        config_path: Path given on the command line, or None

    Returns:
        TeamConfig: Loaded configuration, or the default roster as a fallback
    """
    if config_path:
        print(f"Loading configuration from: {config_path}")
        try:
            return load_config(config_path)
        except InvalidConfigurationError as e:
            print(f"Error loading configuration file: {e}", file=sys.stderr)
            print("Falling back to default configuration...", file=sys.stderr)
            logging.error(f"Failed to load config {config_path}: {e}")
            return default_config()

    found = find_default_config()
    if found:
        print(f"Loading configuration from: {found}")
        try:
            return load_config(found)
        except InvalidConfigurationError as e:
            print(f"Error loading configuration file: {e}", file=sys.stderr)
            print("Falling back to default configuration...", file=sys.stderr)
            logging.error(f"Failed to load config {found}: {e}")
            return default_config()

    print("No configuration file found, using default players...")
    return default_config()


def print_end_message():
    print("##################")
    print("  END OF DRAW")
    print("##################")


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file)

    try:
        config = resolve_config(args.config)
        group_size = config.group_size()
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    seed = args.seed if args.seed is not None else config.random_seed
    if seed is not None:
        print(f"Using random seed: {seed}")
    rng = random.Random(seed)

    max_attempts = args.max_attempts if args.max_attempts is not None else config.max_attempts
    color = False if args.no_color else None

    print(
        f"Drawing {len(config.participants)} players into teams of {group_size}..."
    )
    start_time = time.time()
    exit_code = 0
    try:
        result = assemble_until_balanced(
            config.participants,
            config.group_names,
            group_size,
            max_attempts=max_attempts,
            rng=rng,
            show_progress=args.progress,
        )
    except BalanceNotAchievedError as e:
        print(f"⚠️  {e}", file=sys.stderr)
        result = e.last_result
        exit_code = 1
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Draw completed in {time.time() - start_time:.2f} seconds.")
    if result is not None:
        print_results(result, verbose=args.verbose, color=color)
    print_end_message()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
