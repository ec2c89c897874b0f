#!/usr/bin/env python3
"""
Cross-platform formatting script for Santa Pairing.
Runs black and isort over the package and its tests.
"""
import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description):
    """Run a tool and report how it went."""
    print(f"Running {description}...")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        print(f"NICE! {description} completed successfully")
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"SAD! {description} failed:")
        print(e.stderr)
        return False
    except FileNotFoundError:
        print(f"Command not found: {cmd[0]}", file=sys.stderr)
        return False


def format_code(targets, check_only=False):
    """Format code using black and isort."""
    success = True

    black_cmd = [sys.executable, "-m", "black"]
    if check_only:
        black_cmd += ["--check", "--diff"]
    if not run_command(black_cmd + targets, "Black formatting"):
        success = False

    isort_cmd = [sys.executable, "-m", "isort"]
    if check_only:
        isort_cmd += ["--check-only", "--diff"]
    if not run_command(isort_cmd + targets, "Import sorting"):
        success = False

    return success


def main():
    parser = argparse.ArgumentParser(description="Format Santa Pairing sources")
    parser.add_argument(
        "--check", action="store_true", help="Check formatting without making changes"
    )
    args = parser.parse_args()

    root = Path(__file__).parent.resolve()
    targets = [str(root / "src" / "santapairing"), str(root / "tests")]

    if format_code(targets, check_only=args.check):
        print("Formatting completed successfully!")
        sys.exit(0)
    sys.exit(1)


if __name__ == "__main__":
    main()
