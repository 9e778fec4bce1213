"""
Command-line interface for the secureconfig demo.

Running the tool with no arguments loads both sample configs in turn:
- config.enc.json (Example 1)
- config.enc.yaml (Example 2)

A failing example is reported as a warning and never stops the other
one. The exit status is 0 unless --strict is given.
"""

from __future__ import annotations

import sys
import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .config import (
    DEFAULT_JSON_CONFIG,
    DEFAULT_YAML_CONFIG,
    ENV_SOPS_BINARY,
    FORMAT_JSON,
    FORMAT_YAML,
    SETUP_SCRIPT,
    TOOL_VERSION,
)
from .decrypt import SopsDecryptor
from .errors import SecureConfigError
from .loader import load_config
from .output import Colors, colored, print_error, print_success, print_warning
from .presenter import (
    AWS_ACCESS_KEY,
    DATABASE_PASSWORD,
    STRIPE_KEY,
    SecretField,
    summary_lines,
)


BANNER = "SOPS Python Integration Example"


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Example:
    title: str
    filename: str
    fmt: str
    secrets: Tuple[SecretField, ...]


EXAMPLES: Tuple[Example, ...] = (
    Example(
        title="Example 1: Loading JSON Configuration",
        filename=DEFAULT_JSON_CONFIG,
        fmt=FORMAT_JSON,
        secrets=(DATABASE_PASSWORD, STRIPE_KEY),
    ),
    Example(
        title="Example 2: Loading YAML Configuration",
        filename=DEFAULT_YAML_CONFIG,
        fmt=FORMAT_YAML,
        secrets=(DATABASE_PASSWORD, AWS_ACCESS_KEY),
    ),
)


# ---------------------------------------------------------------------------
# CLI context
# ---------------------------------------------------------------------------


class CLIContext:
    """Shared context for the example runs."""

    def __init__(self, config_dir: str, verbose: bool, quiet: bool):
        self.config_dir = Path(config_dir)
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded
        self._decryptor: Optional[SopsDecryptor] = None

    @property
    def decryptor(self) -> SopsDecryptor:
        """Create decryptor lazily."""
        if self._decryptor is None:
            self._decryptor = SopsDecryptor()
        return self._decryptor

    def log(self, msg: str) -> None:
        """Log message if not quiet."""
        if not self.quiet:
            print(msg)

    def log_verbose(self, msg: str) -> None:
        """Log message if verbose."""
        if self.verbose and not self.quiet:
            print(colored(f"  → {msg}", Colors.BLUE))


# ---------------------------------------------------------------------------
# Example runner
# ---------------------------------------------------------------------------


def run_example(ctx: CLIContext, example: Example) -> None:
    """
    Load one encrypted config and print its summary.

    Raises:
        SecureConfigError: if the file is missing, cannot be decrypted
            or does not match the schema
    """
    ctx.log(example.title)
    ctx.log("-" * 38)

    path = ctx.config_dir / example.filename
    ctx.log_verbose(f"Config file: {path}")
    if ctx.verbose:
        ctx.log_verbose(f"Decrypt command: {' '.join(ctx.decryptor.command(path, example.fmt))}")

    cfg = load_config(path, example.fmt, decryptor=ctx.decryptor)

    for line in summary_lines(cfg, example.secrets):
        ctx.log(line)


def run_examples(ctx: CLIContext) -> int:
    """Run every example and return the number that failed."""
    ctx.log(colored(BANNER, Colors.BOLD))
    ctx.log("=" * len(BANNER))
    ctx.log("")

    failed = 0
    for idx, example in enumerate(EXAMPLES):
        if idx:
            ctx.log("")
        try:
            run_example(ctx, example)
        except SecureConfigError as e:
            print_warning(f"{example.fmt.upper()} config example failed: {e}")
            failed += 1

    ctx.log("")
    if failed:
        print_warning(f"Integration examples completed, {failed} of {len(EXAMPLES)} failed")
    elif not ctx.quiet:
        print_success("Integration examples completed successfully!")

    return failed


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------


def cmd_help() -> int:
    """
    Show help message.
    """
    help_text = f"""
{colored('secureconfig', Colors.BOLD)} — load SOPS-encrypted configs and print them safely

{colored('USAGE:', Colors.CYAN)}
  secureconfig [options]

{colored('DESCRIPTION:', Colors.CYAN)}
  Decrypts {DEFAULT_JSON_CONFIG} and {DEFAULT_YAML_CONFIG} with sops, parses
  them and prints a summary. Secrets are masked: only their first and last
  two characters are shown.

  Run {SETUP_SCRIPT} first to produce the encrypted sample files.

{colored('OPTIONS:', Colors.CYAN)}
  -d, --dir PATH            Directory holding the encrypted configs
                            (default: current directory)
  --strict                  Exit 1 if any example fails
  -v, --verbose             Enable verbose output
  -q, --quiet               Suppress non-warning output
  -h, --help                Show this help message and exit

{colored('ENVIRONMENT:', Colors.CYAN)}
  {ENV_SOPS_BINARY:<25} sops executable to use (default: sops)
  SOPS_AGE_KEY_FILE         Read by sops to find age keys

{colored('VERSION:', Colors.CYAN)}
  {TOOL_VERSION}
"""
    print(help_text)
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="secureconfig",
        description="Load SOPS-encrypted configs and print them safely",
        add_help=False,
    )

    parser.add_argument(
        "-d", "--dir",
        default=".",
        help="Directory holding the encrypted configs",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 if any example fails",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-warning output",
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show help message",
    )

    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        return cmd_help()

    ctx = CLIContext(
        config_dir=args.dir,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    try:
        failed = run_examples(ctx)
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if args.strict and failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
