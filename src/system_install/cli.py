"""
Command-line interface for system-install tool
"""

import sys
import argparse
from typing import List, Optional

import requests

from .constants import DEFAULT_INSTALL_DIR, GITHUB_LATEST
from .exceptions import InstallationError
from .installer import FirecrackerInstaller, FirecrackerOptions


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(
        prog="system-install",
        description="Install system components from their upstream releases",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    firecracker = subparsers.add_parser(
        "firecracker",
        help="Install Firecracker",
        description="Install Firecracker and its Jailer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Install the latest release
  sudo system-install firecracker

  # Install a specific release
  sudo system-install firecracker --version v1.0.0

  # Install into a custom directory without a progress display
  system-install firecracker --path ~/.local/bin --no-progress
        """
    )

    firecracker.add_argument(
        "--version", "-v",
        default=GITHUB_LATEST,
        help=f"The version for Firecracker to install (default: {GITHUB_LATEST})"
    )

    firecracker.add_argument(
        "--path", "-p",
        dest="install_path",
        default=DEFAULT_INSTALL_DIR,
        help=f"Installation path (default: {DEFAULT_INSTALL_DIR})"
    )

    firecracker.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show download progress"
    )

    return parser


def run_firecracker(args: argparse.Namespace) -> bool:
    """Install Firecracker with the parsed options, reporting any failure"""
    options = FirecrackerOptions(
        version=args.version,
        install_path=args.install_path,
        show_progress=args.progress,
    )
    installer = FirecrackerInstaller(options)

    try:
        installer.install()
    except (InstallationError, OSError, requests.RequestException) as e:
        print(f"✗ Installation failed: {e}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command != "firecracker":
        parser.print_help()
        sys.exit(1)

    success = run_firecracker(args)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
