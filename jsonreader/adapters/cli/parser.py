# jsonreader/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from jsonreader.core.domain.enums import Platform


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="jsonreader",
        description="Load a JSON resource and print it as a converted value tree",
    )

    parser.add_argument(
        "name", help="Resource name (resolved across candidate locations) or absolute path"
    )

    # Output options
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--raw", action="store_true", help="Print the raw document text instead of the value tree"
    )
    output_group.add_argument(
        "--type",
        dest="type_name",
        metavar="TYPE_NAME",
        help="Parse into this class (dotted import path, e.g. mypkg.models.Article)",
    )

    # Platform options
    parser.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        default=Platform.STANDARD.value,
        help="Resource resolution variant (default: standard)",
    )
    parser.add_argument("--asset-root", help="Asset root directory for the hosted platform")
    parser.add_argument("--files-dir", help="Files directory for the hosted platform")

    # Configuration and logging
    parser.add_argument("--config", help="Path to JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO, DEBUG if enabled in config)",
    )
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("--silent", action="store_true", help="Suppress console log output")

    return parser
