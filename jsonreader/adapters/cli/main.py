# jsonreader/adapters/cli/main.py

"""
jsonreader - CLI Main Module

Loads one JSON resource, reports each load state as it happens and prints the
result. This CLI uses the public API provided by jsonreader.
"""

# Standard library imports
from json import dumps
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import TypeAdapter

# Local imports
from jsonreader.adapters.api import create_json_reader
from jsonreader.adapters.cli.parser import create_argument_parser
from jsonreader.core.domain.enums import Platform
from jsonreader.core.domain.exceptions import JsonReaderError
from jsonreader.core.domain.load_state import Error
from jsonreader.core.domain.load_state import LoadState
from jsonreader.infrastructure.config import get_config
from jsonreader.infrastructure.logging import setup_logging
from jsonreader.infrastructure.resources import HostContext

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_TYPED_PARSE_ERROR = 2


def render_state(state: LoadState) -> None:
    """Report a load state transition"""
    match state.state:
        case "idle":
            logger.debug("Idle")
        case "loading":
            logger.info(f"Loading {state.name}...")
        case "success":
            logger.info(f"Loaded {state.name} ({len(state.raw_text):,} characters)")
        case "error":
            logger.error(f"[{state.kind.value}] {state.message}")


def format_typed(value: object) -> str:
    """Serialize a typed parse result for display"""
    return TypeAdapter(type(value)).dump_json(value, indent=2).decode()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point using the public API"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = get_config(args.config)

    log_level = args.log_level or ("DEBUG" if config.logging.debug else "INFO")
    setup_logging(
        log_file=args.log_file or config.logging.log_file,
        log_level=log_level,
        silent=args.silent,
    )

    context = None
    if args.asset_root:
        context = HostContext(
            asset_root=Path(args.asset_root),
            files_dir=Path(args.files_dir) if args.files_dir else None,
        )

    reader = create_json_reader(Platform(args.platform), config, context)
    operation = reader.new_operation()
    operation.subscribe(render_state)

    result = operation.load(args.name)
    if isinstance(result, Error):
        return EXIT_LOAD_ERROR

    if args.type_name:
        try:
            typed = reader.parse_to_type(result.raw_text, args.type_name)
        except JsonReaderError as e:
            logger.error(f"[{e.kind.value}] {e}")
            return EXIT_TYPED_PARSE_ERROR
        print(format_typed(typed))
    elif args.raw:
        print(result.raw_text)
    else:
        print(dumps(result.value.to_python(), indent=2, ensure_ascii=False))

    return EXIT_OK
