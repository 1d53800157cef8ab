"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

Alias Preview - Main entry point for the interactive alias preview shell.
"""
import argparse
import sys

from alias_preview.config import (DEFAULT_COLOR, DEFAULT_MAX_MATCHES,
                                  DEFAULT_POSITION, DEFAULT_PREFIX,
                                  DEFAULT_TRIGGER, PreviewConfig)
from alias_preview.core.alias_file import load_alias_file
from alias_preview.core.exceptions import (AliasDefinitionError,
                                           ConfigurationError)
from alias_preview.interfaces import CliInterface
from alias_preview.ui.resources import Emojis, format_error_message
from alias_preview.utils.logging_config import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Interactive shell showing alias expansions as you type"
    )
    parser.add_argument("-a", "--aliases", action="append", default=[], metavar="FILE",
                        help="File with alias definitions (can be given several times)")
    parser.add_argument("-p", "--position", choices=["above", "below"], default=None,
                        help=f"Where to show the preview (default: {DEFAULT_POSITION})")
    parser.add_argument("--prefix", default=None,
                        help=f"Text before the expansion (default: '{DEFAULT_PREFIX}')")
    parser.add_argument("-c", "--color", default=None,
                        help=f"Color of the preview (default: {DEFAULT_COLOR})")
    parser.add_argument("-t", "--trigger", choices=["space", "instant", "progressive"], default=None,
                        help=f"When to show the preview (default: {DEFAULT_TRIGGER})")
    parser.add_argument("-m", "--max-matches", default=None,
                        help=f"Maximum matches in progressive mode (default: {DEFAULT_MAX_MATCHES})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")
    return parser


def build_config(args: argparse.Namespace) -> PreviewConfig:
    """Merge command-line options over the ALIAS_PREVIEW_* environment.
    
    Raises:
        ConfigurationError: If a command-line option is invalid
    """
    env_config = PreviewConfig.from_env()
    return PreviewConfig(
        position=args.position if args.position is not None else env_config.position,
        prefix=args.prefix if args.prefix is not None else env_config.prefix,
        color=args.color if args.color is not None else env_config.color_name,
        trigger=args.trigger if args.trigger is not None else env_config.trigger,
        max_matches=args.max_matches if args.max_matches is not None else env_config.max_matches,
    )


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = get_logger(__name__)

    try:
        config = build_config(args)

        aliases, global_aliases = {}, {}
        for path in args.aliases:
            load_alias_file(path, aliases, global_aliases)

        cli = CliInterface(config, aliases, global_aliases)
        cli.interactive_session()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(format_error_message(f"Invalid configuration: {e}"))
        sys.exit(1)
    except AliasDefinitionError as e:
        logger.error(f"Invalid alias definitions: {e}")
        print(format_error_message(f"Invalid alias definitions: {e}"))
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n\n{Emojis.BYE} Session terminated by user. Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
