"""Command-line interface for paging through a text file in the terminal."""

import argparse
import logging
import signal
import sys
import threading
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from .config import Config, load_config
from .core import (
    CancellationToken,
    CleanupBehavior,
    CommandParser,
    ContentChunker,
    ControlKind,
    HelpCommand,
    NavigationBehavior,
    PaginationButtons,
    PressCommand,
)
from .dispatcher import Dispatcher
from .interfaces import InteractionEvent
from .transport import ConsoleTransport, PubSubInteractionSource

logger = logging.getLogger(__name__)

CONSOLE_CHANNEL = "console"
CONSOLE_USER = "console"

HELP_TEXT = """Pager Help:
f - First page
p - Previous page
n - Next page
l - Last page
s - Stop
? - This help"""


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Button Pager - Page through a text file with pagination buttons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notes.txt                     # Page through a file
  %(prog)s notes.txt -c config.yaml      # Use specific config file
  %(prog)s notes.txt --wrap              # Wrap around at either end
  %(prog)s notes.txt --cleanup delete    # Delete the message when done
  %(prog)s notes.txt --timeout 300       # Give up after 5 minutes
""",
    )

    parser.add_argument(
        "file",
        metavar="FILE",
        help="Text file to paginate",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap around instead of stopping at the first and last page",
    )

    parser.add_argument(
        "--cleanup",
        choices=[behavior.value for behavior in CleanupBehavior],
        help="What to do with the message when paging ends",
    )

    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Cancel the session after this many seconds (0 for never)",
    )

    parser.add_argument(
        "--page-size",
        metavar="CHARS",
        type=int,
        help="Maximum characters per page",
    )

    parser.add_argument(
        "--embed",
        action="store_true",
        help="Render pages as embeds titled with the file name",
    )

    return parser.parse_args()


def read_commands(
    stream: TextIO,
    source: PubSubInteractionSource,
    message_id: str,
    buttons: PaginationButtons,
    cancellation: CancellationToken,
    out: TextIO,
) -> None:
    """
    Read commands line by line and publish them as button presses.

    End of input cancels the session.

    Args:
        stream: Input to read commands from.
        source: Event source the dispatcher is subscribed to.
        message_id: The paginated message the presses target.
        buttons: Configured buttons, for their custom ids.
        cancellation: Token cancelled on end of input.
        out: Where help and errors are written.
    """
    parser = CommandParser()

    for line in stream:
        command = parser.parse(line)

        if isinstance(command, HelpCommand):
            out.write(HELP_TEXT + "\n")
            continue

        if not isinstance(command, PressCommand):
            out.write(f"{command.reason}: {command.original_input.strip()!r}\nSend ? for help\n")
            continue

        event = InteractionEvent(
            message_id=message_id,
            user_id=CONSOLE_USER,
            custom_id=buttons.get(command.kind).custom_id,
        )
        try:
            source.publish(event)
        except Exception as e:
            logger.error(f"[{message_id}] Error handling {command.kind.value}: {e}")

        if command.kind is ControlKind.STOP:
            return

    logger.info("End of input")
    cancellation.cancel()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.wrap:
        config = replace(config, wrap_behavior=NavigationBehavior.WRAP_AROUND)
    if args.cleanup:
        config = replace(config, cleanup_behavior=CleanupBehavior(args.cleanup))
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout or None)
    if args.page_size is not None:
        config = replace(config, page_size=args.page_size)

    # Validate input file
    path = Path(args.file).expanduser()
    if not path.is_file():
        logger.error(f"File does not exist: {path}")
        return 1

    try:
        chunker = ContentChunker(max_size=config.page_size)
        text = path.read_text()
        pages = chunker.to_embed_pages(text, title=path.name) if args.embed else chunker.to_pages(text)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to read {path}: {e}")
        return 1

    if not pages:
        logger.error(f"Nothing to paginate in {path}")
        return 1

    if config.timeout_seconds:
        cancellation = CancellationToken.with_timeout(config.timeout_seconds)
    else:
        cancellation = CancellationToken()

    transport = ConsoleTransport()
    source = PubSubInteractionSource()
    dispatcher = Dispatcher(transport, source, config)

    # Set up signal handlers for graceful shutdown
    def signal_handler(sig, frame):
        logger.info("Shutdown signal received")
        cancellation.cancel()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(f"Paging {path} ({len(pages)} page(s), {config.wrap_behavior.value})")

    try:
        session = dispatcher.create_session(
            CONSOLE_CHANNEL, CONSOLE_USER, pages, cancellation=cancellation
        )

        def read_when_started():
            session.started.wait()
            read_commands(
                sys.stdin, source, session.message_id, config.buttons, cancellation, sys.stdout
            )

        threading.Thread(target=read_when_started, name="pager-input", daemon=True).start()
        stopped = dispatcher.start(session)

    except Exception as e:
        logger.error(f"Pagination error: {e}")
        return 1
    finally:
        dispatcher.dispose()
        cancellation.dispose()

    logger.info("Stopped" if stopped else "Cancelled")
    return 0


if __name__ == "__main__":
    sys.exit(main())
