"""Interactive command loop and console entry point."""

import argparse
import datetime
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .collector import InvoiceCollector, select_record
from .exceptions import DirectoryCreationFailure, InvoiceCliError, RenderError
from .prompts import ConsolePrompter, Prompter
from .service import InvoiceService
from .settings import AppSettings
from .strategies import STRATEGIES

logger = logging.getLogger(__name__)

MENU = (
    ("Create a new invoice", "create"),
    ("Generate a document for a single invoice", "render_one"),
    ("Generate documents for all existing invoices", "render_all"),
    ("Exit", "exit"),
)


class CommandLoop:
    """
    Menu-driven session: one action per iteration until the user exits.

    Action failures are reported and the menu comes back; only a working
    directory that cannot be created ends the session with an error.
    """

    def __init__(
        self,
        service: InvoiceService,
        prompter: Prompter,
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self.service = service
        self.prompter = prompter
        self.today = today
        self.actions = {
            "create": self.create_invoice,
            "render_one": self.render_single_invoice,
            "render_all": self.render_all_invoices,
        }

    def run(self) -> int:
        while True:
            try:
                action = self.prompter.choose("What would you like to do?", MENU)
                if action == "exit":
                    break
                self.actions[action]()
            except (EOFError, KeyboardInterrupt):
                self.prompter.say("")
                break
            except DirectoryCreationFailure:
                raise
            except InvoiceCliError as e:
                logger.debug("Action failed", exc_info=True)
                self.prompter.say(f"Error: {e}")

        self.prompter.say("Goodbye!")
        return 0

    def create_invoice(self) -> None:
        collector = InvoiceCollector(
            self.prompter,
            self.service.seller,
            currency=self.service.currency,
            today=self.today,
        )
        record = collector.run()

        json_path = self.service.save_record(record)
        self.prompter.say(f"JSON data saved: {json_path}")

        if not self.prompter.confirm("Generate the document now?", default=True):
            return
        try:
            document_path = self.service.render_record(record)
        except RenderError as e:
            logger.error(str(e))
            self.prompter.say(f"Error: could not generate the document: {e}")
            return
        self.prompter.say(f"Invoice generated: {document_path}")

    def render_single_invoice(self) -> None:
        file_names = self.service.list_records()
        if not file_names:
            self.prompter.say("No existing invoices found.")
            return

        selected = select_record(self.prompter, file_names)
        document_path = self.service.render_one(selected)
        self.prompter.say(f"Invoice generated: {document_path}")

    def render_all_invoices(self) -> None:
        if not self.service.list_records():
            self.prompter.say("No existing invoices found.")
            return

        result = self.service.render_all()
        for document_path in result.generated:
            self.prompter.say(f"Invoice generated: {document_path}")
        for error in result.errors:
            self.prompter.say(f"Error: {error}")
        self.prompter.say(f"Generated {len(result.generated)} document(s), {len(result.errors)} failure(s).")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create invoices interactively and render them to documents")
    parser.add_argument("--root", default=".", help="Directory holding the record and output directories")
    parser.add_argument("--records-dir", help="Record directory (default: <root>/invoices)")
    parser.add_argument("--output-dir", help="Document directory (default: <root>/generated_invoices)")
    parser.add_argument(
        "--seller-config",
        help="Seller block JSON file (default: <root>/seller.json if present)",
    )
    parser.add_argument("--currency", default="$", help="Currency marker for new invoices")
    parser.add_argument(
        "--format",
        dest="render_format",
        choices=sorted(STRATEGIES),
        default="pdf",
        help="Document format",
    )
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, prompter: Optional[Prompter] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    settings = AppSettings.from_root(
        Path(args.root),
        records_dir=args.records_dir,
        output_dir=args.output_dir,
        seller_config=args.seller_config,
        currency=args.currency,
        render_format=args.render_format,
    )

    try:
        service = InvoiceService.from_settings(settings)
        service.prepare()
        return CommandLoop(service, prompter or ConsolePrompter()).run()
    except InvoiceCliError as e:
        logger.critical(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
