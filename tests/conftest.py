"""
Invoice CLI Test Configuration

Shared fixtures for all tests.
"""
import datetime
import pytest
from pathlib import Path
from typing import Any, List

from invoice_cli.components import RecordStore, SellerConfigLoader
from invoice_cli.prompts import Prompter
from invoice_cli.records import CustomerInfo, LineItem, build_invoice_record
from invoice_cli.renderer import RendererAdapter
from invoice_cli.service import InvoiceService
from invoice_cli.strategies import BaseRenderStrategy, PdfRenderStrategy

ISSUE_DATE = datetime.date(2026, 10, 19)


class ScriptedPrompter(Prompter):
    """Prompter answering from a fixed list; choose() answers are the choice values."""

    def __init__(self, answers: List[Any]):
        self.answers = list(answers)
        self.questions: List[str] = []
        self.messages: List[str] = []

    def _next(self, message: str):
        self.questions.append(message)
        if not self.answers:
            raise EOFError(f"No scripted answer left for {message!r}")
        return self.answers.pop(0)

    def ask(self, message):
        return self._next(message)

    def confirm(self, message, default=True):
        return self._next(message)

    def choose(self, message, choices):
        answer = self._next(message)
        assert answer in [value for _, value in choices], f"{answer!r} is not offered by {message!r}"
        return answer

    def say(self, message):
        self.messages.append(message)


class RecordingStrategy(BaseRenderStrategy):
    """Render strategy writing a marker file; fails for the configured document numbers."""
    name = "recording"
    extension = ".txt"

    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.rendered: List[Path] = []

    def render(self, document, output_path):
        customer_id = document.customer[1].value
        if customer_id in self.fail_for:
            raise RuntimeError(f"backend exploded on {customer_id}")
        output_path.write_text(document.name, encoding="utf-8")
        self.rendered.append(output_path)


# =============================================================================
# FIXTURES: Directories and services
# =============================================================================

@pytest.fixture
def records_dir(tmp_path) -> Path:
    return tmp_path / "invoices"


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "generated_invoices"


@pytest.fixture
def seller():
    return SellerConfigLoader().load()


@pytest.fixture
def store(records_dir) -> RecordStore:
    return RecordStore(records_dir)


@pytest.fixture
def recording_strategy() -> RecordingStrategy:
    return RecordingStrategy()


@pytest.fixture
def service(store, output_dir, seller) -> InvoiceService:
    return InvoiceService(store, RendererAdapter(PdfRenderStrategy(), output_dir), seller)


@pytest.fixture
def make_prompter():
    return ScriptedPrompter


@pytest.fixture
def make_strategy():
    return RecordingStrategy


# =============================================================================
# FIXTURES: Sample records
# =============================================================================

@pytest.fixture
def sample_items() -> List[LineItem]:
    return [
        LineItem("Website redesign", 1, "1200"),
        LineItem("Hosting (12 months)", 12, "180.5"),
        LineItem("Domain renewal", None, "15.25"),
    ]


@pytest.fixture
def make_record(seller):
    def _make(company_name="Acme Corp", customer_id="C-001", items=()):
        customer = CustomerInfo(name="Jane Doe", address="1 Main Street, Springfield", customer_id=customer_id)
        return build_invoice_record(company_name, customer, list(items), seller, issued_on=ISSUE_DATE)
    return _make


@pytest.fixture
def sample_record(make_record, sample_items):
    return make_record(items=sample_items)
