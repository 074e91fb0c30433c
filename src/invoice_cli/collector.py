"""
Interactive collection of a new invoice.

:class:`InvoiceCollector` is a state machine with one state per question.
Each :meth:`~InvoiceCollector.step` asks the question of the current state,
stores the answer and moves on; ``COMPLETE`` is terminal and holds the
finished record. The only loop is the "Add an invoice item?" gate, which
ends on the first negative answer. Answers are never revisited.
"""

import datetime
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from .models import InvoiceRecord, LabeledValue
from .prompts import Prompter
from .records import CustomerInfo, LineItem, build_invoice_record, parse_quantity, to_price

logger = logging.getLogger(__name__)


class CollectorState(Enum):
    COMPANY_NAME = "company_name"
    CUSTOMER_NAME = "customer_name"
    CUSTOMER_ADDRESS = "customer_address"
    CUSTOMER_ID = "customer_id"
    ADD_ITEM = "add_item"
    ITEM_DESCRIPTION = "item_description"
    ITEM_QUANTITY = "item_quantity"
    ITEM_PRICE = "item_price"
    COMPLETE = "complete"


QUESTIONS: Dict[CollectorState, str] = {
    CollectorState.COMPANY_NAME: "Enter the company name:",
    CollectorState.CUSTOMER_NAME: "Enter customer name:",
    CollectorState.CUSTOMER_ADDRESS: "Enter customer address:",
    CollectorState.CUSTOMER_ID: "Enter customer ID:",
    CollectorState.ADD_ITEM: "Add an invoice item?",
    CollectorState.ITEM_DESCRIPTION: "Enter item description:",
    CollectorState.ITEM_QUANTITY: "Enter quantity:",
    CollectorState.ITEM_PRICE: "Enter total price ({currency}):",
}

# Text answers: state -> (answer key, next state)
_TEXT_TRANSITIONS = {
    CollectorState.COMPANY_NAME: ("company_name", CollectorState.CUSTOMER_NAME),
    CollectorState.CUSTOMER_NAME: ("customer_name", CollectorState.CUSTOMER_ADDRESS),
    CollectorState.CUSTOMER_ADDRESS: ("customer_address", CollectorState.CUSTOMER_ID),
    CollectorState.CUSTOMER_ID: ("customer_id", CollectorState.ADD_ITEM),
    CollectorState.ITEM_DESCRIPTION: ("item_description", CollectorState.ITEM_QUANTITY),
}


class InvoiceCollector:
    """
    Builds one :class:`InvoiceRecord` from a fixed sequence of questions.

    Attributes:
        prompter (Prompter): Source of answers
        seller (List[LabeledValue]): Configured seller block for the record
        currency (str): Currency marker of the record
        state (CollectorState): Question to ask next
        record (Optional[InvoiceRecord]): Set once ``state`` is COMPLETE

    Example:
        >>> collector = InvoiceCollector(ConsolePrompter(), seller)
        >>> record = collector.run()
    """

    def __init__(
        self,
        prompter: Prompter,
        seller: Sequence[LabeledValue],
        currency: str = "$",
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self.prompter = prompter
        self.seller = list(seller)
        self.currency = currency
        self.today = today
        self.state = CollectorState.COMPANY_NAME
        self.answers: Dict[str, str] = {}
        self.items: List[LineItem] = []
        self._quantity: Optional[int] = None
        self.record: Optional[InvoiceRecord] = None

    def question(self, state: CollectorState) -> str:
        return QUESTIONS[state].format(currency=self.currency)

    def step(self) -> CollectorState:
        """Ask the current question, record the answer and return the new state."""
        state = self.state
        if state is CollectorState.COMPLETE:
            return state

        if state in _TEXT_TRANSITIONS:
            key, next_state = _TEXT_TRANSITIONS[state]
            self.answers[key] = self.prompter.ask(self.question(state))
            self.state = next_state
        elif state is CollectorState.ADD_ITEM:
            if self.prompter.confirm(self.question(state), default=True):
                self.state = CollectorState.ITEM_DESCRIPTION
            else:
                self.record = self._build_record()
                self.state = CollectorState.COMPLETE
        elif state is CollectorState.ITEM_QUANTITY:
            answer = self.prompter.ask(self.question(state))
            self._quantity = parse_quantity(answer)
            if self._quantity is None:
                logger.debug(f"Quantity {answer!r} is not a number; storing null")
            self.state = CollectorState.ITEM_PRICE
        elif state is CollectorState.ITEM_PRICE:
            answer = self.prompter.ask(self.question(state))
            try:
                total = to_price(answer)
            except ValueError:
                self.prompter.say(f"'{answer}' is not an amount, please enter a number such as 12.50.")
                return self.state
            self.items.append(LineItem(self.answers["item_description"], self._quantity, total))
            self.state = CollectorState.ADD_ITEM

        return self.state

    def run(self) -> InvoiceRecord:
        while self.state is not CollectorState.COMPLETE:
            self.step()
        return self.record

    def _build_record(self) -> InvoiceRecord:
        customer = CustomerInfo(
            name=self.answers["customer_name"],
            address=self.answers["customer_address"],
            customer_id=self.answers["customer_id"],
        )
        return build_invoice_record(
            self.answers["company_name"],
            customer,
            self.items,
            self.seller,
            currency=self.currency,
            issued_on=self.today(),
        )


def select_record(prompter: Prompter, file_names: Sequence[str], message: str = "Select an invoice to generate:") -> str:
    """Let the user pick one of the existing record file names."""
    return prompter.choose(message, [(name, name) for name in file_names])
