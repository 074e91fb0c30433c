"""
Console question primitives.

The collector and the command loop only talk to a :class:`Prompter`; the
console implementation reads from ``input()`` and writes numbered menus to
stdout. Tests substitute a scripted prompter.
"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence, Tuple, TypeVar

T = TypeVar("T")

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Prompter(ABC):
    """Asks the user one question at a time."""

    @abstractmethod
    def ask(self, message: str) -> str:
        """Return a free-text answer."""

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Return a yes/no answer; an empty answer selects ``default``."""

    @abstractmethod
    def choose(self, message: str, choices: Sequence[Tuple[str, T]]) -> T:
        """Return the value of one of ``choices`` (label, value pairs)."""

    @abstractmethod
    def say(self, message: str) -> None:
        """Show a message that needs no answer."""


class ConsolePrompter(Prompter):
    """
    Prompter reading answers from the terminal.

    Invalid confirm and choice answers are asked again; free text is taken
    as typed, minus surrounding whitespace. ``EOFError`` and
    ``KeyboardInterrupt`` propagate so the command loop can end the session.

    Example:
        >>> prompter = ConsolePrompter()
        >>> prompter.choose("What would you like to do?", [("Create", "create"), ("Exit", "exit")])
        1. Create
        2. Exit
        Enter your choice (1-2): 2
        'exit'
    """

    def __init__(self, input_func: Callable[[str], str] = input, output_func: Callable[[str], None] = print):
        self.input_func = input_func
        self.output_func = output_func

    def ask(self, message: str) -> str:
        return self.input_func(f"{message} ").strip()

    def confirm(self, message: str, default: bool = True) -> bool:
        hint = "(Y/n)" if default else "(y/N)"
        while True:
            answer = self.input_func(f"{message} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.output_func("Please answer 'y' or 'n'.")

    def choose(self, message: str, choices: Sequence[Tuple[str, T]]) -> T:
        if not choices:
            raise ValueError("choose() needs at least one choice")

        self.output_func(f"\n{message}")
        for number, (label, _) in enumerate(choices, 1):
            self.output_func(f"{number}. {label}")

        while True:
            answer = self.input_func(f"Enter your choice (1-{len(choices)}): ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            self.output_func("Invalid choice, please try again.")

    def say(self, message: str) -> None:
        self.output_func(message)
