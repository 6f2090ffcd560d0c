"""Chain of handlers that check security-question answers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class PasswordRecoveryHandler(ABC):
    """One link in a recovery chain; passes on to the next on success."""

    def __init__(self) -> None:
        self.next_handler: PasswordRecoveryHandler | None = None

    def set_next_handler(self, handler: PasswordRecoveryHandler | None) -> None:
        self.next_handler = handler

    @abstractmethod
    def handle(self, answers: Sequence[str]) -> bool:
        """Return whether the answers pass this link and those after it."""


class SecurityQuestionHandler(PasswordRecoveryHandler):
    """Checks the answer to one security question."""

    def __init__(self, index: int, correct_answers: Sequence[str]) -> None:
        super().__init__()
        self.question_index = index
        self.correct_answers = list(correct_answers)

    def handle(self, answers: Sequence[str]) -> bool:
        number = self.question_index + 1
        if answers[self.question_index] != self.correct_answers[self.question_index]:
            print(f"Incorrect answer for question {number}.")
            return False
        print(f"Answer to question {number} correct.")
        if self.next_handler is not None:
            return self.next_handler.handle(answers)
        return True