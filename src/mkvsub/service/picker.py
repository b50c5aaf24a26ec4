from __future__ import annotations
from typing import List, Optional, Protocol, Sequence

from mkvsub.model.choice import Choice


class IPicker(Protocol):
    """
    Operator decision interface. Implementations raise ``OperatorCancelled``
    instead of returning an empty selection.
    """

    def choose_one(self, choices: Sequence[Choice], header: Optional[str] = None,
                   prompt: Optional[str] = None) -> Choice:
        ...

    def choose_many(self, choices: Sequence[Choice], header: Optional[str] = None,
                    prompt: Optional[str] = None) -> List[Choice]:
        ...


def confirm(picker: IPicker, header: str, prompt: str, yes_label: str, no_label: str) -> bool:
    choices = [Choice(key=yes_label, value=True), Choice(key=no_label, value=False)]
    return bool(picker.choose_one(choices, header=header, prompt=prompt).value)
