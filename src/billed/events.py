"""DOM-like events the container reacts to."""

from dataclasses import dataclass, field

from billed.form import FileInput, NewBillForm


class _Preventable:
    default_prevented: bool

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass
class FileSelectedEvent(_Preventable):
    target: FileInput
    default_prevented: bool = field(default=False, init=False)


@dataclass
class SubmitEvent(_Preventable):
    target: NewBillForm
    default_prevented: bool = field(default=False, init=False)
