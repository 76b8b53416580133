"""Transient status line shown under the branch list."""


class StatusMessage:
    """The outcome of the last action, replaced wholesale by the next one."""

    def __init__(self, text: str = "", is_error: bool = False):
        self.text = text
        self.is_error = is_error

    def __bool__(self) -> bool:
        return bool(self.text)

    def set(self, text: str, is_error: bool = False) -> None:
        self.text = text
        self.is_error = is_error

    def clear(self) -> None:
        self.text = ""
        self.is_error = False
