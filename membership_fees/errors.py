"""Exceptions raised while loading fee tables and calculating fees."""


class FeeTableError(Exception):
    """The fee table source could not be read or parsed."""


class SectionNotFoundError(FeeTableError):
    def __init__(self, section):
        super().__init__(f"Section '{section}' not found in fee table")
        self.section = section


class MissingSelectionError(ValueError):
    """A required form selection is empty. The message is shown to the user."""

    def __init__(self, message, fields):
        super().__init__(message)
        self.fields = tuple(fields)


class FeeLookupError(KeyError):
    def __init__(self, table, key):
        super().__init__(f"{table}: no entry for {key!r}")
        self.table = table
        self.key = key

    def __str__(self):
        return self.args[0]
