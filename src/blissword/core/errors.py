"""
Exceptions raised by the symbol engine.

decode() and decompose() report failure by returning an empty sequence or None;
only encode(), the cycle guard and the table loader raise.
"""


class BlisswordError(Exception):
    pass


class UnknownIdentifier(BlisswordError, KeyError):
    """An identifier has no dictionary entry or no mapping-table spelling."""

    def __init__(self, identifier: int, table: str = "id map"):
        self.identifier = identifier
        self.table = table
        super().__init__(f"Unknown identifier {identifier} in {table}")

    def __str__(self) -> str:
        return self.args[0]


class CyclicComposition(BlisswordError, ValueError):
    def __init__(self, path: list[int]):
        self.path = path
        chain = " -> ".join(str(p) for p in path)
        super().__init__(f"Cyclic composition: {chain}")


class TableLoadError(BlisswordError):
    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Could not load {source}: {reason}")
