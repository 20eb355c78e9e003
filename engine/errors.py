INVALID_COLUMN = "Invalid column"
CANNOT_MOVE_SEQUENCE = "Cannot move this sequence"
INVALID_MOVE = "Invalid move"
NO_COMPLETED_SUIT = "No completed suit"
NOT_ENOUGH_STOCK = "Not enough cards in stock"
EMPTY_COLUMN_DEAL = "Cannot deal when columns are empty"

ERROR_KINDS = (
    INVALID_COLUMN,
    CANNOT_MOVE_SEQUENCE,
    INVALID_MOVE,
    NO_COMPLETED_SUIT,
    NOT_ENOUGH_STOCK,
    EMPTY_COLUMN_DEAL,
)


class RuleError(Exception):
    """
    Raised by the deal/move/completion primitives when called with arguments
    that break their contract. The reducer validates first and never lets
    these escape.
    """

    def __init__(self, kind: str, detail: str = ""):
        if kind not in ERROR_KINDS:
            raise ValueError(f"unknown rule error kind: {kind!r}")
        self.kind = kind
        self.detail = detail
        message = kind if not detail else f"{kind}: {detail}"
        super().__init__(message)
