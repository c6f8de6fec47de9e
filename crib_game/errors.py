class CribbageError(Exception):
    pass


class NotEnoughCardsError(CribbageError):
    def __init__(self, requested: int, available: int):
        super().__init__(f"Not enough cards to deal: requested {requested}, {available} left")
        self.requested = requested
        self.available = available


class EmptyDeckError(CribbageError):
    pass


class IllegalMoveError(CribbageError):
    pass
