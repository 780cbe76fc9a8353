"""Exceptions raised by the word-search engine."""


class WordSearchError(Exception):
    """Base class for word-search engine errors."""


class OutOfBoundsError(WordSearchError, IndexError):
    """A cell coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"Cell ({row}, {col}) is outside the {size}x{size} grid")


class AlreadyRecordedError(WordSearchError, ValueError):
    """A word was credited twice."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"'{word}' has already been recorded")
