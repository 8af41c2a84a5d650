"""A word dictionary with strict add, update and delete operations."""


class DictionaryError(Exception):
    """Base class for dictionary errors."""


class NotFoundError(DictionaryError):
    """The word being searched for is not in the dictionary."""

    def __init__(self, message: str = "could not find the word you were looking for"):
        super().__init__(message)


class WordExistsError(DictionaryError):
    """The word being added is already in the dictionary."""

    def __init__(
        self, message: str = "cannot add word because it already exists"
    ):
        super().__init__(message)


class WordDoesNotExistError(DictionaryError):
    """The word being changed or removed is not in the dictionary."""

    def __init__(
        self,
        message: str = "cannot perform operation on word because it does not exist",
    ):
        super().__init__(message)


class Dictionary(dict[str, str]):
    """A mapping of words to definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word`` or raise NotFoundError."""
        try:
            return self[word]
        except KeyError:
            raise NotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; raise WordExistsError if it is already present."""
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Change the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]