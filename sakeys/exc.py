from typing import Optional


class BaseSakeysException(Exception):
    pass


class ArgumentMissingError(BaseSakeysException, ValueError):
    """ A required argument was not provided

    Reported when an entity, an entry, a session or an attribute name is None (or empty)
    """

    def __init__(self, argument: str, reason: Optional[str] = None):
        self.argument = argument

        super().__init__(f'Argument "{argument}" {reason or "is required"}')


class CompositeKeyError(BaseSakeysException, RuntimeError):
    """ Single-key access on a key that does not have exactly one part

    Reported when the caller expects a simple primary key, but the model has a composite key,
    or a custom key lookup gave an empty key
    """

    def __init__(self, model: str, parts: int):
        self.model = model
        self.parts = parts

        super().__init__(f'Key of "{model}" is not a single-part key: it has \'{parts}\' parts.')


class KeyTypeError(BaseSakeysException, TypeError):
    """ The key value is not of the type the caller has asked for """

    def __init__(self, model: str, value: object, expected: type):
        self.model = model
        self.value = value
        self.expected = expected

        super().__init__(f'Key of "{model}" is {type(value).__name__}, expected {expected.__name__}')


class EntityGoneError(BaseSakeysException, ReferenceError):
    """ The entity of a change-tracking entry has been garbage-collected

    Entries only keep a weak reference to their entity: once it's gone, there are no values to read
    """

    def __init__(self, model: str):
        self.model = model

        super().__init__(f'The "{model}" entity of this entry has been garbage-collected')
