class MerkleError(ValueError):
    """Base class for tree construction and proof errors."""


class EmptyInputError(MerkleError):
    pass


class InputTooLargeError(MerkleError):
    pass


class IndexOutOfRangeError(MerkleError, IndexError):
    pass
