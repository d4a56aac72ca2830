"""Exception classes for lp-workbook."""


class ModelError(Exception):
    """Malformed model input detected before solving."""
    pass


class DimensionMismatch(ModelError):
    """Coefficient vectors or matrices have inconsistent lengths."""
    pass


class InvalidRelation(ModelError):
    """Unrecognized relational operator in a constraint."""
    pass


class InvalidDirection(ModelError):
    """Unrecognized objective direction."""
    pass
