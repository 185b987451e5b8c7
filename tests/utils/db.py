from unittest.mock import MagicMock


def result_with(rowcount=None, first=None):
    """A stand-in for a SQLAlchemy `Result`."""
    result = MagicMock()
    result.rowcount = rowcount
    result.scalars.return_value.first.return_value = first
    return result
