"""
Staff ID conversion utilities
"""
from typing import Union, Optional


def to_int_id(id_value: Union[str, int, None]) -> Optional[int]:
    """
    Convert a staff ID from a path or query parameter to an integer.

    Args:
        id_value: ID as string, int, or None

    Returns:
        Integer ID, or None if the value is not a whole number
    """
    if id_value is None or isinstance(id_value, bool):
        return None

    if isinstance(id_value, int):
        return id_value

    if isinstance(id_value, str):
        try:
            return int(id_value.strip())
        except ValueError:
            return None

    return None
