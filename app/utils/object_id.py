# app/utils/object_id.py
from typing import Optional
from bson import ObjectId, errors


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for ``value``, or None if it is not one.

    A string that is not a valid ObjectId cannot identify a stored record,
    so callers treat None the same as a missing record.
    """
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        return None
