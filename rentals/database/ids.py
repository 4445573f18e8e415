"""ObjectId parsing for ids coming from paths, bodies and tokens."""

from typing import Union

from bson import ObjectId

from common.utils.exceptions import ValidationException


def to_object_id(
    value: Union[str, ObjectId, None],
    field: str = "id",
    message: str = "Please provide a valid ID.",
) -> ObjectId:
    """
    Convert a string id to an ObjectId.

    Raises:
        ValidationException: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if not value or not ObjectId.is_valid(value):
        raise ValidationException.for_field(field, message)
    return ObjectId(value)
