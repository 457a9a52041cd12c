"""
JSON array encoding for a collection.

Untyped collections parse to plain Python values (dicts, lists, str, ...).
When a pydantic model is given, every element is validated into that model
on load and dumped through it on save.
"""

from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import CorruptCollectionError, RecordSerializationError

__all__ = ["CollectionCodec", "EMPTY_COLLECTION"]

EMPTY_COLLECTION = "[]"


class CollectionCodec:
    """Parse and dump the whole collection as one compact JSON array."""

    def __init__(self, model: Optional[type[BaseModel]] = None):
        self.model = model
        item_type = model if model is not None else Any
        self._items = TypeAdapter(list[item_type])
        self._item = TypeAdapter(item_type)

    def decode(self, text: str, path: str = "<collection>") -> list:
        """
        Parse *text* as the full collection.

        Strings holding a lone UTF-16 surrogate escape (e.g. "\\ud800") are
        rejected as corrupt even though they are legal JSON; they have no
        UTF-8 form.
        """
        try:
            return self._items.validate_json(text)
        except ValidationError as e:
            raise CorruptCollectionError(
                f"{path} does not hold a valid JSON array: {e.error_count()} error(s)"
            ) from e

    def encode(self, records: list) -> str:
        try:
            return self._items.dump_json(records).decode("utf-8")
        except PydanticSerializationError as e:
            raise RecordSerializationError(str(e)) from e

    def coerce(self, record):
        """Validate an incoming record into the model; untyped records pass through."""
        if self.model is None or isinstance(record, self.model):
            return record
        return self._item.validate_python(record)
