from typing import Type, TypeVar

from flask import request
from pydantic import BaseModel

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_body(schema: Type[SchemaT]) -> SchemaT:
    """Validate the JSON request body; pydantic errors become 400 responses."""
    return schema.model_validate(request.get_json(silent=True) or {})
