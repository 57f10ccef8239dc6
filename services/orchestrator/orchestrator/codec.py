from __future__ import annotations

from dataclasses import dataclass
from typing import Type, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class JsonCodec:
    """Fixed JSON options shared by the tool clients."""

    by_alias: bool = True
    exclude_none: bool = False

    def encode(self, value: BaseModel) -> str:
        return value.model_dump_json(by_alias=self.by_alias, exclude_none=self.exclude_none)

    def decode(self, text: str, model_type: Type[ModelT]) -> ModelT:
        # pydantic.ValidationError is a ValueError
        return model_type.model_validate_json(text)


DEFAULT_CODEC = JsonCodec()
