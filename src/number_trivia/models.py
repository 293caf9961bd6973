from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TriviaRecord(BaseModel):
    """A single number fact.

    Remote responses and cached blobs both deserialize into this model, so a
    record read back from the cache compares equal to the one that was fetched.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    text: str = Field(..., min_length=1)
    number: int

    @classmethod
    def from_payload(cls, payload: Any) -> "TriviaRecord":
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "TriviaRecord":
        return cls.model_validate_json(raw)

    def to_payload(self) -> dict[str, Any]:
        return {"text": self.text, "number": self.number}
