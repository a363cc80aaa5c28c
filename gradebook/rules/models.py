from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gradebook.components.classifier import SCORE_MAX, SCORE_MIN

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StorageRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    data_dir: str = "data"
    students_key: str = Field(default="students", min_length=1)
    items_key: str = Field(default="items", min_length=1)


class ValidationRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    name_min_length: int = Field(default=2, ge=1)
    # May narrow the classified range, never widen it
    score_min: float = Field(default=SCORE_MIN, ge=SCORE_MIN, le=SCORE_MAX)
    score_max: float = Field(default=SCORE_MAX, ge=SCORE_MIN, le=SCORE_MAX)

    @model_validator(mode="after")
    def _check_score_bounds(self) -> Self:
        if self.score_min > self.score_max:
            raise ValueError("score_min must not exceed score_max")
        return self


class LoggingRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: LogLevel = "INFO"


class Rules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    storage: StorageRules = Field(default_factory=StorageRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
