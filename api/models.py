from typing import Optional
from pydantic import BaseModel, field_validator

from parsers.line_parser import DEFAULT_SEPARATOR


class SplitRequest(BaseModel):
    """A single line to split with the strict parser"""
    line: str
    separator: Optional[str] = None

    @field_validator("separator")
    @classmethod
    def check_separator(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if len(value) != 1:
            raise ValueError("separator must be a single character")
        if value.isspace():
            raise ValueError("separator must not be whitespace")
        return value


class TrySplitRequest(SplitRequest):
    """A single line to split, skipping blanks, comments and malformed lines"""
    comment: Optional[str] = None

    @field_validator("comment")
    @classmethod
    def check_comment(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            raise ValueError("comment marker must not be empty")
        return value


class PropertyResponse(BaseModel):
    """Parsed key/value pair"""
    key: str
    value: str


class TrySplitResponse(BaseModel):
    """Result of a tolerant split; property is null when the line was skipped"""
    skipped: bool
    property: Optional[PropertyResponse] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    default_separator: str = DEFAULT_SEPARATOR
