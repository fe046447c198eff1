from pydantic import BaseModel, ConfigDict


class Property(BaseModel):
    """A key/value pair parsed from a single line.

    Instances are immutable and compare by key and value.
    """

    model_config = ConfigDict(frozen=True)

    key: str = ""
    value: str = ""

    @classmethod
    def init(cls, key: str, value: str) -> "Property":
        return cls(key=key, value=value)
