"""Base record and the list envelope shared by every resource model."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Base for every validated GitLab response record.

    Undeclared fields are kept on the instance (``extra="allow"``) for every
    record type, so callers can still reach attributes this library does not
    model yet.
    """

    model_config = ConfigDict(extra="allow")


RecordT = TypeVar("RecordT", bound=BaseModel)


class Page(BaseModel, Generic[RecordT]):
    """List envelope: ``count`` is the server-side total, ``items`` one page.

    When a list call narrows results client-side, ``count`` is the narrowed
    length instead; such call sites say so.
    """

    count: int = Field(ge=0)
    items: list[RecordT]
