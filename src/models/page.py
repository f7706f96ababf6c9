"""
Wire models for the dataproxy page protocol.

A page request is a ``(hash, token)`` pair posted as JSON; the response is a
``ResultSet`` holding the next-page token and a batch of string-encoded records
described by a column header. Fields the server leaves out or sends as
``null`` decode to their empty value and unknown fields are ignored, so only a
body that is not JSON or that carries a wrongly typed field fails to decode.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PageRequest(BaseModel):
    hash: str
    token: str


class _WireModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null leaves a field at its default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Column(_WireModel):
    name: str = ""
    type: str = ""
    position: int = Field(0, strict=True)


class Header(_WireModel):
    # kept in server order, never re-sorted by position
    columns: list[Column] = Field(default_factory=list)

    @field_validator("columns", mode="before")
    @classmethod
    def _null_columns(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{} if c is None else c for c in value]
        return value


class PageData(_WireModel):
    """A batch of records.

    Record width is not checked against ``header.columns``.
    """

    header: Header = Field(default_factory=Header)
    records: list[list[str]] = Field(default_factory=list)

    @field_validator("records", mode="before")
    @classmethod
    def _null_records(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        records = []
        for record in value:
            if record is None:
                record = []
            elif isinstance(record, list):
                record = ["" if v is None else v for v in record]
            records.append(record)
        return records


class PageMeta(_WireModel):
    model_config = ConfigDict(populate_by_name=True)

    next_token: str = Field("", alias="next")


class ResultSet(_WireModel):
    meta: PageMeta = Field(default_factory=PageMeta)
    data: PageData = Field(default_factory=PageData)

    @property
    def record_count(self) -> int:
        return len(self.data.records)


__all__ = ["PageRequest", "Column", "Header", "PageData", "PageMeta", "ResultSet"]
