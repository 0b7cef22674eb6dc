# solaredge_api/models/wire.py
"""Pydantic base for API response records.

Field names are snake_case; the JSON keys are their camelCase form unless a
field declares its own ``alias``. Validation is strict (no string-to-number
coercion) and runs against the raw JSON body, so enum tokens and numbers are
checked exactly as the API sent them. Unknown keys are ignored.

The API formats timestamps as ``YYYY-MM-DD HH:MM:SS`` and some endpoints send
a bare date where a timestamp is documented; :data:`WireDateTime` accepts both.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Generic, List, Optional, TypeVar, Union

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from solaredge_api.errors import DecodeError
from solaredge_api.models.timefmt import parse_date, parse_datetime

T = TypeVar("T")
M = TypeVar("M", bound="WireModel")


def _datetime_validator(v: Any) -> Any:
    if isinstance(v, str):
        return parse_datetime(v)
    return v


def _date_validator(v: Any) -> Any:
    if isinstance(v, str):
        return parse_date(v)
    return v


WireDateTime = Annotated[datetime, BeforeValidator(_datetime_validator)]
WireDate = Annotated[date, BeforeValidator(_date_validator)]


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class WireModel(BaseModel):
    """Base model for all API response records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
        protected_namespaces=(),
    )

    @classmethod
    def decode(cls: type[M], raw: Union[str, bytes], context: Optional[str] = None) -> M:
        """Validate a JSON body; any mismatch becomes :class:`DecodeError`."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            prefix = f"{context}: " if context else ""
            raise DecodeError(f"{prefix}{_describe(exc)}") from exc


class ListResult(WireModel, Generic[T]):
    """``{"count": N, "<items>": [...]}`` as returned by list endpoints.

    The vendor names the item array (and sometimes the count) differently per
    endpoint; all known names are accepted and exposed as ``count``/``list``.
    """

    count: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("count", "total", "batteryCount"),
    )
    list: List[T] = Field(
        validation_alias=AliasChoices(
            "list", "data", "site", "siteEnergyList", "timeFrameEnergyList", "telemetries", "batteries"
        ),
    )
