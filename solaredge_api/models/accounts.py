from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from solaredge_api.models.site import Location
from solaredge_api.models.wire import ListResult, WireModel


class Account(WireModel):
    id: int
    name: str
    location: Location
    company_website: Optional[str] = Field(default=None, alias="companyWebSite")
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    fax_number: Optional[str] = None
    notes: Optional[str] = None
    parent_id: Optional[int] = None
    uris: List[str]


class AccountsEnvelope(WireModel):
    accounts: ListResult[Account]
