# solaredge_api/models/request.py
"""Query parameter records.

Every field is optional; a field left as None is omitted from the query
string. Query keys are the camelCase form of the field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from solaredge_api.models.enums import (
    AccountSortBy,
    MeterType,
    SiteSortBy,
    SiteStatus,
    SortOrder,
    SystemUnits,
    TimeUnit,
)


@dataclass
class SitesList:
    # At most 100 sites per call; page with start_index.
    size: Optional[int] = None
    start_index: Optional[int] = None
    # Matches name, notes, address, city, zip, full address and country.
    search_text: Optional[str] = None
    sort_property: Optional[SiteSortBy] = None
    sort_order: Optional[SortOrder] = None
    # Vendor default is Active,Pending.
    status: Optional[Sequence[SiteStatus]] = None


@dataclass
class SiteEnergy:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    time_unit: Optional[TimeUnit] = None


@dataclass
class SiteTotalEnergy:
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass
class DateTimeRange:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


@dataclass
class SitePowerDetails:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    # All meters when omitted.
    meters: Optional[Sequence[MeterType]] = None


@dataclass
class MetersDateTimeRange:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    time_unit: Optional[TimeUnit] = None
    meters: Optional[Sequence[MeterType]] = None


@dataclass
class SensorsDateTimeRange:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass
class SiteStorageData:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    # Battery serial numbers; all batteries when omitted.
    serials: Optional[Sequence[str]] = None


@dataclass
class SiteImage:
    """Scaling and caching options for the site image.

    When ``hash`` matches the stored image the API answers 304 with an empty
    body. ``hash`` is ignored if a maximum size is given.
    """

    max_width: Optional[int] = None
    max_height: Optional[int] = None
    hash: Optional[int] = None


@dataclass
class SiteEnvBenefits:
    # The account's own units are used when omitted.
    system_units: Optional[SystemUnits] = None


@dataclass
class AccountsList:
    size: Optional[int] = None
    start_index: Optional[int] = None
    search_text: Optional[str] = None
    sort_property: Optional[AccountSortBy] = None
    sort_order: Optional[SortOrder] = None
