# solaredge_api/models/version.py
from __future__ import annotations

from typing import List

from solaredge_api.models.wire import WireModel


class VersionSpec(WireModel):
    # <major.minor.revision>
    release: str


class CurrentVersionEnvelope(WireModel):
    version: VersionSpec


class SupportedVersionsEnvelope(WireModel):
    supported: List[VersionSpec]
