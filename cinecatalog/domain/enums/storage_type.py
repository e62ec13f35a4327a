from __future__ import annotations
from enum import StrEnum

class StorageType(StrEnum):
    server_db = "serverDB"
