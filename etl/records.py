# WORKFLOW: Record type for parsed packing list rows.
# Used by: Parser, aggregator, dashboard builder, API schemas
# Contents:
# 1. WELL_KNOWN_FIELDS - Column names the dashboard relies on
# 2. PackingListItem - Immutable record with header-driven columns
#
# Record flow: Header + row values -> from_columns() -> PackingListItem
# The header row decides the schema; well-known columns are mirrored as attributes.

"""
Record type for parsed packing list rows.
"""

from typing import Dict, List, Mapping, Tuple

from pydantic import BaseModel, Field, root_validator

WELL_KNOWN_FIELDS = (
    "customer",
    "DeviceName",
    "DeviceCategory",
    "LotNumber",
    "deliverdate",
    "licenseID",
    "Numbers",
)


class PackingListItem(BaseModel):
    """One shipment row of a packing list."""
    customer: str = ""
    DeviceName: str = ""
    DeviceCategory: str = ""
    LotNumber: str = ""
    deliverdate: str = ""
    licenseID: str = ""
    Numbers: str = ""
    columns: Tuple[Tuple[str, str], ...] = Field((), description="(header name, value) pairs in header order")

    class Config:
        frozen = True

    @root_validator(pre=True)
    def mirror_known_fields(cls, values):
        if not isinstance(values, dict):
            return values

        values = dict(values)
        columns = values.get("columns")
        if isinstance(columns, Mapping):
            values["columns"] = tuple(columns.items())
        elif not columns:
            # Records built from keyword attributes alone get columns for those attributes
            values["columns"] = tuple((name, values[name]) for name in WELL_KNOWN_FIELDS if name in values)
        return values

    @classmethod
    def from_columns(cls, columns: Mapping[str, str]) -> "PackingListItem":
        """
        Build a record from an ordered header -> value mapping.

        Args:
            columns: Every header column of the row, in header order

        Returns:
            PackingListItem with well-known attributes mirrored from columns
        """
        known = {name: columns[name] for name in WELL_KNOWN_FIELDS if name in columns}
        return cls(columns=tuple(columns.items()), **known)

    def get(self, field: str) -> str:
        """Value of ``field``; columns the header did not define read as ''."""
        for name, value in self.columns:
            if name == field:
                return value
        return ""

    def keys(self) -> List[str]:
        return [name for name, _ in self.columns]

    def to_dict(self) -> Dict[str, str]:
        return dict(self.columns)
