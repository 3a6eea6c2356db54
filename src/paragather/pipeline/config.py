"""Gather configuration dataclasses"""
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Union
import json

from ..settings import get_default_key

# A group selection as stored in JSON: textual form ("Ca:V") or a list of names
GroupSelection = Union[str, List[str]]


@dataclass
class GatherConfig:
    """Reusable description of a parallel gather"""
    groups: Dict[str, GroupSelection] = field(default_factory=dict)  # output column -> selection
    key: str = field(default_factory=get_default_key)  # "param"
    convert: bool = False
    factor_key: bool = False
    sheet_name: Optional[str] = None    # Excel sheet to read, first sheet if None
    description: str = ""               # "Major elements with 1-sigma uncertainty"

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> 'GatherConfig':
        # Older configs may omit the optional fields
        return cls(
            groups=dict(data['groups']),
            key=data.get('key') or get_default_key(),
            convert=data.get('convert', False),
            factor_key=data.get('factor_key', False),
            sheet_name=data.get('sheet_name'),
            description=data.get('description', ''),
        )

    @classmethod
    def from_json(cls, json_str: str) -> 'GatherConfig':
        return cls.from_dict(json.loads(json_str))

    def set_group(self, name: str, selection: GroupSelection) -> None:
        """Add or replace a group, keeping its original position if it exists."""
        self.groups[name] = selection

    def group_names(self) -> List[str]:
        return list(self.groups)
