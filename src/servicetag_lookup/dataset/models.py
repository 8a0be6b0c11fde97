"""Data model for service-tag JSON documents."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _get(data: Dict[str, Any], key: str, default: Any = None) -> Any:
    """Case-insensitive dict lookup (exact key wins)."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == lowered:
            return v
    return default


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def _list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


@dataclass
class ServiceTagProperties:
    change_number: int = 0
    region: str = ""
    region_id: int = 0
    platform: str = ""
    system_service: str = ""
    address_prefixes: List[Any] = field(default_factory=list)
    network_features: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceTagProperties":
        return cls(
            change_number=_int(_get(data, "changeNumber")),
            region=_str(_get(data, "region")),
            region_id=_int(_get(data, "regionId")),
            platform=_str(_get(data, "platform")),
            system_service=_str(_get(data, "systemService")),
            address_prefixes=_list(_get(data, "addressPrefixes")),
            network_features=_str_list(_get(data, "networkFeatures")),
        )


@dataclass
class ServiceTag:
    name: str = ""
    id: str = ""
    properties: Optional[ServiceTagProperties] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceTag":
        props = _get(data, "properties")
        return cls(
            name=_str(_get(data, "name")),
            id=_str(_get(data, "id")),
            properties=ServiceTagProperties.from_dict(props) if isinstance(props, dict) else None,
        )


@dataclass
class ServiceTagData:
    """Top-level service-tag document."""
    change_number: int = 0
    cloud: str = ""
    values: Optional[List[ServiceTag]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceTagData":
        raw_values = _get(data, "values")
        values = None
        if isinstance(raw_values, list):
            values = [ServiceTag.from_dict(v) for v in raw_values if isinstance(v, dict)]
        return cls(
            change_number=_int(_get(data, "changeNumber")),
            cloud=_str(_get(data, "cloud")),
            values=values,
        )
