"""Упрощённые структуры данных для описания объектов Docker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dockdash.utils.helpers import strip_leading_separator


@dataclass(frozen=True, slots=True)
class PortMapping:
    """Проброс порта контейнера."""

    private: int
    public: Optional[int] = None  # отсутствует, если порт не опубликован
    type: str = "tcp"

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "PortMapping":
        """Строит модель из элемента Ports ответа /containers/json."""

        public = raw.get("PublicPort")
        return cls(
            private=int(raw.get("PrivatePort", 0)),
            public=int(public) if public is not None else None,
            type=str(raw.get("Type", "")),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PortMapping":
        public = data.get("public")
        return cls(
            private=int(data["private"]),
            public=int(public) if public is not None else None,
            type=str(data.get("type", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует проброс; ключ public опускается, если порт не опубликован."""

        payload: Dict[str, Any] = {"private": self.private}
        if self.public is not None:
            payload["public"] = self.public
        payload["type"] = self.type
        return payload


@dataclass(frozen=True, slots=True)
class ContainerSummary:
    """Минимальное представление контейнера."""

    id: str  # полный идентификатор контейнера из docker ps
    name: str
    image: str
    state: str
    ports: Tuple[PortMapping, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "ContainerSummary":
        """Проецирует элемент ответа Docker Engine на фиксированный набор полей."""

        names = raw.get("Names") or []
        return cls(
            id=str(raw.get("Id", "")),
            name=strip_leading_separator(str(names[0])) if names else "",
            image=str(raw.get("Image", "")),
            state=str(raw.get("State", "")),
            ports=tuple(PortMapping.from_api(port) for port in raw.get("Ports") or []),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContainerSummary":
        """Восстанавливает модель из JSON ответа шлюза."""

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            image=str(data.get("image", "")),
            state=str(data.get("state", "")),
            ports=tuple(PortMapping.from_dict(port) for port in data.get("ports") or []),
        )

    @property
    def is_running(self) -> bool:
        return self.state == "running"

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует модель в dict для JSON ответа."""

        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "state": self.state,
            "ports": [port.to_dict() for port in self.ports],
        }


def format_ports(ports: Tuple[PortMapping, ...]) -> List[str]:
    """Возвращает строки вида 8080->80/tcp для отображения."""

    result = []
    for port in ports:
        if port.public is not None:
            result.append(f"{port.public}->{port.private}/{port.type}")
        else:
            result.append(f"{port.private}/{port.type}")
    return result
