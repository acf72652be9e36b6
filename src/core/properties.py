"""Almacén de propiedades arbitrarias clave/valor de una molécula."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator


class PropertyStore:
    """Guarda valores serializables a JSON bajo claves de texto.

    Los valores se almacenan ya serializados; interpretar el valor leído es
    responsabilidad de quien lo consulta.
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def store(self, key: str, value: Any) -> None:
        """Guarda `value` bajo `key`.

        Raises:
            TypeError: Si el valor no es serializable a JSON.
        """
        self._data[key] = json.dumps(value)

    def load(self, key: str) -> Any:
        """Devuelve el valor guardado en `key`.

        Raises:
            KeyError: Si la clave no existe.
        """
        return json.loads(self._data[key])

    def discard(self, key: str) -> None:
        self._data.pop(key, None)

    def to_dict(self) -> Dict[str, Any]:
        return {key: json.loads(raw) for key, raw in self._data.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyStore":
        props = cls()
        for key, value in data.items():
            props.store(key, value)
        return props
