"""Mapeo biyectivo entre números de serie de átomos e índices de nodo."""

from __future__ import annotations

from typing import Dict, List, Optional

from core.errors import MappingConflict
from core.graph import NodeIndex


class IdentityMap:
    """Biyección número de serie <-> índice de nodo.

    Las dos direcciones se guardan en diccionarios privados y solo se
    modifican juntas, de modo que nunca pueden divergir.
    """

    def __init__(self) -> None:
        self._by_serial: Dict[int, NodeIndex] = {}
        self._by_index: Dict[NodeIndex, int] = {}

    def __len__(self) -> int:
        return len(self._by_serial)

    def __contains__(self, sn: object) -> bool:
        return sn in self._by_serial

    def get_handle(self, sn: int) -> Optional[NodeIndex]:
        return self._by_serial.get(sn)

    def get_serial(self, index: NodeIndex) -> Optional[int]:
        return self._by_index.get(index)

    def insert_no_overwrite(self, sn: int, index: NodeIndex) -> None:
        """Registra el par (`sn`, `index`) sin sobrescribir ninguno de los lados.

        Args:
            sn: Número de serie del átomo.
            index: Índice del nodo en el grafo.

        Raises:
            MappingConflict: Si `sn` o `index` ya están asociados a otro valor.
        """
        current = self._by_serial.get(sn)
        if current is not None:
            if current == index:
                return
            raise MappingConflict(f"atom sn {sn} already mapped to node {current}")
        owner = self._by_index.get(index)
        if owner is not None:
            raise MappingConflict(f"node {index} already mapped to atom sn {owner}")
        self._by_serial[sn] = index
        self._by_index[index] = sn

    def remove(self, sn: int) -> Optional[NodeIndex]:
        """Elimina la entrada de `sn` y devuelve el índice liberado, si existía."""
        index = self._by_serial.pop(sn, None)
        if index is not None:
            del self._by_index[index]
        return index

    def clear(self) -> None:
        self._by_serial.clear()
        self._by_index.clear()

    def serials_ascending(self) -> List[int]:
        """Instantánea ordenada de los números de serie presentes."""
        return sorted(self._by_serial)
