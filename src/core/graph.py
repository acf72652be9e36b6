"""Almacén de grafo para átomos y enlaces.

`GraphStore` envuelve un `networkx.Graph` no dirigido y acuña sus propios
índices de nodo. Los índices liberados al eliminar un nodo se reutilizan
para nodos posteriores, así que un índice no identifica a un átomo más
allá de su tiempo de vida en el grafo.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

import networkx as nx

from core.errors import InvalidNodeIndex, MissingEdge

NodeIndex = int

# Claves de atributo en networkx donde se guardan los valores.
_NODE_KEY = "atom"
_EDGE_KEY = "bond"


class GraphStore:
    """Grafo no dirigido con índices de nodo reciclables."""

    def __init__(self) -> None:
        """Inicializa el grafo vacío y la lista de índices libres."""
        self._graph = nx.Graph()
        self._free: List[NodeIndex] = []
        self._next_index: NodeIndex = 0

    def _mint(self) -> NodeIndex:
        if self._free:
            return self._free.pop()
        index = self._next_index
        self._next_index += 1
        return index

    def add_node(self, value: Any) -> NodeIndex:
        """Agrega un nodo con `value` y devuelve su índice."""
        index = self._mint()
        self._graph.add_node(index, **{_NODE_KEY: value})
        return index

    def remove_node(self, index: NodeIndex) -> Optional[Any]:
        """Elimina un nodo y sus aristas incidentes.

        Args:
            index: Índice del nodo.

        Returns:
            El valor almacenado, o `None` si el índice no existe.

        Side Effects:
            El índice pasa a la lista libre y puede reaparecer en otro nodo.
        """
        if index not in self._graph:
            return None
        value = self._graph.nodes[index][_NODE_KEY]
        self._graph.remove_node(index)
        self._free.append(index)
        return value

    def add_edge(self, n1: NodeIndex, n2: NodeIndex, value: Any) -> Optional[Any]:
        """Agrega o reemplaza la arista entre `n1` y `n2`.

        Returns:
            El valor previo de la arista, o `None` si no existía.

        Raises:
            InvalidNodeIndex: Si alguno de los nodos no existe.
        """
        self._require(n1)
        self._require(n2)
        previous = None
        if self._graph.has_edge(n1, n2):
            previous = self._graph.edges[n1, n2][_EDGE_KEY]
        self._graph.add_edge(n1, n2, **{_EDGE_KEY: value})
        return previous

    def remove_edge(self, n1: NodeIndex, n2: NodeIndex) -> Optional[Any]:
        if not self._graph.has_edge(n1, n2):
            return None
        value = self._graph.edges[n1, n2][_EDGE_KEY]
        self._graph.remove_edge(n1, n2)
        return value

    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def has_node(self, index: NodeIndex) -> bool:
        return index in self._graph

    def has_edge(self, n1: NodeIndex, n2: NodeIndex) -> bool:
        return self._graph.has_edge(n1, n2)

    def node_value(self, index: NodeIndex) -> Any:
        """Devuelve el valor de un nodo.

        Raises:
            InvalidNodeIndex: Si el índice no corresponde a un nodo vivo.
        """
        self._require(index)
        return self._graph.nodes[index][_NODE_KEY]

    def set_node_value(self, index: NodeIndex, value: Any) -> None:
        self._require(index)
        self._graph.nodes[index][_NODE_KEY] = value

    def edge_value(self, n1: NodeIndex, n2: NodeIndex) -> Any:
        """Devuelve el valor de la arista entre `n1` y `n2`.

        Raises:
            InvalidNodeIndex: Si alguno de los nodos no existe.
            MissingEdge: Si los nodos existen pero no están enlazados.
        """
        self._require(n1)
        self._require(n2)
        if not self._graph.has_edge(n1, n2):
            raise MissingEdge(n1, n2)
        return self._graph.edges[n1, n2][_EDGE_KEY]

    def node_indices(self) -> Iterator[NodeIndex]:
        """Itera los índices de nodo en orden de inserción."""
        return iter(list(self._graph.nodes))

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex, Any]]:
        """Itera las aristas como tripletas (n1, n2, valor)."""
        for n1, n2, value in self._graph.edges(data=_EDGE_KEY):
            yield n1, n2, value

    def copy(self) -> "GraphStore":
        """Devuelve un grafo independiente con los mismos índices y valores.

        Los valores (átomos y enlaces) se comparten; la estructura no.
        """
        other = GraphStore()
        other._graph = self._graph.copy()
        other._free = list(self._free)
        other._next_index = self._next_index
        return other

    def clear(self) -> None:
        """Elimina todos los nodos y aristas y reinicia la acuñación."""
        self._graph.clear()
        self._free.clear()
        self._next_index = 0

    def _require(self, index: NodeIndex) -> None:
        if index not in self._graph:
            raise InvalidNodeIndex(index)
