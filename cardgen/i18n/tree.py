"""Translation tree: string leaves under named namespaces."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Namespace:
    children: Mapping[str, "Node"] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str) -> Optional["Node"]:
        return self.children.get(key)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, child in self.children.items():
            out[key] = child.text if isinstance(child, Leaf) else child.to_dict()
        return out


Node = Union[Leaf, Namespace]


def parse_tree(data: Any, path: str = "") -> Namespace:
    """Build a Namespace from decoded JSON.

    Raises TypeError if ``data`` is not a JSON object. Values that are
    neither strings nor objects are dropped.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected object at '{path or '<root>'}', got {type(data).__name__}")

    children: dict[str, Node] = {}
    for key, value in data.items():
        child_path = f"{path}.{key}" if path else str(key)
        if isinstance(value, str):
            children[str(key)] = Leaf(value)
        elif isinstance(value, dict):
            children[str(key)] = parse_tree(value, child_path)
        else:
            logger.debug("Dropping non-string translation value at %s", child_path)
    return Namespace(MappingProxyType(children))


def walk(tree: Namespace, key: str) -> Optional[Node]:
    """Follow a dotted key through the tree. None if any segment misses."""
    node: Node = tree
    for segment in key.split("."):
        if not isinstance(node, Namespace):
            return None
        child = node.get(segment)
        if child is None:
            return None
        node = child
    return node
