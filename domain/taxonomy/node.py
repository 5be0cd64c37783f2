"""Node and tree models."""

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Node(BaseModel):
    """
    A single taxonomy node.

    Any extra keyword given at construction (e.g. `state`, `title`, `metadata`)
    is kept on the instance as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    data: Any = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list["Node"] = Field(default_factory=list)
    is_leaf: bool = True

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> Any:
        """Allow bare labels and mappings as children: "foo" -> Node(data="foo")."""
        if value is None:
            return []
        out: list[Any] = []
        for item in value:
            if isinstance(item, (Node, dict)):
                out.append(item)
            else:
                out.append({"data": item})
        return out

    @property
    def slug(self) -> Any:
        return self.attributes.get("slug")

    def has_data(self) -> bool:
        return self.data is not None


class Tree(BaseModel):
    """Ordered sequence of root-level nodes."""

    roots: list[Node] = Field(default_factory=list)


class ParentChild(NamedTuple):
    """Result of a parent/child lookup."""

    parent: Node
    child: Node
    position: int
