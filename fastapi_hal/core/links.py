"""HAL link objects and the per-relation link sets built from them."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, RootModel, model_serializer, model_validator


class Link(BaseModel):
    """A HAL link object: a target reference plus an optional name.

    ``name`` is a secondary key that tells apart several links declared under
    the same relation. It is left out of the serialized object when unset.
    """

    model_config = ConfigDict(frozen=True)

    href: str
    name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_reference(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"href": data}
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> dict[str, str]:
        data = {"href": self.href}
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_href(cls, href: str) -> "Link":
        """Return a link that only carries a target reference."""
        return cls(href=href)

    @classmethod
    def coerce(cls, value: "LinkLike") -> "Link":
        """Return ``value`` as a link, accepting references and mappings."""
        if isinstance(value, Link):
            return value
        return cls.model_validate(value)


LinkLike = Union[Link, str, Mapping[str, Any]]


class Single(RootModel[Link]):
    """Exactly one link declared for a relation; serializes as an object."""

    def push(self, link: Link) -> "Multiple":
        """Promote to a link array holding the current link then ``link``."""
        return Multiple([self.root, link])

    @property
    def links(self) -> list[Link]:
        return [self.root]

    def __len__(self) -> int:
        return 1


class Multiple(RootModel[list[Link]]):
    """Links declared for a relation, in declaration order; serializes as an array."""

    def push(self, link: Link) -> "Multiple":
        """Append ``link`` and return this link set."""
        self.root.append(link)
        return self

    @property
    def links(self) -> list[Link]:
        return list(self.root)

    def __len__(self) -> int:
        return len(self.root)


Links = Union[Single, Multiple]
