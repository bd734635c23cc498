"""Rich text content shared by the subject and message of a notification.

A ``RichText`` holds one localized template and the objects bound to its
placeholders. The rich view (template plus typed parameters) and the parsed
view (plain text) are both derived from it.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from files.notification.notification import RichObjectType

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_-]+)\}")


@dataclass(frozen=True)
class RichObject:
    type: RichObjectType
    id: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "id": self.id, "name": self.name}


@dataclass(frozen=True)
class RichText:
    template: str
    parameters: Mapping[str, RichObject] = field(default_factory=dict)

    def rich_parameters(self) -> Mapping[str, Mapping[str, str]]:
        """Placeholder metadata as read-only mappings."""
        return MappingProxyType({key: MappingProxyType(obj.to_dict()) for key, obj in self.parameters.items()})

    def parsed(self) -> str:
        """Replace each bound placeholder with its display name.

        Substitution is a single pass, so display names containing braces
        are never expanded a second time.
        """

        def _substitute(match: re.Match) -> str:
            obj = self.parameters.get(match.group(1))
            return obj.name if obj is not None else match.group(0)

        return _PLACEHOLDER.sub(_substitute, self.template)


def user(uid: str) -> RichObject:
    return RichObject(type=RichObjectType.USER, id=uid, name=uid)


def highlighted_path(owner: str, node_name: str) -> RichObject:
    """Highlight for a node, scoped to the user who will own it."""
    return RichObject(type=RichObjectType.HIGHLIGHT, id=f"{owner}::{node_name}", name=node_name)
