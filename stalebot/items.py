"""Snapshots of issues and comments as returned by the REST API."""
import enum
from datetime import datetime
from typing import FrozenSet, NamedTuple, Optional

from . import util


@enum.unique
class ItemKind(enum.Enum):
    issue = "issue"
    pull_request = "pr"


class Item(NamedTuple):
    number: int
    kind: ItemKind
    state: str
    locked: bool
    labels: FrozenSet[str]
    updated_at: datetime
    comments: int

    @classmethod
    def from_data(cls, data):
        kind = ItemKind.pull_request if data.get("pull_request") else ItemKind.issue
        return cls(
            number=data["number"],
            kind=kind,
            state=data["state"],
            locked=bool(data.get("locked", False)),
            labels=frozenset(util.labels(data)),
            updated_at=util.parse_timestamp(data["updated_at"]),
            comments=data.get("comments", 0),
        )

    @property
    def is_open(self):
        return self.state == "open"

    def describe(self):
        return f"{self.kind.value} #{self.number}"


class Comment(NamedTuple):
    issue_number: int
    created_at: datetime
    author: Optional[str]
    author_association: str

    @classmethod
    def from_data(cls, issue_number, data):
        return cls(
            issue_number=issue_number,
            created_at=util.parse_timestamp(data["created_at"]),
            author=util.user_login(data),
            author_association=data.get("author_association", "NONE"),
        )
