from __future__ import annotations

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from board.database import Base

# SQLite only auto-assigns ids for INTEGER PRIMARY KEY columns.
PostId = BigInteger().with_variant(Integer, "sqlite")


# ---------------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------------
class Post(Base):
    __tablename__ = "posts"

    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(PostId, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    @classmethod
    def create(cls, title: str, content: str) -> Post:
        """Build a new, not yet persisted post. The id is assigned on flush."""
        return cls(title=title, content=content)

    def update(self, title: str, content: str) -> None:
        """Replace title and content in place; the id never changes."""
        self.title = title
        self.content = content

    def __repr__(self) -> str:
        return f"Post(id={self.id!r}, title={self.title!r})"
