"""Quickstart: filter a SQLAlchemy query with a declarative filter set.

Creates an in-memory SQLite database with documents and tags, then
narrows ``select(Document)`` from a bag of request parameters.  Blank
parameters are ignored, and the ``tag`` filter is pinned to the joined
``tags`` table so its ``name`` column does not clash with
``documents.name``.
"""

from typing import List

from sqlalchemy import Column, ForeignKey, String, Table, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from scopefilters import FilterDescriptor, FilterSet, MatchKind
from scopefilters.config import configure_logging
from scopefilters.database import DatabaseManager


class Base(DeclarativeBase):
    pass


document_tags = Table(
    "document_tags",
    Base.metadata,
    Column("document_id", ForeignKey("documents.id"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id"), primary_key=True),
)


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)


class Document(Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(50))
    tags: Mapped[List[Tag]] = relationship(secondary=document_tags)


class DocumentFilters(FilterSet):
    name = FilterDescriptor("name", match=MatchKind.PATTERN)
    status = FilterDescriptor("status")
    tag = FilterDescriptor("tag", column="name", table=Tag)


configure_logging("DEBUG")

# --- Seed the database ---
db = DatabaseManager(url="sqlite://")
db.initialize()
db.create_all(Base.metadata)

with db.get_session() as session:
    python, sql = Tag(name="python"), Tag(name="sql")
    session.add_all(
        [
            Document(name="annual_report", status="published", tags=[python, sql]),
            Document(name="draft_report", status="draft", tags=[python]),
            Document(name="meeting_notes", status="published", tags=[sql]),
        ]
    )
    session.commit()

# --- Apply request parameters ---
params = {"name": "report", "status": "", "tag": "sql", "page": "2"}
filters = DocumentFilters(params)

statement = filters.apply(select(Document).join(Document.tags))

print(f"Active filters: {[d.key for d in filters.active_filters()]}")
print(statement.compile(compile_kwargs={"literal_binds": True}))
print()
with db.get_session() as session:
    for document in session.scalars(statement).unique():
        print(f"{document.name} ({document.status})")

db.close()
