"""
orm_lifecycle.db.relationships

Entities demonstrating the common relationship mappings.

Responsibilities:
- Person: a bare entity with a generated key (served by `/v1/people`).
- One-to-many: OneToManyPost owns OneToManyComment (cascade + orphan removal).
- One-to-one: OneToOnePost owns at most one OneToOnePostDetails.
- Many-to-many: ManyToManyAuthor <-> ManyToManyBook via an association table.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from orm_lifecycle.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Person(Base):
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(primary_key=True)


# --- One-to-many ------------------------------------------------------------


class OneToManyPost(Base):
    __tablename__ = "one_to_many_post"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    comments: Mapped[list[OneToManyComment]] = relationship(
        back_populates="post", cascade="all, delete-orphan"
    )

    def add_comment(self, comment: OneToManyComment) -> None:
        # back_populates sets comment.post
        self.comments.append(comment)

    def remove_comment(self, comment: OneToManyComment) -> None:
        # The detached comment is deleted on the next flush (delete-orphan).
        self.comments.remove(comment)


class OneToManyComment(Base):
    __tablename__ = "one_to_many_comment"

    id: Mapped[int] = mapped_column(primary_key=True)
    text: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    post_id: Mapped[int | None] = mapped_column(
        ForeignKey("one_to_many_post.id"), nullable=True, index=True
    )

    post: Mapped[OneToManyPost | None] = relationship(back_populates="comments")


# --- One-to-one -------------------------------------------------------------


class OneToOnePost(Base):
    __tablename__ = "one_to_one_post"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    details: Mapped[OneToOnePostDetails | None] = relationship(
        back_populates="post", cascade="all, delete-orphan", single_parent=True
    )

    def add_details(self, details: OneToOnePostDetails) -> None:
        self.details = details

    def remove_details(self, details: OneToOnePostDetails | None) -> None:
        if details is not None:
            details.post = None
        self.details = None


class OneToOnePostDetails(Base):
    __tablename__ = "one_to_one_post_details"

    id: Mapped[int] = mapped_column(primary_key=True)
    creation_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_id: Mapped[int | None] = mapped_column(
        ForeignKey("one_to_one_post.id"), nullable=True, unique=True
    )

    post: Mapped[OneToOnePost | None] = relationship(back_populates="details")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("creation_date", _utcnow())
        super().__init__(**kwargs)

    @validates("creation_date")
    def _validate_creation_date(self, _: str, value: datetime) -> datetime:
        if self.creation_date is not None:
            raise ValueError("creation_date cannot be changed once set")
        return value


# --- Many-to-many -----------------------------------------------------------

book_authors = Table(
    "many_to_many_book_authors",
    Base.metadata,
    Column("book_id", ForeignKey("many_to_many_book.id"), primary_key=True),
    Column("author_id", ForeignKey("many_to_many_author.id"), primary_key=True),
)


class ManyToManyAuthor(Base):
    __tablename__ = "many_to_many_author"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # No delete cascade: removing an author must never remove shared books.
    books: Mapped[list[ManyToManyBook]] = relationship(
        secondary=book_authors, back_populates="authors", cascade="save-update, merge"
    )

    def add_book(self, book: ManyToManyBook) -> None:
        self.books.append(book)

    def remove_book(self, book: ManyToManyBook) -> None:
        self.books.remove(book)

    def remove(self) -> None:
        for book in list(self.books):
            self.remove_book(book)


class ManyToManyBook(Base):
    __tablename__ = "many_to_many_book"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    authors: Mapped[list[ManyToManyAuthor]] = relationship(
        secondary=book_authors, back_populates="books", cascade="save-update, merge"
    )
