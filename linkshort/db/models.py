from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime, timezone

from linkshort.core.config import MAX_SHORT_CODE_LENGTH

Base = declarative_base()


def utcnow() -> datetime:
    # Naive UTC so SQLite and PostgreSQL compare timestamps the same way
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Link(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(String, nullable=False)

    # The unique constraint is what actually guarantees code uniqueness;
    # the existence check before insert only makes collisions rare.
    short_url = Column(String(MAX_SHORT_CODE_LENGTH), unique=True, index=True, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    visits = relationship("Visit", back_populates="link")

    def __repr__(self):
        return f"<Link {self.id} {self.short_url}>"


class Visit(Base):
    __tablename__ = "visits"
    __table_args__ = (
        Index("ix_visits_link_id_created_at", "link_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    link_id = Column(Integer, ForeignKey("links.id"), nullable=False, index=True)
    ip_address = Column(String(64), nullable=False, default="")
    user_agent = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utcnow, nullable=False)

    link = relationship("Link", back_populates="visits")

    def __repr__(self):
        return f"<Visit {self.id} for link {self.link_id}>"
