"""
PowerDNS-compatible SQLAlchemy models for the record store
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from ..core.database import Base


class Domain(Base):
    """Zone known to the authoritative server"""
    __tablename__ = "domains"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    master = Column(String(128), nullable=True)
    type = Column(String(8), nullable=False, default="NATIVE")

    records = relationship("Record", back_populates="domain", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Domain(id={self.id}, name='{self.name}', type='{self.type}')>"


class Record(Base):
    """Resource record row; the validation engine only reads id, name, type and content"""
    __tablename__ = "records"

    id = Column(Integer, primary_key=True, index=True)
    domain_id = Column(Integer, ForeignKey("domains.id", ondelete="CASCADE"), nullable=True)
    name = Column(String(255), nullable=True)
    type = Column(String(10), nullable=True)
    content = Column(Text, nullable=True)
    ttl = Column(Integer, nullable=True)
    prio = Column(Integer, nullable=True)
    disabled = Column(Boolean, default=False, nullable=False)

    domain = relationship("Domain", back_populates="records")

    __table_args__ = (
        Index("nametype_index", "name", "type"),
    )

    def __repr__(self):
        return f"<Record(id={self.id}, name='{self.name}', type='{self.type}', content='{self.content}')>"

    def __str__(self):
        return f"{self.name} {self.type} {self.content}"
