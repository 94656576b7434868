from sqlalchemy import Column, DateTime, String, Text, func

from .database import Base


# 💾 key -> string blob (the browser's localStorage, server side)
class StorageItem(Base):
    __tablename__ = "storage_items"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
