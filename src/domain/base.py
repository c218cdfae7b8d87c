"""Shared base for domain entities"""

import time
import uuid
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all persisted entities"""
    pass


def generate_uuid() -> str:
    """Generate a document identifier"""
    return uuid.uuid4().hex


def now_ms() -> int:
    """Current time as epoch milliseconds (record timestamps are stamped by the core)"""
    return int(time.time() * 1000)
