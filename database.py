import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from config import DATABASE_URL, DATABASE_NAME, DATABASE_TIMEOUT_MS

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None
_db = None

try:
    _client = MongoClient(DATABASE_URL, serverSelectionTimeoutMS=DATABASE_TIMEOUT_MS)
    # Trigger server selection so a missing server is detected at startup
    _client.server_info()
    _db = _client[DATABASE_NAME]
except PyMongoError as e:
    logger.warning("MongoDB unavailable at %s: %s", DATABASE_URL, e)
    _client = None
    _db = None

# Expose db for other modules
db = _db


def _get_collection(name: str) -> Optional[Collection]:
    if db is None:
        return None
    return db[name]


def _require(name: str) -> Collection:
    col = _get_collection(name)
    if col is None:
        raise RuntimeError("Database not connected")
    return col


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _with_str_id(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {**doc, "_id": str(doc.get("_id"))}


def get_documents(collection_name: str, filter_dict: Optional[Dict[str, Any]] = None, limit: int = 100) -> List[Dict[str, Any]]:
    """Documents matching ``filter_dict`` with ``_id`` as a string."""
    cursor = _require(collection_name).find(filter_dict or {}).limit(limit)
    return [_with_str_id(doc) for doc in cursor]


def upsert_document(collection_name: str, key: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Write ``data`` onto the one document identified by ``key``, creating it on
    first save. ``created_at`` is set once; ``updated_at`` on every write.
    """
    now = _now()
    doc = _require(collection_name).find_one_and_update(
        key,
        {"$set": {**data, "updated_at": now}, "$setOnInsert": {"created_at": now}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return _with_str_id(doc)


def delete_documents(collection_name: str, filter_dict: Dict[str, Any]) -> int:
    return _require(collection_name).delete_many(filter_dict).deleted_count
