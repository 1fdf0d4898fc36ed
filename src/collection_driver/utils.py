import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from bson import ObjectId


ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def load_settings(config_file: Path | None, required: bool = True) -> Dict[str, Any]:
    try:
        if config_file:
            with open(config_file, 'r') as config_handle:
                return json.load(config_handle)
    except Exception as e:
        if required:
            logging.error(f"Error loading config file {config_file}: {e}")
        return {}

    return {}


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def is_valid_id(id: Any) -> bool:
    """True if id is a 24 character hex string"""
    return isinstance(id, str) and ID_PATTERN.fullmatch(id) is not None


def to_object_id(id: Any) -> ObjectId:
    """Convert an id to an ObjectId. Raises bson.errors.InvalidId on bad input"""
    if isinstance(id, ObjectId):
        return id
    return ObjectId(id)
