from datetime import datetime, timezone

from pymongo.errors import PyMongoError

from the_field import db


def log_activity(user_id: str, action: str, metadata: dict | None = None):
    """Best-effort: runs after the write it describes, so it never fails the request."""
    try:
        db.activity_logs.insert_one({
            "user_id": user_id,
            "action": action,
            "timestamp": datetime.now(timezone.utc),
            "metadata": metadata or {},
        })
    except PyMongoError:
        pass
