from the_field import db
from the_field.utils.audit import ensure_audit_indexes


def ensure_indexes():
    # users -> detail records
    db.users.create_index("org")
    db.users.create_index("athlete")

    # sessions
    db.sessions.create_index("user_id")
    db.sessions.create_index("expires_at")

    # activity
    db.activity_logs.create_index([("user_id", 1), ("timestamp", -1)])

    ensure_audit_indexes()
