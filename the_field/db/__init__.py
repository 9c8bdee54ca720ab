# the_field/db/__init__.py
from pymongo import MongoClient

from the_field import settings

client = MongoClient(settings.MONGO_URI)
db = client[settings.MONGO_DB]

# --- Collections (one source of truth) ---
users = db["users"]
orgs = db["orgs"]
athletes = db["athletes"]
sessions = db["sessions"]

activity_logs = db["activity_logs"]
audit_events = db["audit_events"]
