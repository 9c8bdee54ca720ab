import os
from dotenv import load_dotenv

# switch environments with THE_FIELD_ENV (dev, test, prod)
env = os.getenv("THE_FIELD_ENV", "dev")
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), f".env.{env}"))

# Fetch from OS env (Docker runtime injects this way)
MONGO_URI = os.getenv("MONGO_URI", "mongodb://mongo:27017")
MONGO_DB = os.getenv("MONGO_DB", "the_field_dev")

APP_TITLE = os.getenv("APP_TITLE", "The Field API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# when true, sessions past their expires_at are treated as unauthenticated
SESSION_TTL_CHECK = os.getenv("SESSION_TTL_CHECK", "true").lower() == "true"
