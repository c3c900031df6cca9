import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB", "attendanceDB_test"),
    "server_selection_timeout_ms": 1000,
}

CORS_ORIGINS = ["http://localhost:3000"]

PORT = 5000
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
