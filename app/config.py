import os
from typing import List

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase (the client itself is created lazily in app.infra.supabase.client)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Window used by the urgency classifier for "due soon" badges
TASK_DUE_SOON_DAYS = int(os.getenv("TASK_DUE_SOON_DAYS", "3"))

CORS_ALLOW_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
