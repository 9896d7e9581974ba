"""Application settings loaded from the environment"""
import os
from dotenv import load_dotenv

load_dotenv()

# Supabase tables
USERS_WAITLIST_TABLE = os.environ.get('USERS_WAITLIST_TABLE', 'users_waitlist')
PARTNERS_WAITLIST_TABLE = os.environ.get('PARTNERS_WAITLIST_TABLE', 'partners_waitlist')

# Post-signup navigation handed back to the site
LANDING_ROUTE = os.environ.get('LANDING_ROUTE', '/')
REDIRECT_DELAY_SECONDS = int(os.environ.get('REDIRECT_DELAY_SECONDS', 3))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://127.0.0.1:3000').split(',')
    if origin.strip()
]
