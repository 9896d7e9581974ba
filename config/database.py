"""Database configuration and Supabase client initialization"""
import os
from dotenv import load_dotenv
from supabase import create_client, Client

from utils.logger import log_error, log_warning

load_dotenv()

_supabase = None


def init_supabase():
    """Create the Supabase client from SUPABASE_URL / SUPABASE_ANON_KEY.

    Returns None when the configuration is missing or the client cannot be
    built, so callers can report the store as unavailable.
    """
    supabase_url = os.environ.get('SUPABASE_URL')
    supabase_key = os.environ.get('SUPABASE_ANON_KEY')

    if not supabase_url or not supabase_key:
        log_warning("SUPABASE_URL and SUPABASE_ANON_KEY must be set; waitlist store is unavailable")
        return None

    try:
        client: Client = create_client(supabase_url, supabase_key)
    except Exception as e:
        log_error("Error initializing Supabase client", error=e)
        return None
    return client


def get_supabase():
    """Get the Supabase client instance"""
    global _supabase
    if _supabase is None:
        _supabase = init_supabase()
    return _supabase


def reset_supabase():
    """Drop the cached client so the next call re-reads the environment"""
    global _supabase
    _supabase = None
