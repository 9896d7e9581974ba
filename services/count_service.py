"""Aggregate sign-up counts for display on the site"""
from typing import Dict, Optional

from config import settings
from config.database import get_supabase
from utils.logger import log_error


def count_rows(supabase, table: str) -> Optional[int]:
    """Exact row count for one table, or None if the query fails"""
    try:
        result = supabase.table(table).select('*', count='exact', head=True).execute()
        if result.count is None:
            raise ValueError(f"No count returned for {table}")
        return int(result.count)
    except Exception as e:
        log_error(f"Error counting rows in {table}", error=e)
        return None


def get_counts(client=None) -> Dict[str, Optional[int]]:
    """Count both waitlists independently; a failed query reports None.

    Counts are read fresh on every call.
    """
    supabase = client if client is not None else get_supabase()
    if not supabase:
        log_error("Supabase client not initialized; counts unavailable")
        return {'partnerCount': None, 'userCount': None}

    return {
        'partnerCount': count_rows(supabase, settings.PARTNERS_WAITLIST_TABLE),
        'userCount': count_rows(supabase, settings.USERS_WAITLIST_TABLE),
    }
