"""Rate limiting configuration for API endpoints"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os

def get_rate_limit_key():
    """Rate limit by client address, honouring the first X-Forwarded-For hop"""
    from flask import request
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return get_remote_address()

def init_rate_limiter(app):
    """Initialize rate limiter with Flask app"""
    # Default rate limits (per minute)
    default_limit = os.environ.get('RATE_LIMIT_DEFAULT', '100 per minute')
    
    limiter = Limiter(
        app=app,
        key_func=get_rate_limit_key,
        default_limits=[default_limit],
        storage_uri=os.environ.get('RATE_LIMIT_STORAGE_URI', 'memory://'),  # Optional: Redis URL for distributed rate limiting
        headers_enabled=True  # Include rate limit headers in response
    )
    
    return limiter

# Rate limit presets for different endpoint types
RATE_LIMITS = {
    'moderate': '30 per minute',    # For write operations (form submissions)
    'standard': '60 per minute',    # For read operations (GET requests)
}
