"""Flask application with route handlers"""
from flask import Flask, jsonify, request
from flask_cors import CORS
import os

from config import settings
from services import count_service, waitlist_service
from services.results import ErrorKind, FormState, WaitlistKind
from utils.logger import log_debug, log_error
from utils.rate_limit import init_rate_limiter, RATE_LIMITS

app = Flask(__name__)
CORS(app, resources={
    r"/api/*": {
        "origins": settings.CORS_ORIGINS,
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"],
    }
})

# Initialize rate limiter
limiter = init_rate_limiter(app)

UNIQUE_VIOLATION = '23505'

ERROR_STATUS = {
    ErrorKind.MISSING_FIELD: 400,
    ErrorKind.INVALID_FORMAT: 400,
    ErrorKind.STORE_FAILURE: 502,
    ErrorKind.UNEXPECTED_FAILURE: 500,
}


def _is_truthy(value):
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _submission_response(result):
    if result.ok:
        return jsonify(result.notice.to_dict()), 201

    status_code = ERROR_STATUS[result.error_kind]
    if result.error_kind is ErrorKind.STORE_FAILURE and result.code == UNIQUE_VIOLATION:
        status_code = 409
    return jsonify({"error": result.message, "kind": result.error_kind.value}), status_code


def _handle_signup(kind, require_name=False):
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "No data provided"}), 400

        form = FormState.from_payload(data)
        result = waitlist_service.submit(kind, form, require_name=require_name)
        return _submission_response(result)
    except Exception as e:
        log_error(f"Error in {kind.value} sign-up", error=e)
        return jsonify({
            "error": waitlist_service.UNEXPECTED_FAILURE_MESSAGE,
            "kind": ErrorKind.UNEXPECTED_FAILURE.value,
        }), 500


@app.route('/')
def home():
    return jsonify({
        "message": "Cafe Waitlist API",
        "status": "running",
        "version": "1.0.0"
    })

@app.route('/health')
@limiter.exempt
def health_check():
    return jsonify({
        "status": "healthy",
        "message": "API is running successfully"
    })

@app.route('/api/waitlist/users', methods=['POST'])
@limiter.limit(RATE_LIMITS['moderate'])
def join_users_waitlist():
    """Add a coffee drinker to the waitlist"""
    data = request.get_json(silent=True)
    require_name = request.args.get('require_name')
    if require_name is None and isinstance(data, dict):
        require_name = data.get('require_name', False)
    return _handle_signup(WaitlistKind.USER, require_name=_is_truthy(require_name))

@app.route('/api/waitlist/partners', methods=['POST'])
@limiter.limit(RATE_LIMITS['moderate'])
def join_partners_waitlist():
    """Add a cafe to the partners waitlist"""
    return _handle_signup(WaitlistKind.PARTNER)

@app.route('/api/contact', methods=['POST'])
@limiter.limit(RATE_LIMITS['moderate'])
def contact_partner():
    """Partner enquiry from the contact page, stored with the partners waitlist"""
    return _handle_signup(WaitlistKind.PARTNER)

@app.route('/api/waitlist/counts', methods=['GET'])
@limiter.limit(RATE_LIMITS['standard'])
def get_waitlist_counts():
    """Sign-up totals for both waitlists; null where a count could not be read"""
    counts = count_service.get_counts()
    log_debug(f"Waitlist counts: partners={counts['partnerCount']} users={counts['userCount']}")
    return jsonify(counts), 200

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_ENV') == 'development'
    app.run(host='0.0.0.0', port=port, debug=debug)
