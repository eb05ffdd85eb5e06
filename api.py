"""
Flask REST API for the NeoCalc web widget
Serves the browser calculator and feeds its key presses to the engine
"""
from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

import config
import keymap
from logging_config import get_logger, setup_logging
from session_manager import SessionManager

logger = get_logger("api")

app = Flask(__name__, static_folder=config.WEB_DIR, static_url_path='')
CORS(app, expose_headers=[config.SESSION_HEADER])  # Enable CORS for all routes

# One engine per browser session
session_manager = SessionManager()


def _resolve_session():
    """Return (session_id, issued) where issued means a new cookie is needed"""
    session_id = request.headers.get(config.SESSION_HEADER)
    if session_id:
        return session_id, False
    session_id = request.cookies.get(config.SESSION_COOKIE)
    if session_id:
        return session_id, False
    return SessionManager.new_session_id(), True


def _respond(payload, session_id, issued, status=200):
    response = jsonify(payload)
    response.status_code = status
    response.headers[config.SESSION_HEADER] = session_id
    if issued:
        response.set_cookie(config.SESSION_COOKIE, session_id, httponly=True, samesite='Lax')
    return response


@app.route('/')
def index():
    """Serve the calculator widget"""
    return send_from_directory(config.WEB_DIR, 'index.html')


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
        <h1>{config.APP_NAME} API Server</h1>
        <p>API is running! Open the calculator at <a href="/" style="color: #4CAF50;">Home</a></p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li>POST /api/key - Send one key token, e.g. {{"key": "7"}}</li>
            <li><a href="/api/state" style="color: #2196F3;">/api/state</a> - Current display and engine state</li>
            <li><a href="/api/calculations" style="color: #2196F3;">/api/calculations</a> - Calculation tape for this session</li>
            <li>DELETE /api/calculations - Clear the calculation tape</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/key', methods=['POST'])
def press_key():
    """Feed one key token to the session's calculator"""
    session_id, issued = _resolve_session()
    data = request.get_json(silent=True) or {}
    key = data.get('key') if isinstance(data, dict) else None
    if not isinstance(key, str):
        return _respond({'success': False, 'error': "Body must be JSON with a string 'key'"},
                        session_id, issued, 400)
    try:
        display, state = session_manager.process_token(session_id, key)
        return _respond({
            'success': True,
            'data': {
                'display': display,
                'accepted': keymap.validate_input(key),
                'state': state,
            }
        }, session_id, issued)
    except Exception as e:
        logger.exception("Key %r failed for session %s", key, session_id)
        return _respond({'success': False, 'error': str(e)}, session_id, issued, 500)


@app.route('/api/state')
def get_state():
    """Get the current display and engine state"""
    session_id, issued = _resolve_session()
    try:
        state = session_manager.get_state(session_id)
        return _respond({
            'success': True,
            'data': {
                'display': state['display'],
                'state': state,
            }
        }, session_id, issued)
    except Exception as e:
        logger.exception("State lookup failed for session %s", session_id)
        return _respond({'success': False, 'error': str(e)}, session_id, issued, 500)


@app.route('/api/calculations', methods=['GET'])
def get_calculations():
    """Get calculation history"""
    session_id, issued = _resolve_session()
    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        return _respond({'success': False, 'error': "'limit' must be an integer"},
                        session_id, issued, 400)
    try:
        calculations = session_manager.get_calculations(session_id, limit=limit)

        formatted = []
        for c in calculations:
            formatted.append({
                'expression': c[0],
                'result': c[1],
                'timestamp': c[2]
            })

        return _respond({
            'success': True,
            'data': formatted,
            'count': len(formatted)
        }, session_id, issued)
    except Exception as e:
        logger.exception("History lookup failed for session %s", session_id)
        return _respond({'success': False, 'error': str(e)}, session_id, issued, 500)


@app.route('/api/calculations', methods=['DELETE'])
def clear_calculations():
    """Clear calculation history"""
    session_id, issued = _resolve_session()
    try:
        session_manager.clear_calculations(session_id)
        return _respond({'success': True, 'data': []}, session_id, issued)
    except Exception as e:
        logger.exception("Clearing history failed for session %s", session_id)
        return _respond({'success': False, 'error': str(e)}, session_id, issued, 500)


def main():
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Calculator Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()
