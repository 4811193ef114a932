from flask_cors import CORS


# restrict API access to requests from the configured origins
def init_cors(app):
    origins = app.config.get("CORS_ORIGINS") or []
    if not origins:
        return None
    return CORS(app, origins=origins)
