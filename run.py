"""
Entry point for running the Exercise Tracker Flask application.

This module loads a local ``.env`` file, builds the app with the
application factory and starts the development server when executed
directly. In production a WSGI server such as gunicorn should serve
``wsgi:app`` instead.
"""

import os

from dotenv import load_dotenv

load_dotenv()

from exercise_tracker import create_app, db  # noqa: E402

app = create_app()

if __name__ == "__main__":
    # Production deployments should create the schema separately.
    with app.app_context():
        db.create_all()
    port = int(os.environ.get("PORT", "3000"))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG") == "1")
