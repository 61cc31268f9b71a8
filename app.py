"""WSGI entry point.

Run: flask --app app run
"""

from src.emasjid_api.emasjid_api.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG", False)))
