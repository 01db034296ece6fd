"""
manage.py - application entry point and development server.
Run with `python manage.py`, or `flask --app manage seed` to seed the database.
"""
from __future__ import annotations
import os
from flask import Flask
from material_management import create_app

app: Flask = create_app()

if __name__ == "__main__":
    # port can be overridden from the environment
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_ENV") == "development"
    app.run(host="0.0.0.0", port=port, debug=debug)
