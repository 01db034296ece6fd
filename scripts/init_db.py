"""Create the tables and apply the seed data (roles, admin account, samples)."""
from __future__ import annotations
from pathlib import Path
import sys

# make the project root importable when run as a plain script
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from material_management import create_app  # noqa: E402
from material_management.extensions import db  # noqa: E402
from material_management.utils.bootstrap import ensure_seed_data  # noqa: E402


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        report = ensure_seed_data(db.session, app.config["ADMIN_EMAIL"], app.config["ADMIN_PASSWORD"])
        print(f"Database initialized: {report}")


if __name__ == "__main__":
    main()
