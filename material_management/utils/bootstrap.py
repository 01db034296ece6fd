from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from ..models import Category, Material
from ..repositories import UserRepository
from .logging_utils import get_logger
from .security import ROLE_ADMIN, ROLE_NAMES
from .seed_definitions import DEFAULT_CATEGORIES, DEFAULT_MATERIALS

logger = get_logger("seed")


@dataclass
class SeedReport:
    roles: List[str] = field(default_factory=list)
    admin_created: bool = False
    categories: int = 0
    materials: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.roles or self.admin_created or self.categories or self.materials)


def ensure_seed_data(session: Session, admin_email: str, admin_password: str) -> SeedReport:
    """Make sure the minimum data the app expects exists.
    - the two fixed roles
    - the administrator account, in the Admin role
    - the sample categories, only if the categories table is empty
    - the sample materials, only if the materials table is empty

    Every step checks before inserting, so calling this repeatedly is safe.
    """
    report = SeedReport()
    users = UserRepository(session)

    # 1) roles
    for name in ROLE_NAMES:
        if users.find_role(name) is None:
            users.ensure_role(name)
            report.roles.append(name)

    # 2) admin account
    admin = users.find_by_username(admin_email)
    if admin is None:
        users.create_user(admin_email, admin_password, email=admin_email.lower(), roles=[ROLE_ADMIN])
        report.admin_created = True
    elif not admin.has_role(ROLE_ADMIN):
        users.add_to_role(admin, ROLE_ADMIN)
    session.commit()

    # 3) categories
    if session.query(Category).count() == 0:
        for name, description in DEFAULT_CATEGORIES:
            session.add(Category(name=name, description=description))
        session.commit()
        report.categories = len(DEFAULT_CATEGORIES)

    # 4) materials, attached to the sample categories by name
    if session.query(Material).count() == 0:
        by_name = {c.name: c for c in session.query(Category).all()}
        for name, description, sku, category_name, qty, min_qty, price in DEFAULT_MATERIALS:
            category = by_name.get(category_name)
            if category is None:
                logger.warning("Seed category %r missing, skipping material %s", category_name, sku)
                continue
            session.add(
                Material(
                    name=name,
                    description=description,
                    sku=sku,
                    category_id=category.id,
                    quantity=qty,
                    minimum_quantity=min_qty,
                    unit_price=price,
                )
            )
            report.materials += 1
        session.commit()

    if report.changed:
        logger.info(
            "Seed data applied: roles=%s admin_created=%s categories=%d materials=%d",
            report.roles, report.admin_created, report.categories, report.materials,
        )
    return report
