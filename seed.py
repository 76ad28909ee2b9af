"""Seed script: fills the database with demo data."""
import os
import sys

# Ensure we're in the project root
sys.path.insert(0, os.path.dirname(__file__))

import assetverse.models  # noqa: F401, registers all models
from assetverse.config import settings
from assetverse.database import Database
from assetverse.models.asset import AssetType
from assetverse.models.user import Role
from assetverse.schemas.asset import AssetCreate
from assetverse.schemas.request import RequestCreate
from assetverse.schemas.user import UserRegister
from assetverse.security import Identity
from assetverse.services.access_service import HRScope, EmployeeScope
from assetverse.services.payment_service import seed_packages
import assetverse.services.inventory_service as inventory_svc
import assetverse.services.request_service as request_svc
import assetverse.services.user_service as user_svc


def seed():
    database = Database(settings.DATABASE_URL)
    database.create_all()
    db = database.session()

    seed_packages(db)

    hr_user, created = user_svc.register_user(
        db,
        Identity(uid="seed-hr", email="hr@acme.test"),
        UserRegister(name="Hana HR", role=Role.hr, company_name="Acme Corp"),
    )
    hr = HRScope(hr_user.email, hr_user.name, hr_user.company_name, hr_user.company_logo)

    employees = []
    for uid, email, name in [
        ("seed-e1", "alice@acme.test", "Alice Novak"),
        ("seed-e2", "bob@acme.test", "Bob Svoboda"),
    ]:
        user, _ = user_svc.register_user(db, Identity(uid=uid, email=email), UserRegister(name=name, role=Role.employee))
        employees.append(EmployeeScope(user.email, user.name))

    if created:
        laptop = inventory_svc.create_asset(
            db, hr, AssetCreate(product_name="Laptop Dell Latitude", product_type=AssetType.returnable, product_quantity=3)
        )
        inventory_svc.create_asset(
            db, hr, AssetCreate(product_name="Monitor LG 27\"", product_type=AssetType.returnable, product_quantity=5)
        )
        notebook = inventory_svc.create_asset(
            db, hr, AssetCreate(product_name="Notebook A5", product_type=AssetType.non_returnable, product_quantity=50)
        )

        first = request_svc.create_request(db, employees[0], RequestCreate(asset_id=laptop.id, note="New hire"))
        request_svc.create_request(db, employees[1], RequestCreate(asset_id=notebook.id))
        request_svc.approve_request(db, hr, first.id)

    db.close()
    database.dispose()
    print("Seed finished")


if __name__ == "__main__":
    seed()
