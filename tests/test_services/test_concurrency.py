"""Several sessions on one file database, racing on the same rows from threads."""
import threading

import pytest
from sqlalchemy import select, func

from assetverse.database import Database
from assetverse.errors import AppError, Conflict
from assetverse.models.affiliation import Affiliation, AffiliationStatus
from assetverse.models.asset import Asset, AssetType
from assetverse.models.assignment import Assignment, AssignmentStatus
from assetverse.models.request import AssetRequest, RequestStatus
from assetverse.models.user import User, Role
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.affiliation_service as affiliation_svc
import assetverse.services.assignment_service as assignment_svc
import assetverse.services.inventory_service as inventory_svc
import assetverse.services.request_service as request_svc

HR = HRScope("hr@acme.test", "HR", "Acme", None)
WORKERS = 6


@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'race.db'}")
    database.create_all()
    yield database
    database.dispose()


def _seed(database, quantity, requesters):
    db = database.session()
    db.add(User(email=HR.email, name=HR.name, role=Role.hr, company_name=HR.company_name, package_limit=10))
    for email in requesters:
        db.add(User(email=email, name=email.split("@")[0], role=Role.employee))
    asset = Asset(
        hr_email=HR.email, company_name=HR.company_name, product_name="Laptop",
        product_type=AssetType.returnable, product_quantity=quantity, available_quantity=quantity,
    )
    db.add(asset)
    db.flush()
    requests = [
        AssetRequest(asset_id=asset.id, requester_email=email, requester_name=email.split("@")[0], hr_email=HR.email)
        for email in requesters
    ]
    db.add_all(requests)
    db.commit()
    ids = asset.id, [r.id for r in requests]
    db.close()
    return ids


def _run_concurrently(database, calls):
    """Run each ``call(session)`` in its own thread, released together by a barrier."""
    barrier = threading.Barrier(len(calls))
    results = [None] * len(calls)

    def worker(index, call):
        session = database.session()
        try:
            barrier.wait()
            call(session)
            results[index] = "ok"
        except AppError as exc:
            results[index] = exc.kind
        except Exception as exc:
            results[index] = repr(exc)
        finally:
            session.close()

    threads = [threading.Thread(target=worker, args=(i, call)) for i, call in enumerate(calls)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)
    return results


def _available(database, asset_id):
    check = database.session()
    try:
        return check.scalar(select(Asset.available_quantity).where(Asset.id == asset_id))
    finally:
        check.close()


def test_concurrent_approvals_allocate_exactly_the_stock(database):
    requesters = [f"user{i}@mail.test" for i in range(WORKERS)]
    asset_id, request_ids = _seed(database, quantity=2, requesters=requesters)

    results = _run_concurrently(
        database,
        [lambda s, rid=rid: request_svc.approve_request(s, HR, rid) for rid in request_ids],
    )

    assert sorted(results) == ["conflict"] * (WORKERS - 2) + ["ok"] * 2
    assert _available(database, asset_id) == 0

    check = database.session()
    assert check.scalar(select(func.count()).select_from(Assignment)) == 2
    assert check.scalar(
        select(func.count()).select_from(AssetRequest).where(AssetRequest.status == RequestStatus.approved)
    ) == 2
    assert check.scalar(select(User.current_employees).where(User.email == HR.email)) == 2
    check.close()


def test_concurrent_approvals_of_one_request_apply_once(database):
    asset_id, (request_id,) = _seed(database, quantity=5, requesters=["alice@mail.test"])

    results = _run_concurrently(
        database,
        [lambda s: request_svc.approve_request(s, HR, request_id) for _ in range(WORKERS)],
    )

    assert results.count("ok") == 1
    assert set(results) <= {"ok", "not_found", "conflict"}
    assert _available(database, asset_id) == 4

    check = database.session()
    assert check.scalar(select(func.count()).select_from(Assignment)) == 1
    assert check.scalar(select(User.current_employees).where(User.email == HR.email)) == 1
    check.close()


def test_return_racing_removal_restocks_once(database):
    asset_id, (request_id,) = _seed(database, quantity=3, requesters=["alice@mail.test"])
    db = database.session()
    approval = request_svc.approve_request(db, HR, request_id)
    assignment_id = approval["assignment"].id
    db.close()
    assert _available(database, asset_id) == 2

    alice = EmployeeScope("alice@mail.test", "alice")
    removal = {}
    results = _run_concurrently(
        database,
        [
            lambda s: assignment_svc.return_asset(s, alice, assignment_id),
            lambda s: removal.update(affiliation_svc.remove_employee(s, HR, alice.email)),
        ],
    )

    assert results[1] == "ok"
    assert results[0] in ("ok", "not_found")
    returned_by_employee = 1 if results[0] == "ok" else 0
    assert returned_by_employee + removal["returned_assignments"] == 1
    assert _available(database, asset_id) == 3

    check = database.session()
    assert check.get(Assignment, assignment_id).status == AssignmentStatus.returned
    affiliation = check.scalar(select(Affiliation).where(Affiliation.employee_email == alice.email))
    assert affiliation.status == AffiliationStatus.inactive
    assert check.scalar(select(User.current_employees).where(User.email == HR.email)) == 0
    check.close()


def test_stale_read_does_not_bypass_stock_guard(database):
    asset_id, _ = _seed(database, quantity=1, requesters=[])
    first = database.session()
    second = database.session()

    stale = second.get(Asset, asset_id)
    assert stale.available_quantity == 1
    second.commit()

    inventory_svc.adjust_available(first, asset_id, -1)
    first.commit()
    first.close()

    with pytest.raises(Conflict):
        inventory_svc.adjust_available(second, asset_id, -1)
    second.rollback()
    second.close()

    assert _available(database, asset_id) == 0


def test_status_claim_on_approved_request_conflicts(database):
    _, (request_id,) = _seed(database, quantity=2, requesters=["alice@mail.test"])
    first = database.session()
    request_svc.approve_request(first, HR, request_id)
    first.close()

    second = database.session()
    with pytest.raises(Conflict):
        request_svc._claim(second, HR, request_id, RequestStatus.approved)
    second.rollback()
    second.close()

    check = database.session()
    assert check.scalar(select(func.count()).select_from(Assignment)) == 1
    check.close()
