# tests/conftest.py
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import infra.db.models  # noqa: F401  (registers tables on Base)
from core.domain import Money, Project, WbsNode, WbsNodeType
from core.services.evm.policy import DEFAULT_THRESHOLDS
from infra.db.base import Base
from infra.db.project import project_to_orm
from infra.db.wbs import wbs_node_to_orm
from infra.services import build_service_dict

PROJECT_ID = "proj-1"
TODAY = date(2024, 3, 1)


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_dict(session, thresholds=DEFAULT_THRESHOLDS)


@pytest.fixture
def today():
    return TODAY


def make_node(node_id, *, level=1, parent_id=None, budget=0, actual=0, pct=0, **extra):
    extra.setdefault("type", WbsNodeType.WORK_PACKAGE)
    return WbsNode.create(
        PROJECT_ID,
        id=node_id,
        level=level,
        parent_id=parent_id,
        budgeted_cost=budget,
        actual_cost=actual,
        percent_complete=pct,
        **extra,
    )


@pytest.fixture
def node_factory():
    return make_node


@pytest.fixture
def scenario_nodes():
    return [
        make_node("a", budget=1000, actual=600, pct=50, code="1"),
        make_node("b", budget=2000, actual=1800, pct=90, code="2"),
    ]


@pytest.fixture
def site_wbs():
    """Small construction WBS: two summaries, work packages, activities."""
    return [
        make_node("S1", type=WbsNodeType.SUMMARY, code="1", name="Foundations",
                  budget="5000", actual="2000", pct=40),
        make_node("S2", type=WbsNodeType.SUMMARY, code="2", name="Structure",
                  budget="8000", actual="0", pct=0),
        make_node("W11", level=2, parent_id="S1", code="1.1", name="Excavation",
                  budget="3000", actual="2500", pct=100),
        make_node("W12", level=2, parent_id="S1", code="1.2", name="Footings",
                  budget="2500", actual="400", pct=20),
        make_node("W21", level=2, parent_id="S2", code="2.1", name="Columns",
                  budget="6000", actual="0", pct=0),
        make_node("A111", level=3, parent_id="W11", type=WbsNodeType.ACTIVITY, code="1.1.1",
                  name="Dig trenches", budget="1000", actual="900", pct=100,
                  start_date=date(2024, 2, 1), end_date=date(2024, 2, 10), duration=9),
        make_node("A121", level=3, parent_id="W12", type=WbsNodeType.ACTIVITY, code="1.2.1",
                  name="Pour footings", budget="800", actual="100", pct=25,
                  start_date=date(2024, 2, 27), end_date=date(2024, 3, 6), duration=8),
        make_node("A122", level=3, parent_id="W12", type=WbsNodeType.ACTIVITY, code="1.2.2",
                  name="Cure footings", budget="200", actual="0", pct=0,
                  start_date=date(2024, 3, 1), end_date=date(2024, 3, 8), duration=7),
        make_node("A211", level=3, parent_id="W21", type=WbsNodeType.ACTIVITY, code="2.1.1",
                  name="Formwork", budget="1500", actual="0", pct=0,
                  start_date=date(2024, 3, 8), end_date=date(2024, 3, 20), duration=12),
        make_node("A212", level=3, parent_id="W21", type=WbsNodeType.ACTIVITY, code="2.1.2",
                  name="Rebar", budget="1200", actual="0", pct=0,
                  start_date=date(2024, 3, 9), end_date=date(2024, 3, 22), duration=13),
    ]


@pytest.fixture
def seeded_project(session, site_wbs):
    project = Project(
        id=PROJECT_ID,
        name="Warehouse Extension",
        budget=Money.of("15000", "EUR"),
        start_date=date(2024, 1, 15),
        end_date=date(2024, 9, 30),
        currency="EUR",
    )
    session.add(project_to_orm(project))
    for node in site_wbs:
        session.add(wbs_node_to_orm(node))
    session.flush()
    return project
