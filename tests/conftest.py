import pytest

from workforce_api import create_app
from workforce_api.extensions import db
from workforce_api.mcp.handler import handle_mcp_request


@pytest.fixture(scope="function")
def app(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    app = create_app()
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture
def dispatch(app):
    """dispatch("create", "employee", data={...}) -> MCPResponse"""
    def _dispatch(action, entity, params=None, data=None):
        body = {"action": action, "entity": entity}
        if params is not None:
            body["params"] = params
        if data is not None:
            body["data"] = data
        return handle_mcp_request(body)
    return _dispatch


@pytest.fixture
def ana(dispatch):
    resp = dispatch("create", "employee", data={
        "name": "Ana", "email": "ana@x.com", "telephone": "111",
        "weekendRate": 100, "holidayRate": 150,
    })
    assert resp.success, resp.error
    return resp.data
