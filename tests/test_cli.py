import json

from workforce_api.models.employee import Employee
from workforce_api.models.monthly_work_record import MonthlyWorkRecord


def test_mcp_call_prints_envelope(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["mcp", "call", "employee", "create",
                                 "--data", '{"name": "Ana", "email": "ana@x.com", "telephone": "1"}'])
    assert result.exit_code == 0, result.output
    body = json.loads(result.output)
    assert body["success"] is True
    assert body["data"]["email"] == "ana@x.com"

    result = runner.invoke(args=["mcp", "call", "invoice", "list"])
    assert json.loads(result.output) == {"success": False, "error": "Unknown entity: invoice"}


def test_mcp_call_rejects_bad_json(app):
    result = app.test_cli_runner().invoke(args=["mcp", "call", "employee", "get", "--params", "{id: 1"])
    assert result.exit_code != 0
    assert "invalid JSON" in result.output


def test_seed_demo_is_idempotent(app):
    runner = app.test_cli_runner()
    first = runner.invoke(args=["seed-demo", "--year", "2024", "--month", "3"])
    assert first.exit_code == 0, first.output
    assert "created=3" in first.output
    assert MonthlyWorkRecord.query.count() == 3

    second = runner.invoke(args=["seed-demo", "--year", "2024", "--month", "3"])
    assert second.exit_code == 0, second.output
    assert "created=0, existing=3" in second.output
    assert Employee.query.count() == 3
    assert MonthlyWorkRecord.query.count() == 3
