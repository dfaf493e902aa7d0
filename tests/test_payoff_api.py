from __future__ import annotations

from copy import deepcopy

from flask.testing import FlaskClient

from debtplan.core.formatting import format_currency


def plan_payload() -> dict:
    return {
        "debts": [
            {
                "id": "card",
                "name": "Credit Card",
                "balance": 5000,
                "interestRate": 18.99,
                "minimumPayment": 150,
                "totalPayments": 36,
            },
            {
                "id": "car",
                "name": "Car Loan",
                "balance": 15000,
                "interestRate": 5.25,
                "minimumPayment": 300,
                "totalPayments": 60,
            },
        ],
        "monthlyIncome": 3000,
        "monthlyBudget": 600,
        "strategy": "snowball",
    }


def test_payoff_endpoint_returns_full_plan(client: FlaskClient):
    resp = client.post("/api/calc/payoff", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["strategy"] == "snowball"
    assert body["monthlyBudget"] == 600
    assert body["recommendedPercentage"] == 15
    assert body["isFullyPaid"] is True
    assert body["outstandingBalance"] == 0
    assert body["months"] == len(body["monthlyPlans"])
    assert set(body["payoffMonths"]) == {"card", "car"}

    first = body["monthlyPlans"][0]
    assert first["month"] == 1
    assert [p["debtId"] for p in first["payments"]] == ["card", "car"]
    assert set(first["payments"][0]) == {
        "debtId",
        "minimumPayment",
        "extraPayment",
        "interestPaid",
        "remainingBalance",
        "isPaidOff",
    }


def test_budget_percentage_derives_monthly_budget(client: FlaskClient):
    payload = plan_payload()
    del payload["monthlyBudget"]
    payload["budgetPercentage"] = 20

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["monthlyBudget"] == 600


def test_missing_budget_returns_422(client: FlaskClient):
    payload = plan_payload()
    del payload["monthlyBudget"]

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unknown_strategy_returns_422(client: FlaskClient):
    payload = plan_payload()
    payload["strategy"] = "lottery"

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 422


def test_zero_minimum_payment_returns_400(client: FlaskClient):
    payload = plan_payload()
    payload["debts"][0]["minimumPayment"] = 0

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert any("minimum payment" in message for message in body["error"])


def test_duplicate_debt_ids_return_400(client: FlaskClient):
    payload = plan_payload()
    payload["debts"].append(deepcopy(payload["debts"][0]))

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 400
    assert any("duplicate" in message for message in resp.get_json()["error"])


def test_empty_debts_return_zero_plan(client: FlaskClient):
    payload = plan_payload()
    payload["debts"] = []

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["months"] == 0
    assert body["monthlyPlans"] == []
    assert body["isFullyPaid"] is True


def test_compare_endpoint_covers_all_strategies(client: FlaskClient):
    resp = client.post("/api/calc/payoff/compare", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["monthlyBudget"] == 600
    assert body["recommendedPercentage"] == 15
    assert set(body["strategies"]) == {"snowball", "avalanche", "proportional"}
    for summary in body["strategies"].values():
        assert summary["months"] > 0
        assert summary["isFullyPaid"] is True


def test_strategies_endpoint_lists_descriptions(client: FlaskClient):
    resp = client.get("/api/strategies")

    assert resp.status_code == 200
    keys = [item["key"] for item in resp.get_json()]
    assert keys == ["snowball", "avalanche", "proportional"]
    assert all(item["description"] for item in resp.get_json())


def test_validate_endpoint_reports_each_debt(client: FlaskClient):
    debts = plan_payload()["debts"]
    debts[1]["name"] = "  "
    debts[1]["totalPayments"] = 0

    resp = client.post("/api/debts/validate", json={"debts": debts})

    assert resp.status_code == 200
    results = resp.get_json()["results"]
    assert results[0] == {"id": "card", "valid": True, "errors": []}
    assert results[1]["valid"] is False
    assert len(results[1]["errors"]) == 2


def test_payoff_response_includes_display_strings(client: FlaskClient):
    payload = plan_payload()
    payload["monthlyBudget"] = 1250000
    payload["monthlyIncome"] = 4500000

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["display"]["monthlyBudget"] == "1.250.000"
    assert body["display"]["recommendedPercentage"] == "1,0"
    assert body["display"]["totalInterest"] == format_currency(body["totalInterest"])


def test_formatted_amounts_are_accepted(client: FlaskClient):
    payload = plan_payload()
    payload["monthlyBudget"] = "$600"
    payload["monthlyIncome"] = "3.000"

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["monthlyBudget"] == 600
    assert body["recommendedPercentage"] == 15


def test_malformed_amount_returns_422(client: FlaskClient):
    payload = plan_payload()
    payload["monthlyBudget"] = "6-00"

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 422


def test_runaway_interest_debt_returns_capped_plan(client: FlaskClient):
    payload = plan_payload()
    payload["debts"] = [
        {
            "id": "payday",
            "name": "Payday Loan",
            "balance": 1000,
            "interestRate": 400,
            "minimumPayment": 1,
            "totalPayments": 12,
        }
    ]
    payload["monthlyBudget"] = 1

    resp = client.post("/api/calc/payoff", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["months"] == 360
    assert body["isFullyPaid"] is False
