"""
Tests for transaction API endpoints.

These test the HTTP layer: status codes, response format
and error mapping. Business logic is tested in
test_transaction_service.py.
"""

from decimal import Decimal

from ledger_core.exceptions import NotFoundError


DEMO_TRANSACTION = {
    "id": "123-abc",
    "name": "Move funds",
    "entries": [
        {"account_id": "1", "amount": 100, "direction": "credit"},
        {"account_id": "2", "amount": 100, "direction": "debit"},
    ],
}


class TestCreateTransaction:

    def test_balanced_transaction_returns_201(self, client, demo_accounts):
        response = client.post("/transactions", json=DEMO_TRANSACTION)
        assert response.status_code == 201

    def test_returns_transaction(self, client, demo_accounts):
        data = client.post("/transactions", json=DEMO_TRANSACTION).json()

        assert data["id"] == "123-abc"
        assert data["name"] == "Move funds"
        assert [e["account_id"] for e in data["entries"]] == ["1", "2"]

    def test_balances_are_applied(self, client, demo_accounts):
        client.post("/transactions", json=DEMO_TRANSACTION)

        assert Decimal(client.get("/accounts/1").json()["balance"]) == 0
        assert Decimal(client.get("/accounts/2").json()["balance"]) == 100

    def test_generates_id_when_absent(self, client, demo_accounts):
        body = {k: v for k, v in DEMO_TRANSACTION.items() if k != "id"}
        data = client.post("/transactions", json=body).json()
        assert data["id"]

    def test_unbalanced_returns_400(self, client, demo_accounts):
        response = client.post("/transactions", json={
            "name": "Bad",
            "entries": [
                {"account_id": "1", "amount": 100, "direction": "credit"},
                {"account_id": "2", "amount": 50, "direction": "debit"},
            ],
        })

        assert response.status_code == 400
        assert "does not balance" in response.json()["detail"]

    def test_missing_account_returns_400(self, client, demo_accounts):
        response = client.post("/transactions", json={
            "name": "Ghost",
            "entries": [
                {"account_id": "1", "amount": 50, "direction": "credit"},
                {"account_id": "ghost", "amount": 50, "direction": "debit"},
            ],
        })

        assert response.status_code == 400
        assert "ghost" in response.json()["detail"]

    def test_duplicate_id_returns_400(self, client, demo_accounts):
        client.post("/transactions", json=DEMO_TRANSACTION)
        response = client.post("/transactions", json=DEMO_TRANSACTION)

        assert response.status_code == 400
        assert Decimal(client.get("/accounts/1").json()["balance"]) == 0

    def test_malformed_body_returns_422(self, client, demo_accounts):
        response = client.post("/transactions", json={"name": "No entries"})
        assert response.status_code == 422

    def test_overflowing_amount_returns_400(self, client, demo_accounts):
        response = client.post("/transactions", json={
            "name": "Huge",
            "entries": [
                {"account_id": "1", "amount": "1e1000000", "direction": "credit"},
                {"account_id": "2", "amount": "1e1000000", "direction": "debit"},
            ],
        })

        assert response.status_code == 400
        assert Decimal(client.get("/accounts/1").json()["balance"]) == 100
        assert client.get("/transactions").json() == []

    def test_amount_beyond_fixed_point_scale_returns_400(self, client, demo_accounts):
        response = client.post("/transactions", json={
            "name": "Too precise",
            "entries": [
                {
                    "account_id": "1",
                    "amount": "1.00000000000000000000000000001",
                    "direction": "credit",
                },
                {"account_id": "2", "amount": "1", "direction": "debit"},
            ],
        })

        assert response.status_code == 400
        assert "decimal places" in response.json()["detail"]
        assert Decimal(client.get("/accounts/1").json()["balance"]) == 100

    def test_ledger_failure_returns_500(
        self, client, ledger, demo_accounts, monkeypatch
    ):
        def broken_apply(transaction):
            raise NotFoundError("Account 1 not found")

        monkeypatch.setattr(ledger, "apply_transaction", broken_apply)

        response = client.post("/transactions", json=DEMO_TRANSACTION)

        assert response.status_code == 500
        assert client.get("/transactions/123-abc").status_code == 404


class TestValidateEntries:

    def test_valid_entries(self, client):
        response = client.post("/transactions/validate", json={
            "entries": DEMO_TRANSACTION["entries"],
        })

        assert response.status_code == 200
        assert response.json() == {"valid": True}

    def test_overflowing_amount_returns_400(self, client):
        response = client.post("/transactions/validate", json={
            "entries": [
                {"account_id": "1", "amount": "1e1000000", "direction": "credit"},
                {"account_id": "2", "amount": "1e1000000", "direction": "debit"},
            ],
        })

        assert response.status_code == 400

    def test_invalid_entries_return_400(self, client):
        response = client.post("/transactions/validate", json={
            "entries": [{"account_id": "1", "amount": 50, "direction": "debit"}],
        })

        assert response.status_code == 400
        assert "at least two entries" in response.json()["detail"]

    def test_validation_does_not_post(self, client, demo_accounts):
        client.post("/transactions/validate", json={
            "entries": DEMO_TRANSACTION["entries"],
        })

        assert client.get("/transactions").json() == []


class TestGetTransaction:

    def test_get_transaction(self, client, demo_accounts):
        client.post("/transactions", json=DEMO_TRANSACTION)
        response = client.get("/transactions/123-abc")

        assert response.status_code == 200
        assert response.json()["name"] == "Move funds"

    def test_nonexistent_transaction_returns_404(self, client):
        response = client.get("/transactions/missing")
        assert response.status_code == 404

    def test_list_transactions(self, client, demo_accounts):
        client.post("/transactions", json=DEMO_TRANSACTION)
        response = client.get("/transactions")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["123-abc"]
