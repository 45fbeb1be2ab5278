"""API tests for transactions and finance documents."""

import base64

import pytest


@pytest.fixture
def transaction(client):
    response = client.post("/api/v1/finance", json={
        "academyId": "a1", "type": "income", "amount": 120.5, "date": "2024-03-01",
    })
    assert response.status_code == 201
    return response.json()["data"]


class TestTransactions:

    def test_create_assigns_transaction_id(self, transaction):
        assert transaction["transactionId"].startswith("TXN-")
        assert transaction["status"] == "active"

    def test_list_newest_first(self, client, transaction):
        client.post("/api/v1/finance", json={"academyId": "a1", "type": "expense", "amount": 30, "date": "2024-04-01"})
        data = client.get("/api/v1/finance", params={"academyId": "a1"}).json()["data"]
        assert [t["date"] for t in data] == ["2024-04-01", "2024-03-01"]

    def test_delete_hides_but_keeps(self, client, db, transaction):
        client.delete(f"/api/v1/finance/{transaction['id']}")
        assert client.get("/api/v1/finance", params={"academyId": "a1"}).json()["data"] == []
        assert db["ams-finance"].find_one({"transactionId": transaction["transactionId"]})["status"] == "deleted"

    def test_update_status_by_transaction_id(self, client, transaction):
        response = client.patch(f"/api/v1/finance/{transaction['transactionId']}", json={"status": "deleted"})
        assert response.json()["data"]["status"] == "deleted"

    def test_non_positive_amount(self, client):
        response = client.post("/api/v1/finance", json={"academyId": "a1", "type": "income", "amount": 0})
        assert response.status_code == 400


class TestDocuments:

    def test_upload_list_and_download(self, client):
        payload = base64.b64encode(b"%PDF-1.4 receipt").decode()
        response = client.post("/api/v1/finance/documents", json={
            "academyId": "a1", "filename": "receipt.pdf", "contentType": "application/pdf", "data": payload,
        })
        assert response.status_code == 201
        meta = response.json()["data"]
        assert "data" not in meta
        assert meta["url"] == f"/api/v1/docs/{meta['_id']}"

        listed = client.get("/api/v1/finance/documents", params={"academyId": "a1"}).json()["data"]
        assert [d["filename"] for d in listed] == ["receipt.pdf"]
        assert "data" not in listed[0]

        download = client.get(meta["url"])
        assert download.status_code == 200
        assert download.content == b"%PDF-1.4 receipt"
        assert download.headers["content-type"] == "application/pdf"
        assert download.headers["content-disposition"] == 'inline; filename="receipt.pdf"'

    def test_invalid_payload(self, client):
        response = client.post("/api/v1/finance/documents", json={
            "academyId": "a1", "filename": "x.pdf", "data": "###",
        })
        assert response.status_code == 400

    def test_missing_document(self, client):
        assert client.get("/api/v1/docs/missing").status_code == 404
