import pytest

from app.utils.settings import settings


ACK_BODY = '{"message_id":"518726r85010000001","payload":{}}'


@pytest.fixture
def hub_auth(monkeypatch):
    monkeypatch.setattr(settings, "hub_access_token", "s3cr3t")
    monkeypatch.setattr(settings, "hub_store_id", "store-1")


def test_auth_disabled_by_default(client):
    assert client.post("/drop_ship", content=ACK_BODY).status_code == 200


def test_missing_token_is_rejected(client, hub_auth):
    response = client.post("/drop_ship", content=ACK_BODY)
    assert response.status_code == 401


def test_wrong_token_is_rejected(client, hub_auth):
    response = client.post(
        "/validate_address",
        content=ACK_BODY,
        headers={"X-Hub-Store": "store-1", "X-Hub-Access-Token": "nope"},
    )
    assert response.status_code == 401


def test_wrong_store_is_rejected(client, hub_auth):
    response = client.post(
        "/drop_ship",
        content=ACK_BODY,
        headers={"X-Hub-Store": "other", "X-Hub-Access-Token": "s3cr3t"},
    )
    assert response.status_code == 401


def test_valid_credentials(client, hub_auth):
    response = client.post(
        "/drop_ship",
        content=ACK_BODY,
        headers={"X-Hub-Store": "store-1", "X-Hub-Access-Token": "s3cr3t"},
    )
    assert response.status_code == 200
    assert response.json() == {"message_id": "518726r85010000001"}


def test_store_check_skipped_when_not_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "hub_access_token", "s3cr3t")
    response = client.post(
        "/drop_ship",
        content=ACK_BODY,
        headers={"X-Hub-Access-Token": "s3cr3t"},
    )
    assert response.status_code == 200
