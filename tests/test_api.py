from chatcore.config.settings import Config


def _create_group(client, auth_headers, name="Team", user_id=1):
    response = client.post(
        "/api/conversations/group", json={"name": name}, headers=auth_headers(user_id)
    )
    assert response.status_code == 201
    return response.json()


def _add(client, auth_headers, conversation_id, user_id, role=None, actor_id=1):
    return client.post(
        f"/api/conversations/{conversation_id}/participants",
        json={"userId": user_id, "role": role},
        headers=auth_headers(actor_id),
    )


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_missing_or_invalid_token_is_401(client):
    assert client.get("/api/conversations/user").status_code == 401

    response = client.get(
        "/api/conversations/user", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401
    assert "error" in response.json()


def test_create_private_conversation(client, auth_headers):
    response = client.post(
        "/api/conversations/private", json={"otherUserId": 2}, headers=auth_headers(1)
    )

    assert response.status_code == 201
    body = response.json()
    assert body["kind"] == "private"
    assert body["name"] is None
    assert body["participantCount"] == 2
    assert body["lastMessageAt"] is None

    again = client.post(
        "/api/conversations/private", json={"otherUserId": 1}, headers=auth_headers(2)
    )
    assert again.status_code == 409
    assert "error" in again.json()


def test_create_private_with_self_is_400(client, auth_headers):
    response = client.post(
        "/api/conversations/private", json={"otherUserId": 1}, headers=auth_headers(1)
    )
    assert response.status_code == 400


def test_body_schema_errors_are_400(client, auth_headers):
    response = client.post(
        "/api/conversations/private", json={"other": "x"}, headers=auth_headers(1)
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_group_lifecycle(client, auth_headers):
    group = _create_group(client, auth_headers)
    conversation_id = group["conversationId"]
    assert group["kind"] == "group"
    assert group["participantCount"] == 1

    added = _add(client, auth_headers, conversation_id, 2)
    assert added.status_code == 201
    assert added.json()["username"] == "bob"
    assert added.json()["status"] == "ACTIVE"

    assert _add(client, auth_headers, conversation_id, 2).status_code == 409
    assert _add(client, auth_headers, conversation_id, 3, actor_id=2).status_code == 403
    assert _add(client, auth_headers, conversation_id, 3, role="Owner").status_code == 400

    renamed = client.put(
        f"/api/conversations/{conversation_id}/name",
        json={"name": "Crew"},
        headers=auth_headers(2),
    )
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Crew"

    participants = client.get(
        f"/api/conversations/{conversation_id}/participants", headers=auth_headers(2)
    ).json()
    assert {p["userId"]: p["role"] for p in participants} == {1: "Admin", 2: None}

    promoted = client.post(
        f"/api/conversations/{conversation_id}/participants/2/promote",
        headers=auth_headers(1),
    )
    assert promoted.status_code == 200
    assert promoted.json()["role"] == "Admin"

    left = client.delete(
        f"/api/conversations/{conversation_id}/participants/2", headers=auth_headers(2)
    )
    assert left.status_code == 200
    assert left.json() == {"success": True}


def test_get_conversation_hides_it_from_outsiders(client, auth_headers):
    conversation_id = _create_group(client, auth_headers)["conversationId"]

    assert (
        client.get(f"/api/conversations/{conversation_id}", headers=auth_headers(1)).status_code
        == 200
    )
    assert (
        client.get(f"/api/conversations/{conversation_id}", headers=auth_headers(3)).status_code
        == 404
    )
    assert client.get("/api/conversations/999", headers=auth_headers(1)).status_code == 404


def test_messages_flow(client, auth_headers):
    conversation_id = _create_group(client, auth_headers)["conversationId"]
    _add(client, auth_headers, conversation_id, 2)

    sent = client.post(
        f"/api/conversations/{conversation_id}/messages",
        json={"content": "hi"},
        headers=auth_headers(2),
    )
    assert sent.status_code == 201
    message = sent.json()
    assert message["type"] == "text"
    assert message["senderId"] == 2
    assert message["senderName"] == "bob"

    client.post(
        f"/api/conversations/{conversation_id}/messages",
        json={"content": "welcome"},
        headers=auth_headers(1),
    )
    history = client.get(
        f"/api/conversations/{conversation_id}/messages", headers=auth_headers(1)
    ).json()
    assert [m["content"] for m in history] == ["hi", "welcome"]

    summary = client.get(
        f"/api/conversations/{conversation_id}", headers=auth_headers(1)
    ).json()
    assert summary["lastMessageAt"] == history[-1]["createdAt"]

    outsider = client.post(
        f"/api/conversations/{conversation_id}/messages",
        json={"content": "me too"},
        headers=auth_headers(3),
    )
    assert outsider.status_code == 404

    blank = client.post(
        f"/api/conversations/{conversation_id}/messages",
        json={"content": "  "},
        headers=auth_headers(1),
    )
    assert blank.status_code == 400

    not_mine = client.delete(
        f"/api/conversations/{conversation_id}/messages/{message['messageId']}",
        headers=auth_headers(1),
    )
    assert not_mine.status_code == 403

    as_admin = client.delete(
        f"/api/conversations/{conversation_id}/messages/{message['messageId']}/admin",
        headers=auth_headers(1),
    )
    assert as_admin.status_code == 200
    assert as_admin.json() == {"success": True}


def test_block_and_unblock(client, auth_headers):
    conversation_id = _create_group(client, auth_headers)["conversationId"]
    _add(client, auth_headers, conversation_id, 2)
    body = {"conversationId": conversation_id, "targetUserId": 2}

    blocked = client.patch(
        "/api/conversations/participants/block", json=body, headers=auth_headers(1)
    )
    assert blocked.status_code == 200
    assert blocked.json()["status"] == "BLOCKED"

    assert (
        client.patch(
            "/api/conversations/participants/block", json=body, headers=auth_headers(1)
        ).status_code
        == 409
    )

    send = client.post(
        f"/api/conversations/{conversation_id}/messages",
        json={"content": "let me talk"},
        headers=auth_headers(2),
    )
    assert send.status_code == 403

    for _ in range(2):
        unblocked = client.patch(
            "/api/conversations/participants/unblock", json=body, headers=auth_headers(1)
        )
        assert unblocked.status_code == 200
        assert unblocked.json()["status"] == "ACTIVE"


def test_list_scopes(client, auth_headers):
    group_id = _create_group(client, auth_headers)["conversationId"]
    private_id = client.post(
        "/api/conversations/private", json={"otherUserId": 3}, headers=auth_headers(1)
    ).json()["conversationId"]
    client.post(
        f"/api/conversations/{group_id}/messages",
        json={"content": "first"},
        headers=auth_headers(1),
    )

    def ids(path):
        response = client.get(f"/api/conversations/{path}", headers=auth_headers(1))
        assert response.status_code == 200
        return [c["conversationId"] for c in response.json()]

    assert set(ids("user")) == {group_id, private_id}
    assert ids("chats") == [group_id]
    assert ids("contacts") == [private_id]


def test_search_users(client, auth_headers):
    found = client.get(
        "/api/conversations/search/users", params={"query": "CAR"}, headers=auth_headers(1)
    )
    assert found.status_code == 200
    assert found.json() == [
        {
            "userId": 3,
            "username": "carol",
            "email": "carol@example.com",
            "phone": "+46700000003",
        }
    ]

    blank = client.get(
        "/api/conversations/search/users", params={"query": "  "}, headers=auth_headers(1)
    )
    assert blank.json() == []


def test_search_users_limit_is_read_from_config(client, auth_headers, monkeypatch):
    monkeypatch.setattr(Config, "USER_SEARCH_LIMIT", 2)

    found = client.get(
        "/api/conversations/search/users",
        params={"query": "example.com"},
        headers=auth_headers(1),
    )

    assert found.status_code == 200
    assert len(found.json()) == 2


def test_metrics_endpoint_exposes_chat_metrics(client, auth_headers):
    _create_group(client, auth_headers)
    client.get("/api/conversations/999", headers=auth_headers(1))

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "chat_errors_total" in response.text
    assert "http_server_request_duration_seconds" in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
