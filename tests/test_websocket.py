def _events(socket_client, name):
    return [event["args"][0] for event in socket_client.get_received() if event["name"] == name]


def test_join_game_sends_state(socket_client, new_game):
    game_id = new_game(length=4)

    socket_client.emit("join_game", {"game_id": game_id})

    states = _events(socket_client, "game_state")
    assert len(states) == 1
    assert states[0]["game_id"] == game_id
    assert states[0]["state"]["word_length"] == 4


def test_join_unknown_game(socket_client):
    socket_client.emit("join_game", {"game_id": "missing"})

    errors = _events(socket_client, "error")
    assert errors == [{"success": False, "error": "Game not found", "error_type": "GameNotFoundError"}]


def test_submit_guess_updates_sender_once(socket_client, new_game):
    game_id = new_game(length=4)
    socket_client.emit("join_game", {"game_id": game_id})
    socket_client.get_received()

    socket_client.emit("submit_guess", {"game_id": game_id, "guess": "drag"})

    updates = _events(socket_client, "game_state_update")
    assert len(updates) == 1
    assert updates[0]["state"]["scores"] == [4]


def test_submit_guess_broadcasts_to_room(app_bundle, socket_client, new_game):
    app, socketio = app_bundle
    watcher = socketio.test_client(app)
    game_id = new_game(length=4)
    watcher.emit("join_game", {"game_id": game_id})
    watcher.get_received()

    socket_client.emit("submit_guess", {"game_id": game_id, "guess": "frog"})

    updates = _events(watcher, "game_state_update")
    assert len(updates) == 1
    assert updates[0]["state"]["status"] == "won"
    watcher.disconnect()


def test_submit_invalid_guess(socket_client, new_game):
    game_id = new_game(length=4)

    socket_client.emit("submit_guess", {"game_id": game_id, "guess": "toolong"})

    errors = _events(socket_client, "error")
    assert errors[0]["error_type"] == "InvalidLengthError"


def test_submit_guess_requires_fields(socket_client):
    socket_client.emit("submit_guess", {"guess": "frog"})

    assert _events(socket_client, "error") == [{"error": "Game ID and guess are required"}]


def test_non_object_payloads_rejected(socket_client):
    socket_client.emit("join_game", ["game"])
    assert _events(socket_client, "error") == [{"error": "Game ID is required"}]

    socket_client.emit("submit_guess", "frog")
    assert _events(socket_client, "error") == [{"error": "Game ID and guess are required"}]
