def _events(sio_client, name):
    return [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == name]


def test_socket_connect_and_ping(sio_client):
    assert sio_client.is_connected('/ws')
    sio_client.get_received('/ws')  # flush
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    pongs = _events(sio_client, 'pong')
    assert pongs and pongs[0]['args'][0] == {'n': 1}


def test_get_leaderboard_event(sio_client, client):
    client.post('/api/game/guess', json={'name': 'Alice', 'guess1': '34', 'guess2': '12'})
    sio_client.get_received('/ws')  # flush
    sio_client.emit('get_leaderboard', namespace='/ws')
    boards = _events(sio_client, 'leaderboard')
    assert boards
    assert boards[0]['args'][0]['masterUser'] == {'name': 'Alice', 'accumulatedReward': 1000}


def test_guess_broadcasts_leaderboard_update(sio_client, client):
    sio_client.get_received('/ws')  # flush
    res = client.post('/api/game/guess', json={'name': 'Bob', 'guess1': '43', 'guess2': '76'})
    assert res.status_code == 200
    updates = _events(sio_client, 'leaderboard_update')
    assert len(updates) == 1
    payload = updates[0]['args'][0]
    assert payload['allUsers'] == [{'name': 'Bob', 'accumulatedReward': 400}]
    assert payload['expectedNumbers'] == ['34', '67']


def test_rejected_guess_does_not_broadcast(sio_client, client):
    client.post('/api/game/guess', json={'name': 'Cara', 'guess1': '34', 'guess2': '67'})
    sio_client.get_received('/ws')  # flush
    res = client.post('/api/game/guess', json={'name': 'Cara', 'guess1': '34', 'guess2': '67'})
    assert res.status_code == 403
    assert _events(sio_client, 'leaderboard_update') == []
