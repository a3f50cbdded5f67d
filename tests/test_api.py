def test_new_game(client):
    res = client.post('/api/new_game')
    assert res.status_code == 200
    data = res.get_json()
    assert data['success'] is True
    assert 'game_id' in data
    state = data['state']
    assert state['score'] == 0
    assert state['current_word_count'] == 1
    assert state['word_count_label'] == '1 of 10 words'
    assert state['answer'] is None


def test_get_state(client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    res = client.get(f'/api/game/{game_id}/state')
    assert res.status_code == 200
    assert res.get_json()['state']['game_id'] == game_id


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/guess', json={'guess': 'cat'}).status_code == 404
    assert client.post('/api/game/nope/skip').status_code == 404
    assert client.post('/api/game/nope/restart').status_code == 404
    assert client.get('/api/game/nope/summary').status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_guess_requires_body(client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    res = client.post(f'/api/game/{game_id}/guess', json={})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess is required'

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': '  '})
    assert res.status_code == 400


def test_wrong_guess_says_try_again(client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'xyzzyq'})
    assert res.status_code == 200
    data = res.get_json()
    assert data['correct'] is False
    assert data['message'] == 'Try again!'
    assert data['state']['score'] == 0
    assert data['state']['current_word_count'] == 1


def test_guess_is_trimmed_before_checking(two_word_client, two_word_service, current_word):
    game_id = two_word_client.post('/api/new_game').get_json()['game_id']
    word = current_word(two_word_service, game_id)

    data = two_word_client.post(f'/api/game/{game_id}/guess', json={'guess': f'  {word} '}).get_json()
    assert data['correct'] is True
    assert data['state']['score'] == 20


def test_full_two_word_game(two_word_client, two_word_service, current_word):
    game_id = two_word_client.post('/api/new_game').get_json()['game_id']

    res = two_word_client.post(
        f'/api/game/{game_id}/guess',
        json={'guess': current_word(two_word_service, game_id).upper()}
    )
    data = res.get_json()
    assert data['correct'] is True
    assert data['game_over'] is False
    assert data['state']['score_label'] == 'Score: 20'
    assert data['state']['word_count_label'] == '2 of 2 words'

    res = two_word_client.post(
        f'/api/game/{game_id}/guess',
        json={'guess': current_word(two_word_service, game_id)}
    )
    data = res.get_json()
    assert data['game_over'] is True
    assert data['state']['score'] == 40
    assert data['state']['answer'] in ('cat', 'dog')
    assert data['summary'] == {
        'title': 'Congratulations!',
        'message': 'You scored: 40',
        'score': 40,
        'words_played': 2,
        'max_rounds': 2,
    }

    res = two_word_client.post(f'/api/game/{game_id}/guess', json={'guess': 'cat'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Game is already over'
    assert two_word_client.post(f'/api/game/{game_id}/skip').status_code == 400

    summary = two_word_client.get(f'/api/game/{game_id}/summary').get_json()
    assert summary['game_over'] is True
    assert summary['summary']['score'] == 40


def test_skip_then_play_again(two_word_client):
    game_id = two_word_client.post('/api/new_game').get_json()['game_id']

    data = two_word_client.post(f'/api/game/{game_id}/skip').get_json()
    assert data['game_over'] is False
    assert data['state']['current_word_count'] == 2

    data = two_word_client.post(f'/api/game/{game_id}/skip').get_json()
    assert data['game_over'] is True
    assert data['summary']['message'] == 'You scored: 0'

    data = two_word_client.post(f'/api/game/{game_id}/restart').get_json()
    assert data['success'] is True
    assert data['state']['game_over'] is False
    assert data['state']['current_word_count'] == 1
    assert data['state']['score'] == 0


def test_delete_game(client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    res = client.delete(f'/api/game/{game_id}')
    assert res.status_code == 200
    assert res.get_json()['success'] is True
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client):
    client.post('/api/new_game')
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['word_pool_size'] > 0
