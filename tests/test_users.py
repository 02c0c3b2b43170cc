class TestGetUsers:
    async def test_returns_all_users(self, client):
        response = await client.get('/api/users')

        assert response.status_code == 200
        users = response.json()['users']
        assert len(users) == 4
        for user in users:
            assert set(user) == {'username', 'name', 'avatar_url'}


class TestGetUserByUsername:
    async def test_returns_user(self, client):
        response = await client.get('/api/users/mallionaire')

        assert response.status_code == 200
        assert response.json() == {
            'user': {
                'username': 'mallionaire',
                'name': 'haz',
                'avatar_url': 'https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg',
            }
        }

    async def test_unknown_user(self, client):
        response = await client.get('/api/users/test_username')

        assert response.status_code == 404
        assert response.json() == {'msg': 'User does not exist'}

    async def test_unknown_user_is_logged(self, client, caplog):
        with caplog.at_level('WARNING', logger='users'):
            await client.get('/api/users/test_username')

        assert 'User test_username not found' in caplog.text
