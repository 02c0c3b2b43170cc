import pytest

from boardgames.errors import NotFoundError, ValidationError
from boardgames.utils import check_exists, parse_pagination


class TestCheckExists:
    async def test_existing_row(self, session):
        assert await check_exists(session, 'reviews', 'review_id', 1) is None

    async def test_existing_string_key(self, session):
        assert await check_exists(session, 'categories', 'slug', "children's games") is None

    async def test_missing_row(self, session):
        with pytest.raises(NotFoundError) as error:
            await check_exists(session, 'reviews', 'review_id', 10000)

        assert error.value.status_code == 404
        assert error.value.msg == 'Resource not found in the database'

    async def test_unknown_column(self, session):
        with pytest.raises(KeyError):
            await check_exists(session, 'reviews', 'not_a_column', 1)


class TestParsePagination:
    def test_defaults(self):
        assert parse_pagination(None, None) == (10, 1)

    def test_query_strings(self):
        assert parse_pagination('5', '3') == (5, 3)

    @pytest.mark.parametrize('limit, page', [
        ('banana', '1'),
        ('5', 'banana'),
        ('2.5', '1'),
        ('0', '1'),
        ('5', '0'),
        ('99999999999999999999', '1'),
        ('10', '99999999999999999999'),
        ('10', str(2 ** 62)),
    ])
    def test_rejects_invalid_values(self, limit, page):
        with pytest.raises(ValidationError) as error:
            parse_pagination(limit, page)

        assert error.value.msg == 'Limit and page queries should be a number value'
