import unittest
from types import SimpleNamespace
from unittest import mock

from ppify.helpers.errors import OsuApiError, UserNotFoundError
from ppify.helpers.osu_api import OsuApiV2


class OsuApiTestCase(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.api = OsuApiV2(1, "secret", cooldown=0)

    async def asyncTearDown(self):
        await self.api.close()

    def test_format_response(self):
        # Nested dicts and lists of dicts become namespaces
        response = [{"id": 1, "beatmap": {"id": 2, "tags": [{"name": "a"}]}, "pp": None}]
        formatted = self.api._format_response(response)
        self.assertIsInstance(formatted[0], SimpleNamespace)
        self.assertEqual(2, formatted[0].beatmap.id)
        self.assertEqual("a", formatted[0].beatmap.tags[0].name)
        self.assertIsNone(formatted[0].pp)

    def test_format_response_errors(self):
        with self.assertRaises(OsuApiError):
            self.api._format_response({"error": None}, 200)
        with self.assertRaises(OsuApiError) as ctx:
            self.api._format_response({"authentication": "basic"}, 401)
        self.assertEqual(401, ctx.exception.status)

    def test_format_params(self):
        self.assertEqual({"limit": 100}, OsuApiV2._format_params({"limit": 100, "mode": None}))
        self.assertEqual({}, OsuApiV2._format_params(None))

    async def test_resolve_numeric_user_id(self):
        # Numeric input does not need a request
        with mock.patch.object(self.api, "_get_endpoint") as get_endpoint:
            self.assertEqual(124493, await self.api.resolve_user_id(" 124493 "))
            get_endpoint.assert_not_called()

    async def test_resolve_username(self):
        with mock.patch.object(self.api, "_get_endpoint",
                               mock.AsyncMock(return_value=SimpleNamespace(id=2))) as get_endpoint:
            self.assertEqual(2, await self.api.resolve_user_id("peppy"))
            get_endpoint.assert_awaited_once_with("users/peppy", {"key": "username"})

    async def test_user_not_found(self):
        error = OsuApiError("not found", status=404)
        with mock.patch.object(self.api, "_get_endpoint", mock.AsyncMock(side_effect=error)):
            with self.assertRaises(UserNotFoundError):
                await self.api.resolve_user_id("nobody-here")

    async def test_get_user_best_scores(self):
        scores = [SimpleNamespace(pp=100.0)]
        with mock.patch.object(self.api, "_get_endpoint", mock.AsyncMock(return_value=scores)) as get_endpoint:
            result = await self.api.get_user_best_scores("2", "mania")

        self.assertEqual(scores, result)
        get_endpoint.assert_awaited_once_with("users/2/scores/best",
                                              {"include_fails": None, "mode": "mania", "limit": 100,
                                               "offset": None})


if __name__ == '__main__':
    unittest.main()
