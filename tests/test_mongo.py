"""Unit tests for the MongoDB client manager."""

from unittest.mock import MagicMock, patch

import pytest

from calorie_api.db.mongo import MongoDB


class TestMongoDB:
    def teardown_method(self):
        MongoDB.client = None

    def test_connect_opens_tz_aware_client(self):
        with patch("calorie_api.db.mongo.AsyncIOMotorClient") as client_class:
            MongoDB.connect("mongodb://db.test:27017", "calories")

        client_class.assert_called_once_with("mongodb://db.test:27017", tz_aware=True)
        assert MongoDB.is_connected()
        assert MongoDB.get_database() is client_class.return_value.__getitem__.return_value
        client_class.return_value.__getitem__.assert_called_once_with("calories")

    def test_close(self):
        client = MagicMock()
        MongoDB.client = client

        MongoDB.close()

        client.close.assert_called_once_with()
        assert not MongoDB.is_connected()

    def test_database_requires_connection(self):
        with pytest.raises(RuntimeError):
            MongoDB.get_database()
