import unittest
from unittest.mock import Mock, patch

import requests

from cep_weather.services.errors import UpstreamError, UpstreamSchemaError
from cep_weather.services.location_service import ViaCepClient

from .conftest import fake_response


class TestViaCepClient(unittest.TestCase):
    def _client(self, response=None, error=None) -> tuple:
        session = Mock()
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = response
        return ViaCepClient(session=session), session

    def test_returns_locality(self) -> None:
        payload = {
            "cep": "01310-100",
            "logradouro": "Avenida Paulista",
            "bairro": "Bela Vista",
            "localidade": "São Paulo",
            "uf": "SP",
        }
        client, session = self._client(fake_response(payload))

        self.assertEqual(client.get_location("01310100"), "São Paulo")
        args, kwargs = session.get.call_args
        self.assertEqual(args[0], "https://viacep.com.br/ws/01310100/json/")
        self.assertEqual(kwargs["timeout"], (5.0, 10.0))

    def test_code_is_escaped_into_the_path(self) -> None:
        client, session = self._client(fake_response({"localidade": "X"}))
        client.get_location("01/10100")
        self.assertEqual(session.get.call_args[0][0], "https://viacep.com.br/ws/01%2F10100/json/")

    def test_non_2xx_is_not_found(self) -> None:
        for status in (400, 404, 500, 503):
            client, _ = self._client(fake_response(None, status_code=status))
            self.assertEqual(client.get_location("00000000"), "")

    def test_erro_flag_is_not_found(self) -> None:
        client, _ = self._client(fake_response({"erro": True}))
        self.assertEqual(client.get_location("99999999"), "")

        client, _ = self._client(fake_response({"erro": "true"}))
        self.assertEqual(client.get_location("99999999"), "")

    def test_missing_locality_is_not_found(self) -> None:
        client, _ = self._client(fake_response({"cep": "01310-100"}))
        self.assertEqual(client.get_location("01310100"), "")

    def test_null_fields_read_as_absent(self) -> None:
        client, _ = self._client(fake_response({"localidade": None, "erro": None}))
        self.assertEqual(client.get_location("01310100"), "")

        client, _ = self._client(fake_response({"cep": None, "localidade": "Recife", "uf": None}))
        self.assertEqual(client.get_location("50010000"), "Recife")

    def test_transport_error_raises(self) -> None:
        client, _ = self._client(error=requests.ConnectionError("connection refused"))
        with self.assertRaises(UpstreamError) as ctx:
            client.get_location("01310100")
        self.assertIn("connection refused", str(ctx.exception))

    def test_invalid_json_raises(self) -> None:
        client, _ = self._client(fake_response(ValueError("Expecting value")))
        with self.assertRaises(UpstreamError):
            client.get_location("01310100")

    def test_wrong_shape_raises(self) -> None:
        client, _ = self._client(fake_response(["not", "an", "object"]))
        with self.assertRaises(UpstreamSchemaError):
            client.get_location("01310100")

    @patch("requests.Session.get")
    def test_default_session(self, mock_get: Mock) -> None:
        mock_get.return_value = fake_response({"localidade": "Curitiba"})
        client = ViaCepClient(base_url="http://viacep.local/ws/{cep}/json/", timeout_connect=1.0, timeout_read=2.0)

        self.assertEqual(client.get_location("80010000"), "Curitiba")
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["timeout"], (1.0, 2.0))


if __name__ == "__main__":
    unittest.main()
