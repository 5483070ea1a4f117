from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote

import requests
import structlog
from pydantic import ValidationError

from ..schemas.upstream import ViaCepAddress
from .errors import UpstreamError, UpstreamSchemaError

logger = structlog.get_logger()


class LocationResolver(Protocol):
    """Resolves a postal code to a locality name.

    An empty string means the code is unknown. Transport and decoding
    failures raise ``UpstreamError``.
    """

    def get_location(self, cep: str) -> str:
        ...


@dataclass
class ViaCepClient:
    """ViaCEP implementation of `LocationResolver`.

    Notes:
    - Any non-2xx reply reads as "not found", so a ViaCEP outage and an
      unknown code look the same to callers.
    - No retries. Each call is bounded by the connect/read timeouts.
    - ``session`` may be injected; it is then reused and left open.
    """

    base_url: str = "https://viacep.com.br/ws/{cep}/json/"
    timeout_connect: float = 5.0
    timeout_read: float = 10.0
    session: Optional[requests.Session] = None

    def _session(self):
        if self.session is not None:
            return nullcontext(self.session)
        return requests.Session()

    def get_location(self, cep: str) -> str:
        url = self.base_url.format(cep=quote(cep, safe=""))
        timeout = (self.timeout_connect, self.timeout_read)

        logger.debug("location_lookup", cep=cep)
        try:
            with self._session() as s:
                resp = s.get(url, headers={"accept": "application/json"}, timeout=timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"location lookup failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.info("location_not_found", cep=cep, status=resp.status_code)
            return ""

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamError(f"location lookup returned invalid JSON: {e}") from e

        try:
            address = ViaCepAddress.model_validate(payload)
        except ValidationError as e:
            raise UpstreamSchemaError(f"location lookup returned unexpected body: {e}") from e

        if not address.locality:
            logger.info("location_not_found", cep=cep, status=resp.status_code)
        return address.locality
