"""
Lunch Flow API client.
Binds the operations declared in lunchflow_mcp.contract to HTTP.

Documentation: https://lunchflow.app/destinations
"""
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from lunchflow_mcp import __version__
from lunchflow_mcp.config import ServerConfig
from lunchflow_mcp.contract import (
    GET_ACCOUNT_BALANCE,
    GET_ACCOUNT_TRANSACTIONS,
    LIST_ACCOUNTS,
    ApiResult,
    Operation,
    TransportError,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"
REQUEST_TIMEOUT = 30.0


class LunchFlowClient:
    """Async client for the Lunch Flow API destination endpoints."""

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            config: Server configuration holding the API key and base URL
            transport: Custom httpx transport (optional, used to fake the API)
            timeout: Request timeout in seconds
        """
        self.config = config
        self.transport = transport
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            "Accept": "application/json",
            "User-Agent": f"lunchflow-mcp/{__version__}",
        }

    async def call(
        self,
        operation: Operation,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        """
        Make one request for a contract operation and decode the response.

        Args:
            operation: The contract operation to call
            params: Path parameters for the operation

        Returns:
            The decoded result. Upstream and network failures are returned
            as TransportError rather than raised.

        Raises:
            pydantic.ValidationError: If the path parameters are invalid
        """
        path = operation.build_path(params)
        logger.debug(f"{operation.method} {path} ({operation.name})")

        try:
            async with httpx.AsyncClient(
                base_url=self.config.api_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(operation.method, path)
        except httpx.HTTPError as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"HTTP error calling Lunch Flow API {operation.name}: {message}")
            return TransportError(message=message)

        if response.status_code != 200:
            logger.warning(
                f"Lunch Flow API {operation.name} returned {response.status_code}"
            )
            return operation.decode(response.status_code, self._error_payload(response))

        try:
            return operation.decode(200, response.json())
        except ValidationError as e:
            message = f"Invalid response from {operation.name}: {e}"
        except ValueError as e:
            message = f"Invalid JSON in response from {operation.name}: {e}"

        logger.error(message)
        return TransportError(message=message)

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    async def list_accounts(self) -> ApiResult:
        return await self.call(LIST_ACCOUNTS)

    async def get_account_transactions(self, account_id: int) -> ApiResult:
        return await self.call(GET_ACCOUNT_TRANSACTIONS, {"accountId": str(account_id)})

    async def get_account_balance(self, account_id: int) -> ApiResult:
        return await self.call(GET_ACCOUNT_BALANCE, {"accountId": str(account_id)})
