#!/usr/bin/env python3
"""
YNAB API Client

Thin wrapper over the YNAB REST API covering the three calls the tracker
needs: listing budgets, fetching transactions changed since a server
knowledge cursor, and bulk-updating transactions.

Failed requests are not retried. Any transport failure, non-2xx status, or
YNAB error envelope raises LedgerRejectedError.
"""

import logging
from typing import Any

import requests

from ..core.errors import LedgerRejectedError
from .models import TransactionDelta, TransactionMutation, YnabBudget, YnabTransaction

logger = logging.getLogger(__name__)


class YnabClient:
    """Authenticated YNAB API client."""

    def __init__(
        self,
        api_token: str,
        base_url: str = "https://api.ynab.com/v1",
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize YNAB client.

        Args:
            api_token: Personal access token
            base_url: API root, without trailing slash
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/json",
            }
        )

    def get_budgets(self) -> list[YnabBudget]:
        """List all budgets visible to the token."""
        data = self._request("GET", "/budgets")
        return [YnabBudget.from_dict(budget) for budget in data.get("budgets", [])]

    def get_transactions(self, budget_id: str, server_knowledge: int | None = None) -> TransactionDelta:
        """
        Fetch transactions changed since ``server_knowledge``.

        Args:
            budget_id: Budget to read
            server_knowledge: Cursor from a previous call, or None for a full fetch

        Returns:
            TransactionDelta with the changed transactions and the new cursor
        """
        params = {}
        if server_knowledge is not None:
            params["last_knowledge_of_server"] = server_knowledge

        data = self._request("GET", f"/budgets/{budget_id}/transactions", params=params)
        transactions = [YnabTransaction.from_dict(tx) for tx in data.get("transactions", [])]

        logger.debug(
            f"Fetched {len(transactions)} transactions for budget {budget_id} "
            f"(knowledge {server_knowledge} -> {data.get('server_knowledge')})"
        )
        return TransactionDelta(
            transactions=transactions,
            server_knowledge=self._server_knowledge(data, "GET", f"/budgets/{budget_id}/transactions"),
        )

    def patch_transactions(self, budget_id: str, mutations: list[TransactionMutation]) -> int:
        """
        Send amount updates for a budget in one bulk request.

        Args:
            budget_id: Budget to update
            mutations: Transaction updates to apply

        Returns:
            Server knowledge reported by YNAB after the update
        """
        body = {"transactions": [mutation.to_dict() for mutation in mutations]}
        data = self._request("PATCH", f"/budgets/{budget_id}/transactions", json=body)

        logger.info(f"Updated {len(mutations)} transactions in budget {budget_id}")
        return self._server_knowledge(data, "PATCH", f"/budgets/{budget_id}/transactions")

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Perform a request and unwrap the ``data`` envelope."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise LedgerRejectedError(f"{method} {path} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            raise LedgerRejectedError(
                f"{method} {path} returned a non-JSON response",
                status_code=response.status_code,
            )

        error = payload.get("error")
        if error or not response.ok:
            error = error or {}
            raise LedgerRejectedError(
                error.get("detail") or error.get("name") or response.reason or "Unknown error",
                status_code=response.status_code,
                error_id=error.get("id"),
            )

        data = payload.get("data")
        if not isinstance(data, dict):
            raise LedgerRejectedError(f"{method} {path} response has no data", status_code=response.status_code)
        return data

    @staticmethod
    def _server_knowledge(data: dict[str, Any], method: str, path: str) -> int:
        """Extract the cursor YNAB returns alongside transaction data."""
        server_knowledge = data.get("server_knowledge")
        if not isinstance(server_knowledge, int) or isinstance(server_knowledge, bool):
            raise LedgerRejectedError(f"{method} {path} response has no server_knowledge")
        return server_knowledge
