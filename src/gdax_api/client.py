"""GDAX client - one coroutine per REST endpoint.

Each method maps to exactly one request agent call with a fixed path.
Keyword arguments left as None are not sent. Pagination cursors
(``before``, ``after``, ``limit``) are forwarded as-is; following them is
up to the caller.
"""

from typing import Any, Dict, List, Optional, Union

import httpx

from .agent import RequestAgent
from .config import AgentConfig
from .types import Credentials, Scalar

StatusFilter = Union[str, List[str], None]


def _compact(**params: Any) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}


class GdaxClient:
    """Client for the GDAX REST API.

    Usage:
        # Market data only
        async with GdaxClient() as gdax:
            book = (await gdax.get_product_order_book("BTC-USD", level=2)).json()

        # Trading
        gdax = GdaxClient(Credentials.from_env())
        await gdax.place_order(
            side="buy", product_id="BTC-USD", price="100.00", size="0.01"
        )
        open_orders = (await gdax.list_orders(status=["open", "pending"])).json()
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config: Optional[AgentConfig] = None,
        agent: Optional[RequestAgent] = None,
    ):
        self.agent = agent or RequestAgent(credentials=credentials, config=config)

    def is_upgraded(self) -> bool:
        return self.agent.is_upgraded()

    def upgrade(self, credentials: Credentials) -> None:
        """Attach or replace API keys."""
        self.agent.upgrade(credentials)

    # -------------------------------------------------------------------------
    # Market data (public)
    # -------------------------------------------------------------------------

    async def get_products(self) -> httpx.Response:
        return await self.agent.get_public("products")

    async def get_product_order_book(
        self, product_id: str, level: Optional[int] = None
    ) -> httpx.Response:
        """Get the order book; level is 1 (best bid/ask), 2 (top 50) or 3 (full)."""
        return await self.agent.get_public(f"products/{product_id}/book", _compact(level=level))

    async def get_product_ticker(self, product_id: str) -> httpx.Response:
        return await self.agent.get_public(f"products/{product_id}/ticker")

    async def get_product_trades(
        self,
        product_id: str,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        params = _compact(before=before, after=after, limit=limit)
        return await self.agent.get_public(f"products/{product_id}/trades", params)

    async def get_product_historic_rates(
        self,
        product_id: str,
        start: Optional[str] = None,
        end: Optional[str] = None,
        granularity: Optional[int] = None,
    ) -> httpx.Response:
        """Get candles; start and end are ISO 8601, granularity is in seconds."""
        params = _compact(start=start, end=end, granularity=granularity)
        return await self.agent.get_public(f"products/{product_id}/candles", params)

    async def get_product_stats(self, product_id: str) -> httpx.Response:
        return await self.agent.get_public(f"products/{product_id}/stats")

    async def get_currencies(self) -> httpx.Response:
        return await self.agent.get_public("currencies")

    async def get_time(self) -> httpx.Response:
        return await self.agent.get_public("time")

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    async def list_accounts(self) -> httpx.Response:
        return await self.agent.get_private("accounts")

    async def get_account(self, account_id: str) -> httpx.Response:
        return await self.agent.get_private(f"accounts/{account_id}")

    async def get_account_history(
        self,
        account_id: str,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        """List ledger entries for an account."""
        params = _compact(before=before, after=after, limit=limit)
        return await self.agent.get_private(f"accounts/{account_id}/ledger", params)

    async def get_account_holds(
        self,
        account_id: str,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        params = _compact(before=before, after=after, limit=limit)
        return await self.agent.get_private(f"accounts/{account_id}/holds", params)

    # -------------------------------------------------------------------------
    # Orders & fills
    # -------------------------------------------------------------------------

    async def place_order(
        self,
        side: str,
        product_id: str,
        type: Optional[str] = None,
        price: Optional[Scalar] = None,
        size: Optional[Scalar] = None,
        funds: Optional[Scalar] = None,
        client_oid: Optional[str] = None,
        stp: Optional[str] = None,
        time_in_force: Optional[str] = None,
        cancel_after: Optional[str] = None,
        post_only: Optional[bool] = None,
        overdraft_enabled: Optional[bool] = None,
        funding_amount: Optional[Scalar] = None,
    ) -> httpx.Response:
        """Place a limit, market or stop order.

        Fields are sent in the order given here; only those that are set
        appear in the body.
        """
        body = _compact(
            side=side,
            product_id=product_id,
            type=type,
            price=price,
            size=size,
            funds=funds,
            client_oid=client_oid,
            stp=stp,
            time_in_force=time_in_force,
            cancel_after=cancel_after,
            post_only=post_only,
            overdraft_enabled=overdraft_enabled,
            funding_amount=funding_amount,
        )
        return await self.agent.post_private("orders", body)

    async def cancel_order(self, order_id: str) -> httpx.Response:
        return await self.agent.delete_private(f"orders/{order_id}")

    async def cancel_all_orders(self, product_id: Optional[str] = None) -> httpx.Response:
        """Cancel all open orders, optionally for a single product."""
        return await self.agent.delete_private("orders", _compact(product_id=product_id))

    async def list_orders(
        self,
        status: StatusFilter = None,
        product_id: Optional[str] = None,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        """List orders.

        ``status`` may be a list (e.g. ``["open", "pending"]``); it is sent as
        repeated ``status`` keys.
        """
        params = _compact(
            status=status, product_id=product_id, before=before, after=after, limit=limit
        )
        return await self.agent.get_private("orders", params)

    async def get_order(self, order_id: str) -> httpx.Response:
        return await self.agent.get_private(f"orders/{order_id}")

    async def list_fills(
        self,
        order_id: Optional[str] = None,
        product_id: Optional[str] = None,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        params = _compact(
            order_id=order_id, product_id=product_id, before=before, after=after, limit=limit
        )
        return await self.agent.get_private("fills", params)

    # -------------------------------------------------------------------------
    # Margin funding & position
    # -------------------------------------------------------------------------

    async def list_fundings(
        self,
        status: StatusFilter = None,
        before: Optional[Scalar] = None,
        after: Optional[Scalar] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        """List margin fundings; ``status`` is outstanding, settled or rejected."""
        params = _compact(status=status, before=before, after=after, limit=limit)
        return await self.agent.get_private("funding", params)

    async def repay_funding(self, amount: Scalar, currency: str) -> httpx.Response:
        return await self.agent.post_private(
            "funding/repay", {"amount": amount, "currency": currency}
        )

    async def create_margin_transfer(
        self,
        margin_profile_id: str,
        type: str,
        currency: str,
        amount: Scalar,
    ) -> httpx.Response:
        """Move funds between a standard and a margin profile (type: deposit or withdraw)."""
        body = {
            "margin_profile_id": margin_profile_id,
            "type": type,
            "currency": currency,
            "amount": amount,
        }
        return await self.agent.post_private("profiles/margin-transfer", body)

    async def get_position(self) -> httpx.Response:
        return await self.agent.get_private("position")

    async def close_position(self, repay_only: Optional[bool] = None) -> httpx.Response:
        return await self.agent.post_private("position/close", _compact(repay_only=repay_only))

    # -------------------------------------------------------------------------
    # Deposits & withdrawals
    # -------------------------------------------------------------------------

    async def deposit_from_payment_method(
        self, amount: Scalar, currency: str, payment_method_id: str
    ) -> httpx.Response:
        body = {"amount": amount, "currency": currency, "payment_method_id": payment_method_id}
        return await self.agent.post_private("deposits/payment-method", body)

    async def deposit_from_coinbase(
        self, amount: Scalar, currency: str, coinbase_account_id: str
    ) -> httpx.Response:
        body = {"amount": amount, "currency": currency, "coinbase_account_id": coinbase_account_id}
        return await self.agent.post_private("deposits/coinbase-account", body)

    async def withdraw_to_payment_method(
        self, amount: Scalar, currency: str, payment_method_id: str
    ) -> httpx.Response:
        body = {"amount": amount, "currency": currency, "payment_method_id": payment_method_id}
        return await self.agent.post_private("withdrawals/payment-method", body)

    async def withdraw_to_coinbase(
        self, amount: Scalar, currency: str, coinbase_account_id: str
    ) -> httpx.Response:
        body = {"amount": amount, "currency": currency, "coinbase_account_id": coinbase_account_id}
        return await self.agent.post_private("withdrawals/coinbase-account", body)

    async def withdraw_to_crypto(
        self, amount: Scalar, currency: str, crypto_address: str
    ) -> httpx.Response:
        body = {"amount": amount, "currency": currency, "crypto_address": crypto_address}
        return await self.agent.post_private("withdrawals/crypto", body)

    async def list_payment_methods(self) -> httpx.Response:
        return await self.agent.get_private("payment-methods")

    async def list_coinbase_accounts(self) -> httpx.Response:
        return await self.agent.get_private("coinbase-accounts")

    # -------------------------------------------------------------------------
    # Reports & volume
    # -------------------------------------------------------------------------

    async def create_report(
        self,
        type: str,
        start_date: str,
        end_date: str,
        product_id: Optional[str] = None,
        account_id: Optional[str] = None,
        format: Optional[str] = None,
        email: Optional[str] = None,
    ) -> httpx.Response:
        """Request a fills or account report.

        Args:
            type: "fills" (needs product_id) or "account" (needs account_id)
            start_date: ISO 8601 start of the report window
            end_date: ISO 8601 end of the report window
            product_id: Product for fills reports
            account_id: Account for account reports
            format: "pdf" or "csv"
            email: Address to notify when the report is ready
        """
        body = _compact(
            type=type,
            start_date=start_date,
            end_date=end_date,
            product_id=product_id,
            account_id=account_id,
            format=format,
            email=email,
        )
        return await self.agent.post_private("reports", body)

    async def get_report(self, report_id: str) -> httpx.Response:
        return await self.agent.get_private(f"reports/{report_id}")

    async def get_trailing_volume(self) -> httpx.Response:
        """Get 30-day trailing volume for all products."""
        return await self.agent.get_private("users/self/trailing-volume")

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.agent.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
