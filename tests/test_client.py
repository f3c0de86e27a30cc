"""Tests for the GDAX endpoint client."""

import json

import pytest

from gdax_api import GdaxClient, RequestAgent, Unauthenticated


@pytest.fixture
def make_client(make_agent):
    def factory(credentials=None):
        return GdaxClient(agent=make_agent(credentials))

    return factory


def test_client_init_defaults():
    client = GdaxClient()
    assert isinstance(client.agent, RequestAgent)
    assert not client.is_upgraded()


def test_client_upgrade(credentials):
    client = GdaxClient()
    client.upgrade(credentials)
    assert client.is_upgraded()
    assert client.agent.credentials is credentials


@pytest.mark.asyncio
async def test_list_orders_repeats_status_key(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.list_orders(status=["open", "pending"])

    request = spy.last
    assert request.method == "GET"
    assert request.url.raw_path == b"/orders?status=open&status=pending"
    assert b"status%5B%5D" not in request.url.raw_path


@pytest.mark.asyncio
async def test_list_orders_passes_pagination_through(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.list_orders(product_id="BTC-USD", after=1234, limit=50)

    assert spy.last.url.raw_path == b"/orders?product_id=BTC-USD&after=1234&limit=50"


@pytest.mark.asyncio
async def test_place_order_posts_body(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.place_order(
            side="sell", product_id="ETH-USD", type="limit", price="300.00", size="0.5"
        )

    request = spy.last
    assert request.method == "POST"
    assert request.url.raw_path == b"/orders"
    assert json.loads(request.content) == {
        "side": "sell",
        "product_id": "ETH-USD",
        "type": "limit",
        "price": "300.00",
        "size": "0.5",
    }


@pytest.mark.asyncio
async def test_cancel_endpoints(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.cancel_order("abc-123")
        await client.cancel_all_orders(product_id="BTC-USD")
        await client.cancel_all_orders()

    assert [(r.method, r.url.raw_path) for r in spy.requests] == [
        ("DELETE", b"/orders/abc-123"),
        ("DELETE", b"/orders?product_id=BTC-USD"),
        ("DELETE", b"/orders"),
    ]


@pytest.mark.asyncio
async def test_public_market_data(make_client, spy):
    async with make_client() as client:
        await client.get_products()
        await client.get_product_order_book("BTC-USD", level=2)
        await client.get_product_ticker("BTC-USD")
        await client.get_product_trades("BTC-USD", before=10)
        await client.get_product_historic_rates("BTC-USD", granularity=60)
        await client.get_product_stats("BTC-USD")
        await client.get_currencies()
        await client.get_time()

    assert [r.url.raw_path for r in spy.requests] == [
        b"/products",
        b"/products/BTC-USD/book?level=2",
        b"/products/BTC-USD/ticker",
        b"/products/BTC-USD/trades?before=10",
        b"/products/BTC-USD/candles?granularity=60",
        b"/products/BTC-USD/stats",
        b"/currencies",
        b"/time",
    ]
    assert all("cb-access-sign" not in r.headers for r in spy.requests)


@pytest.mark.asyncio
async def test_private_get_endpoints(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.list_accounts()
        await client.get_account("acc")
        await client.get_account_history("acc", limit=10)
        await client.get_account_holds("acc")
        await client.get_order("ord")
        await client.list_fills(order_id="ord")
        await client.list_fundings(status=["outstanding", "settled"])
        await client.get_position()
        await client.list_payment_methods()
        await client.list_coinbase_accounts()
        await client.get_report("rep")
        await client.get_trailing_volume()

    assert all(r.method == "GET" for r in spy.requests)
    assert all("cb-access-sign" in r.headers for r in spy.requests)
    assert [r.url.raw_path for r in spy.requests] == [
        b"/accounts",
        b"/accounts/acc",
        b"/accounts/acc/ledger?limit=10",
        b"/accounts/acc/holds",
        b"/orders/ord",
        b"/fills?order_id=ord",
        b"/funding?status=outstanding&status=settled",
        b"/position",
        b"/payment-methods",
        b"/coinbase-accounts",
        b"/reports/rep",
        b"/users/self/trailing-volume",
    ]


@pytest.mark.asyncio
async def test_private_post_endpoints(make_client, spy, credentials):
    async with make_client(credentials) as client:
        await client.repay_funding("10", "USD")
        await client.create_margin_transfer("mp", "deposit", "USD", "5")
        await client.close_position(repay_only=True)
        await client.deposit_from_payment_method("10", "USD", "pm")
        await client.deposit_from_coinbase("1", "BTC", "cb")
        await client.withdraw_to_payment_method("10", "USD", "pm")
        await client.withdraw_to_coinbase("1", "BTC", "cb")
        await client.withdraw_to_crypto("1", "BTC", "1Addr")
        await client.create_report(
            "fills", "2017-01-01T00:00:00Z", "2017-02-01T00:00:00Z", product_id="BTC-USD"
        )

    assert all(r.method == "POST" for r in spy.requests)
    assert [r.url.raw_path for r in spy.requests] == [
        b"/funding/repay",
        b"/profiles/margin-transfer",
        b"/position/close",
        b"/deposits/payment-method",
        b"/deposits/coinbase-account",
        b"/withdrawals/payment-method",
        b"/withdrawals/coinbase-account",
        b"/withdrawals/crypto",
        b"/reports",
    ]
    assert json.loads(spy.requests[2].content) == {"repay_only": True}
    assert json.loads(spy.requests[7].content) == {
        "amount": "1",
        "currency": "BTC",
        "crypto_address": "1Addr",
    }
    assert json.loads(spy.requests[8].content) == {
        "type": "fills",
        "start_date": "2017-01-01T00:00:00Z",
        "end_date": "2017-02-01T00:00:00Z",
        "product_id": "BTC-USD",
    }


@pytest.mark.asyncio
async def test_private_endpoint_without_keys(make_client, spy):
    async with make_client() as client:
        with pytest.raises(Unauthenticated):
            await client.list_accounts()
        with pytest.raises(Unauthenticated):
            await client.place_order(side="buy", product_id="BTC-USD", size="1")

    assert spy.requests == []
