"""Example: Read public market data (no API keys needed)."""

import asyncio

from gdax_api import GdaxClient


async def main():
    async with GdaxClient() as gdax:
        ticker = (await gdax.get_product_ticker("BTC-USD")).json()
        print(f"BTC-USD last price: {ticker['price']}")

        book = (await gdax.get_product_order_book("BTC-USD", level=1)).json()
        print(f"Best bid: {book['bids'][0][0]}  Best ask: {book['asks'][0][0]}")

        # Pagination cursors come back in the CB-BEFORE / CB-AFTER headers
        response = await gdax.get_product_trades("BTC-USD", limit=10)
        print(f"Last 10 trades: {len(response.json())}")
        print(f"Next page cursor: {response.headers.get('CB-AFTER')}")


if __name__ == "__main__":
    asyncio.run(main())
