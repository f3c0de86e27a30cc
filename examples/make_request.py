"""Example: Make authenticated requests to GDAX."""

import asyncio

from gdax_api import AgentConfig, ApiError, Credentials, GdaxClient


async def main():
    # Reads GDAX_API_KEY, GDAX_API_SECRET and GDAX_API_PASSPHRASE
    credentials = Credentials.from_env()

    async with GdaxClient(credentials, config=AgentConfig(sandbox=True)) as gdax:
        accounts = (await gdax.list_accounts()).json()
        for account in accounts:
            print(f"{account['currency']}: {account['balance']}")

        try:
            response = await gdax.place_order(
                side="buy",
                product_id="BTC-USD",
                type="limit",
                price="100.00",
                size="0.01",
            )
            print(f"\n✓ Order placed: {response.json()['id']}")
        except ApiError as exc:
            print(f"\n✗ Order rejected ({exc.status_code}): {exc.reason}")

        open_orders = (await gdax.list_orders(status=["open", "pending"])).json()
        print(f"\nOpen orders: {len(open_orders)}")


if __name__ == "__main__":
    asyncio.run(main())
