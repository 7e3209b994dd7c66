import asyncio
import os

from anchorpy import Provider, Wallet
from solana.rpc.async_api import AsyncClient

from social_client import SocialClient, SocialConfig, load_keypair


async def function() -> None:
    kp = load_keypair(os.environ.get("USER_KEYPAIR", "~/.config/solana/id.json"))

    config = SocialConfig.from_env()
    connection = AsyncClient(config.cluster_url)
    provider = Provider(connection, Wallet(kp))
    client = SocialClient.from_config(config, provider)

    sig = await client.init_profile()
    print("init user success, sign:", sig)
    profile = await client.get_profile()
    print(profile)
    await connection.close()


asyncio.run(function())
