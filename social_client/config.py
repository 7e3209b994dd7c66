import json
import os
import typing
from dataclasses import dataclass
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from .program_id import PROGRAM_ID


@dataclass(frozen=True)
class SocialConfig:
    cluster_url: str
    program_id: Pubkey = PROGRAM_ID

    @classmethod
    def from_env(cls, default: str = "localnet") -> "SocialConfig":
        """Start from ``configs[default]`` and apply CLUSTER_URL / PROGRAM_ID."""
        base = configs[default]
        url = os.environ.get("CLUSTER_URL", base.cluster_url)
        program_id = os.environ.get("PROGRAM_ID")
        return cls(
            cluster_url=url,
            program_id=Pubkey.from_string(program_id) if program_id else base.program_id,
        )


configs: typing.Dict[str, SocialConfig] = {
    "localnet": SocialConfig(cluster_url="http://127.0.0.1:8899"),
    "devnet": SocialConfig(cluster_url="https://api.devnet.solana.com"),
}


def load_keypair(path: str) -> Keypair:
    """Read a keypair file in the JSON byte-array format of ``solana-keygen``."""
    with open(os.path.expanduser(path), "r") as f:
        secret = json.load(f)
    return Keypair.from_bytes(bytes(secret))
