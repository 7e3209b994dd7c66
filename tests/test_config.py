import json

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from social_client import configs, load_keypair, SocialConfig
from social_client.program_id import PROGRAM_ID


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("CLUSTER_URL", raising=False)
    monkeypatch.delenv("PROGRAM_ID", raising=False)
    assert SocialConfig.from_env() == configs["localnet"]
    assert configs["localnet"].program_id == PROGRAM_ID


def test_from_env_overrides(monkeypatch):
    program_id = Pubkey.new_unique()
    monkeypatch.setenv("CLUSTER_URL", "https://example.invalid")
    monkeypatch.setenv("PROGRAM_ID", str(program_id))
    config = SocialConfig.from_env("devnet")
    assert config.cluster_url == "https://example.invalid"
    assert config.program_id == program_id


def test_load_keypair(tmp_path):
    kp = Keypair()
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(kp))))
    assert load_keypair(str(path)).pubkey() == kp.pubkey()
