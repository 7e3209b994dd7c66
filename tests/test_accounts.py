from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from solders.pubkey import Pubkey

from social_client.accounts import Post, UserPost, UserProfile
from social_client.errors import AccountNotOwned, MalformedPayload
from social_client.program_id import PROGRAM_ID


def account_resp(data: bytes, owner: Pubkey = PROGRAM_ID):
    return SimpleNamespace(value=SimpleNamespace(owner=owner, data=data))


def test_user_profile_decode_ignores_spare_space():
    followers = [Pubkey.new_unique(), Pubkey.new_unique()]
    data = UserProfile.layout.build({"data_len": 2, "followers": followers}) + bytes(64)
    profile = UserProfile.decode(data)
    assert profile.data_len == 2
    assert profile.followers == followers
    assert profile.follows(followers[1])
    assert not profile.follows(Pubkey.new_unique())


def test_user_profile_json():
    profile = UserProfile(data_len=1, followers=[Pubkey.new_unique()])
    assert UserProfile.from_json(profile.to_json()) == profile


def test_user_profile_truncated():
    with pytest.raises(MalformedPayload):
        UserProfile.decode(b"\x01\x00\x01\x00\x00\x00" + bytes(5))


def test_post_decode():
    data = Post.layout.build({"content": "hello", "timestamp": 1_700_000_000})
    assert Post.decode(data) == Post(content="hello", timestamp=1_700_000_000)


def test_user_post_decode():
    assert UserPost.decode((12).to_bytes(8, "little")).post_count == 12
    with pytest.raises(MalformedPayload):
        UserPost.decode(b"\x01")


@pytest.mark.asyncio
async def test_fetch_missing_account():
    conn = AsyncMock()
    conn.get_account_info.return_value = SimpleNamespace(value=None)
    assert await UserProfile.fetch(conn, Pubkey.new_unique()) is None


@pytest.mark.asyncio
async def test_fetch_rejects_foreign_owner():
    conn = AsyncMock()
    conn.get_account_info.return_value = account_resp(
        (1).to_bytes(8, "little"), owner=Pubkey.new_unique()
    )
    with pytest.raises(AccountNotOwned):
        await UserPost.fetch(conn, Pubkey.new_unique())


@pytest.mark.asyncio
async def test_fetch_decodes():
    conn = AsyncMock()
    conn.get_account_info.return_value = account_resp(
        Post.layout.build({"content": "gm", "timestamp": 5})
    )
    post = await Post.fetch(conn, Pubkey.new_unique())
    assert post == Post(content="gm", timestamp=5)


def multiple_item(data: bytes, owner: Pubkey = PROGRAM_ID):
    return SimpleNamespace(
        pubkey=Pubkey.new_unique(), account=SimpleNamespace(owner=owner, data=data)
    )


@pytest.mark.asyncio
async def test_post_fetch_multiple_keeps_missing_slots(monkeypatch):
    get_multiple = AsyncMock(
        return_value=[multiple_item(Post.layout.build({"content": "gm", "timestamp": 9})), None]
    )
    monkeypatch.setattr("social_client.accounts.post.get_multiple_accounts", get_multiple)
    conn = AsyncMock()
    addresses = [Pubkey.new_unique(), Pubkey.new_unique()]

    posts = await Post.fetch_multiple(conn, addresses)
    assert posts == [Post(content="gm", timestamp=9), None]
    assert get_multiple.call_args.args == (conn, addresses)


@pytest.mark.asyncio
async def test_post_fetch_multiple_rejects_foreign_owner(monkeypatch):
    foreign = multiple_item(
        Post.layout.build({"content": "gm", "timestamp": 9}), owner=Pubkey.new_unique()
    )
    monkeypatch.setattr(
        "social_client.accounts.post.get_multiple_accounts", AsyncMock(return_value=[foreign])
    )
    with pytest.raises(AccountNotOwned):
        await Post.fetch_multiple(AsyncMock(), [foreign.pubkey])


@pytest.mark.asyncio
async def test_user_profile_fetch_multiple(monkeypatch):
    follower = Pubkey.new_unique()
    data = UserProfile.layout.build({"data_len": 1, "followers": [follower]})
    monkeypatch.setattr(
        "social_client.accounts.user_profile.get_multiple_accounts",
        AsyncMock(return_value=[None, multiple_item(data)]),
    )
    profiles = await UserProfile.fetch_multiple(
        AsyncMock(), [Pubkey.new_unique(), Pubkey.new_unique()]
    )
    assert profiles == [None, UserProfile(data_len=1, followers=[follower])]


@pytest.mark.asyncio
async def test_user_profile_fetch_multiple_rejects_foreign_owner(monkeypatch):
    data = UserProfile.layout.build({"data_len": 0, "followers": []})
    monkeypatch.setattr(
        "social_client.accounts.user_profile.get_multiple_accounts",
        AsyncMock(return_value=[multiple_item(data, owner=Pubkey.new_unique())]),
    )
    with pytest.raises(AccountNotOwned):
        await UserProfile.fetch_multiple(AsyncMock(), [Pubkey.new_unique()])
