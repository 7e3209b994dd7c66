from solders.instruction import AccountMeta
from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID

from social_client import instructions
from social_client.program_id import PROGRAM_ID


def roles(ix):
    return [(m.is_writable, m.is_signer) for m in ix.accounts]


def test_init_accounts():
    authority, social = Pubkey.new_unique(), Pubkey.new_unique()
    ix = instructions.init(
        {"seed_type": "profile"},
        {"authority": authority, "social": social, "system_program": SYS_PROGRAM_ID},
    )
    assert ix.program_id == PROGRAM_ID
    assert [m.pubkey for m in ix.accounts] == [authority, social, SYS_PROGRAM_ID]
    assert roles(ix) == [(True, True), (True, False), (False, False)]


def test_follow_and_unfollow_accounts(target):
    profile = Pubkey.new_unique()
    for builder in (instructions.follow, instructions.unfollow):
        ix = builder({"target": target}, {"profile": profile})
        assert [m.pubkey for m in ix.accounts] == [profile]
        assert roles(ix) == [(True, False)]


def test_query_follows_accounts():
    profile = Pubkey.new_unique()
    ix = instructions.query_follows({"profile": profile})
    assert [m.pubkey for m in ix.accounts] == [profile]
    assert roles(ix) == [(True, False)]
    assert bytes(ix.data) == b"\x03"


def test_post_accounts():
    authority, user_post, post = (Pubkey.new_unique() for _ in range(3))
    ix = instructions.post(
        {"content": "hi"},
        {
            "authority": authority,
            "user_post": user_post,
            "post": post,
            "system_program": SYS_PROGRAM_ID,
        },
    )
    assert [m.pubkey for m in ix.accounts] == [authority, user_post, post, SYS_PROGRAM_ID]
    assert roles(ix) == [(True, True), (True, False), (True, False), (False, False)]


def test_query_posts_accounts():
    user_post, post = Pubkey.new_unique(), Pubkey.new_unique()
    ix = instructions.query_posts({"user_post": user_post, "post": post})
    assert [m.pubkey for m in ix.accounts] == [user_post, post]
    assert roles(ix) == [(True, False), (True, False)]


def test_remaining_accounts_are_appended():
    profile, extra = Pubkey.new_unique(), Pubkey.new_unique()
    ix = instructions.query_follows(
        {"profile": profile},
        remaining_accounts=[AccountMeta(pubkey=extra, is_signer=False, is_writable=False)],
    )
    assert [m.pubkey for m in ix.accounts] == [profile, extra]


def test_custom_program_id():
    program_id = Pubkey.new_unique()
    ix = instructions.query_follows({"profile": Pubkey.new_unique()}, program_id=program_id)
    assert ix.program_id == program_id
