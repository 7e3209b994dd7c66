import logging
import typing
from anchorpy import Provider
from solana.exceptions import SolanaRpcException
from solana.rpc.core import (
    RPCException,
    TransactionExpiredBlockheightExceededError,
    UnconfirmedTxError,
)
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from . import pda
from .accounts import Post, UserPost, UserProfile
from .builder import BuildParams, build, validate_content
from .config import SocialConfig
from .errors import SubmissionError, ValidationError
from .program_id import PROGRAM_ID
from .transaction import assemble

logger = logging.getLogger(__name__)

RPC_ERRORS = (
    RPCException,
    SolanaRpcException,
    UnconfirmedTxError,
    TransactionExpiredBlockheightExceededError,
)


class SocialClient:
    """Submit social program instructions signed by the provider's wallet.

    Every call builds fresh instructions, fetches a fresh blockhash and sends
    exactly once. Failures are raised as :class:`SubmissionError`; retrying
    is left to the caller since Follow and Post are not idempotent.
    """

    def __init__(self, provider: Provider, program_id: Pubkey = PROGRAM_ID):
        self.provider = provider
        self.program_id = program_id

    @classmethod
    def from_config(cls, config: SocialConfig, provider: Provider) -> "SocialClient":
        return cls(provider, program_id=config.program_id)

    @property
    def payer(self) -> Keypair:
        return self.provider.wallet.payer

    @property
    def authority(self) -> Pubkey:
        return self.provider.wallet.public_key

    def build(self, kind: str, params: typing.Optional[BuildParams] = None) -> Instruction:
        return build(kind, self.authority, params, program_id=self.program_id)

    async def send_instructions(self, instructions: typing.Sequence[Instruction]) -> Signature:
        conn = self.provider.connection
        try:
            latest = (await conn.get_latest_blockhash()).value
        except RPC_ERRORS as exc:
            raise SubmissionError(str(exc)) from exc
        tx = assemble(instructions, self.payer, latest.blockhash)
        opts = self.provider.opts._replace(
            skip_confirmation=False,
            last_valid_block_height=latest.last_valid_block_height,
        )
        try:
            sig = await self.provider.send(tx, opts)
        except RPC_ERRORS as exc:
            raise SubmissionError(str(exc)) from exc
        logger.debug("sent %d instruction(s), signature %s", len(instructions), sig)
        return sig

    async def init_user(self, seed_type: str) -> Signature:
        return await self.send_instructions([self.build("Init", {"seed_type": seed_type})])

    async def init_profile(self) -> Signature:
        return await self.init_user(pda.USER_PROFILE_SEED.decode())

    async def init_post_container(self) -> Signature:
        return await self.init_user(pda.USER_POST_SEED.decode())

    async def follow(self, target: Pubkey) -> Signature:
        return await self.send_instructions([self.build("Follow", {"target": target})])

    async def unfollow(self, target: Pubkey) -> Signature:
        return await self.send_instructions([self.build("Unfollow", {"target": target})])

    async def query_follows(self) -> Signature:
        return await self.send_instructions([self.build("QueryFollows")])

    async def post(self, content: str, index: typing.Optional[int] = None) -> Signature:
        """Publish ``content`` into post slot ``index``.

        Without an index the slot is the container's current ``post_count``.
        Only 256 slots exist per user; see :data:`pda.MAX_POST_SLOTS`.
        """
        validate_content(content)
        if index is None:
            counter = await self.get_post_counter()
            if counter is None:
                raise ValidationError(
                    "post container is not initialised, call init_post_container first"
                )
            index = counter.post_count
        return await self.send_instructions(
            [self.build("Post", {"content": content, "index": index})]
        )

    async def query_posts(self, index: int) -> Signature:
        return await self.send_instructions([self.build("QueryPosts", {"index": index})])

    async def get_profile(
        self, authority: typing.Optional[Pubkey] = None
    ) -> typing.Optional[UserProfile]:
        address = pda.profile_address(authority or self.authority, self.program_id)
        return await UserProfile.fetch(
            self.provider.connection, address, program_id=self.program_id
        )

    async def get_post_counter(
        self, authority: typing.Optional[Pubkey] = None
    ) -> typing.Optional[UserPost]:
        address = pda.post_container_address(authority or self.authority, self.program_id)
        return await UserPost.fetch(
            self.provider.connection, address, program_id=self.program_id
        )

    async def get_post(
        self, index: int, authority: typing.Optional[Pubkey] = None
    ) -> typing.Optional[Post]:
        address = pda.post_address(authority or self.authority, index, self.program_id)
        return await Post.fetch(self.provider.connection, address, program_id=self.program_id)

    async def get_posts(
        self, authority: typing.Optional[Pubkey] = None
    ) -> typing.List[typing.Optional[Post]]:
        owner = authority or self.authority
        counter = await self.get_post_counter(owner)
        if counter is None:
            return []
        count = min(counter.post_count, pda.MAX_POST_SLOTS)
        addresses = [pda.post_address(owner, i, self.program_id) for i in range(count)]
        if not addresses:
            return []
        return await Post.fetch_multiple(
            self.provider.connection, addresses, program_id=self.program_id
        )
