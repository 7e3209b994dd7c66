from . import accounts, errors, instructions, types
from .builder import build
from .client import SocialClient
from .config import SocialConfig, configs, load_keypair
from .pda import find_program_address, MAX_POST_SLOTS
from .program_id import PROGRAM_ID
from .transaction import assemble
