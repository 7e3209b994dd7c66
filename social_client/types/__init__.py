import typing
from . import social_instruction
from .social_instruction import SocialInstructionKind, SocialInstructionJSON
