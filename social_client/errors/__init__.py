from .client import (
    SocialClientError,
    DerivationExhausted,
    ValidationError,
    UnrecognizedOperation,
    MalformedPayload,
    SubmissionError,
    AccountNotOwned,
)
