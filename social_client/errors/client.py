import typing


class SocialClientError(Exception):
    code: typing.ClassVar[int] = 0
    name: typing.ClassVar[str] = "SocialClientError"
    msg: typing.ClassVar[str] = ""

    def __init__(self, detail: typing.Optional[str] = None) -> None:
        self.detail = detail if detail is not None else self.msg
        super().__init__(self.detail)


class DerivationExhausted(SocialClientError):
    code = 1
    name = "DerivationExhausted"
    msg = "no nonce yields an off-curve program address"


class ValidationError(SocialClientError):
    code = 2
    name = "ValidationError"
    msg = "parameters are inconsistent with the operation"


class UnrecognizedOperation(SocialClientError):
    code = 3
    name = "UnrecognizedOperation"
    msg = "unknown instruction discriminant"

    def __init__(self, discriminant: int) -> None:
        self.discriminant = discriminant
        super().__init__(f"{self.msg}: {discriminant}")


class MalformedPayload(SocialClientError):
    code = 4
    name = "MalformedPayload"
    msg = "payload is truncated or malformed"


class SubmissionError(SocialClientError):
    """Raised when the network rejects or fails to confirm a transaction.

    The underlying RPC exception is kept as ``__cause__`` and its text is
    relayed unchanged; remote program error codes are not interpreted.
    """

    code = 5
    name = "SubmissionError"
    msg = "transaction submission failed"


class AccountNotOwned(SocialClientError):
    code = 6
    name = "AccountNotOwned"
    msg = "account does not belong to this program"
