from __future__ import annotations


class NamespaceError(Exception):
    pass


class TransportFailure(NamespaceError):
    """The RPC daemon could not be reached or answered with a failure."""


class RpcCallError(TransportFailure):
    def __init__(self, method: str, code: int | None, message: str) -> None:
        super().__init__(f"{method} failed ({code}): {message}")
        self.method = method
        self.code = code
        self.message = message


class ShapeMismatch(NamespaceError):
    """A response did not match the expected schema."""


class IndexResolutionMiss(NamespaceError):
    def __init__(self, sentinel: str, detail: str) -> None:
        super().__init__(detail)
        self.sentinel = sentinel


class UnsupportedChain(NamespaceError):
    def __init__(self, chain_id: str) -> None:
        super().__init__(f"Unsupported blockchain: {chain_id}")
        self.chain_id = chain_id
