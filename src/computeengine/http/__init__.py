from computeengine.http.transport import ComputeTransport, TokenProvider

__all__ = ["ComputeTransport", "TokenProvider"]
