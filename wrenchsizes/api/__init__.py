from .request import RequestError, build_request

__all__ = ["RequestError", "build_request"]
