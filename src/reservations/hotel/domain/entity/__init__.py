from .hotel import Hotel

__all__ = ["Hotel"]
