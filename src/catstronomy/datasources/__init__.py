from .cache import RequestCache
from .resource import RemoteResource
from .track_api import TrackAPI

__all__ = ["RemoteResource", "RequestCache", "TrackAPI"]
