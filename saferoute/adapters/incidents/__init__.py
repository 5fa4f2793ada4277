from .file_source import FileIncidentSource, load_incidents
from .memory_source import InMemoryIncidentSource

__all__ = ["FileIncidentSource", "InMemoryIncidentSource", "load_incidents"]
