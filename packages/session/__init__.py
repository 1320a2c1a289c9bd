from .core import Session, start_session, submit, record_accepted, reset_session
from .io import write_csv, write_manifest

__all__ = [
    "Session",
    "start_session",
    "submit",
    "record_accepted",
    "reset_session",
    "write_csv",
    "write_manifest",
]
