from fellowship.helpers.sinks import RecordingSink, stdout_sink

__all__ = [
    "RecordingSink",
    "stdout_sink",
]
