"""Notification sinks — where party members write their lines."""


def stdout_sink(line: str) -> None:
    """Default sink: one line on standard output."""
    print(line)


class RecordingSink:
    """Sink that keeps every line it receives, in order.

    Usage:
        sink = RecordingSink()
        hobbit = Hobbit(sink)
        hobbit.act(Action.HUNT_GOLD)
        assert sink.lines == ["Hobbit hunts for gold"]
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)

    def clear(self) -> None:
        self.lines.clear()
