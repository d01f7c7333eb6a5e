from fellowship.mediator.party import Party

__all__ = ["Party"]
