from .forward_message import ForwardMessageUseCase

__all__ = ["ForwardMessageUseCase"]
