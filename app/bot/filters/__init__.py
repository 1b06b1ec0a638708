from .chat_type import ChatTypeFilter

__all__ = ["ChatTypeFilter"]
