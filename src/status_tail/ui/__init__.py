"""Terminal display pieces: state models, message tail, and repaint controller."""

from .message_tail import MessageTail
from .models import DisplaySnapshot
from .terminal_display import DisplayController, create, render_frame

__all__ = ["DisplayController", "DisplaySnapshot", "MessageTail", "create", "render_frame"]
